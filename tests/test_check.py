import pytest

from shoehorn_tools.check import (
    CheckError,
    CheckResult,
    EntityReport,
    evaluate_entity,
    evaluate_scorecard,
)


def test_scorecard_passes_at_threshold():
    result = evaluate_scorecard("svc", 70, 100, "B", 70)
    assert result["pass"] is True
    assert result["entity"] == "svc"
    assert result["score"] == 70
    assert result["min_score"] == 70
    assert result["max_score"] == 100
    assert result["grade"] == "B"


def test_scorecard_fails_below_threshold():
    result = evaluate_scorecard("svc", 69, 100, "C", 70)
    assert result["pass"] is False


@pytest.mark.parametrize("score", range(0, 101, 10))
def test_scorecard_pass_matches_comparison(score):
    assert evaluate_scorecard("svc", score, 100, "", 50)["pass"] is (score >= 50)


def test_entity_requires_a_check_flag():
    with pytest.raises(CheckError, match="at least one check flag is required"):
        evaluate_entity("svc", "team-a", [], False, False)


def test_entity_owner_present():
    report = evaluate_entity("svc", "team-a", [], True, False)
    assert report.passed is True
    assert report.checks == [CheckResult("has-owner", True, "team-a")]
    assert report.lines() == ["PASS: svc has-owner (team-a)"]


def test_entity_owner_missing():
    report = evaluate_entity("svc", "", [], True, False)
    assert report.passed is False
    assert report.lines() == ["FAIL: svc has-owner"]


def test_entity_docs_present():
    report = evaluate_entity("svc", "", ["a", "b"], False, True)
    assert report.passed is True
    assert report.checks[0].detail == "2 links"
    assert report.lines() == ["PASS: svc has-docs (2 links)"]


def test_entity_docs_missing_with_none_links():
    report = evaluate_entity("svc", "team-a", None, False, True)
    assert report.passed is False
    assert report.checks == [CheckResult("has-docs", False, "")]


def test_entity_both_checks_order_and_overall():
    report = evaluate_entity("svc", "team-a", [], True, True)
    assert [c.check for c in report.checks] == ["has-owner", "has-docs"]
    assert report.passed is False


def test_as_dict_omits_empty_detail():
    report = evaluate_entity("svc", "", ["x"], True, True)
    data = report.as_dict()
    assert data["entity"] == "svc"
    assert data["pass"] is False
    assert data["checks"] == [
        {"check": "has-owner", "pass": False},
        {"check": "has-docs", "pass": True, "detail": "1 links"},
    ]


def test_empty_report_passes():
    report = EntityReport("svc")
    assert report.passed is True
    assert report.lines() == []
    assert report.as_dict() == {"entity": "svc", "pass": True, "checks": []}