"""Quality checks on catalog entities for CI/CD pipelines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

HAS_OWNER = "has-owner"
HAS_DOCS = "has-docs"


class CheckError(Exception):
    """Raised when a check cannot be run as asked."""


@dataclass
class CheckResult:
    """The outcome of one quality check."""

    check: str
    passed: bool
    detail: str = ""


@dataclass
class EntityReport:
    """The quality checks run on one entity."""

    entity_id: str
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when every check passed."""
        return all(result.passed for result in self.checks)

    def as_dict(self) -> dict[str, Any]:
        """Return the report as a plain mapping for JSON or YAML output."""
        checks = []
        for result in self.checks:
            item: dict[str, Any] = {"check": result.check, "pass": result.passed}
            if result.detail:
                item["detail"] = result.detail
            checks.append(item)
        return {"entity": self.entity_id, "pass": self.passed, "checks": checks}

    def lines(self) -> list[str]:
        """Return one ``PASS:`` or ``FAIL:`` line per check."""
        out = []
        for result in self.checks:
            if result.passed:
                line = f"PASS: {self.entity_id} {result.check}"
                if result.detail:
                    line += f" ({result.detail})"
            else:
                line = f"FAIL: {self.entity_id} {result.check}"
            out.append(line)
        return out


def evaluate_scorecard(
    entity_id: str, score: int, max_score: int, grade: str, min_score: int
) -> dict[str, Any]:
    """Compare a scorecard score with the required minimum.

    Returns the result mapping; its ``"pass"`` key is True when
    ``score >= min_score``.
    """
    return {
        "entity": entity_id,
        "score": score,
        "grade": grade,
        "max_score": max_score,
        "min_score": min_score,
        "pass": score >= min_score,
    }


def evaluate_entity(
    entity_id: str,
    owner: str,
    links: Sequence[Any] | None,
    has_owner: bool,
    has_docs: bool,
) -> EntityReport:
    """Run the requested owner and documentation checks on an entity."""
    if not has_owner and not has_docs:
        raise CheckError("at least one check flag is required (--has-owner, --has-docs)")

    report = EntityReport(entity_id)
    if has_owner:
        ok = bool(owner)
        report.checks.append(CheckResult(HAS_OWNER, ok, owner if ok else ""))
    if has_docs:
        count = len(links or ())
        ok = count > 0
        report.checks.append(CheckResult(HAS_DOCS, ok, f"{count} links" if ok else ""))
    return report