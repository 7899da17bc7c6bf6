import pytest

from shoehorn_tools.forge_inputs import (
    InputError,
    MoldAction,
    MoldInput,
    build_inputs,
    coerce_input_types,
    fill_defaults,
    missing_required,
    resolve_action,
)


@pytest.mark.parametrize(
    "json_str, kv_pairs, want_keys",
    [
        ("", None, []),
        ('{"env":"staging","count":1}', None, ["env", "count"]),
        ("", ["name=my-repo", "owner=acme"], ["name", "owner"]),
        ('{"env":"staging"}', ["name=my-repo"], ["env", "name"]),
        ('{"name":"old"}', ["name=new"], ["name"]),
    ],
)
def test_build_inputs_keys(json_str, kv_pairs, want_keys):
    got = build_inputs(json_str, kv_pairs)
    assert sorted(got) == sorted(want_keys)


@pytest.mark.parametrize(
    "json_str, kv_pairs",
    [
        ("{invalid}", None),
        ("", ["no-equals-sign"]),
        ("[1, 2]", None),
    ],
)
def test_build_inputs_errors(json_str, kv_pairs):
    with pytest.raises(InputError):
        build_inputs(json_str, kv_pairs)


def test_build_inputs_kv_overrides_json():
    got = build_inputs('{"name":"old"}', ["name=new"])
    assert got["name"] == "new"


def test_build_inputs_value_keeps_extra_equals():
    got = build_inputs("", ["query=a=b"])
    assert got == {"query": "a=b"}


def test_build_inputs_json_values_typed():
    got = build_inputs('{"count":1,"flag":true}', None)
    assert got == {"count": 1, "flag": True}


def test_build_inputs_null_json_is_empty():
    assert build_inputs("null", ["a=1"]) == {"a": "1"}


@pytest.mark.parametrize(
    "flag, actions, want",
    [
        ("create", None, "create"),
        ("", [MoldAction("scaffold"), MoldAction("create", primary=True)], "create"),
        ("", [MoldAction("scaffold"), MoldAction("delete")], "scaffold"),
        ("", None, ""),
        ("", [], ""),
    ],
)
def test_resolve_action(flag, actions, want):
    assert resolve_action(flag, actions) == want


SCHEMA = [
    MoldInput("enabled", type="boolean"),
    MoldInput("ratio", type="number"),
    MoldInput("count", type="integer"),
    MoldInput("name", type="string"),
]


def test_coerce_converts_declared_types():
    inputs = {"enabled": "true", "ratio": "1.5", "count": "42", "name": "7"}
    coerce_input_types(inputs, SCHEMA)
    assert inputs == {"enabled": True, "ratio": 1.5, "count": 42, "name": "7"}


@pytest.mark.parametrize(
    "key, raw, want",
    [
        ("enabled", "F", False),
        ("enabled", "1", True),
        ("enabled", "yes", "yes"),
        ("ratio", "abc", "abc"),
        ("ratio", " 1.5", " 1.5"),
        ("ratio", "1e400", "1e400"),
        ("count", "1.5", "1.5"),
        ("count", "-12", -12),
        ("count", "9223372036854775808", "9223372036854775808"),
    ],
)
def test_coerce_edge_values(key, raw, want):
    inputs = {key: raw}
    coerce_input_types(inputs, SCHEMA)
    assert inputs[key] == want
    assert type(inputs[key]) is type(want)


def test_coerce_skips_non_strings_and_unknown_keys():
    inputs = {"count": 3.0, "other": "true"}
    coerce_input_types(inputs, SCHEMA)
    assert inputs == {"count": 3.0, "other": "true"}


def test_fill_defaults_only_missing_and_nonempty():
    schema = [
        MoldInput("env", default="staging"),
        MoldInput("name", default="fallback"),
        MoldInput("owner"),
    ]
    inputs = {"name": "given"}
    fill_defaults(inputs, schema)
    assert inputs == {"name": "given", "env": "staging"}


def test_missing_required_in_schema_order():
    schema = [
        MoldInput("b", required=True),
        MoldInput("a", required=True),
        MoldInput("c"),
        MoldInput("d", required=True),
    ]
    assert missing_required({"d": "x"}, schema) == ["b", "a"]


def test_defaults_satisfy_required():
    schema = [MoldInput("env", required=True, default="prod")]
    inputs = {}
    fill_defaults(inputs, schema)
    assert missing_required(inputs, schema) == []