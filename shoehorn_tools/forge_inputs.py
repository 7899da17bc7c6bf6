"""Building, typing and checking the inputs for a forge workflow run."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_SPECIAL_FLOATS = frozenset({"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan"})


class InputError(ValueError):
    """Raised when run inputs cannot be parsed."""


@dataclass
class MoldInput:
    """One input declared by a mold's schema."""

    name: str
    type: str = "string"
    required: bool = False
    default: str = ""
    description: str = ""


@dataclass
class MoldAction:
    """An action a mold can run."""

    action: str
    label: str = ""
    primary: bool = False
    description: str = ""


def build_inputs(inputs_json: str, kv_pairs: Iterable[str] | None) -> dict[str, Any]:
    """Merge a JSON object of inputs with ``key=value`` pairs.

    Pairs are applied after the JSON object, so they override its keys.
    """
    inputs: dict[str, Any] = {}
    if inputs_json:
        try:
            parsed = json.loads(inputs_json)
        except ValueError as exc:
            raise InputError(f"parse --inputs JSON: {exc}") from exc
        if parsed is not None:
            if not isinstance(parsed, dict):
                raise InputError("parse --inputs JSON: expected a JSON object")
            inputs.update(parsed)

    for pair in kv_pairs or ():
        key, sep, value = pair.partition("=")
        if not sep:
            raise InputError(f'invalid --input format "{pair}", expected key=value')
        inputs[key] = value
    return inputs


def _parse_bool(text: str) -> bool | None:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    lowered = text.lower()
    try:
        value = float(text)
    except ValueError:
        body = lowered.lstrip("+-")
        if not body.startswith("0x"):
            return None
        try:
            value = float.fromhex(text)
        except (ValueError, OverflowError):
            return None
    if math.isinf(value) and lowered not in _SPECIAL_FLOATS:
        return None
    return value


def _parse_int(text: str) -> int | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


_PARSERS = {
    "boolean": _parse_bool,
    "number": _parse_float,
    "integer": _parse_int,
}


def coerce_input_types(
    inputs: MutableMapping[str, Any], schema: Iterable[MoldInput]
) -> None:
    """Convert string values in place to the boolean, number or integer the schema declares.

    Values that are not strings, or that do not parse, are left unchanged.
    """
    types = {item.name: item.type for item in schema}
    for key, value in list(inputs.items()):
        if not isinstance(value, str):
            continue
        parser = _PARSERS.get(types.get(key, ""))
        if parser is None:
            continue
        converted = parser(value)
        if converted is not None:
            inputs[key] = converted


def fill_defaults(inputs: MutableMapping[str, Any], schema: Iterable[MoldInput]) -> None:
    """Set schema defaults in place for inputs that were not given."""
    for item in schema:
        if item.name not in inputs and item.default != "":
            inputs[item.name] = item.default


def missing_required(
    inputs: MutableMapping[str, Any], schema: Iterable[MoldInput]
) -> list[str]:
    """Return the names of required inputs that have no value, in schema order."""
    return [item.name for item in schema if item.required and item.name not in inputs]


def resolve_action(flag: str, actions: Iterable[MoldAction] | None) -> str:
    """Choose the action: the flag, else the primary action, else the first one, else ``""``."""
    if flag:
        return flag
    actions = list(actions or ())
    for action in actions:
        if action.primary:
            return action.action
    if actions:
        return actions[0].action
    return ""