"""Presentation helpers for forge workflow runs and molds."""

from __future__ import annotations

TERMINAL_STATUSES = frozenset({"completed", "failed", "cancelled", "rolled_back"})
"""Run statuses after which a run makes no further progress."""

_STATUS_ICONS = {
    "pending": "? ",
    "executing": "> ",
    "completed": "v ",
    "failed": "x ",
    "cancelled": "o ",
    "rolled_back": "< ",
}
_UNKNOWN_ICON = "  "

ID_DISPLAY_LENGTH = 12
DESCRIPTION_DISPLAY_LENGTH = 50


def is_terminal_status(status: str) -> bool:
    """Return True if a run with this status is done."""
    return status in TERMINAL_STATUSES


def format_status(status: str) -> str:
    """Prefix a status with its two-character icon."""
    return _STATUS_ICONS.get(status, _UNKNOWN_ICON) + status


def truncate_id(run_id: str) -> str:
    """Shorten a run ID to its first twelve characters for table display."""
    return run_id[:ID_DISPLAY_LENGTH]


def shorten_description(text: str) -> str:
    """Cut a description to fifty characters, marking the cut with ``...``."""
    if len(text) > DESCRIPTION_DISPLAY_LENGTH:
        return text[:DESCRIPTION_DISPLAY_LENGTH] + "..."
    return text