"""Helpers for Shoehorn tooling: credentials, manifest diffs, paths, forge inputs, checks and addon publishing."""

__version__ = "0.1.0"

__all__ = [
    "auth",
    "check",
    "diff",
    "forge_inputs",
    "forge_status",
    "paths",
    "publish",
]