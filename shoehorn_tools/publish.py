"""Reading an addon project's manifest and built bundles for publishing."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

MAX_BUNDLE_SIZE = 2 * 1024 * 1024
"""Largest manifest or bundle accepted (2 MB)."""

_BUNDLES = (
    ("backend", Path("dist", "addon.js")),
    ("frontend", Path("dist", "frontend.js")),
)


class PublishError(Exception):
    """Raised when an addon project cannot be read for publishing."""


def _project_dir(directory: str | os.PathLike[str] | None) -> Path:
    return Path(directory) if directory else Path(".")


def read_manifest(directory: str | os.PathLike[str] | None = None) -> dict[str, Any]:
    """Load ``manifest.json`` from the project directory as a JSON object."""
    root = _project_dir(directory)
    path = root / "manifest.json"
    try:
        size = path.stat().st_size
    except FileNotFoundError as exc:
        raise PublishError(f"no manifest.json found in {root}") from exc
    except OSError as exc:
        raise PublishError(f"stat manifest.json: {exc}") from exc
    if size > MAX_BUNDLE_SIZE:
        raise PublishError(
            f"manifest.json exceeds maximum size of {MAX_BUNDLE_SIZE} bytes (2MB)"
        )
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise PublishError(f"read manifest.json: {exc}") from exc
    try:
        manifest = json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise PublishError(f"invalid manifest.json: {exc}") from exc
    if manifest is None:
        return {}
    if not isinstance(manifest, dict):
        raise PublishError("invalid manifest.json: expected a JSON object")
    return manifest


def collect_bundles(directory: str | os.PathLike[str] | None = None) -> dict[str, bytes]:
    """Read the built backend and frontend bundles that exist.

    Returns a mapping of bundle name (``"backend"``, ``"frontend"``) to its
    contents; bundles that were not built are left out.
    """
    root = _project_dir(directory)
    bundles: dict[str, bytes] = {}
    for name, relative in _BUNDLES:
        path = root / relative
        try:
            size = path.stat().st_size
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise PublishError(f"stat bundle {name}: {exc}") from exc
        if size > MAX_BUNDLE_SIZE:
            raise PublishError(
                f"bundle {name} ({path}) exceeds maximum size of "
                f"{MAX_BUNDLE_SIZE} bytes (2MB)"
            )
        try:
            bundles[name] = path.read_bytes()
        except OSError as exc:
            raise PublishError(f"read bundle {name}: {exc}") from exc
    return bundles