"""Path checks and size-limited reading for manifest conversion."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

MAX_CONVERT_FILE_SIZE = 10 * 1024 * 1024
"""Largest input accepted for conversion (10 MB)."""

YAML_SUFFIXES = (".yaml", ".yml")
STDIN_PATH = "-"


class PathTraversalError(ValueError):
    """Raised when an output path would land outside its base directory."""


class InputTooLargeError(ValueError):
    """Raised when an input exceeds the allowed size."""


def validate_output_path(
    output_path: str | os.PathLike[str], base_dir: str | os.PathLike[str]
) -> None:
    """Ensure ``output_path`` is ``base_dir`` itself or lies beneath it."""
    abs_output = os.path.abspath(output_path)
    abs_base = os.path.abspath(base_dir)
    if abs_output != abs_base and not abs_output.startswith(abs_base + os.sep):
        raise PathTraversalError(
            f'path traversal detected: "{os.fspath(output_path)}" escapes output '
            f'directory "{os.fspath(base_dir)}"'
        )


def iter_yaml_files(directory: str | os.PathLike[str]) -> Iterator[Path]:
    """Yield every ``.yaml`` or ``.yml`` file below ``directory`` in lexical order."""
    entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir():
            yield from iter_yaml_files(entry.path)
        elif entry.name.endswith(YAML_SUFFIXES):
            yield Path(entry.path)


def output_path_for(
    path: str | os.PathLike[str],
    input_dir: str | os.PathLike[str],
    output_dir: str | os.PathLike[str] | None,
) -> Path | None:
    """Map a file under ``input_dir`` to the same relative place under ``output_dir``.

    Returns None when no output directory is given (output goes to stdout).
    Raises :class:`PathTraversalError` if the result escapes ``output_dir``.
    """
    if not output_dir:
        return None
    relative = os.path.relpath(path, input_dir)
    target = os.path.join(output_dir, relative)
    validate_output_path(target, output_dir)
    return Path(target)


def read_limited(path: str | os.PathLike[str], limit: int = MAX_CONVERT_FILE_SIZE) -> str:
    """Read a file, or stdin when ``path`` is ``-``, refusing more than ``limit`` bytes."""
    if os.fspath(path) == STDIN_PATH:
        data = sys.stdin.buffer.read(limit + 1)
        if len(data) > limit:
            raise InputTooLargeError(f"stdin exceeds maximum size of {limit} bytes")
        return data.decode("utf-8", errors="replace")

    file_path = Path(path)
    size = file_path.stat().st_size
    if size > limit:
        raise InputTooLargeError(
            f"file {file_path} exceeds maximum size of {limit} bytes"
        )
    return file_path.read_bytes().decode("utf-8", errors="replace")