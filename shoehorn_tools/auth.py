"""Server URL handling, token resolution and transport safety checks."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path
from urllib.parse import urlsplit

MAX_TOKEN_FILE_SIZE = 1 << 16
"""Largest token file accepted (64 KiB)."""

TOKEN_ENV = "SHOEHORN_TOKEN"
TOKEN_FILE_ENV = "SHOEHORN_TOKEN_FILE"

_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


class AuthError(Exception):
    """Raised when credentials or the server address cannot be used."""


def has_scheme(raw_url: str) -> bool:
    """Return True if the URL starts with an http or https scheme."""
    return raw_url.startswith(("http://", "https://"))


def normalize_server_url(url: str) -> str:
    """Add ``https://`` to a bare host and strip trailing slashes."""
    if url and not has_scheme(url):
        url = "https://" + url
    return url.rstrip("/")


def format_duration(delta: timedelta) -> str:
    """Render a duration as whole seconds, minutes, hours or days."""
    seconds = delta.total_seconds()
    if seconds < 60:
        return f"{int(seconds)} seconds"
    if seconds < 3600:
        return f"{int(seconds / 60)} minutes"
    if seconds < 24 * 3600:
        return f"{int(seconds / 3600)} hours"
    return f"{int(seconds / 3600 / 24)} days"


def _read_token_file(token_file: str) -> str:
    path = Path(token_file)
    try:
        info = path.stat()
    except OSError as exc:
        raise AuthError(f"{TOKEN_FILE_ENV}: {exc}") from exc
    if path.is_dir():
        raise AuthError(f'{TOKEN_FILE_ENV} "{token_file}" is a directory, not a file')
    if info.st_size > MAX_TOKEN_FILE_SIZE:
        raise AuthError(
            f'{TOKEN_FILE_ENV} "{token_file}" is {info.st_size} bytes '
            f"(max {MAX_TOKEN_FILE_SIZE})"
        )
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AuthError(f"{TOKEN_FILE_ENV}: {exc}") from exc
    token = data.strip()
    if not token:
        raise AuthError(f'{TOKEN_FILE_ENV} "{token_file}" is empty')
    return token


def resolve_token(flag_value: str) -> tuple[str, str]:
    """Pick the token to use and report where it came from.

    Priority: the explicit flag, then the file named by ``SHOEHORN_TOKEN_FILE``,
    then ``SHOEHORN_TOKEN``. Returns ``(token, source)`` where source is one of
    ``"flag"``, ``"file"``, ``"env"`` or ``"none"``. A configured token file that
    cannot be used raises :class:`AuthError`.
    """
    if flag_value:
        return flag_value, "flag"
    token_file = os.environ.get(TOKEN_FILE_ENV, "")
    if token_file:
        return _read_token_file(token_file), "file"
    env_token = os.environ.get(TOKEN_ENV, "")
    if env_token:
        return env_token, "env"
    return "", "none"


def validate_server_security(server_url: str) -> None:
    """Refuse plaintext HTTP to anything other than a local host."""
    if not server_url:
        return
    try:
        parts = urlsplit(server_url)
        host = parts.hostname or ""
    except ValueError as exc:
        raise AuthError(f"invalid server URL: {exc}") from exc
    if parts.scheme == "https":
        return
    if parts.scheme != "http":
        raise AuthError(
            f'unsupported URL scheme "{parts.scheme}": use https:// for remote servers '
            "or http://localhost for local development"
        )
    if host in _LOCAL_HOSTS:
        return
    secure = server_url.replace("http://", "https://", 1)
    raise AuthError(
        f'refusing plaintext HTTP connection to "{host}" — your token would be sent '
        f"unencrypted.\nUse HTTPS: {secure}"
    )