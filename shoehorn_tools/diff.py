"""Comparing local manifest resources with the remote catalog."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

CREATE = "create"
UPDATE = "update"
UNCHANGED = "unchanged"


@dataclass
class Resource:
    """A resource parsed from a local manifest."""

    service_id: str
    name: str = ""
    type: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    raw_yaml: str = ""


@dataclass
class RemoteEntity:
    """The fields of a catalog entity that a diff looks at."""

    name: str = ""
    type: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class DiffEntry:
    """What applying one resource would do."""

    service_id: str
    name: str
    action: str
    changes: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Return the entry as a plain mapping, leaving out empty changes."""
        result: dict[str, Any] = {
            "service_id": self.service_id,
            "name": self.name,
            "action": self.action,
        }
        if self.changes:
            result["changes"] = list(self.changes)
        return result


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def diff_resource(local: Resource, remote: RemoteEntity | None) -> DiffEntry:
    """Compare a local resource with its remote entity (None if it does not exist)."""
    if remote is None:
        return DiffEntry(local.service_id, local.name, CREATE)

    changes: list[str] = []
    if local.name and local.name != remote.name:
        changes.append(f"name: {_quote(remote.name)} -> {_quote(local.name)}")
    if local.type and local.type != remote.type:
        changes.append(f"type: {_quote(remote.type)} -> {_quote(local.type)}")
    if local.description and local.description != remote.description:
        changes.append("description changed")
    if local.tags and ",".join(local.tags) != ",".join(remote.tags):
        changes.append("tags changed")

    action = UPDATE if changes else UNCHANGED
    return DiffEntry(local.service_id, local.name, action, changes)


def summarize(entries: Iterable[DiffEntry]) -> tuple[int, int, int]:
    """Count entries as ``(to_create, to_update, unchanged)``."""
    creates = updates = unchanged = 0
    for entry in entries:
        if entry.action == CREATE:
            creates += 1
        elif entry.action == UPDATE:
            updates += 1
        else:
            unchanged += 1
    return creates, updates, unchanged


def render_entries(entries: Iterable[DiffEntry]) -> str:
    """Render the plain-text diff listing followed by its summary line."""
    entries = list(entries)
    lines: list[str] = []
    for entry in entries:
        if entry.action == CREATE:
            lines.append(f"  + {entry.service_id}  {entry.name} ({entry.action})")
        elif entry.action == UPDATE:
            lines.append(f"  ~ {entry.service_id}  {entry.name} ({entry.action})")
            lines.extend(f"      {change}" for change in entry.changes)
        else:
            lines.append(f"  = {entry.service_id}  (unchanged)")
    creates, updates, unchanged = summarize(entries)
    lines.append("")
    lines.append(f"{creates} to create, {updates} to update, {unchanged} unchanged")
    return "\n".join(lines) + "\n"