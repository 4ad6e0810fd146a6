"""
Conflict detection for pushed updates.

Last-writer-wins with detection: an update made on the client before the
server's most recent change is refused when it would change a field value,
and both versions are handed back to the caller. Nothing is merged here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from apps.sync.models import SYNC_BOOKKEEPING_FIELDS

ConflictKind = Literal["timestamp", "version"]


@dataclass
class Conflict:
    """A detected conflict between a client edit and stored state."""

    kind: ConflictKind
    affected_fields: list[str] = field(default_factory=list)


def to_epoch_ms(value: datetime) -> int:
    """Convert an aware datetime to milliseconds since the epoch."""
    return int(value.timestamp() * 1000)


def diff_fields(server_values: dict[str, Any], local_values: dict[str, Any]) -> list[str]:
    """
    List fields whose incoming value differs from the stored value.

    Both sides must already be in canonical (JSON-compatible) form so that
    equality is structural. Bookkeeping fields never count.
    """
    return [
        name
        for name, value in local_values.items()
        if name not in SYNC_BOOKKEEPING_FIELDS and server_values.get(name) != value
    ]


def detect_conflict(
    server_values: dict[str, Any],
    server_modified_at: datetime,
    local_values: dict[str, Any],
    local_timestamp: int,
    expected_version: int | None = None,
    server_version: int | None = None,
) -> Conflict | None:
    """
    Decide whether an incoming update conflicts with the stored record.

    Args:
        server_values: Canonical values of the stored record
        server_modified_at: Record's last modification (or creation) time
        local_values: Canonical values the client wants to write
        local_timestamp: When the client made the edit, ms since epoch
        expected_version: sync_version the client last saw, if it sent one
        server_version: The record's current sync_version

    Returns:
        A Conflict when the server changed after the client's edit and at
        least one field would change, otherwise None.
    """
    stale_by_time = to_epoch_ms(server_modified_at) > local_timestamp
    stale_by_version = (
        expected_version is not None
        and server_version is not None
        and expected_version != server_version
    )
    if not stale_by_time and not stale_by_version:
        return None

    affected = diff_fields(server_values, local_values)
    if not affected:
        # Client and server agree on every field it touched
        return None

    return Conflict(kind="timestamp" if stale_by_time else "version", affected_fields=affected)
