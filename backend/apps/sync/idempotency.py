"""
Idempotent creates via natural keys.

A client may resend a create whose first attempt was applied but never
acknowledged. For entity types with a natural key (e.g. a client's email)
the resend resolves to the existing record instead of a duplicate insert.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.db import IntegrityError

from apps.core.logging import get_logger

if TYPE_CHECKING:
    from apps.sync.models import SyncableModel
    from apps.sync.registry import EntityConfig
    from apps.sync.store import EntityStore

logger = get_logger(__name__)

# SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError came from a uniqueness constraint."""
    cause = exc.__cause__
    code = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if code == PG_UNIQUE_VIOLATION:
        return True
    message = str(exc)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message


def find_existing(
    config: EntityConfig, values: dict[str, Any], store: EntityStore
) -> SyncableModel | None:
    """Look up a live record of the tenant by the entity's natural key."""
    if config.natural_key is None:
        return None
    key_value = values.get(config.natural_key)
    if key_value in (None, ""):
        return None
    return store.find_by(config.model, **{config.natural_key: key_value})


def create_idempotent(
    config: EntityConfig, values: dict[str, Any], store: EntityStore
) -> tuple[SyncableModel, bool]:
    """
    Insert a record unless its natural key is already taken.

    The lookup runs before the insert, and again if the insert still hits a
    uniqueness violation (two retries racing each other). If the second
    lookup also misses, the original IntegrityError propagates unchanged.

    Returns:
        Tuple of (record, replayed) where replayed is True when an existing
        record was returned instead of inserting.
    """
    existing = find_existing(config, values, store)
    if existing is not None:
        logger.info(
            "sync_operation_replayed",
            entity_type=config.entity_type,
            entity_id=str(existing.pk),
            natural_key=config.natural_key,
        )
        return existing, True

    try:
        return store.insert(config.model, values), False
    except IntegrityError as exc:
        if not is_unique_violation(exc):
            raise
        existing = find_existing(config, values, store)
        if existing is None:
            raise
        logger.info(
            "sync_operation_replayed",
            entity_type=config.entity_type,
            entity_id=str(existing.pk),
            natural_key=config.natural_key,
            recovered=True,
        )
        return existing, True
