"""
Sync engine models.

Provides the base class every record reachable through the push endpoint
inherits from.
"""

from __future__ import annotations

from datetime import datetime

from django.db import models
from uuid6 import uuid7

from apps.core.models import (
    SoftDeleteAllManager,
    SoftDeleteManager,
    SoftDeleteMixin,
    TenantScopedModel,
)

# Bookkeeping fields that clients never write and conflict detection ignores
SYNC_BOOKKEEPING_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "organization",
        "organization_id",
        "created_at",
        "updated_at",
        "deleted_at",
        "sync_version",
        "last_modified_by",
        "last_modified_by_id",
    }
)


class SyncableModel(SoftDeleteMixin, TenantScopedModel):
    """
    Base for all sync-enabled entities.

    Inherits soft-delete behavior from SoftDeleteMixin.
    IMPORTANT: SoftDeleteMixin MUST come before TenantScopedModel in MRO
    so that soft_delete() properly updates updated_at timestamp.

    Manager usage:
    - .objects: Excludes deleted records (for normal app queries)
    - .all_objects: Includes deleted records (needed for idempotent deletes)

    ID Strategy:
    UUIDv7 ids are time-ordered and collision-free. They are the durable ids
    that replace client-local placeholder ids after a create is applied.
    """

    objects = SoftDeleteManager()
    all_objects = SoftDeleteAllManager()

    class Meta:
        abstract = True
        indexes = [
            models.Index(
                fields=["organization", "updated_at", "id"],
                name="%(app_label)s_%(class)s_sync_idx",
            ),
        ]

    id = models.UUIDField(primary_key=True, default=uuid7, editable=False)

    # Sync metadata
    sync_version = models.PositiveBigIntegerField(default=0)
    last_modified_by = models.ForeignKey(
        "accounts.Member",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="%(class)s_modified",
    )

    def save(self, *args, **kwargs):
        """Increment sync version on save."""
        self.sync_version += 1
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = {*update_fields, "sync_version"}
        super().save(*args, **kwargs)

    @property
    def last_modified_at(self) -> datetime:
        """Server-side modification time, falling back to creation time."""
        return self.updated_at or self.created_at

    @classmethod
    def get_syncable_fields(cls) -> list[str]:
        """Return attribute names clients may write (FKs by their *_id attname)."""
        return [
            f.attname
            for f in cls._meta.concrete_fields
            if not f.primary_key
            and f.name not in SYNC_BOOKKEEPING_FIELDS
            and f.attname not in SYNC_BOOKKEEPING_FIELDS
        ]
