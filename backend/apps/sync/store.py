"""
Tenant-bound entity store used by the sync engine.

The executor and normalizers only talk to storage through this narrow
interface, so every read and write is scoped to the organization the store
was constructed for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.sync.models import SyncableModel

if TYPE_CHECKING:
    from apps.accounts.models import Member
    from apps.organizations.models import Organization

M = TypeVar("M", bound=SyncableModel)


class EntityStore(Protocol):
    """Repository interface the executor depends on."""

    def get(self, model: type[M], entity_id: Any, include_deleted: bool = False) -> M | None: ...

    def find_by(self, model: type[M], **lookup: Any) -> M | None: ...

    def insert(self, model: type[M], values: dict[str, Any]) -> M: ...

    def update(self, record: M, values: dict[str, Any]) -> M: ...

    def soft_delete(self, record: SyncableModel) -> None: ...


class DjangoEntityStore:
    """
    ORM-backed EntityStore for one organization.

    Writes are stamped with the acting member. Lookups by id tolerate
    malformed ids (a client placeholder that never resolved is simply
    "not found" rather than a database error).
    """

    def __init__(self, organization: Organization, actor: Member | None = None) -> None:
        self.organization = organization
        self.actor = actor

    def get(self, model: type[M], entity_id: Any, include_deleted: bool = False) -> M | None:
        manager = model.all_objects if include_deleted else model.objects
        try:
            return manager.filter(organization=self.organization, pk=entity_id).first()
        except (ValidationError, ValueError):
            return None

    def find_by(self, model: type[M], **lookup: Any) -> M | None:
        """Find a live record of this tenant by arbitrary field lookups."""
        try:
            return model.objects.filter(organization=self.organization, **lookup).first()
        except (ValidationError, ValueError):
            return None

    def insert(self, model: type[M], values: dict[str, Any]) -> M:
        """
        Insert a record inside a savepoint.

        A failed insert (e.g. uniqueness violation) rolls back only the
        savepoint, leaving the surrounding transaction usable.
        """
        record = model(organization=self.organization, last_modified_by=self.actor, **values)
        with transaction.atomic():
            record.save(force_insert=True)
        return record

    def update(self, record: M, values: dict[str, Any]) -> M:
        """Apply field values; updated_at is refreshed by auto_now."""
        for field, value in values.items():
            setattr(record, field, value)
        record.last_modified_by = self.actor
        with transaction.atomic():
            record.save()
        return record

    def soft_delete(self, record: SyncableModel) -> None:
        """Set the deletion marker; the row itself is never removed."""
        record.deleted_at = timezone.now()
        record.last_modified_by = self.actor
        with transaction.atomic():
            record.save(update_fields=["deleted_at", "updated_at", "last_modified_by"])
