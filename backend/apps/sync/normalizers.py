"""
Payload normalization for pushed operations.

Each entity family has one EntityNormalizer subclass. The payload shape is a
ninja Schema with every field optional: unknown keys (embedded summaries of
related records, bookkeeping fields) are dropped, text dates are coerced,
and only the fields the client actually sent survive into an update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated, Any, ClassVar

from ninja import Schema
from pydantic import AfterValidator
from pydantic import ValidationError as PydanticValidationError

from apps.sync.exceptions import MissingDependencyError, PayloadValidationError

if TYPE_CHECKING:
    from apps.sync.models import SyncableModel
    from apps.sync.store import EntityStore


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# Datetimes compare equal across clients only once they share an offset
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


@dataclass(frozen=True)
class ParentLink:
    """
    A reference from a payload field to a parent record.

    Attributes:
        field: Payload field holding the parent id (e.g. 'pet_id')
        model: Parent model class
        name: Dependency name used in error messages
        copy: Parent attribute -> payload field to derive (e.g. owner_id -> client_id)
    """

    field: str
    model: type[SyncableModel]
    name: str
    copy: dict[str, str] = field(default_factory=dict)


class EntityNormalizer:
    """
    Common interface for per-entity payload normalization.

    Subclasses declare their payload_schema and, where relevant, required
    fields, create-time defaults and parent links. Entity-specific reshaping
    goes in clean().
    """

    model: ClassVar[type[SyncableModel]]
    payload_schema: ClassVar[type[Schema]]
    required_fields: ClassVar[tuple[str, ...]] = ()
    defaults: ClassVar[dict[str, Any]] = {}
    parents: ClassVar[tuple[ParentLink, ...]] = ()
    # Fields that change only through named transitions
    state_fields: ClassVar[tuple[str, ...]] = ()

    def validate(self, payload: dict[str, Any]) -> Schema:
        """Validate a raw payload against the entity's shape."""
        try:
            return self.payload_schema.model_validate(payload)
        except PydanticValidationError as e:
            details: dict[str, list[str]] = {}
            for error in e.errors():
                loc = ".".join(str(part) for part in error["loc"]) or "__all__"
                details.setdefault(loc, []).append(error["msg"])
            raise PayloadValidationError("Validation failed", details=details) from e

    def canonicalize(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Return the JSON form of the fields the client sent.

        Used for conflict detection, so it must agree with snapshot() on how
        every value is rendered.
        """
        values = self.validate(payload).model_dump(mode="json", exclude_unset=True)
        self.check_state_fields("update", values)
        self.check_nulls(values)
        return values

    def snapshot(self, record: SyncableModel) -> dict[str, Any]:
        """Return the JSON form of a stored record's writable fields."""
        return self.payload_schema.model_validate(record).model_dump(mode="json")

    def normalize(self, kind: str, payload: dict[str, Any], store: EntityStore) -> dict[str, Any]:
        """
        Turn a raw payload into field values ready for storage.

        Raises:
            PayloadValidationError: Shape errors or missing required fields
            MissingDependencyError: A referenced parent does not exist
        """
        values = self.validate(payload).model_dump(exclude_unset=True)

        if kind == "create":
            # Explicit nulls on create fall back to model defaults
            values = {name: value for name, value in values.items() if value is not None}
            for name, default in self.defaults.items():
                values.setdefault(name, default)

        # Parents first: a required key may be derivable from one
        values = self.resolve_parents(values, store)

        self.check_state_fields(kind, values)

        if kind == "create":
            missing = [name for name in self.required_fields if values.get(name) in (None, "")]
            if missing:
                raise PayloadValidationError(
                    "Validation failed",
                    details={name: ["This field is required."] for name in missing},
                )
        else:
            self.check_nulls(values)

        return self.clean(kind, values, store)

    def check_state_fields(self, kind: str, values: dict[str, Any]) -> None:
        """
        Reject direct writes to transition-managed fields.

        A create may only restate the initial value; an update may not name
        the field at all.
        """
        details = {
            name: ["This field changes only through a transition operation."]
            for name in self.state_fields
            if name in values
            and not (kind == "create" and values[name] == self.defaults.get(name))
        }
        if details:
            raise PayloadValidationError("Validation failed", details=details)

    def check_nulls(self, values: dict[str, Any]) -> None:
        """Reject explicit nulls an update would write into non-nullable columns."""
        details: dict[str, list[str]] = {}
        for name, value in values.items():
            if value is not None:
                continue
            if name in self.required_fields:
                details[name] = ["This field is required."]
            elif not self.model._meta.get_field(name).null:
                details[name] = ["This field may not be null."]
        if details:
            raise PayloadValidationError("Validation failed", details=details)

    def resolve_parents(self, values: dict[str, Any], store: EntityStore) -> dict[str, Any]:
        """Check referenced parents exist and copy derived ownership keys."""
        for link in self.parents:
            parent_id = values.get(link.field)
            if parent_id is None:
                continue
            parent = store.get(link.model, parent_id)
            if parent is None:
                raise MissingDependencyError(link.name, parent_id)
            for source, target in link.copy.items():
                values[target] = getattr(parent, source)
        return values

    def clean(self, kind: str, values: dict[str, Any], store: EntityStore) -> dict[str, Any]:
        """Entity-specific final reshaping. Default is a no-op."""
        return values
