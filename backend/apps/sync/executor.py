"""
Operation executor.

Applies one prepared operation through the EntityStore. The executor is
entity-agnostic: everything entity-specific comes from the EntityConfig.
Failures are raised as SyncError subclasses; conflicts are returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from apps.core.logging import get_logger
from apps.sync.conflicts import detect_conflict
from apps.sync.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    StatePreconditionError,
)
from apps.sync.idempotency import create_idempotent

if TYPE_CHECKING:
    from apps.sync.models import SyncableModel
    from apps.sync.registry import EntityConfig
    from apps.sync.schemas import SyncOperationIn
    from apps.sync.store import EntityStore

logger = get_logger(__name__)


@dataclass
class OperationOutcome:
    """Result of processing a single pushed operation."""

    success: bool
    entity_type: str
    client_correlation_id: int | str | None = None
    server_entity_id: str | None = None
    client_entity_id: int | str | None = None
    replayed: bool = False
    conflict: bool = False
    conflict_details: dict | None = None
    error: str | None = None
    error_code: str | None = None
    error_details: dict | None = None

    @property
    def status(self) -> str:
        if self.conflict:
            return "conflict"
        return "applied" if self.success else "rejected"


def serialize_record(config: EntityConfig, record: SyncableModel) -> dict[str, Any]:
    """Serialize a stored record for conflict reports."""
    data = config.normalizer.snapshot(record)
    data.update(
        id=str(record.pk),
        sync_version=record.sync_version,
        created_at=record.created_at.isoformat() if record.created_at else None,
        updated_at=record.updated_at.isoformat() if record.updated_at else None,
        deleted_at=record.deleted_at.isoformat() if record.deleted_at else None,
    )
    return data


class OperationExecutor:
    """Dispatches operations to the correct storage verb."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def execute(self, config: EntityConfig, operation: SyncOperationIn) -> OperationOutcome:
        if operation.kind == "create":
            return self.create(config, operation)
        if operation.kind == "update":
            return self.update(config, operation)
        if operation.kind == "delete":
            return self.delete(config, operation)
        return self.transition(config, operation)

    def create(self, config: EntityConfig, operation: SyncOperationIn) -> OperationOutcome:
        values = config.normalizer.normalize("create", operation.payload, self.store)
        record, replayed = create_idempotent(config, values, self.store)
        return OperationOutcome(
            success=True,
            entity_type=operation.entity_type,
            server_entity_id=str(record.pk),
            replayed=replayed,
        )

    def update(self, config: EntityConfig, operation: SyncOperationIn) -> OperationOutcome:
        record = self._load(config, operation)
        normalizer = config.normalizer

        conflict = detect_conflict(
            server_values=normalizer.snapshot(record),
            server_modified_at=record.last_modified_at,
            local_values=normalizer.canonicalize(operation.payload),
            local_timestamp=operation.local_timestamp,
            expected_version=operation.expected_version,
            server_version=record.sync_version,
        )
        if conflict is not None:
            return OperationOutcome(
                success=False,
                entity_type=operation.entity_type,
                server_entity_id=str(record.pk),
                conflict=True,
                conflict_details={
                    "local_payload": operation.payload,
                    "server_payload": serialize_record(config, record),
                    "conflict_kind": conflict.kind,
                    "affected_fields": conflict.affected_fields,
                },
            )

        values = normalizer.normalize("update", operation.payload, self.store)
        self.store.update(record, values)
        return OperationOutcome(
            success=True,
            entity_type=operation.entity_type,
            server_entity_id=str(record.pk),
        )

    def delete(self, config: EntityConfig, operation: SyncOperationIn) -> OperationOutcome:
        record = self._load(config, operation, include_deleted=True)
        if record.is_deleted:
            logger.debug(
                "sync_delete_noop",
                entity_type=config.entity_type,
                entity_id=str(record.pk),
            )
        else:
            self.store.soft_delete(record)
        return OperationOutcome(
            success=True,
            entity_type=operation.entity_type,
            server_entity_id=str(record.pk),
        )

    def transition(self, config: EntityConfig, operation: SyncOperationIn) -> OperationOutcome:
        transition = config.get_transition(operation.kind)
        if transition is None:
            raise InvalidOperationError(
                f"Operation '{operation.kind}' is not valid "
                f"for entity type '{operation.entity_type}'"
            )

        record = self._load(config, operation)
        current = getattr(record, transition.state_field)
        if current not in transition.source_states:
            raise StatePreconditionError(transition.name, list(transition.source_states), current)

        values: dict[str, Any] = {transition.state_field: transition.target_state}
        if transition.apply is not None:
            values.update(transition.apply(record, operation.payload))
        self.store.update(record, values)

        logger.info(
            "sync_transition_applied",
            entity_type=config.entity_type,
            entity_id=str(record.pk),
            transition=transition.name,
            from_state=current,
            to_state=transition.target_state,
        )
        return OperationOutcome(
            success=True,
            entity_type=operation.entity_type,
            server_entity_id=str(record.pk),
        )

    def _load(
        self, config: EntityConfig, operation: SyncOperationIn, include_deleted: bool = False
    ) -> SyncableModel:
        record = self.store.get(config.model, operation.entity_id, include_deleted=include_deleted)
        if record is None:
            raise EntityNotFoundError(
                f"Record not found: {operation.entity_type} '{operation.entity_id}'"
            )
        return record
