"""
Sync engine services.

Core business logic for reconciling a pushed batch of offline operations.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from django.db import IntegrityError, transaction

from apps.core.logging import get_logger
from apps.sync.exceptions import SyncError, TenantMismatchError
from apps.sync.executor import OperationExecutor, OperationOutcome
from apps.sync.registry import SyncRegistry
from apps.sync.schemas import (
    ConflictDetailsOut,
    OperationOutcomeOut,
    SyncOperationIn,
    SyncPushResponse,
)
from apps.sync.store import DjangoEntityStore, EntityStore
from apps.sync.tenancy import check_tenant, tenant_mismatch_message

if TYPE_CHECKING:
    from apps.accounts.models import Member
    from apps.organizations.models import Organization

logger = get_logger(__name__)


@dataclass
class BatchResult:
    """Aggregate result of one pushed batch. Never persisted."""

    processed: int = 0
    failed: int = 0
    conflicts: int = 0
    results: list[OperationOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0 and self.conflicts == 0

    def add(self, outcome: OperationOutcome) -> None:
        if outcome.conflict:
            self.conflicts += 1
        elif outcome.success:
            self.processed += 1
        else:
            self.failed += 1
        self.results.append(outcome)


def placeholder_id(operation: SyncOperationIn) -> int | str | None:
    """The client-local id a create is known by until the server assigns one."""
    if operation.entity_id is not None:
        return operation.entity_id
    return operation.payload.get("id")


def resolve_placeholders(
    operation: SyncOperationIn, id_map: dict[int | str, str]
) -> SyncOperationIn:
    """
    Swap placeholder ids created earlier in the batch for durable ids.

    Applies to the operation's entity_id and to payload reference fields
    ('id' and '*_id' keys), including nested ones.
    """
    if not id_map:
        return operation

    def lookup(value: Any) -> Any:
        if isinstance(value, (str, int)) and not isinstance(value, bool) and value in id_map:
            return id_map[value]
        return value

    def walk(data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: lookup(value) if key == "id" or key.endswith("_id") else walk(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [walk(item) for item in data]
        return data

    return operation.model_copy(
        update={
            "entity_id": lookup(operation.entity_id),
            "payload": walk(operation.payload),
        }
    )


def _failed(
    operation: SyncOperationIn, error_code: str, message: str, details: dict | None = None
) -> OperationOutcome:
    return OperationOutcome(
        success=False,
        entity_type=operation.entity_type,
        error=message,
        error_code=error_code,
        error_details=details,
    )


def process_sync_operation(
    operation: SyncOperationIn,
    tenant_id: str,
    executor: OperationExecutor,
    id_map: dict[int | str, str],
) -> OperationOutcome:
    """
    Process a single sync operation.

    Never raises: every failure becomes a failed OperationOutcome so sibling
    operations in the batch still run. Each operation commits on its own.

    Args:
        operation: The operation as submitted
        tenant_id: The authenticated session's tenant id
        executor: Executor bound to the tenant's store
        id_map: Placeholder -> durable id map shared across the batch

    Returns:
        OperationOutcome with correlation ids filled in
    """
    log = logger.bind(
        kind=operation.kind,
        entity_type=operation.entity_type,
        entity_id=operation.entity_id,
    )

    if not check_tenant(operation, tenant_id):
        outcome = _failed(
            operation,
            TenantMismatchError.error_code,
            tenant_mismatch_message(operation, tenant_id),
        )
    else:
        try:
            config = SyncRegistry.get_config(operation.entity_type)
            prepared = resolve_placeholders(operation, id_map)
            with transaction.atomic():
                outcome = executor.execute(config, prepared)
        except SyncError as e:
            log.info("sync_operation_rejected", error_code=e.error_code, error=str(e))
            outcome = _failed(operation, e.error_code, str(e), getattr(e, "details", None))
        except IntegrityError as e:
            # Uniqueness violations the idempotency resolver could not recover
            log.warning("sync_operation_integrity_error", error=str(e))
            outcome = _failed(operation, "INTEGRITY_ERROR", str(e))
        except Exception as e:
            log.exception("sync_operation_error", error=str(e))
            outcome = _failed(
                operation, "INTERNAL_ERROR", "Unexpected error while applying operation"
            )

    outcome.client_correlation_id = operation.id
    if operation.kind == "create":
        outcome.client_entity_id = placeholder_id(operation)
        if outcome.success and outcome.client_entity_id is not None:
            id_map[outcome.client_entity_id] = outcome.server_entity_id

    if outcome.conflict:
        log.info(
            "sync_operation_conflict",
            conflict_kind=outcome.conflict_details["conflict_kind"],
            affected_fields=outcome.conflict_details["affected_fields"],
        )
    elif outcome.success:
        log.info(
            "sync_operation_applied",
            server_entity_id=outcome.server_entity_id,
            replayed=outcome.replayed,
        )
    return outcome


def process_batch(
    organization: Organization,
    actor: Member | None,
    operations: list[SyncOperationIn],
    client_timestamp: int | None = None,
    store: EntityStore | None = None,
) -> BatchResult:
    """
    Reconcile a batch of operations in submission order.

    Operations are never reordered or parallelized: a later operation may
    reference a record created earlier in the same batch by its placeholder.

    Args:
        organization: The authenticated tenant
        actor: The member performing the push
        operations: Operations in submission order
        client_timestamp: Client wall clock, ms since epoch (diagnostics only)
        store: Storage override; defaults to the ORM store for the tenant

    Returns:
        BatchResult with per-operation outcomes in input order
    """
    executor = OperationExecutor(store or DjangoEntityStore(organization, actor))
    id_map: dict[int | str, str] = {}
    result = BatchResult()

    batch_context: dict[str, Any] = {"organization.id": organization.tenant_id}
    if actor is not None:
        batch_context["usr.id"] = actor.user_id

    with structlog.contextvars.bound_contextvars(**batch_context):
        drift_ms = int(time.time() * 1000) - client_timestamp if client_timestamp else None
        logger.info("sync_push_started", operation_count=len(operations), drift_ms=drift_ms)

        for operation in operations:
            result.add(
                process_sync_operation(
                    operation,
                    tenant_id=organization.tenant_id,
                    executor=executor,
                    id_map=id_map,
                )
            )

        logger.info(
            "sync_push_completed",
            operation_count=len(operations),
            processed=result.processed,
            failed=result.failed,
            conflicts=result.conflicts,
        )

    return result


def to_sync_push_response(result: BatchResult) -> SyncPushResponse:
    """Convert a BatchResult to API response schema."""
    return SyncPushResponse(
        success=result.success,
        processed=result.processed,
        failed=result.failed,
        conflicts=result.conflicts,
        results=[
            OperationOutcomeOut(
                success=outcome.success,
                status=outcome.status,
                entity_type=outcome.entity_type,
                client_correlation_id=outcome.client_correlation_id,
                client_entity_id=outcome.client_entity_id,
                server_entity_id=outcome.server_entity_id,
                replayed=outcome.replayed,
                conflict=outcome.conflict,
                conflict_details=(
                    ConflictDetailsOut(**outcome.conflict_details)
                    if outcome.conflict_details
                    else None
                ),
                error=outcome.error,
                error_code=outcome.error_code,
                error_details=outcome.error_details,
            )
            for outcome in result.results
        ],
    )
