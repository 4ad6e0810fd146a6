"""
Tenant guard for pushed operations.

Runs before any storage access. A mismatch rejects only the offending
operation; the rest of the batch continues.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.core.logging import get_logger

if TYPE_CHECKING:
    from apps.sync.schemas import SyncOperationIn

logger = get_logger(__name__)


def check_tenant(operation: SyncOperationIn, tenant_id: str | int) -> bool:
    """
    Return True only if the operation declares exactly the session's tenant.

    Fails closed: values must match and so must their types, so an integer
    5 never matches the string "5".
    """
    declared = operation.tenant_id
    if type(declared) is type(tenant_id) and declared == tenant_id:
        return True

    logger.warning(
        "sync_tenant_mismatch",
        kind=operation.kind,
        entity_type=operation.entity_type,
        entity_id=operation.entity_id,
        operation_tenant_id=declared,
        operation_tenant_id_type=type(declared).__name__,
        context_tenant_id=tenant_id,
        context_tenant_id_type=type(tenant_id).__name__,
    )
    return False


def tenant_mismatch_message(operation: SyncOperationIn, tenant_id: str | int) -> str:
    return (
        f"Tenant mismatch: operation has '{operation.tenant_id}' "
        f"but context expects '{tenant_id}'"
    )
