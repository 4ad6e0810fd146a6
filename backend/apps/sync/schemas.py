"""
Pydantic schemas for sync API.
"""

from typing import Any, Literal

from ninja import Field, Schema
from pydantic import model_validator

# Generic verbs plus the named workflow transitions
OperationKind = Literal[
    "create",
    "update",
    "delete",
    "approve",
    "reject",
    "discharge",
    "check_in",
    "check_out",
]

SyncStatus = Literal["applied", "rejected", "conflict"]


class SyncOperationIn(Schema):
    """Input schema for a single sync operation."""

    id: int | str | None = None  # Client-local correlation id, echoed back
    kind: OperationKind
    entity_type: str = Field(..., min_length=1, max_length=64)
    entity_id: str | int | None = None  # Placeholder id for create, required otherwise
    local_timestamp: int = Field(..., ge=0)  # ms since epoch of the client edit
    expected_version: int | None = None  # For optimistic concurrency
    user_id: str | int
    tenant_id: str | int

    # PATCH semantics for 'update':
    # - payload contains ONLY changed fields
    # - Omitted fields are NOT overwritten on server
    # - For 'create': payload is the complete entity
    # - For 'delete': payload is ignored (can be empty {})
    payload: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _require_entity_id(self) -> "SyncOperationIn":
        if self.kind != "create" and self.entity_id in (None, ""):
            raise ValueError(f"entity_id is required for '{self.kind}' operations")
        return self


class SyncPushRequest(Schema):
    """Request schema for push endpoint."""

    operations: list[SyncOperationIn] = Field(..., min_length=1)
    client_timestamp: int  # Diagnostics only


class ConflictDetailsOut(Schema):
    """Both versions of a conflicting record."""

    local_payload: dict
    server_payload: dict
    conflict_kind: Literal["timestamp", "version"]
    affected_fields: list[str]


class OperationOutcomeOut(Schema):
    """Result for a single sync operation."""

    success: bool
    status: SyncStatus
    entity_type: str
    client_correlation_id: int | str | None = None
    client_entity_id: int | str | None = None
    server_entity_id: str | None = None
    replayed: bool = False
    conflict: bool = False
    conflict_details: ConflictDetailsOut | None = None
    error: str | None = None
    error_code: str | None = None
    error_details: dict | None = None  # Structured validation errors


class SyncPushResponse(Schema):
    """Response schema for push endpoint."""

    success: bool
    processed: int
    failed: int
    conflicts: int
    results: list[OperationOutcomeOut]
