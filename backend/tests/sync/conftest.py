"""
Pytest fixtures for sync tests.

Provides operation builders, a tenant-bound store and registry isolation.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from typing import Any

import pytest

from apps.sync.executor import OperationExecutor
from apps.sync.registry import SyncRegistry
from apps.sync.schemas import SyncOperationIn
from apps.sync.store import DjangoEntityStore

_operation_ids = itertools.count(1)


def now_ms(offset_ms: int = 0) -> int:
    """Current wall clock in ms since epoch, shifted by offset_ms."""
    return int(time.time() * 1000) + offset_ms


def build_operation(
    tenant_id: str | int,
    kind: str = "create",
    entity_type: str = "client",
    entity_id: str | int | None = None,
    payload: dict[str, Any] | None = None,
    **overrides: Any,
) -> SyncOperationIn:
    """
    Build a valid operation for the given tenant.

    local_timestamp defaults to a minute in the future so that records
    created during the test never look newer than the edit.
    """
    data: dict[str, Any] = {
        "id": next(_operation_ids),
        "kind": kind,
        "entity_type": entity_type,
        "entity_id": entity_id,
        "local_timestamp": now_ms(60_000),
        "user_id": "user-1",
        "tenant_id": tenant_id,
        "payload": payload or {},
    }
    data.update(overrides)
    return SyncOperationIn(**data)


@pytest.fixture
def make_operation(organization) -> Callable[..., SyncOperationIn]:
    """Operation builder bound to the default member's practice."""

    def _make(**kwargs: Any) -> SyncOperationIn:
        return build_operation(organization.tenant_id, **kwargs)

    return _make


@pytest.fixture
def store(organization, member) -> DjangoEntityStore:
    return DjangoEntityStore(organization, member)


@pytest.fixture
def executor(store) -> OperationExecutor:
    return OperationExecutor(store)


@pytest.fixture
def isolated_registry():
    """
    Empty the registry for one test and restore the app registrations after.

    The clinic app registers its entity types at startup; tests that register
    their own must not leak into the rest of the suite.
    """
    configs = dict(SyncRegistry._configs)
    aliases = dict(SyncRegistry._aliases)
    SyncRegistry.clear()

    yield SyncRegistry

    SyncRegistry.clear()
    SyncRegistry._configs.update(configs)
    SyncRegistry._aliases.update(aliases)
