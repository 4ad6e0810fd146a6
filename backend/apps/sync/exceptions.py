"""Sync-specific exceptions.

Each exception maps to one failed operation outcome; error_code is the
machine-readable code returned to the client.
"""


class SyncError(Exception):
    """Base exception for sync errors."""

    error_code = "SYNC_ERROR"


class UnknownEntityTypeError(SyncError):
    """Raised when entity type is not registered."""

    error_code = "UNKNOWN_ENTITY_TYPE"


class EntityNotFoundError(SyncError):
    """Raised when entity does not exist."""

    error_code = "NOT_FOUND"


class TenantMismatchError(SyncError):
    """Raised when an operation declares a tenant other than the session's."""

    error_code = "TENANT_MISMATCH"


class MissingDependencyError(SyncError):
    """Raised when a referenced parent record does not exist."""

    error_code = "MISSING_DEPENDENCY"

    def __init__(self, dependency: str, dependency_id: object, message: str | None = None):
        super().__init__(message or f"Missing dependency: {dependency} '{dependency_id}' not found")
        self.dependency = dependency
        self.dependency_id = dependency_id


class StatePreconditionError(SyncError):
    """Raised when a transition is attempted from the wrong state."""

    error_code = "STATE_PRECONDITION_FAILED"

    def __init__(self, transition: str, expected: list[str], actual: str):
        super().__init__(
            f"Cannot {transition}: expected state {' or '.join(expected)}, got '{actual}'"
        )
        self.expected = expected
        self.actual = actual


class InvalidOperationError(SyncError):
    """Raised when an operation kind is not valid for the entity type."""

    error_code = "INVALID_OPERATION"


class PayloadValidationError(SyncError):
    """Raised when a payload does not match the entity's shape."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}
