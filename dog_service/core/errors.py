"""Error Hierarchy — typed, categorized exceptions for all Dog Service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; persistence errors (500-level) are critical
    - to_response() produces the public body; detail stays on the instance for logs
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DogServiceError base: FastAPI global handler catches all
    - Errors double as values: validators return them and the mapper renders them,
      so handlers never need try/except for expected failures
    - Public bodies keep the service's historical shapes ({"error": ...} for payload
      and storage failures, {"message": ...} for bad ids) — clients depend on them
"""

from enum import Enum

from dog_service.core.domain_types import DogOperation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


class DogServiceError(Exception):
    """Base exception for all Dog Service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class DogValidationError(DogServiceError):
    """Payload is missing fields or carries wrongly typed fields."""

    PUBLIC_MESSAGE = "Invalid input data"

    def __init__(self, details: list[str] | None = None):
        super().__init__(
            self.PUBLIC_MESSAGE, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        # field-level detail is for logs only
        self.details = details or []


class InvalidIdError(DogServiceError):
    """Path identifier does not parse as a number."""

    PUBLIC_MESSAGE = "id should be a number"

    def __init__(self, raw_id: str):
        super().__init__(
            self.PUBLIC_MESSAGE, "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_id = raw_id

    def to_response(self) -> dict:
        return {"message": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

_OPERATION_MESSAGES = {
    DogOperation.CREATE: "An error occurred while creating the dog.",
    DogOperation.LIST: "An error occurred while fetching the dogs.",
    DogOperation.GET: "An error occurred while fetching the dog.",
    DogOperation.UPDATE: "An error occurred while updating the dog.",
    DogOperation.DELETE: "An error occurred while deleting the dog.",
}
_FALLBACK_MESSAGE = "An error occurred while accessing the database."


class PersistenceError(DogServiceError):
    """Storage-layer operation failed. The cause is never sent to clients."""

    def __init__(self, operation: DogOperation | None = None, cause: str = ""):
        super().__init__(
            _OPERATION_MESSAGES.get(operation, _FALLBACK_MESSAGE),
            "PERSISTENCE_ERROR",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.cause = cause


class InternalError(DogServiceError):
    """Anything that escaped local handling."""

    PUBLIC_MESSAGE = "An unexpected error occurred"

    def __init__(self):
        super().__init__(
            self.PUBLIC_MESSAGE, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
