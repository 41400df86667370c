"""Error Mapper — the single mapping from error kind to status code and body.

Invariants:
    - All functions are PURE: logging happens in the shell, never here
    - DogValidationError → 400 {"error": "Invalid input data"} (no field detail)
    - InvalidIdError → 400 {"message": "id should be a number"}
    - PersistenceError → 500 with an operation-specific generic message
    - Any other exception → 500 generic, internal detail never rendered
    - A 204 response carries no body

Design Decisions:
    - HandlerResponse is transport-neutral: routes render it, tests assert on it
      directly without an HTTP client
"""

from dataclasses import dataclass

from dog_service.core.errors import DogServiceError, InternalError


@dataclass(frozen=True)
class HandlerResponse:
    """Status code plus JSON-ready body (None means empty body)."""
    status_code: int
    body: dict | list | None = None


def ok(body: dict | list) -> HandlerResponse:
    return HandlerResponse(200, body)


def created(body: dict) -> HandlerResponse:
    return HandlerResponse(201, body)


def no_content() -> HandlerResponse:
    """Empty-success: used when no matching entity exists."""
    return HandlerResponse(204, None)


def map_error_to_response(error: Exception) -> HandlerResponse:
    """Map any failure to the response a client is allowed to see."""
    if not isinstance(error, DogServiceError):
        error = InternalError()
    return HandlerResponse(error.http_status, error.to_response())
