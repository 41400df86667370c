"""Dog Handlers — create, list, get, update, delete orchestration.

Invariants:
    - Validation and id parsing short-circuit before any repository call
    - Repository failures are matched explicitly and mapped to an opaque 500;
      the cause is logged here and never returned
    - GET/DELETE on a missing id → 204 empty-success (not 404)
    - PATCH on a missing id is a repository failure → 500 (not 404)
    - PATCH success reuses 201
    - DELETE returns the dog as it was immediately before deletion
    - Handlers hold no state across requests (repository injected per request)

Design Decisions:
    - Repository injected through the constructor: no module-level store handle
    - Responses are HandlerResponse values, so handlers are testable without HTTP
    - No retries: a single repository failure surfaces immediately
"""

import logging

from dog_service.core.domain_types import DogOperation, GatewayFailure
from dog_service.core.errors import (
    DogServiceError, DogValidationError, InvalidIdError, PersistenceError,
)
from dog_service.core.map_errors import (
    HandlerResponse, created, map_error_to_response, no_content, ok,
)
from dog_service.core.repository_protocols import DogRepository
from dog_service.core.validate_dog import (
    validate_create, validate_id, validate_partial,
)

logger = logging.getLogger(__name__)


class DogHandlers:
    """One handler per Dog operation, sharing an injected repository."""

    def __init__(self, repository: DogRepository):
        self.repository = repository

    async def create(self, payload: object) -> HandlerResponse:
        """POST /dogs — validate full payload, store, return 201 with the new dog."""
        fields = validate_create(payload)
        if isinstance(fields, DogValidationError):
            return _reject(DogOperation.CREATE, fields)

        result = await self.repository.create(fields.model_dump())
        if isinstance(result, GatewayFailure):
            return _persistence_failure(DogOperation.CREATE, result)
        logger.info(
            f"Dog {result.id} created",
            extra={"operation": DogOperation.CREATE.value, "dog_id": result.id},
        )
        return created(result.to_dict())

    async def list_all(self) -> HandlerResponse:
        """GET /dogs — every stored dog, store-defined order."""
        result = await self.repository.find_many()
        if isinstance(result, GatewayFailure):
            return _persistence_failure(DogOperation.LIST, result)
        return ok([dog.to_dict() for dog in result])

    async def get(self, raw_id: str) -> HandlerResponse:
        """GET /dogs/{id} — 200 with the dog, or 204 if it does not exist."""
        dog_id = validate_id(raw_id)
        if isinstance(dog_id, InvalidIdError):
            return _reject(DogOperation.GET, dog_id)

        result = await self.repository.find_one(dog_id)
        if isinstance(result, GatewayFailure):
            return _persistence_failure(DogOperation.GET, result)
        if result is None:
            return no_content()
        return ok(result.to_dict())

    async def update(self, raw_id: str, payload: object) -> HandlerResponse:
        """PATCH /dogs/{id} — apply present fields only, 201 with the updated dog."""
        dog_id = validate_id(raw_id)
        if isinstance(dog_id, InvalidIdError):
            return _reject(DogOperation.UPDATE, dog_id)
        changes = validate_partial(payload)
        if isinstance(changes, DogValidationError):
            return _reject(DogOperation.UPDATE, changes)

        result = await self.repository.update(dog_id, changes.changes)
        if isinstance(result, GatewayFailure):
            return _persistence_failure(DogOperation.UPDATE, result)
        return created(result.to_dict())

    async def delete(self, raw_id: str) -> HandlerResponse:
        """DELETE /dogs/{id} — 200 with the pre-deletion dog, or 204 if absent."""
        dog_id = validate_id(raw_id)
        if isinstance(dog_id, InvalidIdError):
            return _reject(DogOperation.DELETE, dog_id)

        existing = await self.repository.find_one(dog_id)
        if isinstance(existing, GatewayFailure):
            return _persistence_failure(DogOperation.DELETE, existing)
        if existing is None:
            return no_content()

        removed = await self.repository.delete(dog_id)
        if isinstance(removed, GatewayFailure):
            return _persistence_failure(DogOperation.DELETE, removed)
        logger.info(
            f"Dog {dog_id} deleted",
            extra={"operation": DogOperation.DELETE.value, "dog_id": dog_id},
        )
        return ok(existing.to_dict())


def _reject(operation: DogOperation, error: DogServiceError) -> HandlerResponse:
    """Client error — logged without payload contents."""
    details = getattr(error, "details", None)
    logger.warning(
        f"Rejected {operation.value} request: {error.code}"
        + (f" ({'; '.join(details)})" if details else ""),
        extra={"operation": operation.value, "error_code": error.code},
    )
    return map_error_to_response(error)


def _persistence_failure(
    operation: DogOperation, failure: GatewayFailure,
) -> HandlerResponse:
    """Repository failure — full cause to the log, generic message to the client."""
    error = PersistenceError(operation, failure.cause)
    logger.error(
        f"Repository {failure.operation.value} failed during {operation.value}: "
        f"{failure.cause}",
        extra={"operation": operation.value, "error_code": error.code},
    )
    return map_error_to_response(error)
