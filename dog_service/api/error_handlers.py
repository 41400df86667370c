"""Error Handlers — global exception handlers for the Dog Service API.

Invariants:
    - DogServiceError → its own public body and status
    - RequestValidationError → 400 {"error": "Invalid input data"}, no field detail
    - Exception (catch-all) → generic 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (DogServiceError), validation (FastAPI), catch-all (Exception)
    - Bodies come from core.map_errors so handlers and the global boundary agree
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dog_service.core.errors import DogServiceError, DogValidationError
from dog_service.core.map_errors import map_error_to_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_dog_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_dog_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DogServiceError)
    async def dog_service_error_handler(request: Request, exc: DogServiceError):
        """Handle domain/infrastructure errors raised outside a handler's own matching."""
        logger.error(
            f"DogServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _render(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return _render(DogValidationError())


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return _render(exc)


def _render(exc: Exception) -> JSONResponse:
    response = map_error_to_response(exc)
    return JSONResponse(status_code=response.status_code, content=response.body)
