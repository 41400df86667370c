"""Dog Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DogServiceError → JSON responses, catch-all → generic 500
    - CORS configured from settings (not hardcoded)
    - Database session manager created on startup and stored on app.state

Design Decisions:
    - Application factory: tests build apps with their own settings and state
    - Lifespan over @app.on_event: cleaner cleanup of the connection pool
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dog_service import __version__
from dog_service.api.error_handlers import register_error_handlers
from dog_service.api.routes import dogs, health
from dog_service.config import Settings, get_settings
from dog_service.infrastructure.database import DatabaseSessionManager
from dog_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_schema:
            await db_manager.create_schema()
        app.state.db_manager = db_manager
        logger.info("Dog Service started")
        yield
        logger.info("Dog Service shutting down")
        await db_manager.dispose()

    app = FastAPI(title="Dog Service", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(dogs.router)

    register_error_handlers(app)
    return app


app = create_app()


def serve() -> None:
    """Run the API under uvicorn on the configured host and port."""
    settings = get_settings()
    port = settings.listen_port
    uvicorn.run(
        "dog_service.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
