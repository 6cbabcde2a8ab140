"""Q&A API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QAServiceError → structured JSON responses
    - Connection pool built once in the lifespan and stored on app.state
    - Startup aborts if settings are invalid or the database is unreachable

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests inject settings without touching the env
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from qa_service.api.error_handlers import register_error_handlers
from qa_service.api.routes import answers, health, questions
from qa_service.config import Settings, get_settings
from qa_service.infrastructure.database import DatabaseSessionManager
from qa_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        max_connections=settings.database_max_connections,
    )
    if not await db_manager.health_check():
        await db_manager.dispose()
        raise RuntimeError("Could not connect to the database")
    if settings.database_create_schema:
        await db_manager.create_schema()

    app.state.db_manager = db_manager
    logger.info("Q&A API started")
    try:
        yield
    finally:
        logger.info("Q&A API shutting down")
        app.state.db_manager = None
        await db_manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Q&A API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = None

    app.include_router(health.router)
    app.include_router(questions.router)
    app.include_router(answers.router)

    register_error_handlers(app)
    return app


app = create_app()
