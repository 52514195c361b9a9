"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from swiftmt799.api.errors import register_exception_handlers
from swiftmt799.api.routes import health, swift_message
from swiftmt799.core.config import AppSettings
from swiftmt799.core.logging import setup_logging
from swiftmt799.core.protocols import IMessageStore
from swiftmt799.persistence import create_persistence

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and report the wired store on startup."""
    settings: AppSettings = app.state.settings
    setup_logging(level=settings.log_level, format_type=settings.log_format)
    logger.info(
        "Starting %s (environment=%s, store=%s)",
        settings.api.title, settings.environment, settings.store.backend,
    )
    if settings.store.backend == "sqlite":
        logger.info("SQLite database path: %s", settings.store.db_path)
    yield
    logger.info("Shutting down %s", settings.api.title)


def create_app(
    settings: AppSettings | None = None,
    store: IMessageStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; loaded from the environment if omitted
        store: Message store; built from ``settings.store`` if omitted
    """
    if settings is None:
        settings = AppSettings()

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else create_persistence(settings)

    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(swift_message.router)
    return app
