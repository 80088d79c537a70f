"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from prompt_library.config import Settings
from prompt_library.infrastructure.database import initialize_database
from prompt_library.infrastructure.di import (
    ENGINE,
    SETTINGS,
    Container,
    get_app_container,
)
from prompt_library.interfaces.api.routes import register_routes
from prompt_library.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application around ``container``."""

    container = container or get_app_container()
    settings: Settings = container.resolve(SETTINGS)
    configure_logging(settings.log_level)
    uses_database = settings.storage_backend == "sqlalchemy"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables on start-up and release the engine on shutdown."""

        if uses_database:
            await initialize_database(container.resolve(ENGINE))
        logger.info("Prompt library started with %s storage", settings.storage_backend)
        yield
        if uses_database:
            await container.resolve(ENGINE).dispose()

    app = FastAPI(title="Prompt Library", lifespan=lifespan)
    app.state.container = container
    register_routes(app)
    return app
