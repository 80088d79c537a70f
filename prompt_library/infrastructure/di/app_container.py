"""Default service wiring for the application."""

from __future__ import annotations

import logging
from functools import lru_cache

from prompt_library.config import Settings, get_settings
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.infrastructure.database import build_engine, build_session_factory
from prompt_library.infrastructure.repositories import (
    InMemoryTemplateRepository,
    SqlAlchemyTemplateRepository,
)

from .container import Container

logger = logging.getLogger(__name__)

SETTINGS = "settings"
ENGINE = "engine"
SESSION_FACTORY = "session_factory"
TEMPLATE_REPOSITORY = "TemplateRepository"


def _build_template_repository(container: Container) -> TemplateRepository:
    settings: Settings = container.resolve(SETTINGS)
    if settings.storage_backend == "memory":
        logger.info("Using in-memory template storage")
        return InMemoryTemplateRepository()
    return SqlAlchemyTemplateRepository(container.resolve(SESSION_FACTORY))


def create_app_container(settings: Settings | None = None) -> Container:
    """Return a container with settings, database and repository factories."""

    container = Container()
    container.register(SETTINGS, lambda _: settings or get_settings())
    container.register(ENGINE, lambda c: build_engine(c.resolve(SETTINGS)))
    container.register(
        SESSION_FACTORY, lambda c: build_session_factory(c.resolve(ENGINE))
    )
    container.register(TEMPLATE_REPOSITORY, _build_template_repository)
    return container


@lru_cache
def get_app_container() -> Container:
    """Return the process-wide container built from environment settings."""

    return create_app_container()


__all__ = [
    "ENGINE",
    "SESSION_FACTORY",
    "SETTINGS",
    "TEMPLATE_REPOSITORY",
    "create_app_container",
    "get_app_container",
]
