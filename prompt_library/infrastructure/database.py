"""Database configuration and session management."""

from __future__ import annotations

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from prompt_library.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create the async engine described by ``settings.database_url``.

    In-memory SQLite databases share a single connection so every session sees
    the same tables.
    """

    settings = settings or get_settings()
    options: dict[str, object] = {"echo": settings.sql_echo}
    if _is_in_memory_sqlite(settings.database_url):
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True

    logger.debug(
        "Creating database engine for %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    return create_async_engine(settings.database_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to ``engine``."""

    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


async def initialize_database(engine: AsyncEngine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from prompt_library.infrastructure import models  # noqa: F401  # ensure models are imported

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all, checkfirst=True)


__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "initialize_database",
]
