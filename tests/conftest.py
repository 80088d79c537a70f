"""Shared fixtures for the prompt library tests."""

from __future__ import annotations

import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from prompt_library.config import Settings  # noqa: E402
from prompt_library.domain.entities import Template  # noqa: E402
from prompt_library.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    initialize_database,
)

OWNER_ID = "123e4567-e89b-12d3-a456-426614174000"
OTHER_USER_ID = "a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11"


def build_template(**overrides) -> Template:
    """Return a valid template, overriding any ``Template.create`` argument."""

    params = {
        "name": "Test Template",
        "user_id": OWNER_ID,
        "description": "A template used in tests",
        "messages": [{"role": "user", "content": "Hello"}],
        "arguments": [],
    }
    params.update(overrides)
    return Template.create(**params)


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        storage_backend="memory",
        log_level="WARNING",
    )


@pytest.fixture
def sqlite_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        storage_backend="sqlalchemy",
        log_level="WARNING",
    )


@pytest.fixture
async def session_factory(sqlite_settings: Settings):
    """Yield a session factory bound to a fresh in-memory SQLite database."""

    engine = build_engine(sqlite_settings)
    await initialize_database(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def owner_id() -> str:
    return OWNER_ID


@pytest.fixture
def other_user_id() -> str:
    return OTHER_USER_ID


@pytest.fixture
def make_template():
    return build_template


@pytest.fixture
async def file_session_factory(tmp_path):
    """Yield a session factory bound to a SQLite database file.

    Each session gets its own connection, so overlapping writes really race.
    """

    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'templates.db'}",
        storage_backend="sqlalchemy",
        log_level="WARNING",
    )
    engine = build_engine(settings)
    await initialize_database(engine)
    yield build_session_factory(engine)
    await engine.dispose()
