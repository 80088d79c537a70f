"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

StorageBackend = Literal["sqlalchemy", "memory"]


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./prompt_library.db",
        description="Async SQLAlchemy URL of the database holding prompt templates",
        min_length=1,
    )
    storage_backend: StorageBackend = Field(
        default="sqlalchemy",
        description="Repository adapter wired into the service container",
    )
    sql_echo: bool = Field(
        default=False,
        description="Log every SQL statement emitted by the engine",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used when stamping template creation and updates",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "StorageBackend", "get_settings", "reset_settings_cache"]
