"""Service container and the application's default wiring."""

from .app_container import (
    ENGINE,
    SESSION_FACTORY,
    SETTINGS,
    TEMPLATE_REPOSITORY,
    create_app_container,
    get_app_container,
)
from .container import (
    CircularDependencyError,
    Container,
    Factory,
    UnregisteredServiceError,
)

__all__ = [
    "CircularDependencyError",
    "Container",
    "ENGINE",
    "Factory",
    "SESSION_FACTORY",
    "SETTINGS",
    "TEMPLATE_REPOSITORY",
    "UnregisteredServiceError",
    "create_app_container",
    "get_app_container",
]
