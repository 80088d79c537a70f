"""Minimal inversion-of-control container.

Services are registered as factories under string keys and resolved lazily to
process-wide singletons. No type inspection is involved: a factory receives the
container and resolves its own dependencies explicitly::

    container.register("engine", lambda c: build_engine(c.resolve("settings")))
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any

logger = logging.getLogger(__name__)

Factory = Callable[["Container"], Any]


class UnregisteredServiceError(LookupError):
    """Raised when resolving a key that has no registered factory."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Service {key} is not registered")
        self.key = key


class CircularDependencyError(RuntimeError):
    """Raised when a factory resolves a key that is still being built."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__("Circular dependency detected: " + " -> ".join(self.chain))


class Container:
    """Registry mapping keys to factories with a lazily filled instance cache."""

    def __init__(self) -> None:
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}
        self._resolving: list[str] = []
        self._lock = threading.RLock()

    def register(self, key: str, factory: Factory) -> None:
        """Store ``factory`` under ``key``, replacing any previous factory.

        An instance already built for ``key`` stays cached.
        """

        with self._lock:
            if key in self._factories:
                logger.debug("Replacing factory registered for %s", key)
            self._factories[key] = factory

    def resolve(self, key: str) -> Any:
        """Return the singleton for ``key``, building it on first use.

        Raises:
            UnregisteredServiceError: If no factory is registered for ``key``.
            CircularDependencyError: If ``key`` is requested while its own
                factory is still running.
        """

        with self._lock:
            if key in self._instances:
                return self._instances[key]

            factory = self._factories.get(key)
            if factory is None:
                raise UnregisteredServiceError(key)
            if key in self._resolving:
                raise CircularDependencyError([*self._resolving, key])

            self._resolving.append(key)
            try:
                instance = factory(self)
            finally:
                self._resolving.pop()

            self._instances[key] = instance
            logger.debug("Resolved service %s", key)
            return instance

    def is_registered(self, key: str) -> bool:
        return key in self._factories

    def clear(self) -> None:
        """Forget every factory and cached instance."""

        with self._lock:
            self._factories.clear()
            self._instances.clear()


__all__ = [
    "CircularDependencyError",
    "Container",
    "Factory",
    "UnregisteredServiceError",
]
