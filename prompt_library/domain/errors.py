"""Errors raised by the domain layer and the repository port."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised by the domain model."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidIdentifierError(DomainError, ValueError):
    """Raised when an identifier is not a well-formed UUID string."""


class InvalidTemplateError(DomainError, ValueError):
    """Raised when template data violates an aggregate invariant."""


class TemplateNotFoundError(DomainError, LookupError):
    """Raised by use cases that require an existing template."""


class TemplateAccessError(DomainError, PermissionError):
    """Raised when a user tries to modify a template they do not own."""


class PersistenceError(DomainError, RuntimeError):
    """Raised when the backing store rejects a write or delete.

    The storage-level exception is chained as ``__cause__``.
    """


__all__ = [
    "DomainError",
    "InvalidIdentifierError",
    "InvalidTemplateError",
    "PersistenceError",
    "TemplateAccessError",
    "TemplateNotFoundError",
]
