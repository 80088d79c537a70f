"""Immutable, self-validating value objects used by the template aggregate."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidIdentifierError, InvalidTemplateError

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")

IDENTIFIER_MAX_LENGTH = 64
TEMPLATE_NAME_MAX_LENGTH = 100
TEMPLATE_DESCRIPTION_MAX_LENGTH = 500


@dataclass(frozen=True)
class _Identifier:
    """Base for identifiers wrapping a non-blank token string.

    Accepts UUIDs as well as other ids made of letters, digits, ``-`` and
    ``_``. Equality is by value and by concrete type, so a ``TemplateId``
    never equals a ``UserId`` holding the same string.
    """

    value: str

    kind: ClassVar[str] = "identifier"

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, str)
            or len(self.value) > IDENTIFIER_MAX_LENGTH
            or not _IDENTIFIER_PATTERN.fullmatch(self.value)
        ):
            raise InvalidIdentifierError(f"Invalid {self.kind} ID format", field="id")

    @classmethod
    def create(cls, raw: "str | _Identifier"):
        """Validate ``raw`` and wrap it, passing existing instances through."""

        if isinstance(raw, cls):
            return raw
        return cls(raw)

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TemplateId(_Identifier):
    """Identifier of a prompt template."""

    kind: ClassVar[str] = "template"

    @classmethod
    def generate(cls) -> "TemplateId":
        """Return a fresh random identifier."""

        return cls(str(uuid.uuid4()))


@dataclass(frozen=True)
class UserId(_Identifier):
    """Identifier of the account owning a template."""

    kind: ClassVar[str] = "user"


@dataclass(frozen=True)
class TemplateName:
    """Trimmed, non-empty template name of bounded length."""

    value: str

    @classmethod
    def create(cls, raw: str) -> "TemplateName":
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidTemplateError("Template name cannot be empty", field="name")
        trimmed = raw.strip()
        if len(trimmed) > TEMPLATE_NAME_MAX_LENGTH:
            raise InvalidTemplateError(
                f"Template name cannot exceed {TEMPLATE_NAME_MAX_LENGTH} characters",
                field="name",
            )
        return cls(trimmed)

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TemplateDescription:
    """Optional template description; blank input yields ``None``."""

    value: str

    @classmethod
    def create(cls, raw: str | None) -> "TemplateDescription | None":
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise InvalidTemplateError(
                "Template description must be a string", field="description"
            )
        trimmed = raw.strip()
        if not trimmed:
            return None
        if len(trimmed) > TEMPLATE_DESCRIPTION_MAX_LENGTH:
            raise InvalidTemplateError(
                "Template description cannot exceed "
                f"{TEMPLATE_DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )
        return cls(trimmed)

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


__all__ = [
    "IDENTIFIER_MAX_LENGTH",
    "TEMPLATE_DESCRIPTION_MAX_LENGTH",
    "TEMPLATE_NAME_MAX_LENGTH",
    "TemplateDescription",
    "TemplateId",
    "TemplateName",
    "UserId",
]
