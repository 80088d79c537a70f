"""Template aggregate root and the message/argument values it owns."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from prompt_library.domain.errors import InvalidTemplateError
from prompt_library.domain.value_objects import (
    TemplateDescription,
    TemplateId,
    TemplateName,
    UserId,
)
from prompt_library.utils import ensure_app_timezone, now_in_app_timezone


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class TemplateMessage:
    """A single conversation turn of a template."""

    role: MessageRole
    content: str

    def __post_init__(self) -> None:
        try:
            role = MessageRole(self.role)
        except ValueError as exc:
            raise InvalidTemplateError(
                f"Invalid message role: {self.role!r}", field="messages"
            ) from exc
        if not isinstance(self.content, str):
            raise InvalidTemplateError("Message content must be a string", field="messages")
        object.__setattr__(self, "role", role)

    @classmethod
    def from_value(cls, value: "TemplateMessage | Mapping[str, Any]") -> "TemplateMessage":
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidTemplateError(f"Invalid message: {value!r}", field="messages")
        return cls(role=value.get("role"), content=value.get("content", ""))

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class TemplateArgument:
    """A parameter declared by a template.

    Names are not required to be unique within a template.
    """

    name: str
    description: str = ""
    required: bool = False
    type: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidTemplateError("Argument name cannot be empty", field="arguments")
        if self.description is None:
            object.__setattr__(self, "description", "")
        object.__setattr__(self, "required", bool(self.required))

    @classmethod
    def from_value(
        cls, value: "TemplateArgument | Mapping[str, Any]"
    ) -> "TemplateArgument":
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidTemplateError(f"Invalid argument: {value!r}", field="arguments")
        return cls(
            name=value.get("name"),
            description=value.get("description") or "",
            required=value.get("required", False),
            type=value.get("type"),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }
        if self.type is not None:
            payload["type"] = self.type
        return payload


MessageInput = TemplateMessage | Mapping[str, Any]
ArgumentInput = TemplateArgument | Mapping[str, Any]


def _normalize_messages(messages: Iterable[MessageInput] | None) -> tuple[TemplateMessage, ...]:
    return tuple(TemplateMessage.from_value(message) for message in messages or ())


def _normalize_arguments(
    arguments: Iterable[ArgumentInput] | None,
) -> tuple[TemplateArgument, ...]:
    return tuple(TemplateArgument.from_value(argument) for argument in arguments or ())


class Template:
    """Aggregate root for a prompt template.

    State changes only through the named operations below; each re-validates
    what it touches and moves ``updated_at`` forward. Two instances are equal
    when they share a ``TemplateId``.
    """

    def __init__(
        self,
        *,
        id: TemplateId,
        name: TemplateName,
        description: TemplateDescription | None,
        user_id: UserId,
        is_public: bool,
        messages: tuple[TemplateMessage, ...],
        arguments: tuple[TemplateArgument, ...],
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        if updated_at < created_at:
            raise InvalidTemplateError(
                "updated_at cannot be earlier than created_at", field="updated_at"
            )
        self._id = id
        self._name = name
        self._description = description
        self._user_id = user_id
        self._is_public = bool(is_public)
        self._messages = messages
        self._arguments = arguments
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        *,
        name: str,
        user_id: UserId | str,
        description: str | None = None,
        is_public: bool = False,
        messages: Iterable[MessageInput] | None = None,
        arguments: Iterable[ArgumentInput] | None = None,
    ) -> "Template":
        """Build a brand-new template with a fresh identifier."""

        now = now_in_app_timezone()
        return cls(
            id=TemplateId.generate(),
            name=TemplateName.create(name),
            description=TemplateDescription.create(description),
            user_id=UserId.create(user_id),
            is_public=is_public,
            messages=_normalize_messages(messages),
            arguments=_normalize_arguments(arguments),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        *,
        id: TemplateId | str,
        name: str,
        description: str | None,
        user_id: UserId | str,
        is_public: bool,
        messages: Iterable[MessageInput] | None,
        arguments: Iterable[ArgumentInput] | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Template":
        """Rebuild a stored template, keeping its identifier and timestamps.

        Reserved for storage adapters; application code uses :meth:`create`.
        """

        return cls(
            id=TemplateId.create(id),
            name=TemplateName.create(name),
            description=TemplateDescription.create(description),
            user_id=UserId.create(user_id),
            is_public=is_public,
            messages=_normalize_messages(messages),
            arguments=_normalize_arguments(arguments),
            created_at=ensure_app_timezone(created_at),
            updated_at=ensure_app_timezone(updated_at),
        )

    @property
    def id(self) -> TemplateId:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def description(self) -> str | None:
        return self._description.value if self._description else None

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def is_public(self) -> bool:
        return self._is_public

    @property
    def messages(self) -> tuple[TemplateMessage, ...]:
        return self._messages

    @property
    def arguments(self) -> tuple[TemplateArgument, ...]:
        return self._arguments

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def get_id(self) -> TemplateId:
        return self._id

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str | None:
        return self.description

    def get_user_id(self) -> UserId:
        return self._user_id

    def get_messages(self) -> list[TemplateMessage]:
        return list(self._messages)

    def get_arguments(self) -> list[TemplateArgument]:
        return list(self._arguments)

    def get_created_at(self) -> datetime:
        return self._created_at

    def get_updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, new_name: str) -> None:
        self._name = TemplateName.create(new_name)
        self._touch()

    def update_description(self, new_description: str | None) -> None:
        self._description = TemplateDescription.create(new_description)
        self._touch()

    def set_public(self, is_public: bool) -> None:
        self._is_public = bool(is_public)
        self._touch()

    def publish(self) -> None:
        self.set_public(True)

    def unpublish(self) -> None:
        self.set_public(False)

    def add_message(self, message: MessageInput) -> None:
        self._messages = (*self._messages, TemplateMessage.from_value(message))
        self._touch()

    def update_message(self, index: int, message: MessageInput) -> None:
        index = self._check_index(index, self._messages, "messages")
        updated = list(self._messages)
        updated[index] = TemplateMessage.from_value(message)
        self._messages = tuple(updated)
        self._touch()

    def remove_message(self, index: int) -> None:
        index = self._check_index(index, self._messages, "messages")
        self._messages = self._messages[:index] + self._messages[index + 1 :]
        self._touch()

    def replace_messages(self, messages: Iterable[MessageInput]) -> None:
        self._messages = _normalize_messages(messages)
        self._touch()

    def add_argument(self, argument: ArgumentInput) -> None:
        self._arguments = (*self._arguments, TemplateArgument.from_value(argument))
        self._touch()

    def update_argument(self, index: int, argument: ArgumentInput) -> None:
        index = self._check_index(index, self._arguments, "arguments")
        updated = list(self._arguments)
        updated[index] = TemplateArgument.from_value(argument)
        self._arguments = tuple(updated)
        self._touch()

    def remove_argument(self, index: int) -> None:
        index = self._check_index(index, self._arguments, "arguments")
        self._arguments = self._arguments[:index] + self._arguments[index + 1 :]
        self._touch()

    def replace_arguments(self, arguments: Iterable[ArgumentInput]) -> None:
        self._arguments = _normalize_arguments(arguments)
        self._touch()

    def is_owned_by(self, user_id: UserId | str) -> bool:
        return self._user_id == UserId.create(user_id)

    def can_be_edited_by(self, user_id: UserId | str) -> bool:
        return self.is_owned_by(user_id)

    def _touch(self) -> None:
        now = now_in_app_timezone()
        # updated_at never moves backwards and never precedes created_at.
        self._updated_at = max(now, self._created_at, self._updated_at)

    @staticmethod
    def _check_index(index: int, items: tuple, field: str) -> int:
        if not -len(items) <= index < len(items):
            raise InvalidTemplateError(
                f"No {field[:-1]} at position {index}", field=field
            )
        return index % len(items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Template(id={self._id.value}, name={self.name!r}, public={self._is_public})"


__all__ = [
    "ArgumentInput",
    "MessageInput",
    "MessageRole",
    "Template",
    "TemplateArgument",
    "TemplateMessage",
]
