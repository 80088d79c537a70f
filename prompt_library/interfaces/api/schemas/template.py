"""Schemas for template endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from prompt_library.domain.entities import Template
from prompt_library.domain.value_objects import (
    TEMPLATE_DESCRIPTION_MAX_LENGTH,
    TEMPLATE_NAME_MAX_LENGTH,
)

MessageRole = Literal["user", "assistant", "system"]


class TemplateMessageSchema(BaseModel):
    role: MessageRole
    content: str


class TemplateArgumentSchema(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    required: bool = False
    type: str | None = None


class TemplateCreate(BaseModel):
    """Payload required to create a template."""

    model_config = ConfigDict(extra="forbid")

    user_id: str
    name: str = Field(..., max_length=TEMPLATE_NAME_MAX_LENGTH)
    description: str | None = Field(
        default=None, max_length=TEMPLATE_DESCRIPTION_MAX_LENGTH
    )
    is_public: bool = False
    messages: list[TemplateMessageSchema] = Field(default_factory=list)
    arguments: list[TemplateArgumentSchema] = Field(default_factory=list)


class TemplateUpdate(BaseModel):
    """Partial update; omitted fields are left untouched."""

    model_config = ConfigDict(extra="forbid")

    acting_user_id: str | None = None
    name: str | None = Field(default=None, max_length=TEMPLATE_NAME_MAX_LENGTH)
    description: str | None = Field(
        default=None, max_length=TEMPLATE_DESCRIPTION_MAX_LENGTH
    )
    is_public: bool | None = None
    messages: list[TemplateMessageSchema] | None = None
    arguments: list[TemplateArgumentSchema] | None = None


class TemplateRead(BaseModel):
    id: str
    user_id: str
    name: str
    description: str | None
    is_public: bool
    messages: list[TemplateMessageSchema]
    arguments: list[TemplateArgumentSchema]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, template: Template) -> "TemplateRead":
        return cls(
            id=template.id.get_value(),
            user_id=template.user_id.get_value(),
            name=template.name,
            description=template.description,
            is_public=template.is_public,
            messages=[message.to_dict() for message in template.messages],
            arguments=[argument.to_dict() for argument in template.arguments],
            created_at=template.created_at,
            updated_at=template.updated_at,
        )
