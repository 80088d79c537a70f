"""SQLAlchemy model for prompt templates."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import expression
from sqlalchemy.types import JSON

from prompt_library.domain.value_objects import (
    IDENTIFIER_MAX_LENGTH,
    TEMPLATE_DESCRIPTION_MAX_LENGTH,
    TEMPLATE_NAME_MAX_LENGTH,
)
from prompt_library.infrastructure.database import Base

_template_data_type = JSONB().with_variant(JSON(), "sqlite")


class TemplateModel(Base):
    """Database representation of a prompt template.

    ``template_data`` holds ``{"messages": [...], "arguments": [...]}``.
    """

    __tablename__ = "prompt_templates"

    id = Column(String(IDENTIFIER_MAX_LENGTH), primary_key=True)
    user_id = Column(String(IDENTIFIER_MAX_LENGTH), nullable=False, index=True)
    name = Column(String(TEMPLATE_NAME_MAX_LENGTH), nullable=False)
    description = Column(String(TEMPLATE_DESCRIPTION_MAX_LENGTH), nullable=True)
    is_public = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    template_data = Column(_template_data_type, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)


__all__ = ["TemplateModel"]
