"""Domain entities exposed by the application."""

from .template import (
    MessageRole,
    Template,
    TemplateArgument,
    TemplateMessage,
)

__all__ = [
    "MessageRole",
    "Template",
    "TemplateArgument",
    "TemplateMessage",
]
