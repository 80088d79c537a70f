from .template import (
    TemplateArgumentSchema,
    TemplateCreate,
    TemplateMessageSchema,
    TemplateRead,
    TemplateUpdate,
)

__all__ = [
    "TemplateArgumentSchema",
    "TemplateCreate",
    "TemplateMessageSchema",
    "TemplateRead",
    "TemplateUpdate",
]
