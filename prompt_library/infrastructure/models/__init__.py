"""SQLAlchemy models registered on the declarative base."""

from .template import TemplateModel

__all__ = ["TemplateModel"]
