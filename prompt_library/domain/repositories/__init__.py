"""Repository ports owned by the domain."""

from .template_repository import TemplateRepository

__all__ = ["TemplateRepository"]
