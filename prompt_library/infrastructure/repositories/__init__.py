"""Repository implementations for infrastructure layer."""

from .in_memory_template_repository import InMemoryTemplateRepository
from .sqlalchemy_template_repository import SqlAlchemyTemplateRepository
from .template_mapper import template_from_row, template_to_row

__all__ = [
    "InMemoryTemplateRepository",
    "SqlAlchemyTemplateRepository",
    "template_from_row",
    "template_to_row",
]
