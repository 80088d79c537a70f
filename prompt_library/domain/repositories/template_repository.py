"""Port describing persistence of template aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from prompt_library.domain.entities import Template
from prompt_library.domain.value_objects import TemplateId, UserId


class TemplateRepository(ABC):
    """Storage-agnostic contract for loading and storing templates.

    Reads fail soft: a missing template or a failed query yields ``None`` or an
    empty list. Writes, and lookups made through :meth:`fetch`, fail loud with
    :class:`PersistenceError`.
    """

    @abstractmethod
    async def find_by_id(self, template_id: TemplateId) -> Template | None:
        """Return the template with ``template_id`` or ``None``."""

    async def fetch(self, template_id: TemplateId) -> Template | None:
        """Like :meth:`find_by_id`, but a storage failure raises :class:`PersistenceError`.

        Adapters whose reads cannot fail inherit this default.
        """

        return await self.find_by_id(template_id)

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Template]:
        """Return templates owned by ``user_id``, most recently updated first."""

    @abstractmethod
    async def find_public(self) -> list[Template]:
        """Return public templates, most recently updated first."""

    @abstractmethod
    async def save(self, template: Template) -> None:
        """Insert ``template`` or fully replace the stored copy with the same id."""

    @abstractmethod
    async def delete(self, template_id: TemplateId) -> None:
        """Remove the template; deleting an unknown id is not an error."""


__all__ = ["TemplateRepository"]
