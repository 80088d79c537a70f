"""Dictionary-backed adapter for the template repository port."""

from __future__ import annotations

import copy
from typing import Any

from prompt_library.domain.entities import Template
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.domain.value_objects import TemplateId, UserId
from prompt_library.utils import parse_timestamp

from .template_mapper import template_from_row, template_to_row


class InMemoryTemplateRepository(TemplateRepository):
    """Keep template rows in process memory.

    Rows go through the same mapper as the database adapter, so callers never
    share aggregate instances with the store.
    """

    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}

    async def find_by_id(self, template_id: TemplateId) -> Template | None:
        row = self._rows.get(template_id.get_value())
        return template_from_row(row) if row is not None else None

    async def find_by_user(self, user_id: UserId) -> list[Template]:
        owner = user_id.get_value()
        return self._sorted(row for row in self._rows.values() if row["user_id"] == owner)

    async def find_public(self) -> list[Template]:
        return self._sorted(row for row in self._rows.values() if row["is_public"])

    async def save(self, template: Template) -> None:
        row = template_to_row(template)
        self._rows[row["id"]] = copy.deepcopy(row)

    async def delete(self, template_id: TemplateId) -> None:
        self._rows.pop(template_id.get_value(), None)

    def __len__(self) -> int:
        return len(self._rows)

    @staticmethod
    def _sorted(rows) -> list[Template]:
        ordered = sorted(
            rows,
            key=lambda row: (-parse_timestamp(row["updated_at"]).timestamp(), row["id"]),
        )
        return [template_from_row(row) for row in ordered]


__all__ = ["InMemoryTemplateRepository"]
