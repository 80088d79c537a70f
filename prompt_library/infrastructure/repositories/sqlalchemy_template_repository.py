"""SQLAlchemy adapter for the template repository port."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, delete, select, true
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from prompt_library.domain.entities import Template
from prompt_library.domain.errors import PersistenceError
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.domain.value_objects import TemplateId, UserId
from prompt_library.infrastructure.models import TemplateModel
from prompt_library.utils import parse_timestamp

from .template_mapper import template_from_row, template_to_row

logger = logging.getLogger(__name__)

# Dialects with an atomic INSERT ... ON CONFLICT DO UPDATE; others fall back to merge.
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def _describe(exc: SQLAlchemyError) -> str:
    """Return the driver message for DBAPI errors, the error text otherwise."""

    original = getattr(exc, "orig", None)
    return str(original if original is not None else exc)


class SqlAlchemyTemplateRepository(TemplateRepository):
    """Store templates in the ``prompt_templates`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_by_id(self, template_id: TemplateId) -> Template | None:
        try:
            model = await self._get(template_id)
        except SQLAlchemyError:
            logger.warning("Could not load template %s", template_id, exc_info=True)
            return None
        return self._to_entity(model) if model else None

    async def fetch(self, template_id: TemplateId) -> Template | None:
        try:
            model = await self._get(template_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load template %s", template_id)
            raise PersistenceError(f"Failed to load template: {_describe(exc)}") from exc
        return self._to_entity(model) if model else None

    async def find_by_user(self, user_id: UserId) -> list[Template]:
        statement = select(TemplateModel).where(
            TemplateModel.user_id == user_id.get_value()
        )
        return await self._list(statement, "templates of user %s", user_id)

    async def find_public(self) -> list[Template]:
        statement = select(TemplateModel).where(TemplateModel.is_public == true())
        return await self._list(statement, "public templates")

    async def save(self, template: Template) -> None:
        row = template_to_row(template)
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    dialect_insert = _UPSERT_INSERTS.get(session.get_bind().dialect.name)
                    if dialect_insert is None:
                        await session.merge(self._row_to_model(row))
                    else:
                        await session.execute(self._upsert(dialect_insert, row))
        except SQLAlchemyError as exc:
            logger.exception("Failed to save template %s", row["id"])
            raise PersistenceError(f"Failed to save template: {_describe(exc)}") from exc

    async def delete(self, template_id: TemplateId) -> None:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(TemplateModel).where(
                            TemplateModel.id == template_id.get_value()
                        )
                    )
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete template %s", template_id)
            raise PersistenceError(
                f"Failed to delete template: {_describe(exc)}"
            ) from exc

    async def _list(self, statement: Select, description: str, *args: Any) -> list[Template]:
        statement = statement.order_by(
            TemplateModel.updated_at.desc(), TemplateModel.id.asc()
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(statement)
                models = result.scalars().all()
        except SQLAlchemyError:
            logger.warning("Could not list " + description, *args, exc_info=True)
            return []
        return [self._to_entity(model) for model in models]

    async def _get(self, template_id: TemplateId) -> TemplateModel | None:
        async with self.session_factory() as session:
            return await session.get(TemplateModel, template_id.get_value())

    @classmethod
    def _upsert(cls, dialect_insert, row: dict[str, Any]):
        values = cls._row_values(row)
        statement = dialect_insert(TemplateModel).values(**values)
        return statement.on_conflict_do_update(
            index_elements=[TemplateModel.id],
            set_={
                column: statement.excluded[column] for column in values if column != "id"
            },
        )

    @staticmethod
    def _to_entity(model: TemplateModel) -> Template:
        return template_from_row(
            {
                "id": model.id,
                "name": model.name,
                "description": model.description,
                "user_id": model.user_id,
                "is_public": model.is_public,
                "template_data": model.template_data,
                "created_at": model.created_at,
                "updated_at": model.updated_at,
            }
        )

    @staticmethod
    def _row_values(row: dict[str, Any]) -> dict[str, Any]:
        return {
            **row,
            "created_at": parse_timestamp(row["created_at"]),
            "updated_at": parse_timestamp(row["updated_at"]),
        }

    @classmethod
    def _row_to_model(cls, row: dict[str, Any]) -> TemplateModel:
        return TemplateModel(**cls._row_values(row))


__all__ = ["SqlAlchemyTemplateRepository"]
