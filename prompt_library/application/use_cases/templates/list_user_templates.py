"""Use case for listing the templates owned by a user."""

from prompt_library.domain.entities import Template
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.domain.value_objects import UserId


async def list_user_templates(
    repository: TemplateRepository, *, user_id: str
) -> list[Template]:
    return await repository.find_by_user(UserId.create(user_id))
