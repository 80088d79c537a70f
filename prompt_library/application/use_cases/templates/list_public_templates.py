"""Use case for listing shared templates."""

from prompt_library.domain.entities import Template
from prompt_library.domain.repositories import TemplateRepository


async def list_public_templates(repository: TemplateRepository) -> list[Template]:
    return await repository.find_public()
