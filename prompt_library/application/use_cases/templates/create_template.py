"""Use case for creating templates."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from prompt_library.domain.entities import Template
from prompt_library.domain.entities.template import ArgumentInput, MessageInput
from prompt_library.domain.repositories import TemplateRepository

logger = logging.getLogger(__name__)


async def create_template(
    repository: TemplateRepository,
    *,
    user_id: str,
    name: str,
    description: str | None = None,
    is_public: bool = False,
    messages: Iterable[MessageInput] | None = None,
    arguments: Iterable[ArgumentInput] | None = None,
) -> Template:
    """Create a template owned by ``user_id`` and persist it."""

    template = Template.create(
        name=name,
        user_id=user_id,
        description=description,
        is_public=is_public,
        messages=messages,
        arguments=arguments,
    )
    await repository.save(template)
    logger.info("Template %s created by user %s", template.id, template.user_id)
    return template
