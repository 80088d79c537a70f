"""Use case for updating templates."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from prompt_library.domain.entities import Template
from prompt_library.domain.entities.template import ArgumentInput, MessageInput
from prompt_library.domain.errors import TemplateAccessError
from prompt_library.domain.repositories import TemplateRepository

from .get_template import get_template

logger = logging.getLogger(__name__)

_UNSET = object()


async def update_template(
    repository: TemplateRepository,
    *,
    template_id: str,
    acting_user_id: str | None = None,
    name: str | None = None,
    description: str | None | object = _UNSET,
    is_public: bool | None = None,
    messages: Iterable[MessageInput] | None = None,
    arguments: Iterable[ArgumentInput] | None = None,
) -> Template:
    """Apply the provided changes to a stored template and save it.

    Only arguments that are given change the template; pass
    ``description=None`` to clear the description.

    Raises:
        TemplateNotFoundError: If the template does not exist.
        TemplateAccessError: If ``acting_user_id`` does not own the template.
        InvalidTemplateError: If a new value breaks an aggregate invariant.
        PersistenceError: If the store cannot be read or written.
    """

    template = await get_template(repository, template_id)
    if acting_user_id is not None and not template.can_be_edited_by(acting_user_id):
        raise TemplateAccessError("Only the owner can modify this template")

    if name is not None:
        template.rename(name)
    if description is not _UNSET:
        template.update_description(description)  # type: ignore[arg-type]
    if is_public is not None:
        template.set_public(is_public)
    if messages is not None:
        template.replace_messages(messages)
    if arguments is not None:
        template.replace_arguments(arguments)

    await repository.save(template)
    logger.info("Template %s updated", template.id)
    return template
