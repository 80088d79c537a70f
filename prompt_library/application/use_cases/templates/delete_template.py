"""Use case for deleting templates."""

from __future__ import annotations

import logging

from prompt_library.domain.errors import TemplateAccessError
from prompt_library.domain.repositories import TemplateRepository

from .get_template import get_template

logger = logging.getLogger(__name__)


async def delete_template(
    repository: TemplateRepository,
    template_id: str,
    *,
    acting_user_id: str | None = None,
) -> None:
    """Delete a stored template.

    Raises:
        TemplateNotFoundError: If the template does not exist.
        TemplateAccessError: If ``acting_user_id`` does not own the template.
        PersistenceError: If the store cannot be read or written.
    """

    template = await get_template(repository, template_id)
    if acting_user_id is not None and not template.can_be_edited_by(acting_user_id):
        raise TemplateAccessError("Only the owner can delete this template")

    await repository.delete(template.id)
    logger.info("Template %s deleted", template.id)
