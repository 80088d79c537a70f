"""Use case for retrieving a single template."""

from prompt_library.domain.entities import Template
from prompt_library.domain.errors import TemplateNotFoundError
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.domain.value_objects import TemplateId


async def get_template(repository: TemplateRepository, template_id: str) -> Template:
    """Return the template identified by ``template_id``.

    Raises:
        InvalidIdentifierError: If ``template_id`` is not a valid identifier.
        TemplateNotFoundError: If no such template is stored.
        PersistenceError: If the store cannot be read.
    """

    template = await repository.fetch(TemplateId.create(template_id))
    if template is None:
        raise TemplateNotFoundError("Template not found", field="id")
    return template
