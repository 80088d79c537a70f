"""Routes to manage prompt templates."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from prompt_library.application.use_cases.templates import (
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    get_template as get_template_uc,
    list_public_templates as list_public_templates_uc,
    list_user_templates as list_user_templates_uc,
    update_template as update_template_uc,
)
from prompt_library.domain.errors import (
    DomainError,
    InvalidIdentifierError,
    InvalidTemplateError,
    PersistenceError,
    TemplateAccessError,
    TemplateNotFoundError,
)
from prompt_library.domain.repositories import TemplateRepository
from prompt_library.interfaces.api.dependencies import get_template_repository
from prompt_library.interfaces.api.schemas import (
    TemplateCreate,
    TemplateRead,
    TemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (TemplateNotFoundError, status.HTTP_404_NOT_FOUND),
    (TemplateAccessError, status.HTTP_403_FORBIDDEN),
    (InvalidIdentifierError, status.HTTP_400_BAD_REQUEST),
    (InvalidTemplateError, status.HTTP_400_BAD_REQUEST),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def _to_http_error(exc: DomainError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/public", response_model=list[TemplateRead])
async def list_public_templates(
    repository: TemplateRepository = Depends(get_template_repository),
) -> list[TemplateRead]:
    """Return shared templates, most recently updated first."""

    templates = await list_public_templates_uc(repository)
    return [TemplateRead.from_entity(template) for template in templates]


@router.get("/users/{user_id}", response_model=list[TemplateRead])
async def list_templates_for_user(
    user_id: str,
    repository: TemplateRepository = Depends(get_template_repository),
) -> list[TemplateRead]:
    """Return the templates owned by ``user_id``."""

    try:
        templates = await list_user_templates_uc(repository, user_id=user_id)
    except DomainError as exc:
        raise _to_http_error(exc) from exc
    return [TemplateRead.from_entity(template) for template in templates]


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
async def register_template(
    template_in: TemplateCreate,
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateRead:
    """Create a new prompt template."""

    try:
        template = await create_template_uc(
            repository,
            user_id=template_in.user_id,
            name=template_in.name,
            description=template_in.description,
            is_public=template_in.is_public,
            messages=[message.model_dump() for message in template_in.messages],
            arguments=[argument.model_dump() for argument in template_in.arguments],
        )
    except DomainError as exc:
        raise _to_http_error(exc) from exc
    return TemplateRead.from_entity(template)


@router.get("/{template_id}", response_model=TemplateRead)
async def read_template(
    template_id: str,
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateRead:
    """Return the template identified by ``template_id``."""

    try:
        template = await get_template_uc(repository, template_id)
    except DomainError as exc:
        raise _to_http_error(exc) from exc
    return TemplateRead.from_entity(template)


@router.put("/{template_id}", response_model=TemplateRead)
async def update_template(
    template_id: str,
    template_in: TemplateUpdate,
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateRead:
    """Update an existing template; omitted fields keep their value."""

    update_data = template_in.model_dump(exclude_unset=True)
    try:
        template = await update_template_uc(
            repository, template_id=template_id, **update_data
        )
    except DomainError as exc:
        raise _to_http_error(exc) from exc
    return TemplateRead.from_entity(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    acting_user_id: str | None = None,
    repository: TemplateRepository = Depends(get_template_repository),
) -> Response:
    """Delete the template identified by ``template_id``."""

    try:
        await delete_template_uc(
            repository, template_id, acting_user_id=acting_user_id
        )
    except DomainError as exc:
        raise _to_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
