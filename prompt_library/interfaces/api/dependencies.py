"""FastAPI dependency utilities."""

from fastapi import Request

from prompt_library.domain.repositories import TemplateRepository
from prompt_library.infrastructure.di import TEMPLATE_REPOSITORY, Container


def get_container(request: Request) -> Container:
    """Return the service container attached to the running application."""

    return request.app.state.container


def get_template_repository(request: Request) -> TemplateRepository:
    """Resolve the template repository from the application container."""

    return get_container(request).resolve(TEMPLATE_REPOSITORY)
