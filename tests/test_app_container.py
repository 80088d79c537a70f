from prompt_library.infrastructure.di import (
    ENGINE,
    SESSION_FACTORY,
    SETTINGS,
    TEMPLATE_REPOSITORY,
    create_app_container,
)
from prompt_library.infrastructure.repositories import (
    InMemoryTemplateRepository,
    SqlAlchemyTemplateRepository,
)


def test_repository_uses_sqlalchemy_by_default(sqlite_settings):
    container = create_app_container(sqlite_settings)

    repository = container.resolve(TEMPLATE_REPOSITORY)

    assert isinstance(repository, SqlAlchemyTemplateRepository)
    assert repository.session_factory is container.resolve(SESSION_FACTORY)
    assert container.resolve(TEMPLATE_REPOSITORY) is repository


def test_memory_backend_does_not_build_an_engine(memory_settings):
    container = create_app_container(memory_settings)
    built = []
    container.register(ENGINE, lambda _: built.append(1))

    repository = container.resolve(TEMPLATE_REPOSITORY)

    assert isinstance(repository, InMemoryTemplateRepository)
    assert built == []


def test_settings_are_registered(memory_settings):
    container = create_app_container(memory_settings)
    assert container.resolve(SETTINGS) is memory_settings


def test_repository_can_be_overridden_before_first_resolve(sqlite_settings):
    container = create_app_container(sqlite_settings)
    replacement = InMemoryTemplateRepository()
    container.register(TEMPLATE_REPOSITORY, lambda _: replacement)

    assert container.resolve(TEMPLATE_REPOSITORY) is replacement
