from datetime import datetime, timedelta, timezone

import pytest

from prompt_library.domain.entities import (
    MessageRole,
    Template,
    TemplateArgument,
    TemplateMessage,
)
from prompt_library.domain.errors import InvalidIdentifierError, InvalidTemplateError
from prompt_library.domain.value_objects import TemplateId, UserId

CREATED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _persisted(**overrides) -> Template:
    data = {
        "id": "123e4567-e89b-12d3-a456-426614174999",
        "name": "Stored",
        "description": None,
        "user_id": "123e4567-e89b-12d3-a456-426614174000",
        "is_public": False,
        "messages": [],
        "arguments": [],
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT + timedelta(hours=1),
    }
    data.update(overrides)
    return Template.from_persistence(**data)


def test_create_sets_defaults(make_template, owner_id):
    template = make_template(messages=None, arguments=None, description=None)

    assert template.name == "Test Template"
    assert template.user_id == UserId.create(owner_id)
    assert template.is_public is False
    assert template.messages == ()
    assert template.arguments == ()
    assert template.description is None
    assert template.created_at == template.updated_at
    assert template.created_at.tzinfo is not None


def test_create_generates_distinct_identifiers(make_template):
    assert make_template().id != make_template().id


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_rejects_blank_names(make_template, name):
    with pytest.raises(InvalidTemplateError):
        make_template(name=name)


def test_create_rejects_invalid_owner(make_template):
    with pytest.raises(InvalidIdentifierError):
        make_template(user_id="u 1")


def test_create_accepts_token_owner_ids(make_template):
    assert make_template(user_id="u-1").get_user_id().get_value() == "u-1"


def test_create_trims_name(make_template):
    assert make_template(name="  Spaced  ").get_name() == "Spaced"


def test_messages_and_arguments_keep_order(make_template):
    messages = [
        {"role": "system", "content": "You are helpful"},
        {"role": "user", "content": "Hi {name}"},
        {"role": "assistant", "content": "Hello!"},
    ]
    arguments = [
        {"name": "name", "description": "Who", "required": True},
        {"name": "tone", "description": "How", "required": False, "type": "string"},
    ]
    template = make_template(messages=messages, arguments=arguments)

    assert [message.to_dict() for message in template.get_messages()] == messages
    assert [argument.to_dict() for argument in template.get_arguments()] == arguments
    assert template.messages[0].role is MessageRole.SYSTEM


def test_unknown_message_role_is_rejected(make_template):
    with pytest.raises(InvalidTemplateError, match="Invalid message role"):
        make_template(messages=[{"role": "tool", "content": "nope"}])


def test_duplicate_argument_names_are_allowed(make_template):
    template = make_template(
        arguments=[TemplateArgument(name="x"), TemplateArgument(name="x", required=True)]
    )
    assert [argument.name for argument in template.arguments] == ["x", "x"]


def test_from_persistence_keeps_identifier_and_timestamps():
    template = _persisted()

    assert template.id == TemplateId.create("123e4567-e89b-12d3-a456-426614174999")
    assert template.created_at == CREATED_AT
    assert template.updated_at == CREATED_AT + timedelta(hours=1)


def test_from_persistence_rejects_updated_before_created():
    with pytest.raises(InvalidTemplateError, match="updated_at"):
        _persisted(updated_at=CREATED_AT - timedelta(seconds=1))


def test_from_persistence_validates_name():
    with pytest.raises(InvalidTemplateError):
        _persisted(name="  ")


def test_rename_revalidates_and_bumps_updated_at():
    template = _persisted()
    previous = template.updated_at

    template.rename("Renamed")

    assert template.name == "Renamed"
    assert template.updated_at > previous
    with pytest.raises(InvalidTemplateError):
        template.rename("   ")
    assert template.name == "Renamed"


def test_update_description_can_clear_value():
    template = _persisted(description="Something")
    template.update_description("   ")
    assert template.description is None


def test_visibility_operations():
    template = _persisted()
    template.publish()
    assert template.is_public is True
    template.unpublish()
    assert template.is_public is False
    template.set_public(True)
    assert template.is_public is True


def test_message_operations():
    template = _persisted()
    template.add_message({"role": "user", "content": "first"})
    template.add_message(TemplateMessage(role=MessageRole.ASSISTANT, content="second"))
    template.update_message(0, {"role": "system", "content": "changed"})

    assert [m.content for m in template.messages] == ["changed", "second"]

    template.remove_message(-1)
    assert [m.content for m in template.messages] == ["changed"]

    with pytest.raises(InvalidTemplateError):
        template.remove_message(3)


def test_argument_operations():
    template = _persisted()
    template.add_argument({"name": "a"})
    template.add_argument({"name": "b", "required": True})
    template.update_argument(1, {"name": "c"})
    template.remove_argument(0)

    assert [a.name for a in template.arguments] == ["c"]

    template.replace_arguments([])
    assert template.arguments == ()


def test_returned_lists_are_copies(make_template):
    template = make_template()
    messages = template.get_messages()
    messages.append(TemplateMessage(role="user", content="sneaky"))
    assert len(template.messages) == 1


def test_mutation_never_moves_updated_at_before_created_at():
    future = datetime.now(timezone.utc) + timedelta(days=1)
    template = _persisted(created_at=future, updated_at=future)

    template.rename("Later")

    assert template.updated_at >= template.created_at


def test_equality_is_by_identifier():
    first = _persisted(name="One")
    second = _persisted(name="Two", is_public=True)
    other = _persisted(id="a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11")

    assert first == second
    assert hash(first) == hash(second)
    assert first != other


def test_ownership(make_template, owner_id, other_user_id):
    template = make_template()
    assert template.is_owned_by(owner_id)
    assert template.can_be_edited_by(UserId.create(owner_id))
    assert not template.can_be_edited_by(other_user_id)
