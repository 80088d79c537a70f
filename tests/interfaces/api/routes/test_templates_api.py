import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from prompt_library.infrastructure.di import create_app_container
from prompt_library.main import create_app

OWNER_ID = "123e4567-e89b-12d3-a456-426614174000"
OTHER_USER_ID = "a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11"


@pytest.fixture
def client(memory_settings):
    app = create_app(create_app_container(memory_settings))
    with TestClient(app) as test_client:
        yield test_client


def _create(client, **overrides):
    payload = {
        "user_id": OWNER_ID,
        "name": "Test Template",
        "description": "Greets the user",
        "messages": [{"role": "user", "content": "Hello {name}"}],
        "arguments": [{"name": "name", "description": "Who to greet", "required": True}],
    }
    payload.update(overrides)
    response = client.post("/templates/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_and_read_template(client):
    created = _create(client)

    response = client.get(f"/templates/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Test Template"
    assert body["user_id"] == OWNER_ID
    assert body["is_public"] is False
    assert body["messages"] == [{"role": "user", "content": "Hello {name}"}]
    assert body["arguments"][0]["name"] == "name"
    assert body["arguments"][0]["required"] is True


def test_create_rejects_invalid_user_id(client):
    response = client.post(
        "/templates/", json={"user_id": "u 1", "name": "Broken", "messages": []}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid user ID format"


def test_token_user_ids_are_accepted(client):
    created = _create(client, user_id="u-1")

    listed = client.get("/templates/users/u-1").json()

    assert created["user_id"] == "u-1"
    assert [item["id"] for item in listed] == [created["id"]]


def test_create_rejects_blank_name(client):
    response = client.post("/templates/", json={"user_id": OWNER_ID, "name": "   "})
    assert response.status_code == 400


def test_create_rejects_unknown_role(client):
    response = client.post(
        "/templates/",
        json={
            "user_id": OWNER_ID,
            "name": "Bad role",
            "messages": [{"role": "robot", "content": "beep"}],
        },
    )
    assert response.status_code == 422


def test_read_missing_template_returns_404(client):
    response = client.get(f"/templates/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Template not found"


def test_read_with_malformed_id_returns_400(client):
    response = client.get("/templates/bad%20id")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid template ID format"


def test_list_public_and_user_templates(client):
    private = _create(client, name="Private")
    public = _create(client, name="Shared", user_id=OTHER_USER_ID, is_public=True)

    public_ids = [item["id"] for item in client.get("/templates/public").json()]
    owner_ids = [item["id"] for item in client.get(f"/templates/users/{OWNER_ID}").json()]

    assert public_ids == [public["id"]]
    assert owner_ids == [private["id"]]


def test_update_template(client):
    created = _create(client)

    response = client.put(
        f"/templates/{created['id']}",
        json={"acting_user_id": OWNER_ID, "name": "Renamed", "is_public": True},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["is_public"] is True
    assert body["description"] == "Greets the user"
    assert body["messages"] == created["messages"]


def test_update_can_clear_description(client):
    created = _create(client)

    response = client.put(f"/templates/{created['id']}", json={"description": None})

    assert response.status_code == 200
    assert response.json()["description"] is None


def test_update_by_other_user_is_forbidden(client):
    created = _create(client)

    response = client.put(
        f"/templates/{created['id']}",
        json={"acting_user_id": OTHER_USER_ID, "name": "Mine now"},
    )

    assert response.status_code == 403
    assert client.get(f"/templates/{created['id']}").json()["name"] == "Test Template"


def test_delete_template(client):
    created = _create(client)

    forbidden = client.delete(
        f"/templates/{created['id']}", params={"acting_user_id": OTHER_USER_ID}
    )
    assert forbidden.status_code == 403

    response = client.delete(
        f"/templates/{created['id']}", params={"acting_user_id": OWNER_ID}
    )
    assert response.status_code == 204
    assert client.get(f"/templates/{created['id']}").status_code == 404
    assert client.delete(f"/templates/{created['id']}").status_code == 404


def test_storage_outage_returns_503(sqlite_settings, monkeypatch):
    app = create_app(create_app_container(sqlite_settings))
    with TestClient(app) as sql_client:
        created = _create(sql_client)

        async def _unreachable(*args, **kwargs):
            raise SQLAlchemyError("connection refused")

        monkeypatch.setattr(AsyncSession, "get", _unreachable)

        assert sql_client.get(f"/templates/{created['id']}").status_code == 503
        response = sql_client.put(f"/templates/{created['id']}", json={"name": "Lost"})
        assert response.status_code == 503
        assert response.json()["detail"] == "Failed to load template: connection refused"
