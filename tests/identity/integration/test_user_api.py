"""Integration tests for the user endpoints via TestClient."""

import pytest
from fastapi.testclient import TestClient

from expirapp.app import create_app


@pytest.fixture()
def client():
    return TestClient(create_app(initialize=False))


def _register(client, name="Ana Silva", email="ana@example.com"):
    return client.post("/users", json={"name": name, "email": email})


class TestUserEndpoints:
    def test_register_and_get(self, client):
        response = _register(client, email="Ana@Example.com")
        assert response.status_code == 201
        user_id = response.json()["user_id"]

        body = client.get(f"/users/{user_id}").json()
        assert body["email"] == "ana@example.com"
        assert body["name"] == "Ana Silva"

    def test_find_by_email(self, client):
        user_id = _register(client).json()["user_id"]
        response = client.get("/users/by-email", params={"email": "ANA@example.com"})
        assert response.status_code == 200
        assert response.json()["user_id"] == user_id

        assert client.get("/users/by-email", params={"email": "nobody@example.com"}).status_code == 404

    def test_duplicate_email_returns_400(self, client):
        _register(client)
        assert _register(client, name="Ana Costa").status_code == 400

    def test_invalid_email_returns_400(self, client):
        assert _register(client, email="ana.example.com").status_code == 400

    def test_update_and_remove(self, client):
        user_id = _register(client).json()["user_id"]

        assert client.patch(f"/users/{user_id}", json={"name": "Ana S. Silva"}).status_code == 200
        assert client.get(f"/users/{user_id}").json()["name"] == "Ana S. Silva"

        assert client.delete(f"/users/{user_id}").status_code == 200
        assert client.get(f"/users/{user_id}").status_code == 404

    def test_list(self, client):
        _register(client)
        _register(client, name="Rui Costa", email="rui@example.com")

        body = client.get("/users", params={"limit": 1}).json()
        assert body["total"] == 2
        assert len(body["users"]) == 1
