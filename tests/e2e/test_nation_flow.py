"""End-to-end tests for nation verification and the member directory."""

import pytest
from fastapi.testclient import TestClient

from alliance.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over a fresh, fully mocked container."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _register(client, email="x@y.com", username="x") -> str:
    response = client.post(
        "/auth/register",
        json={"email": email, "username": username, "password": "Abcdef12"},
    )
    assert response.status_code == 201
    return response.json()["token"]


def _verify(client, token: str, api_key: str):
    return client.post("/pnw/verify", json={"apiKey": api_key}, headers=_auth(token))


class TestVerifyNation:
    """Linking a nation with an API key."""

    def test_nation_missing_until_verified(self, client):
        # Arrange
        token = _register(client)

        # Act
        before = client.get("/user/nation", headers=_auth(token))
        verified = _verify(client, token, "mock-api-key-1")
        after = client.get("/user/nation", headers=_auth(token))

        # Assert
        assert before.status_code == 404
        assert verified.status_code == 200
        body = verified.json()
        assert body["user"]["verified"] is True
        assert body["user"]["nationId"] == 1001
        assert body["nationData"]["nationName"] == "Mockland"
        assert body["token"]
        assert "apiKey" not in body["user"]
        assert after.status_code == 200
        assert after.json()["nation"]["allianceName"] == "Mock Alliance"

    def test_nation_linked_to_another_account(self, client):
        # Arrange
        first = _register(client)
        second = _register(client, email="z@y.com", username="z")
        _verify(client, first, "mock-api-key-1")

        # Act
        response = _verify(client, second, "mock-api-key-1-alt")

        # Assert
        assert response.status_code == 409
        me = client.get("/auth/me", headers=_auth(second)).json()
        assert me["user"]["verified"] is False

    def test_invalid_api_key(self, client):
        # Arrange
        token = _register(client)

        # Act
        response = _verify(client, token, "bogus")

        # Assert
        assert response.status_code == 400
        assert "error" in response.json()

    def test_verify_requires_token(self, client):
        # Act
        response = client.post("/pnw/verify", json={"apiKey": "mock-api-key-1"})

        # Assert
        assert response.status_code == 401

    def test_refresh(self, client):
        # Arrange
        token = _register(client)
        unverified = client.post("/pnw/refresh", headers=_auth(token))
        _verify(client, token, "mock-api-key-1")

        # Act
        response = client.post("/pnw/refresh", headers=_auth(token))

        # Assert
        assert unverified.json()["refreshed"] is False
        assert response.status_code == 200
        assert response.json()["refreshed"] is True

    def test_lookup_nation(self, client):
        # Arrange
        token = _register(client)
        _verify(client, token, "mock-api-key-1")

        # Act
        found = client.get("/pnw/nations/1002", headers=_auth(token))
        missing = client.get("/pnw/nations/999999", headers=_auth(token))

        # Assert
        assert found.status_code == 200
        assert found.json()["nation"]["nationName"] == "Testovia"
        assert missing.status_code == 404


class TestMemberDirectory:
    """Search and by-nation lookup."""

    def test_unverified_caller_is_forbidden(self, client):
        # Arrange
        token = _register(client)

        # Act
        response = client.get("/users", headers=_auth(token))

        # Assert
        assert response.status_code == 403

    def test_verified_caller_can_search(self, client):
        # Arrange
        token = _register(client)
        _verify(client, token, "mock-api-key-1")
        other = _register(client, email="z@y.com", username="z")
        _verify(client, other, "mock-api-key-2")

        # Act
        response = client.get(
            "/users", params={"leaderName": "test"}, headers=_auth(token)
        )

        # Assert
        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["username"] for u in users] == ["z"]

    def test_search_limit_out_of_range(self, client):
        # Arrange
        token = _register(client)

        # Act
        response = client.get("/users", params={"limit": 0}, headers=_auth(token))

        # Assert
        assert response.status_code == 400

    def test_user_by_nation(self, client):
        # Arrange
        token = _register(client)
        _verify(client, token, "mock-api-key-1")

        # Act
        found = client.get("/users/by-nation/1001", headers=_auth(token))
        missing = client.get("/users/by-nation/5", headers=_auth(token))

        # Assert
        assert found.status_code == 200
        assert found.json()["user"]["nationName"] == "Mockland"
        assert missing.status_code == 404

    def test_unverified_caller_cannot_look_up_by_nation(self, client):
        # Arrange
        member = _register(client)
        _verify(client, member, "mock-api-key-1")
        token = _register(client, email="z@y.com", username="z")

        # Act
        response = client.get("/users/by-nation/1001", headers=_auth(token))

        # Assert
        assert response.status_code == 403
        assert "nationName" not in response.text
