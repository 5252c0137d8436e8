"""Unit tests for the Discord OAuth client."""

import json
from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qs, urlparse

import pytest
from httpx import Response

from alliance.adapter.discord import (
    DiscordOAuthError,
    MockDiscordOAuthClient,
    RealDiscordOAuthClient,
)


@pytest.fixture
def client() -> RealDiscordOAuthClient:
    return RealDiscordOAuthClient(
        client_id="client-1",
        client_secret="secret-1",
        redirect_uri="http://localhost:5173/auth/discord/callback",
    )


def _response(status_code: int = 200, body: dict | None = None) -> AsyncMock:
    mock_response = AsyncMock(spec=Response)
    mock_response.status_code = status_code
    mock_response.json.return_value = body or {}
    mock_response.text = ""
    return mock_response


def test_authorization_url_params(client):
    """Should carry client id, redirect, scope and the given state."""
    url = urlparse(client.authorization_url("state-xyz"))
    params = parse_qs(url.query)

    assert url.netloc == "discord.com"
    assert params["client_id"] == ["client-1"]
    assert params["response_type"] == ["code"]
    assert params["scope"] == ["identify email"]
    assert params["state"] == ["state-xyz"]
    assert params["redirect_uri"] == ["http://localhost:5173/auth/discord/callback"]


@pytest.mark.asyncio
async def test_complete_authorization(client):
    """Should exchange the code, then fetch the profile with the access token."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client.post.return_value = _response(body={"access_token": "at-1"})
        mock_client.get.return_value = _response(
            body={"id": 42, "username": "bob", "email": "bob@x.com"}
        )

        # Act
        profile = await client.complete_authorization("abc")

        # Assert
        assert profile.discord_id == "42"
        assert profile.username == "bob"
        assert profile.email == "bob@x.com"
        assert mock_client.post.call_args.kwargs["data"]["code"] == "abc"
        headers = mock_client.get.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer at-1"


@pytest.mark.asyncio
async def test_rejected_code(client):
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client.post.return_value = _response(
            status_code=400, body={"error": "invalid_grant"}
        )

        with pytest.raises(DiscordOAuthError):
            await client.complete_authorization("bad")

        mock_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_profile_fetch_failure(client):
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client.post.return_value = _response(body={"access_token": "at-1"})
        mock_client.get.return_value = _response(status_code=401)

        with pytest.raises(DiscordOAuthError):
            await client.complete_authorization("abc")


@pytest.mark.asyncio
async def test_non_json_token_response(client):
    """Should map an undecodable token response to DiscordOAuthError."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_response = _response()
        mock_response.json.side_effect = json.JSONDecodeError("bad", "<html>", 0)
        mock_client.post.return_value = mock_response

        with pytest.raises(DiscordOAuthError, match="Malformed"):
            await client.complete_authorization("abc")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "profile",
    [
        ["not", "an", "object"],
        {"username": "bob"},
        {"id": 42, "username": None},
    ],
)
async def test_malformed_profile(client, profile):
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client.post.return_value = _response(body={"access_token": "at-1"})
        mock_response = _response()
        mock_response.json.return_value = profile
        mock_client.get.return_value = mock_response

        with pytest.raises(DiscordOAuthError):
            await client.complete_authorization("abc")


@pytest.mark.asyncio
async def test_mock_client():
    mock = MockDiscordOAuthClient()

    assert "state=s1" in mock.authorization_url("s1")
    assert (await mock.complete_authorization("abc")).discord_id == "mockdiscord123"
    with pytest.raises(DiscordOAuthError):
        await mock.complete_authorization("invalid")
