"""Discord OAuth 2.0 client implementation."""

from urllib.parse import urlencode

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from alliance.domain.error import ExternalAuthError
from alliance.domain.service.auth_service import OAuthClient
from alliance.domain.value import DiscordProfile


class DiscordOAuthError(ExternalAuthError):
    """Discord OAuth error."""

    pass


def _json_object(response: httpx.Response) -> dict:
    """Decode a Discord response body that must be a JSON object.

    Raises:
        DiscordOAuthError: If the body is not JSON or not an object
    """
    try:
        body = response.json()
    except ValueError:
        logfire.error("Discord returned a non-JSON body")
        raise DiscordOAuthError("Malformed Discord response")
    if not isinstance(body, dict):
        logfire.error("Discord returned a non-object body")
        raise DiscordOAuthError("Malformed Discord response")
    return body


class DiscordOAuthClient(OAuthClient):
    """Base class for Discord OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealDiscordOAuthClient(DiscordOAuthClient):
    """Discord OAuth 2.0 authorization code flow client."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scope: str = "identify email",
    ) -> None:
        """Initialize Discord OAuth client.

        Args:
            client_id: Discord application client ID
            client_secret: Discord application client secret
            redirect_uri: Callback URL registered with Discord
            scope: Space-separated OAuth scopes
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scope = scope

        self.authorize_url = "https://discord.com/api/oauth2/authorize"
        self.token_url = "https://discord.com/api/oauth2/token"
        self.user_info_url = "https://discord.com/api/users/@me"

    def authorization_url(self, state: str) -> str:
        """Build the Discord authorization URL.

        Args:
            state: Signed state parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": self.scope,
            "state": state,
        }
        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str) -> DiscordProfile:
        """Complete Discord OAuth authorization flow.

        Args:
            code: Authorization code from Discord callback

        Returns:
            User information from Discord

        Raises:
            DiscordOAuthError: If OAuth flow fails
        """
        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        try:
            return DiscordProfile(
                discord_id=str(user_info["id"]),
                username=user_info["username"],
                email=user_info.get("email"),
                avatar=user_info.get("avatar"),
            )
        except KeyError as e:
            raise DiscordOAuthError(f"Malformed Discord profile: missing {e}")
        except PydanticValidationError:
            raise DiscordOAuthError("Malformed Discord profile")

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            DiscordOAuthError: If token exchange fails
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Discord token exchange HTTP error", error=str(e))
            raise DiscordOAuthError("Failed to reach Discord")

        if response.status_code != 200:
            logfire.error(
                "Discord token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise DiscordOAuthError("Failed to obtain Discord access token")

        access_token = _json_object(response).get("access_token")
        if not access_token:
            raise DiscordOAuthError("Failed to obtain Discord access token")
        return access_token

    async def _get_user_info(self, access_token: str) -> dict:
        """Get user information from Discord API.

        Raises:
            DiscordOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Discord user info HTTP error", error=str(e))
            raise DiscordOAuthError("Failed to reach Discord")

        if response.status_code != 200:
            logfire.error(
                "Discord user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise DiscordOAuthError("Failed to fetch Discord profile")

        return _json_object(response)


class MockDiscordOAuthClient(DiscordOAuthClient):
    """Mock Discord OAuth client for testing.

    Returns deterministic test data without making real API calls. The code
    ``invalid`` simulates Discord rejecting the authorization code.
    """

    INVALID_CODE = "invalid"

    def __init__(self, profile: DiscordProfile | None = None):
        self.profile = profile or DiscordProfile(
            discord_id="mockdiscord123",
            username="mockuser",
            email="mock@discord.com",
            avatar=None,
        )

    def authorization_url(self, state: str) -> str:
        return f"https://discord.com/api/oauth2/authorize?state={state}&mock=true"

    async def complete_authorization(self, code: str) -> DiscordProfile:
        if code == self.INVALID_CODE:
            raise DiscordOAuthError("Failed to obtain Discord access token")
        return self.profile
