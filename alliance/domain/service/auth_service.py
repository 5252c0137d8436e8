"""Authentication domain service."""

import logfire

from alliance.domain.value import DiscordProfile

from .base import Service


class OAuthClient:
    """OAuth client interface."""

    def authorization_url(self, state: str) -> str:
        """Build the provider authorization URL.

        Args:
            state: Signed state parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str) -> DiscordProfile:
        """Exchange an authorization code and fetch the user's profile.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Provider user information

        Raises:
            ExternalAuthError: If the token exchange or profile fetch fails
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for Discord OAuth login."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Discord OAuth client implementation
        """
        self.oauth_client = oauth_client

    def initiate_login(self, state: str) -> str:
        """Initiate OAuth login flow.

        Args:
            state: Signed state parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        return self.oauth_client.authorization_url(state)

    async def complete_login(self, code: str) -> DiscordProfile:
        """Complete OAuth login flow.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Discord profile of the authenticated user

        Raises:
            ExternalAuthError: If Discord rejects the code or is unreachable
        """
        with logfire.span("auth_service.complete_login"):
            profile = await self.oauth_client.complete_authorization(code)
            logfire.info(
                "Discord profile fetched",
                discord_id=profile.discord_id,
                username=profile.username,
            )
            return profile
