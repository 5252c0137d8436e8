"""Discord infrastructure providers."""

from dishka import Scope, provide

from alliance.adapter.discord import DiscordOAuthClient, RealDiscordOAuthClient
from alliance.config import Settings
from alliance.util.di.base import ProviderBase
from alliance.util.error import ConfigurationError


class DiscordProvider(ProviderBase):
    """Discord component base."""

    __mock_component__ = "discord"


class ProdDiscordProvider(DiscordProvider):
    """Production Discord provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_discord_oauth_client(self, settings: Settings) -> DiscordOAuthClient:
        """Provide Discord OAuth client.

        Raises:
            ConfigurationError: If Discord OAuth credentials are not configured
        """
        if not settings.discord.client_id:
            raise ConfigurationError("Discord OAuth client ID must be configured")
        if not settings.discord.client_secret:
            raise ConfigurationError("Discord OAuth client secret must be configured")

        return RealDiscordOAuthClient(
            client_id=settings.discord.client_id,
            client_secret=settings.discord.client_secret,
            redirect_uri=settings.discord.redirect_uri,
            scope=settings.discord.scope,
        )
