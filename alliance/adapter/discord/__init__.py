"""Discord OAuth adapter."""

from .client import (
    DiscordOAuthClient,
    DiscordOAuthError,
    MockDiscordOAuthClient,
    RealDiscordOAuthClient,
)

__all__ = [
    "DiscordOAuthClient",
    "DiscordOAuthError",
    "RealDiscordOAuthClient",
    "MockDiscordOAuthClient",
]
