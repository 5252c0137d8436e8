"""Core DI providers (non-mockable)."""

from datetime import timedelta

from dishka import Scope, provide

from alliance.config import AuthSettings, Settings
from alliance.util.di.base import ProviderBase
from alliance.util.security import ApiKeyCipher, PasswordHasher


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_nation_cache_ttl(self, settings: Settings) -> timedelta:
        """Provide the age after which cached nations are refreshed."""
        return timedelta(minutes=settings.nation_cache.ttl_minutes)

    @provide(scope=Scope.APP)
    def provide_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        return PasswordHasher.from_settings(auth_settings)

    @provide(scope=Scope.APP)
    def provide_api_key_cipher(self, auth_settings: AuthSettings) -> ApiKeyCipher:
        return ApiKeyCipher.from_settings(auth_settings)
