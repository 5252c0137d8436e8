"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from alliance.adapter.discord import DiscordOAuthClient
from alliance.adapter.pnw import PnWNationDirectory
from alliance.config import AuthSettings
from alliance.domain.repository import NationRepository, UserRepository
from alliance.domain.service import AccountService, AuthService, JWTService
from alliance.util.di.base import ProviderBase
from alliance.util.security import ApiKeyCipher, PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, oauth_client: DiscordOAuthClient) -> AuthService:
        """Provide Discord authentication domain service."""
        return AuthService(oauth_client=oauth_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self,
        user_repository: UserRepository,
        nation_repository: NationRepository,
        nation_directory: PnWNationDirectory,
        password_hasher: PasswordHasher,
        api_key_cipher: ApiKeyCipher,
        nation_cache_ttl: timedelta,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            user_repository=user_repository,
            nation_repository=nation_repository,
            nation_directory=nation_directory,
            password_hasher=password_hasher,
            api_key_cipher=api_key_cipher,
            nation_cache_ttl=nation_cache_ttl,
        )
