"""Application layer DI providers."""

from dishka import Scope, provide

from alliance.application.usecase.auth import (
    DiscordCallbackUseCase,
    GetCurrentUserUseCase,
    InitiateDiscordLoginUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from alliance.application.usecase.nation import (
    GetUserNationUseCase,
    LookupNationUseCase,
    RefreshNationUseCase,
    VerifyNationUseCase,
)
from alliance.application.usecase.user import (
    GetUserByNationUseCase,
    SearchUsersUseCase,
)
from alliance.domain.service import AccountService, AuthService, JWTService
from alliance.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_register_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> RegisterUseCase:
        return RegisterUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide
    def get_initiate_discord_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> InitiateDiscordLoginUseCase:
        return InitiateDiscordLoginUseCase(
            auth_service=auth_service, jwt_service=jwt_service
        )

    @provide
    def get_discord_callback_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        account_service: AccountService,
    ) -> DiscordCallbackUseCase:
        return DiscordCallbackUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            account_service=account_service,
        )

    @provide
    def get_current_user_use_case(
        self, account_service: AccountService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(account_service=account_service)

    @provide
    def get_verify_nation_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> VerifyNationUseCase:
        return VerifyNationUseCase(
            account_service=account_service, jwt_service=jwt_service
        )

    @provide
    def get_refresh_nation_use_case(
        self, account_service: AccountService
    ) -> RefreshNationUseCase:
        return RefreshNationUseCase(account_service=account_service)

    @provide
    def get_user_nation_use_case(
        self, account_service: AccountService
    ) -> GetUserNationUseCase:
        return GetUserNationUseCase(account_service=account_service)

    @provide
    def get_lookup_nation_use_case(
        self, account_service: AccountService
    ) -> LookupNationUseCase:
        return LookupNationUseCase(account_service=account_service)

    @provide
    def get_search_users_use_case(
        self, account_service: AccountService
    ) -> SearchUsersUseCase:
        return SearchUsersUseCase(account_service=account_service)

    @provide
    def get_user_by_nation_use_case(
        self, account_service: AccountService
    ) -> GetUserByNationUseCase:
        return GetUserByNationUseCase(account_service=account_service)
