"""Discord OAuth login use cases."""

import logfire
from pydantic import Field

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import AuthResponse, CamelModel, UserView
from alliance.domain.service import AccountService, AuthService, JWTService


class DiscordAuthUrlResponse(CamelModel):
    """Where to send the browser to start Discord login."""

    auth_url: str


class DiscordCallbackRequest(CamelModel):
    """Discord callback parameters, posted back by the frontend."""

    code: str = Field(min_length=1)
    state: str = Field(min_length=1)


class InitiateDiscordLoginUseCase(BaseUseCase):
    """Use case for building the Discord authorization URL."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: None = None) -> DiscordAuthUrlResponse:
        state = self.jwt_service.create_state_token()
        auth_url = self.auth_service.initiate_login(state)
        logfire.info("Discord login initiated")
        return DiscordAuthUrlResponse(auth_url=auth_url)


class DiscordCallbackUseCase(BaseUseCase):
    """Use case for completing Discord login."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        account_service: AccountService,
    ) -> None:
        """Initialize Discord callback use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            account_service: Account domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.account_service = account_service

    async def execute(self, request: DiscordCallbackRequest) -> AuthResponse:
        """Execute the Discord callback flow.

        Steps:
        1. Verify the signed state (before touching Discord)
        2. Exchange the code and fetch the Discord profile
        3. Find or create the local user
        4. Issue a session token

        Raises:
            InvalidStateError: If the state is forged or expired
            ExternalAuthError: If Discord rejects the code or is unreachable
            ConflictError: If account creation collides with an existing user
        """
        with logfire.span("discord_callback"):
            self.jwt_service.verify_state_token(request.state)
            logfire.info("Discord callback state verified")

            profile = await self.auth_service.complete_login(request.code)

            user = await self.account_service.find_or_create_external_user(
                discord_id=profile.discord_id,
                display_name=profile.username,
                email=profile.email,
            )
            logfire.info("Discord user resolved", user_id=str(user.id))

            token = self.jwt_service.create_token_for_user(user)
            logfire.info("Session issued", user_id=str(user.id))
            return AuthResponse(token=token, user=UserView.from_user(user))
