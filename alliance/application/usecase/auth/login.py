"""Login use case."""

import logfire
from pydantic import Field

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import AuthResponse, CamelModel, UserView
from alliance.domain.service import AccountService, JWTService


class LoginRequest(CamelModel):
    """Password login request."""

    identifier: str = Field(min_length=1)  # Email or username
    password: str = Field(min_length=1)


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Authenticate and issue a session.

        Raises:
            InvalidCredentialsError: If the identifier or password is wrong
        """
        with logfire.span("login"):
            user = await self.account_service.authenticate(
                request.identifier, request.password
            )
            token = self.jwt_service.create_token_for_user(user)
            return AuthResponse(token=token, user=UserView.from_user(user))
