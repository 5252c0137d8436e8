"""Register use case."""

import logfire
from pydantic import Field

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import AuthResponse, CamelModel, UserView
from alliance.domain.service import AccountService, CreateUserData, JWTService


class RegisterRequest(CamelModel):
    """Password registration request."""

    email: str = Field(min_length=1)
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class RegisterUseCase(BaseUseCase):
    """Use case for creating a password account and signing it in."""

    def __init__(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Register a new user and issue a session.

        Raises:
            ValidationError: If the email or password is malformed
            ConflictError: If the email or username is taken
        """
        with logfire.span("register", username=request.username):
            user = await self.account_service.create_user(
                CreateUserData(
                    email=request.email,
                    username=request.username,
                    password=request.password,
                )
            )
            token = self.jwt_service.create_token_for_user(user)
            return AuthResponse(token=token, user=UserView.from_user(user))
