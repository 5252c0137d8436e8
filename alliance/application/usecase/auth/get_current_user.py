"""Get current user use case."""

from pydantic import BaseModel

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import UserResponse, UserView
from alliance.domain.service import AccountService
from alliance.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UserId  # From the verified session token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated user."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Load the user behind a session.

        Raises:
            NotFoundError: If the token outlived its user
        """
        user = await self.account_service.get_by_id(request.user_id)
        return UserResponse(user=UserView.from_user(user))
