"""Refresh nation use case."""

from pydantic import BaseModel

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import CamelModel, UserView
from alliance.domain.service import AccountService
from alliance.domain.value import UserId


class RefreshNationRequest(BaseModel):
    user_id: UserId


class RefreshNationResponse(CamelModel):
    """Current user and whether fresh nation data was fetched."""

    user: UserView
    refreshed: bool


class RefreshNationUseCase(BaseUseCase):
    """Use case for re-fetching the current user's nation."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: RefreshNationRequest) -> RefreshNationResponse:
        """Refresh best effort, returning the unchanged user on failure.

        Raises:
            NotFoundError: If the user does not exist
        """
        updated = await self.account_service.refresh_nation(request.user_id)
        user = updated or await self.account_service.get_by_id(request.user_id)
        return RefreshNationResponse(
            user=UserView.from_user(user), refreshed=updated is not None
        )
