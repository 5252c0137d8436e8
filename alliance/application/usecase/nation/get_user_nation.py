"""Get user nation use case."""

from pydantic import BaseModel

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import NationResponse, NationView
from alliance.domain.service import AccountService
from alliance.domain.value import UserId


class GetUserNationRequest(BaseModel):
    user_id: UserId


class GetUserNationUseCase(BaseUseCase):
    """Use case for reading the current user's cached nation."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetUserNationRequest) -> NationResponse:
        """Raises NotFoundError if the user has no linked nation."""
        nation = await self.account_service.get_user_nation(request.user_id)
        return NationResponse(nation=NationView.from_nation(nation))
