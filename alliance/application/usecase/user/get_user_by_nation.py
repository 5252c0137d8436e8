"""Get user by nation use case."""

from pydantic import BaseModel

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import UserResponse, UserView
from alliance.domain.error import VerificationRequiredError
from alliance.domain.service import AccountService
from alliance.domain.value import NationId, UserId


class GetUserByNationRequest(BaseModel):
    caller_id: UserId
    nation_id: NationId


class GetUserByNationUseCase(BaseUseCase):
    """Use case for finding the account linked to a nation.

    Part of the member directory, so verified callers only.
    """

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetUserByNationRequest) -> UserResponse:
        """Find the member linked to a nation.

        Raises:
            VerificationRequiredError: If the caller has no linked nation
            NotFoundError: If no user is linked to the nation
        """
        caller = await self.account_service.get_by_id(request.caller_id)
        if not caller.verified:
            raise VerificationRequiredError()

        user = await self.account_service.get_user_by_nation_id(request.nation_id)
        return UserResponse(user=UserView.from_user(user))
