"""Search users use case."""

from pydantic import BaseModel, Field

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import CamelModel, UserView
from alliance.domain.error import VerificationRequiredError
from alliance.domain.service import AccountService
from alliance.domain.value import UserId


class SearchUsersRequest(BaseModel):
    """Search users request."""

    caller_id: UserId
    nation_name: str | None = None
    leader_name: str | None = None
    verified: bool | None = None
    limit: int = Field(default=50, ge=1, le=100)


class SearchUsersResponse(CamelModel):
    users: list[UserView]


class SearchUsersUseCase(BaseUseCase):
    """Use case for the member directory, open to verified users only."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Search users.

        The caller's verification is read from the store rather than the
        token, so a session issued before verification is still rejected.

        Raises:
            VerificationRequiredError: If the caller has no linked nation
        """
        caller = await self.account_service.get_by_id(request.caller_id)
        if not caller.verified:
            raise VerificationRequiredError()

        users = await self.account_service.search_users(
            nation_name=request.nation_name,
            leader_name=request.leader_name,
            verified=request.verified,
            limit=request.limit,
        )
        return SearchUsersResponse(users=[UserView.from_user(u) for u in users])
