"""Verify nation use case."""

from pydantic import BaseModel, Field

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import CamelModel, NationView, UserView
from alliance.domain.service import AccountService, JWTService
from alliance.domain.value import UserId


class VerifyNationBody(CamelModel):
    """Verification request body."""

    api_key: str = Field(min_length=1)


class VerifyNationRequest(BaseModel):
    """Verify nation request."""

    user_id: UserId
    api_key: str


class VerifyNationResponse(CamelModel):
    """Verified user, fetched nation data and a refreshed session token.

    The token is re-issued so the client sees the new ``verified`` claim.
    """

    user: UserView
    nation_data: NationView
    token: str


class VerifyNationUseCase(BaseUseCase):
    """Use case for linking a PnW nation to the current user."""

    def __init__(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> None:
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: VerifyNationRequest) -> VerifyNationResponse:
        """Verify the API key and link its nation.

        Raises:
            NotFoundError: If the user does not exist
            ExternalAuthError: If PnW rejects the key
            ConflictError: If the nation belongs to another account
        """
        result = await self.account_service.verify_nation(
            request.user_id, request.api_key
        )
        return VerifyNationResponse(
            user=UserView.from_user(result.user),
            nation_data=NationView.from_snapshot(result.nation),
            token=self.jwt_service.create_token_for_user(result.user),
        )
