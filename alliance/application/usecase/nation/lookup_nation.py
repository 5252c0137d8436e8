"""Lookup nation use case."""

from pydantic import BaseModel

from alliance.application.usecase.base import BaseUseCase
from alliance.application.usecase.view import NationResponse, NationView
from alliance.domain.service import AccountService
from alliance.domain.value import NationId, UserId


class LookupNationRequest(BaseModel):
    """Lookup nation request.

    ``user_id`` identifies the caller whose stored API key is used when the
    nation has to be fetched.
    """

    user_id: UserId
    nation_id: NationId


class LookupNationUseCase(BaseUseCase):
    """Use case for reading any nation through the cache."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: LookupNationRequest) -> NationResponse:
        nation = await self.account_service.lookup_nation(
            request.user_id, request.nation_id
        )
        return NationResponse(nation=NationView.from_nation(nation))
