"""Politics & War nation routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from alliance.application.usecase.nation import (
    LookupNationUseCase,
    RefreshNationUseCase,
    VerifyNationUseCase,
)
from alliance.application.usecase.nation.lookup_nation import LookupNationRequest
from alliance.application.usecase.nation.refresh_nation import (
    RefreshNationRequest,
    RefreshNationResponse,
)
from alliance.application.usecase.nation.verify_nation import (
    VerifyNationBody,
    VerifyNationRequest,
    VerifyNationResponse,
)
from alliance.application.usecase.view import NationResponse
from alliance.domain.value import NationId
from alliance.interface.api.security import CurrentUserId

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pnw", tags=["pnw"], route_class=DishkaRoute)


@router.post("/verify", response_model=VerifyNationResponse)
async def verify_nation(
    body: VerifyNationBody,
    user_id: CurrentUserId,
    verify_nation_use_case: FromDishka[VerifyNationUseCase],
) -> VerifyNationResponse:
    """Link the caller's PnW nation using their API key.

    Example:
        POST /pnw/verify
        Authorization: Bearer eyJ...
        {"apiKey": "..."}

        Response:
        {"user": {..., "verified": true}, "nationData": {...}, "token": "eyJ..."}
    """
    response = await verify_nation_use_case.execute(
        VerifyNationRequest(user_id=user_id, api_key=body.api_key)
    )
    logger.info(f"User {user_id} verified nation {response.nation_data.nation_id}")
    return response


@router.post("/refresh", response_model=RefreshNationResponse)
async def refresh_nation(
    user_id: CurrentUserId,
    refresh_nation_use_case: FromDishka[RefreshNationUseCase],
) -> RefreshNationResponse:
    """Re-fetch the caller's nation with their stored API key.

    ``refreshed`` is false when nothing could be fetched.
    """
    return await refresh_nation_use_case.execute(RefreshNationRequest(user_id=user_id))


@router.get("/nations/{nation_id}", response_model=NationResponse)
async def get_nation(
    nation_id: int,
    user_id: CurrentUserId,
    lookup_nation_use_case: FromDishka[LookupNationUseCase],
) -> NationResponse:
    """Get any nation, from the cache when fresh."""
    return await lookup_nation_use_case.execute(
        LookupNationRequest(user_id=user_id, nation_id=NationId(nation_id))
    )
