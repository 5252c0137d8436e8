"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from alliance.application.usecase.nation import GetUserNationUseCase
from alliance.application.usecase.nation.get_user_nation import GetUserNationRequest
from alliance.application.usecase.user import (
    GetUserByNationUseCase,
    SearchUsersUseCase,
)
from alliance.application.usecase.user.get_user_by_nation import (
    GetUserByNationRequest,
)
from alliance.application.usecase.user.search_users import (
    SearchUsersRequest,
    SearchUsersResponse,
)
from alliance.application.usecase.view import NationResponse, UserResponse
from alliance.domain.value import NationId
from alliance.interface.api.security import CurrentUserId

# The caller's own resources live under /user, the member directory under /users
user_router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)
router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@user_router.get("/nation", response_model=NationResponse)
async def get_my_nation(
    user_id: CurrentUserId,
    get_user_nation_use_case: FromDishka[GetUserNationUseCase],
) -> NationResponse:
    """Get the caller's cached nation.

    Returns 404 until the caller has verified a nation.
    """
    return await get_user_nation_use_case.execute(
        GetUserNationRequest(user_id=user_id)
    )


@router.get("", response_model=SearchUsersResponse)
async def search_users(
    user_id: CurrentUserId,
    search_users_use_case: FromDishka[SearchUsersUseCase],
    nation_name: str | None = Query(default=None, alias="nationName"),
    leader_name: str | None = Query(default=None, alias="leaderName"),
    verified: bool | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
) -> SearchUsersResponse:
    """Search members. Only verified users may search.

    Example:
        GET /users?nationName=mock&verified=true&limit=10
    """
    return await search_users_use_case.execute(
        SearchUsersRequest(
            caller_id=user_id,
            nation_name=nation_name,
            leader_name=leader_name,
            verified=verified,
            limit=limit,
        )
    )


@router.get("/by-nation/{nation_id}", response_model=UserResponse)
async def get_user_by_nation(
    nation_id: int,
    user_id: CurrentUserId,
    get_user_by_nation_use_case: FromDishka[GetUserByNationUseCase],
) -> UserResponse:
    """Get the member linked to a nation."""
    return await get_user_by_nation_use_case.execute(
        GetUserByNationRequest(caller_id=user_id, nation_id=NationId(nation_id))
    )
