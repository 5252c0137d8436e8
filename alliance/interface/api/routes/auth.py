"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from alliance.application.usecase.auth import (
    DiscordCallbackUseCase,
    GetCurrentUserUseCase,
    InitiateDiscordLoginUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from alliance.application.usecase.auth.discord_login import (
    DiscordAuthUrlResponse,
    DiscordCallbackRequest,
)
from alliance.application.usecase.auth.get_current_user import GetCurrentUserRequest
from alliance.application.usecase.auth.login import LoginRequest
from alliance.application.usecase.auth.register import RegisterRequest
from alliance.application.usecase.view import AuthResponse, UserResponse
from alliance.interface.api.security import CurrentUserId

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Register with email, username and password.

    Example:
        POST /auth/register
        {"email": "x@y.com", "username": "x", "password": "Abcdef12"}

        Response (201):
        {"token": "eyJ...", "user": {"id": "...", "verified": false, ...}}
    """
    response = await register_use_case.execute(request)
    logger.info(f"Registered user {response.user.id}")
    return response


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Log in with email or username and password.

    Example:
        POST /auth/login
        {"identifier": "x", "password": "Abcdef12"}
    """
    return await login_use_case.execute(request)


@router.get("/discord", response_model=DiscordAuthUrlResponse)
async def discord_login(
    initiate_use_case: FromDishka[InitiateDiscordLoginUseCase],
) -> DiscordAuthUrlResponse:
    """Start Discord login.

    The returned URL carries a signed state that the callback checks.

    Example:
        GET /auth/discord

        Response:
        {"authUrl": "https://discord.com/api/oauth2/authorize?...&state=eyJ..."}
    """
    return await initiate_use_case.execute()


@router.post("/discord/callback", response_model=AuthResponse)
async def discord_callback(
    request: DiscordCallbackRequest,
    callback_use_case: FromDishka[DiscordCallbackUseCase],
) -> AuthResponse:
    """Complete Discord login.

    The frontend receives Discord's redirect and posts ``code`` and ``state``
    here. A bad state or a Discord failure returns 400 without touching any
    account.
    """
    logger.info("Discord callback received")
    return await callback_use_case.execute(request)


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: CurrentUserId,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UserResponse:
    """Get the authenticated user.

    Returns 404 when the token is valid but its user no longer exists.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout() -> LogoutResponse:
    """Log out.

    Sessions are stateless, the client discards its token.
    """
    return LogoutResponse(success=True)
