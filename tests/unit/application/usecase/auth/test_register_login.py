"""Tests for the password register and login use cases."""

from uuid import uuid4

import pytest

from alliance.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from alliance.application.usecase.auth.get_current_user import GetCurrentUserRequest
from alliance.application.usecase.auth.login import LoginRequest
from alliance.application.usecase.auth.register import RegisterRequest
from alliance.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from alliance.domain.service import JWTService
from alliance.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _register(env, email="x@y.com", username="x", password="Abcdef12"):
    use_case = await env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(email=email, username=username, password=password)
    )


@pytest.mark.asyncio
async def test_register_issues_unverified_session(unit_env):
    response = await _register(unit_env)
    jwt_service = await unit_env.get(JWTService)

    payload = jwt_service.verify_token(response.token)

    assert response.user.verified is False
    assert response.user.username == "x"
    assert payload.user_id == response.user.id
    assert payload.verified is False


@pytest.mark.asyncio
async def test_register_duplicate_email(unit_env):
    await _register(unit_env)

    with pytest.raises(ConflictError):
        await _register(unit_env, username="other")


@pytest.mark.asyncio
async def test_register_weak_password(unit_env):
    with pytest.raises(ValidationError):
        await _register(unit_env, password="weak")


@pytest.mark.asyncio
async def test_login_by_username(unit_env):
    registered = await _register(unit_env)
    login = await unit_env.get(LoginUseCase)

    response = await login.execute(LoginRequest(identifier="x", password="Abcdef12"))

    assert response.user.id == registered.user.id
    assert response.token


@pytest.mark.asyncio
async def test_login_wrong_password(unit_env):
    await _register(unit_env)
    login = await unit_env.get(LoginUseCase)

    with pytest.raises(InvalidCredentialsError):
        await login.execute(LoginRequest(identifier="x@y.com", password="nope"))


@pytest.mark.asyncio
async def test_get_current_user(unit_env):
    registered = await _register(unit_env)
    use_case = await unit_env.get(GetCurrentUserUseCase)

    response = await use_case.execute(
        GetCurrentUserRequest(user_id=UserId(registered.user.id))
    )

    assert response.user.email == "x@y.com"


@pytest.mark.asyncio
async def test_get_current_user_missing(unit_env):
    use_case = await unit_env.get(GetCurrentUserUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(GetCurrentUserRequest(user_id=UserId(uuid4())))
