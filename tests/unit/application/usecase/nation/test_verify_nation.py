"""Tests for the nation use cases."""

import pytest

from alliance.application.usecase.auth import RegisterUseCase
from alliance.application.usecase.auth.register import RegisterRequest
from alliance.application.usecase.nation import (
    GetUserNationUseCase,
    LookupNationUseCase,
    RefreshNationUseCase,
    VerifyNationUseCase,
)
from alliance.application.usecase.nation.get_user_nation import GetUserNationRequest
from alliance.application.usecase.nation.lookup_nation import LookupNationRequest
from alliance.application.usecase.nation.refresh_nation import RefreshNationRequest
from alliance.application.usecase.nation.verify_nation import VerifyNationRequest
from alliance.domain.error import ConflictError, ExternalAuthError, NotFoundError
from alliance.domain.service import JWTService
from alliance.domain.value import NationId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _register(env, email="x@y.com", username="x") -> UserId:
    use_case = await env.get(RegisterUseCase)
    response = await use_case.execute(
        RegisterRequest(email=email, username=username, password="Abcdef12")
    )
    return UserId(response.user.id)


async def _verify(env, user_id: UserId, api_key: str):
    use_case = await env.get(VerifyNationUseCase)
    return await use_case.execute(VerifyNationRequest(user_id=user_id, api_key=api_key))


@pytest.mark.asyncio
async def test_verify_returns_nation_and_verified_token(unit_env):
    user_id = await _register(unit_env)
    jwt_service = await unit_env.get(JWTService)

    response = await _verify(unit_env, user_id, "mock-api-key-1")

    assert response.user.verified is True
    assert response.user.nation_id == 1001
    assert response.nation_data.nation_name == "Mockland"
    assert jwt_service.verify_token(response.token).verified is True


@pytest.mark.asyncio
async def test_verify_view_hides_api_key(unit_env):
    user_id = await _register(unit_env)

    response = await _verify(unit_env, user_id, "mock-api-key-1")

    dumped = response.model_dump_json(by_alias=True)
    assert "mock-api-key-1" not in dumped
    assert "apiKey" not in dumped


@pytest.mark.asyncio
async def test_verify_nation_owned_by_other_user(unit_env):
    first = await _register(unit_env)
    second = await _register(unit_env, email="z@y.com", username="z")
    await _verify(unit_env, first, "mock-api-key-1")

    with pytest.raises(ConflictError):
        await _verify(unit_env, second, "mock-api-key-1-alt")


@pytest.mark.asyncio
async def test_verify_invalid_key(unit_env):
    user_id = await _register(unit_env)

    with pytest.raises(ExternalAuthError):
        await _verify(unit_env, user_id, "bogus")


@pytest.mark.asyncio
async def test_get_user_nation_before_and_after_verify(unit_env):
    user_id = await _register(unit_env)
    use_case = await unit_env.get(GetUserNationUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(GetUserNationRequest(user_id=user_id))

    await _verify(unit_env, user_id, "mock-api-key-1")
    response = await use_case.execute(GetUserNationRequest(user_id=user_id))

    assert response.nation.nation_id == 1001
    assert response.nation.fetched_at is not None


@pytest.mark.asyncio
async def test_refresh_without_key(unit_env):
    user_id = await _register(unit_env)
    use_case = await unit_env.get(RefreshNationUseCase)

    response = await use_case.execute(RefreshNationRequest(user_id=user_id))

    assert response.refreshed is False
    assert response.user.verified is False


@pytest.mark.asyncio
async def test_refresh_verified_user(unit_env):
    user_id = await _register(unit_env)
    await _verify(unit_env, user_id, "mock-api-key-1")
    use_case = await unit_env.get(RefreshNationUseCase)

    response = await use_case.execute(RefreshNationRequest(user_id=user_id))

    assert response.refreshed is True
    assert response.user.nation_name == "Mockland"


@pytest.mark.asyncio
async def test_lookup_other_nation(unit_env):
    user_id = await _register(unit_env)
    await _verify(unit_env, user_id, "mock-api-key-1")
    use_case = await unit_env.get(LookupNationUseCase)

    response = await use_case.execute(
        LookupNationRequest(user_id=user_id, nation_id=NationId(1002))
    )

    assert response.nation.leader_name == "Test Leader"
