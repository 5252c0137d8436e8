"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL.
"""

import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from alliance.domain.error import ConflictError
from alliance.domain.model import Nation, User
from alliance.domain.repository import NationRepository, UserRepository
from alliance.domain.value import NationId, UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _user(**fields) -> User:
    suffix = uuid4().hex[:12]
    defaults = {
        "id": UserId(uuid4()),
        "email": f"{suffix}@example.com",
        "username": f"user-{suffix}",
        "password_hash": "hash",
    }
    return User(**{**defaults, **fields})


def _nation_id() -> NationId:
    # Keep ids well away from anything a real nation would use
    return NationId(9_000_000_000 + uuid4().int % 1_000_000_000)


class TestPostgresUserRepository:
    """Round trips and unique constraints against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = _user()

        # Act
        await repo.save(user)
        by_id = await repo.find_by_id(user.id)
        by_identifier = await repo.find_by_identifier(user.username)

        # Assert
        assert by_id is not None
        assert by_id.email == user.email
        assert by_identifier.id == user.id

    @pytest.mark.asyncio
    async def test_update_links_nation(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.save(_user())
        nation_id = _nation_id()

        # Act
        await repo.save(
            user.model_copy(
                update={
                    "nation_id": nation_id,
                    "nation_name": "Integria",
                    "leader_name": "Lead",
                    "api_key": "encrypted",
                    "verified": True,
                }
            )
        )
        found = await repo.find_by_nation_id(nation_id)

        # Assert
        assert found.id == user.id
        assert found.verified is True

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        first = await repo.save(_user())

        # Act / Assert
        with pytest.raises(ConflictError):
            await repo.save(_user(email=first.email))

        # The failed insert must not poison the session
        assert await repo.find_by_id(first.id) is not None

    @pytest.mark.asyncio
    async def test_duplicate_nation_conflicts(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        nation_id = _nation_id()
        linked = {
            "nation_id": nation_id,
            "nation_name": "Integria",
            "leader_name": "Lead",
            "verified": True,
        }
        await repo.save(_user(**linked))

        # Act / Assert
        with pytest.raises(ConflictError):
            await repo.save(_user(**linked))

    @pytest.mark.asyncio
    async def test_search_matches_wildcards_literally(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        tag = uuid4().hex[:12]
        literal = await repo.save(_user(nation_name=f"{tag}%_off"))
        await repo.save(_user(nation_name=f"{tag}x_off"))
        await repo.save(_user(nation_name=f"{tag}xyoff"))

        # Act
        percent = await repo.search(nation_name=f"{tag}%", limit=100)
        underscore = await repo.search(nation_name=f"{tag.upper()}%_", limit=100)

        # Assert
        assert [u.id for u in percent] == [literal.id]
        assert [u.id for u in underscore] == [literal.id]


class TestPostgresNationRepository:
    """Nation cache upserts against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_upsert_overwrites(self, integration_env):
        # Arrange
        repo = await integration_env.get(NationRepository)
        nation_id = _nation_id()

        # Act
        await repo.upsert(Nation(id=nation_id, nation_name="Old", leader_name="L"))
        await repo.upsert(
            Nation(
                id=nation_id,
                nation_name="New",
                leader_name="L",
                fetched_at=datetime.now(timezone.utc),
            )
        )
        found = await repo.find_by_id(nation_id)

        # Assert
        assert found.nation_name == "New"
