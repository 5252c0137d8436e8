"""Unit tests for domain models."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from alliance.domain.model import Nation, User
from alliance.domain.value import NationId, NationSnapshot, UserId


class TestUser:
    def test_verified_requires_nation(self):
        with pytest.raises(ValidationError):
            User(id=UserId(uuid4()), username="x", verified=True)

    def test_verified_with_nation(self):
        user = User(
            id=UserId(uuid4()),
            username="x",
            verified=True,
            nation_id=NationId(1),
            nation_name="N",
            leader_name="L",
        )

        assert user.verified

    def test_display_name_prefers_username(self):
        user = User(id=UserId(uuid4()), username="x", discord_username="disc")
        discord_only = User(id=UserId(uuid4()), discord_username="disc")

        assert user.display_name == "x"
        assert discord_only.display_name == "disc"


class TestNation:
    def test_from_snapshot(self):
        snapshot = NationSnapshot(
            nation_id=NationId(7), nation_name="N", leader_name="L", cities=3
        )

        nation = Nation.from_snapshot(snapshot)

        assert nation.id == 7
        assert nation.nation_name == "N"
        assert nation.cities == 3

    def test_staleness(self):
        now = datetime.now(timezone.utc)
        nation = Nation(
            id=NationId(7),
            nation_name="N",
            leader_name="L",
            fetched_at=now - timedelta(minutes=61),
        )

        assert nation.is_stale(timedelta(minutes=60), now=now)
        assert not nation.is_stale(timedelta(minutes=90), now=now)
