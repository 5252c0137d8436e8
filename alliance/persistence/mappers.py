"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from alliance.domain.model import Nation, User
from alliance.domain.value import NationId, UserId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    nation_id = row.get("nation_id")
    return User(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        email=row.get("email"),
        username=row.get("username"),
        password_hash=row.get("password_hash"),
        discord_id=row.get("discord_id"),
        discord_username=row.get("discord_username"),
        nation_id=NationId(nation_id) if nation_id is not None else None,
        nation_name=row.get("nation_name"),
        leader_name=row.get("leader_name"),
        api_key=row.get("api_key"),
        verified=row["verified"],
        last_active=row["last_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_nation(row: Dict[str, Any]) -> Nation:
    """Convert database row to Nation domain model."""
    return Nation(
        id=NationId(row["id"]),
        nation_name=row["nation_name"],
        leader_name=row["leader_name"],
        alliance_id=row.get("alliance_id"),
        alliance_name=row.get("alliance_name"),
        score=row.get("score"),
        cities=row.get("cities"),
        color=row.get("color"),
        continent=row.get("continent"),
        war_policy=row.get("war_policy"),
        domestic_policy=row.get("domestic_policy"),
        last_active=row.get("last_active"),
        fetched_at=row["fetched_at"],
    )


def nation_to_dict(nation: Nation) -> Dict[str, Any]:
    """Convert Nation domain model to database dict."""
    return nation.model_dump()
