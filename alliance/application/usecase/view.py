"""Response projections shared by use cases.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from alliance.domain.model import Nation, User
from alliance.domain.value import NationSnapshot


class CamelModel(BaseModel):
    """Base for request and response bodies exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserView(CamelModel):
    """Public projection of a user.

    Never carries the password hash or the API key.
    """

    id: str
    email: str | None = None
    username: str | None = None
    discord_username: str | None = None
    verified: bool
    nation_id: int | None = None
    nation_name: str | None = None
    leader_name: str | None = None
    last_active: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            email=user.email,
            username=user.username,
            discord_username=user.discord_username,
            verified=user.verified,
            nation_id=user.nation_id,
            nation_name=user.nation_name,
            leader_name=user.leader_name,
            last_active=user.last_active,
        )


class NationView(CamelModel):
    """Projection of nation data, cached or freshly fetched."""

    nation_id: int
    nation_name: str
    leader_name: str
    alliance_id: int | None = None
    alliance_name: str | None = None
    score: float | None = None
    cities: int | None = None
    color: str | None = None
    continent: str | None = None
    war_policy: str | None = None
    domestic_policy: str | None = None
    last_active: datetime | None = None
    fetched_at: datetime | None = None

    @classmethod
    def from_nation(cls, nation: Nation) -> "NationView":
        data = nation.model_dump(exclude={"id"})
        return cls(nation_id=nation.id, **data)

    @classmethod
    def from_snapshot(cls, snapshot: NationSnapshot) -> "NationView":
        return cls(**snapshot.model_dump())


class AuthResponse(CamelModel):
    """Session token plus the signed-in user."""

    token: str
    user: UserView


class UserResponse(CamelModel):
    """Single user response."""

    user: UserView


class NationResponse(CamelModel):
    """Single nation response."""

    nation: NationView
