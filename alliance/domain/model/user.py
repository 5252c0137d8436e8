"""User aggregate root.

A user signs in with a password or with Discord, and becomes verified once
they link a Politics & War nation.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from alliance.domain.model.common import DomainModel
from alliance.domain.value import NationId, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    ``verified`` is only ever set together with the nation link fields.
    ``api_key`` holds the encrypted PnW API key, never the plain value.
    """

    id: UserId

    # Credentials
    email: Optional[str] = None
    username: Optional[str] = None
    password_hash: Optional[str] = None

    # Discord identity
    discord_id: Optional[str] = None
    discord_username: Optional[str] = None

    # Nation link
    nation_id: Optional[NationId] = None
    nation_name: Optional[str] = None
    leader_name: Optional[str] = None
    api_key: Optional[str] = None

    verified: bool = False
    last_active: datetime = Field(default_factory=_utcnow)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def check_verified_has_nation(self) -> "User":
        if self.verified and (
            self.nation_id is None or not self.nation_name or not self.leader_name
        ):
            raise ValueError("Verified users must have a linked nation")
        return self

    @property
    def display_name(self) -> Optional[str]:
        """Identity shown to other users and carried in session tokens."""
        return self.username or self.discord_username
