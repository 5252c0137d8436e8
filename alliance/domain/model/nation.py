"""Cached nation record.

A local mirror of one Politics & War nation, written whenever fresh data is
fetched. Never created directly by a user action.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import Field

from alliance.domain.model.common import DomainModel
from alliance.domain.value import NationId, NationSnapshot


class Nation(DomainModel):
    """Cached copy of an external nation."""

    id: NationId
    nation_name: str
    leader_name: str
    alliance_id: Optional[int] = None
    alliance_name: Optional[str] = None
    score: Optional[float] = None
    cities: Optional[int] = None
    color: Optional[str] = None
    continent: Optional[str] = None
    war_policy: Optional[str] = None
    domestic_policy: Optional[str] = None
    last_active: Optional[datetime] = None
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_snapshot(
        cls, snapshot: NationSnapshot, fetched_at: datetime | None = None
    ) -> "Nation":
        data = snapshot.model_dump(exclude={"nation_id"})
        return cls(
            id=snapshot.nation_id,
            fetched_at=fetched_at or datetime.now(timezone.utc),
            **data,
        )

    def is_stale(self, ttl: timedelta, now: datetime | None = None) -> bool:
        """Whether this record is older than the cache TTL."""
        now = now or datetime.now(timezone.utc)
        return now - self.fetched_at > ttl
