"""PostgreSQL repository implementations."""

from alliance.persistence.repository.nation import PostgresNationRepository
from alliance.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresNationRepository",
]
