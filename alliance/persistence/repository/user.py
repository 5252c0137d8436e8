"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from alliance.domain.error import ConflictError
from alliance.domain.model import User
from alliance.domain.repository import UserRepository
from alliance.domain.value import NationId, UserId
from alliance.persistence.mappers import row_to_user, user_to_dict
from alliance.persistence.tables import users_table

# Unique constraint names as generated by Postgres for the users table
_CONFLICT_MESSAGES = {
    "users_email_key": "User with this email already exists",
    "users_username_key": "User with this username already exists",
    "users_discord_id_key": "User with this Discord account already exists",
    "users_nation_id_key": "This PnW nation is already linked to another account",
}


def _conflict_message(error: IntegrityError) -> str:
    detail = str(error.orig)
    for constraint, message in _CONFLICT_MESSAGES.items():
        if constraint in detail:
            return message
    return "User already exists"


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *conditions) -> Optional[User]:
        stmt = select(users_table).where(*conditions)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one(users_table.c.email == email)

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self._find_one(users_table.c.username == username)

    async def find_by_identifier(self, identifier: str) -> Optional[User]:
        return await self._find_one(
            or_(
                users_table.c.email == identifier,
                users_table.c.username == identifier,
            )
        )

    async def find_by_discord_id(self, discord_id: str) -> Optional[User]:
        return await self._find_one(users_table.c.discord_id == discord_id)

    async def find_by_nation_id(self, nation_id: NationId) -> Optional[User]:
        return await self._find_one(users_table.c.nation_id == nation_id)

    async def search(
        self,
        nation_name: Optional[str] = None,
        leader_name: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: int = 50,
    ) -> list[User]:
        """Search users, most recently active first.

        Name filters are case-insensitive substring matches. LIKE wildcards in
        the filter match literally.
        """
        stmt = select(users_table)
        if nation_name:
            stmt = stmt.where(
                users_table.c.nation_name.icontains(nation_name, autoescape=True)
            )
        if leader_name:
            stmt = stmt.where(
                users_table.c.leader_name.icontains(leader_name, autoescape=True)
            )
        if verified is not None:
            stmt = stmt.where(users_table.c.verified == verified)
        stmt = stmt.order_by(users_table.c.last_active.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The write runs in a SAVEPOINT so a unique violation only rolls back
        this statement and the request transaction stays usable.

        Raises:
            ConflictError: If email, username, Discord id or nation id is taken
        """
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            message = _conflict_message(e)
            logfire.warn("User unique constraint violated", error=message)
            raise ConflictError(message)

        return user
