"""In-memory user repository for testing."""

from typing import Optional

from alliance.domain.error import ConflictError
from alliance.domain.model.user import User
from alliance.domain.repository.user import UserRepository
from alliance.domain.value import NationId, UserId

_UNIQUE_FIELDS = {
    "email": "User with this email already exists",
    "username": "User with this username already exists",
    "discord_id": "User with this Discord account already exists",
    "nation_id": "This PnW nation is already linked to another account",
}


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique fields as the database schema.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _find(self, field: str, value) -> Optional[User]:
        for user in self._users.values():
            if getattr(user, field) == value:
                return user
        return None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._find("email", email)

    async def find_by_username(self, username: str) -> Optional[User]:
        return self._find("username", username)

    async def find_by_identifier(self, identifier: str) -> Optional[User]:
        return self._find("email", identifier) or self._find("username", identifier)

    async def find_by_discord_id(self, discord_id: str) -> Optional[User]:
        return self._find("discord_id", discord_id)

    async def find_by_nation_id(self, nation_id: NationId) -> Optional[User]:
        return self._find("nation_id", nation_id)

    async def search(
        self,
        nation_name: Optional[str] = None,
        leader_name: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: int = 50,
    ) -> list[User]:
        def contains(value: Optional[str], needle: Optional[str]) -> bool:
            if not needle:
                return True
            return value is not None and needle.lower() in value.lower()

        matches = [
            user
            for user in self._users.values()
            if contains(user.nation_name, nation_name)
            and contains(user.leader_name, leader_name)
            and (verified is None or user.verified == verified)
        ]
        matches.sort(key=lambda user: user.last_active, reverse=True)
        return matches[:limit]

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            ConflictError: If a unique field collides with another user
        """
        for field, message in _UNIQUE_FIELDS.items():
            value = getattr(user, field)
            if value is None:
                continue
            other = self._find(field, value)
            if other is not None and other.id != user.id:
                raise ConflictError(message)

        self._users[user.id] = user
        return user
