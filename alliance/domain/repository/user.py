"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from alliance.domain.model.user import User
from alliance.domain.value import NationId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Implementations must enforce uniqueness of email, username, discord_id
    and nation_id, and raise ConflictError from ``save`` on a violation.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""
        pass

    @abstractmethod
    async def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Find a user whose email or username equals the identifier.

        Args:
            identifier: Email address or username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_discord_id(self, discord_id: str) -> Optional[User]:
        """Find a user by their Discord id."""
        pass

    @abstractmethod
    async def find_by_nation_id(self, nation_id: NationId) -> Optional[User]:
        """Find the user linked to a nation."""
        pass

    @abstractmethod
    async def search(
        self,
        nation_name: Optional[str] = None,
        leader_name: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: int = 50,
    ) -> list[User]:
        """Search users.

        Name filters are case-insensitive substring matches. Results are
        ordered by last activity, most recent first.

        Args:
            nation_name: Substring of the nation name
            leader_name: Substring of the leader name
            verified: Only users with this verification status
            limit: Maximum number of results

        Returns:
            Matching users (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If a unique field collides with another user
        """
        pass
