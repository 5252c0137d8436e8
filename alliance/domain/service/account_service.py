"""Account domain service.

Owns the account-linking workflow: registration, password login, Discord
find-or-create, and verifying + caching the user's Politics & War nation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from alliance.domain.error import (
    ConflictError,
    ExternalAuthError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from alliance.domain.model import Nation, User
from alliance.domain.repository import NationRepository, UserRepository
from alliance.domain.value import (
    Email,
    NationId,
    NationSnapshot,
    UserId,
    password_policy_errors,
)
from alliance.util.security import ApiKeyCipher, DecryptionError, PasswordHasher

from .base import Service
from .nation_directory import NationDirectory


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CreateUserData:
    """Input for creating an account."""

    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    discord_id: Optional[str] = None
    discord_username: Optional[str] = None


@dataclass
class VerificationResult:
    """Outcome of linking a nation to a user."""

    user: User
    nation: NationSnapshot


class AccountService(Service):
    """Domain service for user accounts and nation linking."""

    def __init__(
        self,
        user_repository: UserRepository,
        nation_repository: NationRepository,
        nation_directory: NationDirectory,
        password_hasher: PasswordHasher,
        api_key_cipher: ApiKeyCipher,
        nation_cache_ttl: timedelta = timedelta(minutes=60),
    ) -> None:
        """Initialize account service.

        Args:
            user_repository: User repository
            nation_repository: Nation cache repository
            nation_directory: External nation directory client
            password_hasher: Password hashing primitive
            api_key_cipher: Encryption for stored API keys
            nation_cache_ttl: Age after which a cached nation is refreshed on read
        """
        self.user_repository = user_repository
        self.nation_repository = nation_repository
        self.nation_directory = nation_directory
        self.password_hasher = password_hasher
        self.api_key_cipher = api_key_cipher
        self.nation_cache_ttl = nation_cache_ttl

    async def create_user(self, data: CreateUserData) -> User:
        """Create a new account.

        Args:
            data: Account fields, every field is optional

        Returns:
            The created, unverified user

        Raises:
            ValidationError: If email or password is malformed
            ConflictError: If email, username or Discord id is taken
        """
        with logfire.span("account_service.create_user", username=data.username):
            self._validate(data)

            if data.email and await self.user_repository.find_by_email(data.email):
                raise ConflictError("User with this email already exists")

            if data.username and await self.user_repository.find_by_username(
                data.username
            ):
                raise ConflictError("User with this username already exists")

            if data.discord_id and await self.user_repository.find_by_discord_id(
                data.discord_id
            ):
                raise ConflictError("User with this Discord account already exists")

            password_hash = None
            if data.password:
                password_hash = await self.password_hasher.hash_async(data.password)

            now = _utcnow()
            user = User(
                id=UserId(uuid4()),
                email=data.email,
                username=data.username,
                password_hash=password_hash,
                discord_id=data.discord_id,
                discord_username=data.discord_username,
                verified=False,
                last_active=now,
                created_at=now,
                updated_at=now,
            )
            # The store's unique constraints catch a concurrent duplicate
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created",
                user_id=str(saved.id),
                via_discord=bool(data.discord_id),
            )
            return saved

    def _validate(self, data: CreateUserData) -> None:
        if data.email:
            try:
                Email(data.email)
            except PydanticValidationError:
                raise ValidationError("Invalid email format")

        if data.password:
            errors = password_policy_errors(data.password)
            if errors:
                raise ValidationError(
                    f"Password validation failed: {', '.join(errors)}", errors
                )

    async def authenticate(self, identifier: str, password: str) -> User:
        """Authenticate with email or username and password.

        Args:
            identifier: Email address or username
            password: Plain text password

        Returns:
            The authenticated user, with last_active updated

        Raises:
            InvalidCredentialsError: If the user is unknown, has no password,
                or the password does not match
        """
        with logfire.span("account_service.authenticate"):
            user = await self.user_repository.find_by_identifier(identifier)

            if not user or not user.password_hash:
                logfire.warn("Login rejected - unknown user or no password")
                raise InvalidCredentialsError()

            if not await self.password_hasher.verify_async(
                password, user.password_hash
            ):
                logfire.warn("Login rejected - wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            user = await self._touch(user)
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def find_or_create_external_user(
        self, discord_id: str, display_name: str, email: Optional[str] = None
    ) -> User:
        """Resolve a Discord identity to a local user, creating one if needed.

        Calling this twice with the same Discord id returns the same user.

        Args:
            discord_id: Discord user id
            display_name: Current Discord username
            email: Discord email (optional)

        Returns:
            The existing or newly created user

        Raises:
            ConflictError: If creation collides with an existing account
        """
        with logfire.span(
            "account_service.find_or_create_external_user", discord_id=discord_id
        ):
            user = await self.user_repository.find_by_discord_id(discord_id)

            if user:
                updates = {}
                if user.discord_username != display_name:
                    updates["discord_username"] = display_name
                user = await self._touch(user, **updates)
                logfire.info(
                    "Existing Discord user logged in",
                    user_id=str(user.id),
                    renamed=bool(updates),
                )
                return user

            return await self.create_user(
                CreateUserData(
                    discord_id=discord_id,
                    discord_username=display_name,
                    email=email,
                )
            )

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("account_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def verify_nation(self, user_id: UserId, api_key: str) -> VerificationResult:
        """Verify an API key and link its nation to the user.

        Args:
            user_id: User to link
            api_key: PnW API key supplied by the user

        Returns:
            The verified user and the fetched nation data

        Raises:
            NotFoundError: If the user does not exist
            ExternalAuthError: If the directory rejects the key
            ConflictError: If the nation is linked to a different user
        """
        with logfire.span("account_service.verify_nation", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            snapshot = await self.nation_directory.fetch_by_api_key(api_key)

            linked = await self.user_repository.find_by_nation_id(snapshot.nation_id)
            if linked and linked.id != user.id:
                logfire.warn(
                    "Nation already linked to another account",
                    user_id=str(user_id),
                    nation_id=snapshot.nation_id,
                )
                raise ConflictError(
                    "This PnW nation is already linked to another account"
                )

            updated = await self._touch(
                user,
                nation_id=snapshot.nation_id,
                nation_name=snapshot.nation_name,
                leader_name=snapshot.leader_name,
                api_key=self.api_key_cipher.encrypt(api_key),
                verified=True,
            )
            await self._cache(snapshot)

            logfire.info(
                "Nation verified",
                user_id=str(user_id),
                nation_id=snapshot.nation_id,
            )
            return VerificationResult(user=updated, nation=snapshot)

    async def refresh_nation(self, user_id: UserId) -> Optional[User]:
        """Re-fetch the user's nation with their stored API key.

        Best effort: any failure returns None and leaves data unchanged.

        Args:
            user_id: User whose nation to refresh

        Returns:
            The updated user, or None if nothing was refreshed
        """
        with logfire.span("account_service.refresh_nation", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                return None

            api_key = self._decrypt_api_key(user)
            if not api_key:
                return None

            try:
                snapshot = await self.nation_directory.fetch_by_api_key(api_key)
            except ExternalAuthError as e:
                logfire.warn(
                    "Nation refresh failed", user_id=str(user_id), error=str(e)
                )
                return None

            # The key now belongs to a different nation; keep the verified link
            if user.nation_id is not None and snapshot.nation_id != user.nation_id:
                logfire.warn(
                    "Nation refresh returned a different nation",
                    user_id=str(user_id),
                    nation_id=snapshot.nation_id,
                )
                return None

            updated = await self.user_repository.save(
                user.model_copy(
                    update={
                        "nation_name": snapshot.nation_name,
                        "leader_name": snapshot.leader_name,
                        "updated_at": _utcnow(),
                    }
                )
            )
            await self._cache(snapshot)
            logfire.info("Nation refreshed", user_id=str(user_id))
            return updated

    async def get_user_nation(self, user_id: UserId) -> Nation:
        """Get the cached nation linked to a user.

        A cached row older than the TTL is refreshed first. If the refresh
        fails the stale row is returned.

        Raises:
            NotFoundError: If the user has no linked nation, or no data can be found
        """
        with logfire.span("account_service.get_user_nation", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            if user.nation_id is None:
                raise NotFoundError("Nation", f"user {user_id}")

            nation = await self.nation_repository.find_by_id(user.nation_id)
            if nation is None or nation.is_stale(self.nation_cache_ttl):
                if await self.refresh_nation(user_id):
                    nation = await self.nation_repository.find_by_id(user.nation_id)

            if nation is None:
                raise NotFoundError("Nation", str(user.nation_id))
            return nation

    async def lookup_nation(self, user_id: UserId, nation_id: NationId) -> Nation:
        """Look up any nation, reading through the cache.

        Fetching uncached or stale nations uses the caller's stored API key.

        Raises:
            NotFoundError: If the nation is not cached and cannot be fetched
        """
        with logfire.span(
            "account_service.lookup_nation", user_id=str(user_id), nation_id=nation_id
        ):
            nation = await self.nation_repository.find_by_id(nation_id)
            if nation is not None and not nation.is_stale(self.nation_cache_ttl):
                return nation

            user = await self.get_by_id(user_id)
            api_key = self._decrypt_api_key(user)
            if api_key:
                try:
                    snapshot = await self.nation_directory.fetch_by_id(
                        nation_id, api_key
                    )
                    nation = await self._cache(snapshot)
                except ExternalAuthError as e:
                    logfire.warn(
                        "Nation lookup failed", nation_id=nation_id, error=str(e)
                    )

            if nation is None:
                raise NotFoundError("Nation", str(nation_id))
            return nation

    async def get_user_by_nation_id(self, nation_id: NationId) -> User:
        """Get the user linked to a nation.

        Raises:
            NotFoundError: If no user is linked to the nation
        """
        user = await self.user_repository.find_by_nation_id(nation_id)
        if not user:
            raise NotFoundError("User", f"nation {nation_id}")
        return user

    async def search_users(
        self,
        nation_name: Optional[str] = None,
        leader_name: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: int = 50,
    ) -> list[User]:
        """Search users by nation name, leader name and verification status."""
        with logfire.span("account_service.search_users", limit=limit):
            users = await self.user_repository.search(
                nation_name=nation_name,
                leader_name=leader_name,
                verified=verified,
                limit=limit,
            )
            logfire.info("User search", count=len(users))
            return users

    async def _touch(self, user: User, **updates) -> User:
        """Save the user with last_active bumped and any extra updates."""
        now = _utcnow()
        return await self.user_repository.save(
            user.model_copy(update={**updates, "last_active": now, "updated_at": now})
        )

    async def _cache(self, snapshot: NationSnapshot) -> Nation:
        return await self.nation_repository.upsert(Nation.from_snapshot(snapshot))

    def _decrypt_api_key(self, user: User) -> Optional[str]:
        if not user.api_key:
            return None
        try:
            return self.api_key_cipher.decrypt(user.api_key)
        except DecryptionError:
            logfire.error("Failed to decrypt API key", user_id=str(user.id))
            return None
