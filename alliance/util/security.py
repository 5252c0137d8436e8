"""Password hashing and API key encryption."""

import asyncio
import base64
import hashlib

from cryptography.fernet import Fernet, InvalidToken
from passlib.context import CryptContext

from alliance.config import AuthSettings


class PasswordHasher:
    """Salted bcrypt password hashing.

    Hashing and verification run in a worker thread, bcrypt is deliberately
    slow and would otherwise block the event loop.
    """

    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "PasswordHasher":
        return cls(rounds=settings.bcrypt_rounds)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time check of a password against a stored hash."""
        try:
            return self._context.verify(password, hashed)
        except ValueError:
            # Unrecognised or corrupt hash
            return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify, password, hashed)


class DecryptionError(Exception):
    """Stored ciphertext could not be decrypted."""

    pass


class ApiKeyCipher:
    """Symmetric encryption for PnW API keys stored on user records.

    The Fernet key is derived from the configured encryption secret, so any
    secret of sufficient length can be used.
    """

    def __init__(self, secret: str) -> None:
        key = base64.urlsafe_b64encode(hashlib.sha256(secret.encode("utf-8")).digest())
        self._fernet = Fernet(key)

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "ApiKeyCipher":
        return cls(settings.encryption_key)

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("utf-8")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a stored value.

        Raises:
            DecryptionError: If the value was not produced with this secret
        """
        try:
            return self._fernet.decrypt(ciphertext.encode("utf-8")).decode("utf-8")
        except InvalidToken as e:
            raise DecryptionError("Failed to decrypt stored value") from e
