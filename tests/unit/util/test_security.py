"""Unit tests for password hashing and API key encryption."""

import pytest

from alliance.util.security import ApiKeyCipher, DecryptionError, PasswordHasher


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_verifies_and_is_salted(self):
        hasher = PasswordHasher(rounds=10)

        first = hasher.hash("Abcdef12")
        second = hasher.hash("Abcdef12")

        assert first != "Abcdef12"
        assert first != second
        assert hasher.verify("Abcdef12", first)
        assert hasher.verify("Abcdef12", second)

    def test_wrong_password_fails(self):
        hasher = PasswordHasher(rounds=10)
        hashed = hasher.hash("Abcdef12")

        assert not hasher.verify("Abcdef13", hashed)

    def test_corrupt_hash_fails_without_raising(self):
        hasher = PasswordHasher(rounds=10)

        assert not hasher.verify("Abcdef12", "not-a-bcrypt-hash")

    def test_uses_configured_cost_factor(self):
        hashed = PasswordHasher(rounds=11).hash("Abcdef12")

        assert hashed.split("$")[2] == "11"

    @pytest.mark.asyncio
    async def test_async_variants(self):
        hasher = PasswordHasher(rounds=10)

        hashed = await hasher.hash_async("Abcdef12")

        assert await hasher.verify_async("Abcdef12", hashed)
        assert not await hasher.verify_async("wrong", hashed)


class TestApiKeyCipher:
    """Tests for ApiKeyCipher."""

    def test_ciphertext_hides_plaintext(self):
        cipher = ApiKeyCipher("s" * 32)

        encrypted = cipher.encrypt("my-pnw-key")

        assert "my-pnw-key" not in encrypted
        assert cipher.decrypt(encrypted) == "my-pnw-key"

    def test_other_secret_cannot_decrypt(self):
        encrypted = ApiKeyCipher("s" * 32).encrypt("my-pnw-key")

        with pytest.raises(DecryptionError):
            ApiKeyCipher("t" * 32).decrypt(encrypted)

    def test_garbage_cannot_decrypt(self):
        with pytest.raises(DecryptionError):
            ApiKeyCipher("s" * 32).decrypt("plain-text-key")
