"""Test configuration and fixtures.

Secrets are required settings, so test values are set before any
application module is imported.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-jwt-secret-0123456789abcdef0123456789")
os.environ.setdefault(
    "AUTH__ENCRYPTION_KEY", "test-encryption-key-0123456789abcdef012345"
)
# Lowest allowed cost factor keeps hashing fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "10")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)
