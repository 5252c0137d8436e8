"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from datetime import datetime

from pydantic import field_validator

from alliance.domain.value.common import RootValueObject, ValueObject
from alliance.domain.value.identifiers import NationId

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PASSWORD_MIN_LENGTH = 8
# bcrypt ignores everything past 72 bytes
PASSWORD_MAX_BYTES = 72


class Email(RootValueObject[str]):
    """Email address in basic ``local@domain.tld`` form."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v


def password_policy_errors(password: str) -> list[str]:
    """Check a password against the password policy.

    Returns:
        Human-readable policy violations, empty if the password is acceptable
    """
    errors: list[str] = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")

    return errors


class DiscordProfile(ValueObject):
    """Discord user information returned by the OAuth flow."""

    discord_id: str  # Permanent snowflake id
    username: str  # Display name, can change over time
    email: str | None = None
    avatar: str | None = None


class NationSnapshot(ValueObject):
    """Nation attributes as returned by the Politics & War API."""

    nation_id: NationId
    nation_name: str
    leader_name: str
    alliance_id: int | None = None
    alliance_name: str | None = None
    score: float | None = None
    cities: int | None = None
    color: str | None = None
    continent: str | None = None
    war_policy: str | None = None
    domestic_policy: str | None = None
    last_active: datetime | None = None
