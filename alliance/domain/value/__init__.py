"""Domain value objects."""

from alliance.domain.value.identifiers import NationId, UserId
from alliance.domain.value.types import (
    DiscordProfile,
    Email,
    NationSnapshot,
    password_policy_errors,
)

__all__ = [
    # Identifiers
    "UserId",
    "NationId",
    # Types
    "Email",
    "DiscordProfile",
    "NationSnapshot",
    "password_policy_errors",
]
