"""Mock providers for testing."""

from .discord import MockDiscordProvider
from .pnw import MockPnWProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockDiscordProvider",
    "MockPnWProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
