"""In-memory repository implementations for testing."""

from .nation import InMemoryNationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryNationRepository",
    "InMemoryUserRepository",
]
