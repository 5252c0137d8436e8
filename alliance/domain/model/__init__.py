"""Domain model entities."""

from alliance.domain.model.nation import Nation
from alliance.domain.model.user import User

__all__ = [
    "User",
    "Nation",
]
