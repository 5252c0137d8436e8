"""User use cases."""

from .get_user_by_nation import GetUserByNationUseCase
from .search_users import SearchUsersUseCase

__all__ = ["GetUserByNationUseCase", "SearchUsersUseCase"]
