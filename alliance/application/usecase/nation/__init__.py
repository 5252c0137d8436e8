"""Nation use cases."""

from .get_user_nation import GetUserNationUseCase
from .lookup_nation import LookupNationUseCase
from .refresh_nation import RefreshNationUseCase
from .verify_nation import VerifyNationUseCase

__all__ = [
    "GetUserNationUseCase",
    "LookupNationUseCase",
    "RefreshNationUseCase",
    "VerifyNationUseCase",
]
