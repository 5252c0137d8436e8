"""Domain services."""

from .account_service import AccountService, CreateUserData, VerificationResult
from .auth_service import AuthService, OAuthClient
from .base import Service
from .jwt_service import JWTService
from .nation_directory import NationDirectory

__all__ = [
    "AccountService",
    "AuthService",
    "CreateUserData",
    "JWTService",
    "NationDirectory",
    "OAuthClient",
    "Service",
    "VerificationResult",
]
