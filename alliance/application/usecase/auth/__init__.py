"""Authentication use cases."""

from .discord_login import DiscordCallbackUseCase, InitiateDiscordLoginUseCase
from .get_current_user import GetCurrentUserUseCase
from .login import LoginUseCase
from .register import RegisterUseCase

__all__ = [
    "DiscordCallbackUseCase",
    "GetCurrentUserUseCase",
    "InitiateDiscordLoginUseCase",
    "LoginUseCase",
    "RegisterUseCase",
]
