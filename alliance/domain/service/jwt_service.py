"""JWT token domain service."""

import logfire

from alliance.config import AuthSettings
from alliance.domain.error import InvalidStateError
from alliance.domain.model.user import User
from alliance.util.jwt import (
    JWTError,
    TokenPayload,
    create_state_token,
    create_token,
    verify_state_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service issuing and validating signed tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self,
        user_id: str,
        verified: bool,
        email: str | None = None,
        username: str | None = None,
    ) -> str:
        """Create session token.

        Args:
            user_id: User ID
            verified: Whether the user has a linked nation
            email: User email (optional)
            username: Display identity (optional)

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(
                user_id,
                verified,
                self.auth_settings,
                email=email,
                username=username,
            )
            logfire.info("JWT token created", user_id=user_id, verified=verified)
            return token

    def create_token_for_user(self, user: User) -> str:
        """Create session token carrying the user's current claims."""
        return self.create_token(
            user_id=str(user.id),
            verified=user.verified,
            email=user.email,
            username=user.display_name,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify session token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError:
                logfire.warn("JWT token verification failed")
                raise
            logfire.debug("JWT token verified", user_id=payload.user_id)
            return payload

    def create_state_token(self) -> str:
        """Create a short-lived OAuth anti-forgery state token."""
        return create_state_token(self.auth_settings)

    def verify_state_token(self, state: str) -> None:
        """Verify an OAuth state token.

        Raises:
            InvalidStateError: If the state is invalid, expired, or not a state token
        """
        try:
            verify_state_token(state, self.auth_settings)
        except JWTError:
            logfire.warn("OAuth state verification failed")
            raise InvalidStateError()
