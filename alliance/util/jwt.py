"""JWT token utilities.

Two kinds of token are signed with the same secret and told apart by the
``typ`` claim: login sessions and short-lived OAuth state tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from alliance.config import AuthSettings

SESSION_TOKEN_TYPE = "session"
STATE_TOKEN_TYPE = "oauth_state"


class TokenPayload(BaseModel):
    """Session token payload."""

    user_id: str
    email: str | None = None
    username: str | None = None
    verified: bool
    exp: datetime


class JWTError(Exception):
    """JWT-related error.

    Raised for every kind of failure with the same message, so callers
    cannot tell a bad signature from an expired token.
    """

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


def _encode(payload: dict, settings: AuthSettings) -> str:
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def _decode(token: str, token_type: str, settings: AuthSettings) -> dict:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "typ"]},
        )
    except jwt.InvalidTokenError:
        raise JWTError()

    if payload.get("typ") != token_type:
        raise JWTError()

    return payload


def create_token(
    user_id: str,
    verified: bool,
    settings: AuthSettings,
    email: str | None = None,
    username: str | None = None,
    now: datetime | None = None,
) -> str:
    """Create a session token for the user.

    Args:
        user_id: User ID
        verified: Whether the user has a linked nation
        settings: Authentication settings
        email: User email (optional)
        username: Display identity (optional)
        now: Issue time, defaults to the current time

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.session_expiry_days)

    payload = {
        "typ": SESSION_TOKEN_TYPE,
        "user_id": user_id,
        "verified": verified,
        "iat": issued_at,
        "exp": expiry,
    }
    if email:
        payload["email"] = email
    if username:
        payload["username"] = username

    return _encode(payload, settings)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or not a session token
    """
    payload = _decode(token, SESSION_TOKEN_TYPE, settings)
    try:
        return TokenPayload(**payload)
    except ValueError:
        raise JWTError()


def create_state_token(settings: AuthSettings, now: datetime | None = None) -> str:
    """Create an OAuth anti-forgery state token.

    The token carries no user data, only its issue time.

    Args:
        settings: Authentication settings
        now: Issue time, defaults to the current time

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "typ": STATE_TOKEN_TYPE,
        "ts": int(issued_at.timestamp() * 1000),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.state_expiry_minutes),
    }
    return _encode(payload, settings)


def verify_state_token(token: str, settings: AuthSettings) -> None:
    """Verify an OAuth state token.

    Raises:
        JWTError: If token is invalid, expired, or not a state token
    """
    _decode(token, STATE_TOKEN_TYPE, settings)
