"""Bearer token authentication for API routes."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from alliance.domain.service import JWTService
from alliance.domain.value import UserId
from alliance.util.jwt import JWTError, TokenPayload

logger = logging.getLogger(__name__)


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Get the token from an ``Authorization: Bearer <token>`` header.

    Returns None when the header is absent. A header that is present but not
    a bearer credential counts as an invalid token.

    Raises:
        HTTPException: 403 when the header is not ``Bearer <token>``
    """
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.debug("Authorization header is not a bearer token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    return parts[1]


async def require_session(
    request: Request,
    token: Optional[str] = Depends(bearer_token),
) -> TokenPayload:
    """Verify the bearer token of an authenticated route.

    Raises:
        HTTPException: 401 when no token is sent, 403 when it does not verify
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
        )

    jwt_service = await request.state.dishka_container.get(JWTService)
    try:
        payload = jwt_service.verify_token(token)
        UUID(payload.user_id)
    except (JWTError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    return payload


def require_user_id(
    session: TokenPayload = Depends(require_session),
) -> UserId:
    """User id of the authenticated caller."""
    return UserId(UUID(session.user_id))


CurrentSession = Annotated[TokenPayload, Depends(require_session)]
CurrentUserId = Annotated[UserId, Depends(require_user_id)]
