"""Bearer token authentication for protected routes."""
import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import decode_access_token
from db.session import get_async_session
from models.user import User
from services.auth_service import get_user

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_async_session),
) -> User:
    """
    Resolve the acting user from the Authorization header.

    Raises 401 if the header is missing, the token is invalid or expired, or
    the user it names no longer exists.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = int(payload["sub"])
    except jwt.ExpiredSignatureError as e:
        raise _unauthorized("Token has expired") from e
    except (jwt.InvalidTokenError, ValueError) as e:
        logger.info("Rejected bearer token: %s", type(e).__name__)
        raise _unauthorized("Invalid token") from e

    user = await get_user(db, user_id)
    if user is None:
        raise _unauthorized("Invalid token")
    return user
