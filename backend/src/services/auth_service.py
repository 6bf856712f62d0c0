"""Service layer for signup, signin and token issuance."""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import AuthenticationError, ConflictError
from core.security import create_access_token, hash_password, verify_password
from db.errors import is_unique_violation
from models.user import User
from schemas.auth import TokenResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
CREDENTIALS_TAKEN = "Credentials taken"


async def signup(db: AsyncSession, email: str, password: str) -> TokenResponse:
    """
    Register a new user and return a token for it.

    Raises:
        ConflictError: If the email is already registered. Detected from the
            database unique constraint, so concurrent signups for the same
            email resolve to exactly one winner.
    """
    # Argon2 is deliberately expensive; keep it off the event loop
    password_hash = await asyncio.to_thread(hash_password, password)

    user = User(email=email, hash=password_hash)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        if is_unique_violation(e):
            logger.info("Signup rejected: email already registered")
            raise ConflictError(CREDENTIALS_TAKEN) from e
        raise

    logger.info("Created user %s", user.id)
    return sign_token(user.id, user.email)


async def signin(db: AsyncSession, email: str, password: str) -> TokenResponse:
    """
    Verify credentials and return a token.

    Both failure paths raise the same AuthenticationError message.
    """
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None:
        logger.info("Signin failed: unknown email")
        raise AuthenticationError(INVALID_CREDENTIALS)

    matches = await asyncio.to_thread(verify_password, password, user.hash)
    if not matches:
        logger.info("Signin failed: wrong password for user %s", user.id)
        raise AuthenticationError(INVALID_CREDENTIALS)

    return sign_token(user.id, user.email)


def sign_token(user_id: int, email: str) -> TokenResponse:
    """Sign a bearer token embedding the user id (`sub`) and email."""
    return TokenResponse(access_token=create_access_token(user_id, email))


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by ID."""
    return await db.get(User, user_id)
