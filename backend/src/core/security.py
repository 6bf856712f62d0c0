"""Password hashing (Argon2 via pwdlib) and JWT signing (PyJWT)."""
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import jwt
from pwdlib import PasswordHash

from core.config import get_settings


@lru_cache
def get_password_hasher() -> PasswordHash:
    """Get the shared Argon2 hasher with pwdlib's recommended parameters."""
    return PasswordHash.recommended()


def hash_password(password: str) -> str:
    """Return a salted Argon2 digest of the plaintext password."""
    return get_password_hasher().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored Argon2 digest."""
    return get_password_hasher().verify(password, password_hash)


def create_access_token(user_id: int, email: str) -> str:
    """
    Sign a bearer token for the given user.

    The `sub` claim carries the user id as a string (RFC 7519 requires a
    string subject, and PyJWT enforces it on decode).
    """
    settings = get_settings()
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the token claims.

    Raises:
        jwt.InvalidTokenError: (or a subclass such as ExpiredSignatureError)
            if the token cannot be trusted.
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
