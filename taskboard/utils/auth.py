"""
Authentication utilities with JWT tokens and bcrypt password hashing.

- bcrypt with a per-password salt for hashing
- HS256 (configurable) for JWT signing
- Fixed token lifetime, 24 hours unless configured otherwise
- UTC timestamps for the expiry claim
"""

from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

from taskboard.config import settings


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    pwd_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    hashed_password = bcrypt.hashpw(password=pwd_bytes, salt=salt)
    return hashed_password.decode("utf-8")


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
    secret_key: str | None = None,
) -> str:
    """Create a JWT access token with the given data."""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode.update({"exp": datetime.now(UTC) + expires_delta})
    return jwt.encode(
        to_encode,
        secret_key or settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str, secret_key: str | None = None) -> dict | None:
    """Decode and verify a JWT access token. Returns None if it is invalid or expired."""
    try:
        return jwt.decode(
            token,
            secret_key or settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None


def create_user_token(user_id) -> str:
    """Mint a bearer token whose subject is the given user id."""
    return create_access_token(data={"sub": str(user_id)})
