"""
Authentication dependencies for FastAPI route protection.

Status contract for bearer tokens:
    - no token                          -> 401
    - bad signature / malformed / expired -> 403
    - valid token for an unknown user   -> 401
"""

import uuid

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard.db_handlers import UserDBHandler
from taskboard.errors import ForbiddenError, UnauthenticatedError
from taskboard.models import User
from taskboard.utils.auth import decode_access_token
from taskboard.utils.logger import setup_logger

logger = setup_logger("dependencies.auth")

# auto_error is off so a missing header maps to our own 401
security = HTTPBearer(auto_error=False)


def get_user_db_handler() -> UserDBHandler:
    return UserDBHandler()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    user_db_handler: UserDBHandler = Depends(get_user_db_handler),
) -> User:
    """
    Dependency to get the current authenticated user from the bearer token.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise ForbiddenError("Invalid or expired token")

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError as e:
        raise UnauthenticatedError("Could not validate credentials") from e

    user = await user_db_handler.get(user_id)
    if user is None:
        logger.info(f"Token subject {user_id} no longer resolves to a user")
        raise UnauthenticatedError("User not found")

    return user
