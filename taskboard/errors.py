"""
Taskboard error hierarchy.

Services raise these; the exception handlers registered in ``main.py`` turn
them into JSON responses of the form ``{"detail": <message>}``.

Hierarchy:
    TaskboardError
    ├── ValidationError       400  missing or empty required field
    ├── ConflictError         400  duplicate username or email
    ├── AuthError             401  bad login credentials
    ├── UnauthenticatedError  401  missing token or unknown token subject
    ├── ForbiddenError        403  invalid signature or expired token
    ├── NotFoundError         404  unknown resource id
    └── ServerError           500  unexpected store failure
"""

from __future__ import annotations

from fastapi import status


class TaskboardError(Exception):
    """Base error carrying a human-readable message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None

    def to_dict(self) -> dict[str, str]:
        return {"detail": self.message}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ValidationError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class AuthError(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class UnauthenticatedError(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class ForbiddenError(TaskboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class NotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ServerError(TaskboardError):
    pass
