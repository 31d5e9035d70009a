from taskboard.dependencies.auth import get_current_user, get_user_db_handler
from taskboard.dependencies.services import (
    get_auth_service,
    get_task_db_handler,
    get_task_service,
)

__all__ = [
    "get_current_user",
    "get_user_db_handler",
    "get_task_db_handler",
    "get_auth_service",
    "get_task_service",
]
