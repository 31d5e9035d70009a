from fastapi import Depends

from taskboard.db_handlers import TaskDBHandler, UserDBHandler
from taskboard.dependencies.auth import get_user_db_handler
from taskboard.services.auth_service import AuthService
from taskboard.services.task_service import TaskService


def get_task_db_handler() -> TaskDBHandler:
    return TaskDBHandler()


def get_auth_service(
    user_db_handler: UserDBHandler = Depends(get_user_db_handler),
) -> AuthService:
    """FastAPI dependency providing the auth service over the user store."""
    return AuthService(user_db_handler)


def get_task_service(
    task_db_handler: TaskDBHandler = Depends(get_task_db_handler),
) -> TaskService:
    """FastAPI dependency providing the task service over the task store."""
    return TaskService(task_db_handler)
