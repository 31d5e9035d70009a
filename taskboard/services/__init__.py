"""
Taskboard services: the auth service (registration, login, token minting)
and the ownership-scoped task service. Both receive their DB handler through
the constructor.
"""

from taskboard.services.auth_service import AuthService
from taskboard.services.task_service import TaskService

__all__ = ["AuthService", "TaskService"]
