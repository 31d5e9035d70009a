"""
Database models for Taskboard.

Architecture: User → Task. Every task is owned by exactly one user.
"""

from taskboard.models.task import Task
from taskboard.models.user import User

__all__ = [
    "User",
    "Task",
]
