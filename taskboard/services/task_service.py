"""
Task service: ownership-scoped CRUD over the task store.

Every operation takes the authenticated user's id and only ever sees tasks
owned by that id. A task belonging to another user is indistinguishable from
a missing one.
"""

import uuid
from typing import Any

from taskboard.db_handlers import TaskDBHandler
from taskboard.errors import NotFoundError, ValidationError
from taskboard.models import Task
from taskboard.schemas import TaskCreate, TaskUpdate
from taskboard.utils.logger import setup_logger

logger = setup_logger(__name__)

TASK_NOT_FOUND = "Task not found"


def parse_task_id(task_id: str | uuid.UUID) -> uuid.UUID:
    """Malformed ids cannot resolve to a task, so they are reported as not found."""
    if isinstance(task_id, uuid.UUID):
        return task_id
    try:
        return uuid.UUID(str(task_id))
    except ValueError as e:
        raise NotFoundError(TASK_NOT_FOUND) from e


class TaskService:
    def __init__(self, task_db_handler: TaskDBHandler):
        self.task_db_handler = task_db_handler

    async def list_tasks(self, owner_id: uuid.UUID) -> list[Task]:
        return await self.task_db_handler.get_tasks_by_owner(owner_id)

    async def get_task(self, owner_id: uuid.UUID, task_id: str | uuid.UUID) -> Task:
        task = await self.task_db_handler.get_owned_task_by_user(
            parse_task_id(task_id), owner_id
        )
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    async def create_task(self, owner_id: uuid.UUID, task_data: TaskCreate) -> Task:
        if task_data.title is None or not task_data.title.strip():
            raise ValidationError("Task title is required")

        task = await self.task_db_handler.create_task(
            {
                "title": task_data.title.strip(),
                "description": task_data.description,
                "completed": False,
                "owner_id": owner_id,
            }
        )
        logger.debug(f"Task {task.id} created for user {owner_id}")
        return task

    async def update_task(
        self,
        owner_id: uuid.UUID,
        task_id: str | uuid.UUID,
        task_data: TaskUpdate,
    ) -> Task:
        # Only fields present in the request; an empty body is a no-op update
        changes: dict[str, Any] = task_data.model_dump(exclude_unset=True)

        if "title" in changes:
            if changes["title"] is None or not changes["title"].strip():
                raise ValidationError("Task title is required")
            changes["title"] = changes["title"].strip()
        if "completed" in changes and changes["completed"] is None:
            raise ValidationError("Task completed flag must be true or false")

        if not changes:
            return await self.get_task(owner_id, task_id)

        task = await self.task_db_handler.update_owned_task(
            parse_task_id(task_id), owner_id, changes
        )
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    async def delete_task(self, owner_id: uuid.UUID, task_id: str | uuid.UUID) -> None:
        task_uuid = parse_task_id(task_id)
        if not await self.task_db_handler.delete_owned_task(task_uuid, owner_id):
            raise NotFoundError(TASK_NOT_FOUND)
        logger.debug(f"Task {task_uuid} deleted by user {owner_id}")
