from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from taskboard.db_handlers.base import BaseDBHandler, check_local_db
from taskboard.models.task import Task
from taskboard.utils.logger import setup_logger

logger = setup_logger("task_db_handler")


class TaskDBHandler(BaseDBHandler[Task]):
    def __init__(self):
        super().__init__(Task)

    @check_local_db
    async def create_task(
        self, obj_dict: dict[str, Any], *, db: AsyncSession = None
    ) -> Task:
        """Create a new task."""
        return await self.create(obj_dict, db=db)

    @check_local_db
    async def get_tasks_by_owner(
        self, owner_id: uuid.UUID, *, db: AsyncSession = None
    ) -> list[Task]:
        """All tasks owned by the user, newest first."""
        return await self.get_multi_by_attributes(
            db=db,
            owner_id=owner_id,
            order_by=[Task.created_at.desc(), Task.id],
        )

    @check_local_db
    async def get_owned_task_by_user(
        self, task_id: uuid.UUID, owner_id: uuid.UUID, *, db: AsyncSession = None
    ) -> Task | None:
        """Get a task only if it belongs to the given user."""
        stmt = select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        result = await db.execute(stmt)
        return result.scalars().first()

    @check_local_db
    async def update_owned_task(
        self,
        task_id: uuid.UUID,
        owner_id: uuid.UUID,
        update_data: dict[str, Any],
        *,
        db: AsyncSession = None,
    ) -> Task | None:
        """
        Apply a partial update to a task owned by the user in a single
        statement. Returns None when no owned row matched, including a task
        deleted concurrently.
        """
        stmt = (
            update(Task)
            .where(Task.id == task_id, Task.owner_id == owner_id)
            .values(**update_data)
            .returning(Task)
        )
        try:
            result = await db.execute(stmt)
            task = result.scalars().first()
            await db.commit()
            return task
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error updating task {task_id}: {e}", exc_info=True)
            raise

    @check_local_db
    async def delete_owned_task(
        self, task_id: uuid.UUID, owner_id: uuid.UUID, *, db: AsyncSession = None
    ) -> bool:
        """Hard-delete a task owned by the user. Returns False if no row matched."""
        stmt = delete(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        try:
            result = await db.execute(stmt)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error deleting task {task_id}: {e}", exc_info=True)
            raise
        return result.rowcount > 0
