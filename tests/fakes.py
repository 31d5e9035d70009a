# tests/fakes.py

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from taskboard.errors import ConflictError

_clock = itertools.count()
_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


def _now() -> datetime:
    # Strictly increasing so "newest first" ordering is deterministic
    return _EPOCH + timedelta(seconds=next(_clock))


@dataclass
class FakeUser:
    username: str
    email: str
    mobile: str
    hashed_password: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class FakeTask:
    title: str
    owner_id: uuid.UUID
    description: str | None = None
    completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


class FakeUserDBHandler:
    """In-memory stand-in for UserDBHandler, enforcing the same unique fields."""

    def __init__(self) -> None:
        self.users: dict[uuid.UUID, FakeUser] = {}

    async def get(self, id: uuid.UUID) -> FakeUser | None:
        return self.users.get(id)

    async def get_user_by_username(self, username: str) -> FakeUser | None:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_user_by_email(self, email: str) -> FakeUser | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def create_user(self, obj_dict: dict[str, Any]) -> FakeUser:
        if await self.get_user_by_username(obj_dict["username"]) or (
            await self.get_user_by_email(obj_dict["email"])
        ):
            raise ConflictError("User already exists")
        user = FakeUser(**obj_dict)
        self.users[user.id] = user
        return user


class FakeTaskDBHandler:
    """In-memory stand-in for TaskDBHandler."""

    def __init__(self) -> None:
        self.tasks: dict[uuid.UUID, FakeTask] = {}
        self.deleted: list[uuid.UUID] = []

    async def create_task(self, obj_dict: dict[str, Any]) -> FakeTask:
        task = FakeTask(**obj_dict)
        self.tasks[task.id] = task
        return task

    async def get_tasks_by_owner(self, owner_id: uuid.UUID) -> list[FakeTask]:
        owned = [t for t in self.tasks.values() if t.owner_id == owner_id]
        return sorted(owned, key=lambda t: t.created_at, reverse=True)

    async def get_owned_task_by_user(
        self, task_id: uuid.UUID, owner_id: uuid.UUID
    ) -> FakeTask | None:
        task = self.tasks.get(task_id)
        if task is None or task.owner_id != owner_id:
            return None
        return task

    async def update_owned_task(
        self, task_id: uuid.UUID, owner_id: uuid.UUID, update_data: dict[str, Any]
    ) -> FakeTask | None:
        task = await self.get_owned_task_by_user(task_id, owner_id)
        if task is None:
            return None
        for key, value in update_data.items():
            setattr(task, key, value)
        task.updated_at = _now()
        return task

    async def delete_owned_task(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> bool:
        if await self.get_owned_task_by_user(task_id, owner_id) is None:
            return False
        del self.tasks[task_id]
        self.deleted.append(task_id)
        return True
