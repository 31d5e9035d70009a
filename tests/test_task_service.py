"""Service-level tests for TaskService against the in-memory task store."""

import uuid

import pytest

from taskboard.errors import NotFoundError, ValidationError
from taskboard.schemas import TaskCreate, TaskUpdate
from taskboard.services.task_service import TaskService, parse_task_id

from .fakes import FakeTaskDBHandler

OWNER = uuid.uuid4()
OTHER = uuid.uuid4()


@pytest.fixture()
def service() -> TaskService:
    return TaskService(FakeTaskDBHandler())


@pytest.mark.asyncio
async def test_create_defaults_to_not_completed(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="buy milk"))

    assert task.title == "buy milk"
    assert task.description is None
    assert task.completed is False
    assert task.owner_id == OWNER


@pytest.mark.asyncio
@pytest.mark.parametrize("title", [None, "", "   "])
async def test_create_requires_title(service: TaskService, title):
    with pytest.raises(ValidationError):
        await service.create_task(OWNER, TaskCreate(title=title, description="x"))


@pytest.mark.asyncio
async def test_list_is_scoped_and_newest_first(service: TaskService):
    first = await service.create_task(OWNER, TaskCreate(title="first"))
    second = await service.create_task(OWNER, TaskCreate(title="second"))
    await service.create_task(OTHER, TaskCreate(title="not mine"))

    tasks = await service.list_tasks(OWNER)

    assert [t.id for t in tasks] == [second.id, first.id]


@pytest.mark.asyncio
async def test_toggling_completed_leaves_other_fields(service: TaskService):
    task = await service.create_task(
        OWNER, TaskCreate(title="buy milk", description="2 litres")
    )

    updated = await service.update_task(OWNER, task.id, TaskUpdate(completed=True))

    assert updated.completed is True
    assert updated.title == "buy milk"
    assert updated.description == "2 litres"


@pytest.mark.asyncio
async def test_update_title_and_description(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="old"))

    updated = await service.update_task(
        OWNER, str(task.id), TaskUpdate(title="new", description="details")
    )

    assert (updated.title, updated.description, updated.completed) == (
        "new",
        "details",
        False,
    )


@pytest.mark.asyncio
async def test_update_rejects_empty_title(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="keep"))

    with pytest.raises(ValidationError):
        await service.update_task(OWNER, task.id, TaskUpdate(title=""))
    assert (await service.get_task(OWNER, task.id)).title == "keep"


@pytest.mark.asyncio
async def test_update_rejects_null_completed(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="keep"))

    with pytest.raises(ValidationError):
        await service.update_task(
            OWNER, task.id, TaskUpdate.model_validate({"completed": None})
        )


@pytest.mark.asyncio
async def test_update_unknown_id_is_not_found(service: TaskService):
    with pytest.raises(NotFoundError):
        await service.update_task(OWNER, uuid.uuid4(), TaskUpdate(completed=True))


@pytest.mark.asyncio
async def test_other_users_task_is_not_found(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="private"))

    with pytest.raises(NotFoundError):
        await service.get_task(OTHER, task.id)
    with pytest.raises(NotFoundError):
        await service.update_task(OTHER, task.id, TaskUpdate(completed=True))
    with pytest.raises(NotFoundError):
        await service.delete_task(OTHER, task.id)

    assert (await service.get_task(OWNER, task.id)).completed is False


@pytest.mark.asyncio
async def test_delete_twice_fails_second_time(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="once"))

    await service.delete_task(OWNER, task.id)

    with pytest.raises(NotFoundError):
        await service.delete_task(OWNER, task.id)
    assert await service.list_tasks(OWNER) == []


def test_malformed_id_is_not_found():
    with pytest.raises(NotFoundError):
        parse_task_id("not-a-uuid")


def test_parse_task_id_accepts_uuid_and_string():
    task_id = uuid.uuid4()
    assert parse_task_id(task_id) == task_id
    assert parse_task_id(str(task_id)) == task_id


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_is_not_found(service: TaskService):
    task = await service.create_task(OWNER, TaskCreate(title="gone"))
    await service.task_db_handler.delete_owned_task(task.id, OWNER)

    with pytest.raises(NotFoundError):
        await service.update_task(OWNER, task.id, TaskUpdate(completed=True))
    assert task.id not in service.task_db_handler.tasks
