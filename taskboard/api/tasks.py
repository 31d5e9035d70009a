"""
Task API routes - CRUD over the authenticated user's own tasks.

Every route depends on get_current_user, and every service call is scoped to
that user's id.
"""

from fastapi import APIRouter, Depends, Path, status

from taskboard.dependencies.auth import get_current_user
from taskboard.dependencies.services import get_task_service
from taskboard.models import User
from taskboard.schemas import MessageResponse, TaskCreate, TaskResponse, TaskUpdate
from taskboard.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    current_user: User = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    """List the current user's tasks, newest first."""
    tasks = await task_service.list_tasks(current_user.id)
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    current_user: User = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    task = await task_service.create_task(current_user.id, task_data)
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str = Path(..., description="The ID of the task to retrieve"),
    current_user: User = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    task = await task_service.get_task(current_user.id, task_id)
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_data: TaskUpdate,
    task_id: str = Path(..., description="The ID of the task to modify"),
    current_user: User = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    """Apply any subset of title, description and completed to a task."""
    task = await task_service.update_task(current_user.id, task_id, task_data)
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str = Path(..., description="The ID of the task to delete"),
    current_user: User = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    await task_service.delete_task(current_user.id, task_id)
    return MessageResponse(message="Task deleted")
