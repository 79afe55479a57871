# app/routes/tasks.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.database import get_db
from app.models.user import User
from app.schemas.task import TaskListResponse, TaskRead, TaskResponse
from app.services import task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"], dependencies=[Depends(get_current_user)])


def _owner(current_user: User) -> str:
    return str(current_user.id)


@router.get("", response_model=TaskListResponse)
async def list_tasks(current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    tasks = await task_service.list_tasks(db, _owner(current_user))
    return TaskListResponse(count=len(tasks), data=[TaskRead.model_validate(t) for t in tasks])


@router.get("/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
async def get_task(task_id: str, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    found = await task_service.get_task(db, _owner(current_user), task_id)
    return TaskResponse(data=TaskRead.model_validate(found))


@router.post("", response_model=TaskResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    created = await task_service.create_task(db, _owner(current_user), payload)
    return TaskResponse(message="Task created successfully", data=TaskRead.model_validate(created))


@router.put("/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
async def update_task(
    task_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    updated = await task_service.update_task(db, _owner(current_user), task_id, payload)
    return TaskResponse(message="Task updated successfully", data=TaskRead.model_validate(updated))


@router.delete("/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
async def delete_task(task_id: str, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    deleted = await task_service.delete_task(db, _owner(current_user), task_id)
    return TaskResponse(message="Task deleted successfully", data=TaskRead.model_validate(deleted))
