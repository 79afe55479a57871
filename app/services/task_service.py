# app/services/task_service.py
# Operations shared by the REST routes and the GraphQL resolvers.
import logging
from contextlib import asynccontextmanager
from typing import Any, List, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InternalError, NotFound
from app.core.validation import validate_task_id, validate_task_payload
from app.crud.task import task as task_crud
from app.models.task import Task

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Task not found or access denied"


@asynccontextmanager
async def _store_errors(db: AsyncSession, message: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s", message)
        await db.rollback()
        raise InternalError(message) from exc


async def list_tasks(db: AsyncSession, owner_id: str) -> List[Task]:
    async with _store_errors(db, "Error retrieving tasks"):
        return await task_crud.list_by_owner(db, owner_id)


async def get_task(db: AsyncSession, owner_id: str, task_id: Any) -> Task:
    task_id = validate_task_id(task_id)
    async with _store_errors(db, "Error retrieving task"):
        found = await task_crud.get_by_owner_and_id(db, owner_id, task_id)
    if found is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return found


async def create_task(db: AsyncSession, owner_id: str, payload: Mapping[str, Any]) -> Task:
    fields = validate_task_payload(payload)
    async with _store_errors(db, "Error creating task"):
        created = await task_crud.create(db, owner_id, fields)
    logger.info("Task %s created by user %s", created.id, owner_id)
    return created


async def update_task(db: AsyncSession, owner_id: str, task_id: Any, payload: Mapping[str, Any]) -> Task:
    task_id = validate_task_id(task_id)
    fields = validate_task_payload(payload, partial=True)
    async with _store_errors(db, "Error updating task"):
        updated = await task_crud.update_by_owner_and_id(db, owner_id, task_id, fields)
    if updated is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    logger.info("Task %s updated by user %s (%s)", task_id, owner_id, ", ".join(sorted(fields)) or "no fields")
    return updated


async def delete_task(db: AsyncSession, owner_id: str, task_id: Any) -> Task:
    task_id = validate_task_id(task_id)
    async with _store_errors(db, "Error deleting task"):
        deleted = await task_crud.delete_by_owner_and_id(db, owner_id, task_id)
    if deleted is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    logger.info("Task %s deleted by user %s", task_id, owner_id)
    return deleted
