# app/crud/task.py
# Every lookup filters on task id and owner id in the same statement.
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.task import Task, check_task_fields, utcnow


class CRUDTask:
    async def list_by_owner(self, db: AsyncSession, owner_id: str) -> List[Task]:
        q = select(Task).where(Task.user_id == owner_id).order_by(Task.created_at.desc())
        res = await db.execute(q)
        return list(res.scalars().all())

    async def get_by_owner_and_id(self, db: AsyncSession, owner_id: str, task_id: str) -> Optional[Task]:
        q = select(Task).where(Task.id == task_id, Task.user_id == owner_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def create(self, db: AsyncSession, owner_id: str, fields: Dict[str, Any]) -> Task:
        task = Task(
            title=fields.get("title"),
            description=fields.get("description"),
            status=fields.get("status") or "pending",
            due_date=fields.get("due_date"),
            user_id=owner_id,
            created_at=utcnow(),
        )
        db.add(task)
        await db.commit()
        await db.refresh(task)
        return task

    async def update_by_owner_and_id(
        self, db: AsyncSession, owner_id: str, task_id: str, fields: Dict[str, Any]
    ) -> Optional[Task]:
        values = check_task_fields(fields)
        if not values:
            return await self.get_by_owner_and_id(db, owner_id, task_id)

        q = (
            update(Task)
            .where(Task.id == task_id, Task.user_id == owner_id)
            .values(**values)
            .returning(Task)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        res = await db.execute(q)
        task = res.scalars().first()
        await db.commit()
        return task

    async def delete_by_owner_and_id(self, db: AsyncSession, owner_id: str, task_id: str) -> Optional[Task]:
        q = (
            delete(Task)
            .where(Task.id == task_id, Task.user_id == owner_id)
            .returning(Task)
            .execution_options(synchronize_session=False)
        )
        res = await db.execute(q)
        task = res.scalars().first()
        await db.commit()
        return task

task = CRUDTask()
