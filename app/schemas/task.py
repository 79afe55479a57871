# app/schemas/task.py
from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TaskRead(BaseModel):
    id: str
    title: str
    description: str
    status: str
    due_date: datetime
    user_id: str
    created_at: datetime

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class TaskResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: TaskRead | None = None


class TaskListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[TaskRead]
