# app/graphql/types.py
"""
GraphQL object and input types.

The GraphQL ``TaskStatus`` enum spells the in-progress state ``in_progress``;
the database keeps ``in-progress``. ``status_to_graphql`` and
``status_from_graphql`` are the only places that translate between them.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry

from app.models.task import Task
from app.models.user import User


@strawberry.enum
class TaskStatus(Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


def status_to_graphql(value: str) -> TaskStatus:
    return TaskStatus(value.replace("-", "_"))


def status_from_graphql(value: TaskStatus) -> str:
    return value.value.replace("_", "-")


def _timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else ""


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    google_id: str
    email: str
    display_name: str
    first_name: Optional[str]
    last_name: Optional[str]
    picture: Optional[str]
    created_at: str
    last_login: str

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            google_id=user.google_id,
            email=user.email,
            display_name=user.display_name,
            first_name=user.first_name,
            last_name=user.last_name,
            picture=user.picture,
            created_at=_timestamp(user.created_at),
            last_login=_timestamp(user.last_login),
        )


@strawberry.type(name="Task")
class TaskType:
    id: strawberry.ID
    title: str
    description: str
    status: TaskStatus
    due_date: str
    user_id: str
    created_at: str

    @classmethod
    def from_model(cls, task: Task) -> "TaskType":
        return cls(
            id=strawberry.ID(task.id),
            title=task.title,
            description=task.description,
            status=status_to_graphql(task.status),
            due_date=_timestamp(task.due_date),
            user_id=task.user_id,
            created_at=_timestamp(task.created_at),
        )


@strawberry.input
class CreateTaskInput:
    title: str
    description: str
    due_date: str
    status: Optional[TaskStatus] = None


@strawberry.input
class UpdateTaskInput:
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[str] = None


@strawberry.type
class TaskResponse:
    success: bool
    message: Optional[str] = None
    data: Optional[TaskType] = None


@strawberry.type
class TasksResponse:
    success: bool
    count: int
    data: List[TaskType]
