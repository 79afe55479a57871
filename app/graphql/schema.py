# app/graphql/schema.py
import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from app.core.errors import TaskAPIError
from app.graphql.context import get_context
from app.graphql.types import (
    CreateTaskInput,
    TaskResponse,
    TasksResponse,
    TaskType,
    UpdateTaskInput,
    UserType,
    status_from_graphql,
)
from app.models.user import User
from app.services import task_service

logger = logging.getLogger(__name__)


def _require_user(info: Info) -> User:
    user = info.context.user
    if user is None:
        raise GraphQLError("Authentication required", extensions={"code": "UNAUTHENTICATED"})
    return user


@contextmanager
def _as_graphql_errors():
    try:
        yield
    except TaskAPIError as exc:
        extensions = {"code": exc.code}
        if exc.error:
            extensions["detail"] = exc.error
        raise GraphQLError(exc.message, extensions=extensions) from exc
    except Exception as exc:
        logger.exception("Unhandled error in GraphQL resolver")
        raise GraphQLError(
            "Internal server error", extensions={"code": "INTERNAL_SERVER_ERROR"}
        ) from exc


def _payload(input: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": input.title,
        "description": input.description,
        "dueDate": input.due_date,
    }
    if input.status is not None:
        payload["status"] = status_from_graphql(input.status)
    return payload


@strawberry.type
class Query:
    @strawberry.field
    async def me(self, info: Info) -> Optional[UserType]:
        return UserType.from_model(_require_user(info))

    @strawberry.field
    async def tasks(self, info: Info) -> TasksResponse:
        user = _require_user(info)
        with _as_graphql_errors():
            tasks = await task_service.list_tasks(info.context.db, str(user.id))
        return TasksResponse(success=True, count=len(tasks), data=[TaskType.from_model(t) for t in tasks])

    @strawberry.field
    async def task(self, info: Info, id: strawberry.ID) -> TaskResponse:
        user = _require_user(info)
        with _as_graphql_errors():
            found = await task_service.get_task(info.context.db, str(user.id), str(id))
        return TaskResponse(success=True, data=TaskType.from_model(found))


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_task(self, info: Info, input: CreateTaskInput) -> TaskResponse:
        user = _require_user(info)
        with _as_graphql_errors():
            created = await task_service.create_task(info.context.db, str(user.id), _payload(input))
        return TaskResponse(success=True, message="Task created successfully", data=TaskType.from_model(created))

    @strawberry.mutation
    async def update_task(self, info: Info, id: strawberry.ID, input: UpdateTaskInput) -> TaskResponse:
        user = _require_user(info)
        with _as_graphql_errors():
            updated = await task_service.update_task(info.context.db, str(user.id), str(id), _payload(input))
        return TaskResponse(success=True, message="Task updated successfully", data=TaskType.from_model(updated))

    @strawberry.mutation
    async def delete_task(self, info: Info, id: strawberry.ID) -> TaskResponse:
        user = _require_user(info)
        with _as_graphql_errors():
            deleted = await task_service.delete_task(info.context.db, str(user.id), str(id))
        return TaskResponse(success=True, message="Task deleted successfully", data=TaskType.from_model(deleted))


schema = strawberry.Schema(query=Query, mutation=Mutation)


def build_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)
