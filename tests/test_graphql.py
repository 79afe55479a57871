"""GraphQL surface mounted at /api/graphql."""
from sqlalchemy.exc import OperationalError

from app.crud.task import task as task_crud
from app.services import task_service

from .conftest import ALICE, BOB

TASK_FIELDS = "id title description status dueDate userId createdAt"

CREATE = f"""
mutation Create($input: CreateTaskInput!) {{
  createTask(input: $input) {{ success message data {{ {TASK_FIELDS} }} }}
}}
"""

UPDATE = f"""
mutation Update($id: ID!, $input: UpdateTaskInput!) {{
  updateTask(id: $id, input: $input) {{ success message data {{ {TASK_FIELDS} }} }}
}}
"""

DELETE = f"""
mutation Delete($id: ID!) {{
  deleteTask(id: $id) {{ success message data {{ {TASK_FIELDS} }} }}
}}
"""

TASK = f"""
query One($id: ID!) {{
  task(id: $id) {{ success data {{ {TASK_FIELDS} }} }}
}}
"""

TASKS = f"query {{ tasks {{ success count data {{ {TASK_FIELDS} }} }} }}"

ME = "query { me { id googleId email displayName firstName lastName picture createdAt lastLogin } }"

NEW_TASK = {"title": "Buy milk", "description": "2%", "dueDate": "2025-01-01"}


def gql(client, query, **variables):
    resp = client.post("/api/graphql", json={"query": query, "variables": variables})
    assert resp.status_code == 200, resp.text
    return resp.json()


def error_code(result):
    return result["errors"][0]["extensions"]["code"]


def create(client, **overrides):
    result = gql(client, CREATE, input={**NEW_TASK, **overrides})
    assert "errors" not in result, result
    return result["data"]["createTask"]["data"]


def test_anonymous_requests_are_unauthenticated(client):
    for query, variables in (
        (ME, {}),
        (TASKS, {}),
        (TASK, {"id": "65a1b2c3d4e5f60718293a4b"}),
        (CREATE, {"input": NEW_TASK}),
        (UPDATE, {"id": "65a1b2c3d4e5f60718293a4b", "input": {"title": "x"}}),
        (DELETE, {"id": "65a1b2c3d4e5f60718293a4b"}),
    ):
        result = gql(client, query, **variables)
        assert error_code(result) == "UNAUTHENTICATED"
        assert result["errors"][0]["message"] == "Authentication required"


def test_me(client, login):
    login(ALICE)
    me = gql(client, ME)["data"]["me"]
    assert me["googleId"] == "google-alice"
    assert me["email"] == "alice@gmail.com"
    assert me["firstName"] == "Alice"


def test_create_without_status_reads_back_pending(client, login):
    login(ALICE)
    created = create(client)
    assert created["status"] == "pending"

    fetched = gql(client, TASK, id=created["id"])["data"]["task"]
    assert fetched == {"success": True, "data": created}
    assert client.get(f"/api/tasks/{created['id']}").json()["data"]["status"] == "pending"


def test_in_progress_is_translated_both_ways(client, login):
    login(ALICE)
    created = create(client, status="in_progress")
    assert created["status"] == "in_progress"
    assert client.get(f"/api/tasks/{created['id']}").json()["data"]["status"] == "in-progress"

    rest_created = client.post("/api/tasks", json={**NEW_TASK, "status": "in-progress"}).json()["data"]
    fetched = gql(client, TASK, id=rest_created["id"])["data"]["task"]["data"]
    assert fetched["status"] == "in_progress"


def test_tasks_lists_only_own_tasks(client, login):
    login(ALICE)
    first = create(client, title="first")
    second = create(client, title="second")
    login(BOB)
    create(client, title="bob's")

    login(ALICE)
    tasks = gql(client, TASKS)["data"]["tasks"]
    assert tasks["success"] is True
    assert tasks["count"] == 2
    assert [t["id"] for t in tasks["data"]] == [second["id"], first["id"]]


def test_create_validation_errors(client, login):
    login(ALICE)
    result = gql(client, CREATE, input={**NEW_TASK, "title": "   "})
    assert error_code(result) == "BAD_USER_INPUT"
    assert result["errors"][0]["message"] == "Title cannot be empty"

    result = gql(client, CREATE, input={**NEW_TASK, "title": "x" * 101})
    assert result["errors"][0]["message"] == "Title cannot exceed 100 characters"

    result = gql(client, CREATE, input={**NEW_TASK, "dueDate": "tomorrow-ish"})
    assert result["errors"][0]["message"] == "Invalid date format"

    result = gql(client, CREATE, input={**NEW_TASK, "dueDate": "0001-01-01T00:00:00+01:00"})
    assert error_code(result) == "BAD_USER_INPUT"
    assert result["errors"][0]["message"] == "Invalid date format"


def test_partial_update(client, login):
    login(ALICE)
    created = create(client)
    result = gql(client, UPDATE, id=created["id"], input={"status": "completed"})
    updated = result["data"]["updateTask"]
    assert updated["message"] == "Task updated successfully"
    assert updated["data"]["status"] == "completed"
    for key in ("title", "description", "dueDate", "createdAt"):
        assert updated["data"][key] == created[key]


def test_malformed_id(client, login):
    login(ALICE)
    result = gql(client, TASK, id="zzzz")
    assert error_code(result) == "BAD_USER_INPUT"
    assert result["errors"][0]["message"] == "Invalid task ID format"


def test_other_users_task_is_not_found(client, login):
    login(ALICE)
    created = create(client)

    login(BOB)
    for query, variables in (
        (TASK, {"id": created["id"]}),
        (UPDATE, {"id": created["id"], "input": {"title": "mine"}}),
        (DELETE, {"id": created["id"]}),
    ):
        result = gql(client, query, **variables)
        assert error_code(result) == "NOT_FOUND"
        assert result["errors"][0]["message"] == "Task not found or access denied"


def test_delete(client, login):
    login(ALICE)
    created = create(client)
    deleted = gql(client, DELETE, id=created["id"])["data"]["deleteTask"]
    assert deleted == {"success": True, "message": "Task deleted successfully", "data": created}
    assert error_code(gql(client, TASK, id=created["id"])) == "NOT_FOUND"


def test_store_failure_is_internal_error(client, login, monkeypatch):
    login(ALICE)

    async def broken(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection reset"))

    monkeypatch.setattr(task_crud, "list_by_owner", broken)
    result = gql(client, TASKS)
    assert error_code(result) == "INTERNAL_SERVER_ERROR"
    assert result["errors"][0]["message"] == "Error retrieving tasks"


def test_unexpected_failure_is_internal_error_without_details(client, login, monkeypatch):
    login(ALICE)

    async def broken(*args, **kwargs):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(task_crud, "list_by_owner", broken)
    resp = client.post("/api/graphql", json={"query": TASKS})
    assert resp.status_code == 200
    assert "secret detail" not in resp.text
    result = resp.json()
    assert error_code(result) == "INTERNAL_SERVER_ERROR"
    assert result["errors"][0]["message"] == "Internal server error"


def test_store_level_rejection_is_bad_user_input(client, login, monkeypatch):
    login(ALICE)
    monkeypatch.setattr(
        task_service,
        "validate_task_payload",
        lambda payload, partial=False: {"title": "x" * 101, "description": "d", "due_date": None},
    )
    result = gql(client, CREATE, input=NEW_TASK)
    error = result["errors"][0]
    assert error["message"] == "Validation error"
    assert error["extensions"] == {"code": "BAD_USER_INPUT", "detail": "Title cannot exceed 100 characters"}
