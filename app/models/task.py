# app/models/task.py
import secrets
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import CheckConstraint, Column, DateTime, String
from sqlalchemy.orm import validates

from app.core.errors import ValidationFailed
from app.database import Base

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"
TASK_STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED)


def generate_task_id() -> str:
    return secrets.token_hex(12)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def check_task_field(key: str, value: Any) -> Any:
    """Table-level constraints, enforced on every write whatever the caller checked."""
    if key in ("title", "description"):
        limit = TITLE_MAX_LENGTH if key == "title" else DESCRIPTION_MAX_LENGTH
        if not isinstance(value, str) or not value.strip():
            raise ValidationFailed(f"Task {key} is required")
        if len(value) > limit:
            raise ValidationFailed(f"{key.capitalize()} cannot exceed {limit} characters")
    elif key == "status":
        if value not in TASK_STATUSES:
            raise ValidationFailed(f"`{value}` is not a valid enum value for path `status`")
    elif key == "due_date":
        if not isinstance(value, datetime):
            raise ValidationFailed("Due date is required")
    elif key == "user_id":
        if not isinstance(value, str) or not value:
            raise ValidationFailed("User ID is required")
    return value


def check_task_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: check_task_field(key, value) for key, value in fields.items()}


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in-progress', 'completed')", name="ck_tasks_status"
        ),
    )

    id = Column(String(24), primary_key=True, default=generate_task_id)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_PENDING)
    due_date = Column(DateTime(timezone=True), nullable=False)
    # owner's users.id kept as a plain string, no foreign key
    user_id = Column(String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    @validates("title", "description", "status", "due_date", "user_id")
    def _validate_field(self, key, value):
        return check_task_field(key, value)
