# app/core/validation.py
# Task rule-set shared by REST and GraphQL; statuses use the stored hyphen form.

import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Mapping

from app.core.errors import BadInput
from app.models.task import TASK_STATUSES, DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

TASK_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

MISSING_FIELDS_MESSAGE = "Please provide title, description, and dueDate"


def validate_task_id(task_id: Any) -> str:
    if not isinstance(task_id, str) or not TASK_ID_PATTERN.match(task_id):
        raise BadInput("Invalid task ID format")
    # generated ids are lowercase and the database compares case-sensitively
    return task_id.lower()


def parse_due_date(value: Any) -> datetime:
    """Parse an ISO-8601 date or date/time into an aware UTC datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise BadInput("Invalid date format")
    else:
        raise BadInput("Invalid date format")

    try:
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # offset pushes the instant outside the datetime range
        raise BadInput("Invalid date format")


def _check_text(value: Any, label: str, max_length: int) -> str:
    # trimming only decides emptiness; the caller keeps the original string
    if not isinstance(value, str) or not value.strip():
        raise BadInput(f"{label} cannot be empty")
    if len(value) > max_length:
        raise BadInput(f"{label} cannot exceed {max_length} characters")
    return value


def validate_task_payload(payload: Mapping[str, Any], *, partial: bool = False) -> Dict[str, Any]:
    """
    Check a candidate task payload and return the fields to persist.

    ``partial=False`` is create mode: title, description and dueDate must be
    present. ``partial=True`` is update mode: every field is optional, but the
    ones supplied obey the same rules. ``None`` counts as absent. Keys other
    than the four task fields are dropped.
    """
    if not isinstance(payload, Mapping):
        raise BadInput("Request body must be a JSON object")

    present = {key: value for key, value in payload.items() if value is not None}
    fields: Dict[str, Any] = {}

    if "title" in present:
        fields["title"] = _check_text(present["title"], "Title", TITLE_MAX_LENGTH)
    elif not partial:
        raise BadInput(MISSING_FIELDS_MESSAGE)

    if "description" in present:
        fields["description"] = _check_text(
            present["description"], "Description", DESCRIPTION_MAX_LENGTH
        )
    elif not partial:
        raise BadInput(MISSING_FIELDS_MESSAGE)

    if "status" in present:
        if present["status"] not in TASK_STATUSES:
            raise BadInput("Status must be: pending, in-progress, or completed")
        fields["status"] = present["status"]

    if "dueDate" in present:
        fields["due_date"] = parse_due_date(present["dueDate"])
    elif not partial:
        raise BadInput(MISSING_FIELDS_MESSAGE)

    return fields
