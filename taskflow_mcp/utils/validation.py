"""Task form validation."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from taskflow_mcp.enums import Priority, TaskStatus
from taskflow_mcp.models.inputs import TaskDraft

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def _parse_due_date(value: str) -> date:
    """Parse an ISO date or date-time string into a calendar date."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        # Python 3.10 does not accept a "Z" suffix.
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value).date()


class _TaskFormSchema(BaseModel):
    """Field rules for the task editor form."""

    title: str
    description: str | None = None
    status: str
    priority: str
    due_date: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("required", "Title is required")
        if len(v) > TITLE_MAX_LENGTH:
            raise PydanticCustomError("too_long", "Title must be less than 100 characters")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise PydanticCustomError("too_long", "Description must be less than 500 characters")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        if v not in {s.value for s in TaskStatus}:
            raise PydanticCustomError("enum", "Status must be one of: pending, in-progress, completed")
        return v

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str) -> str:
        if v not in {p.value for p in Priority}:
            raise PydanticCustomError("enum", "Priority must be one of: low, medium, high")
        return v

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            _parse_due_date(v)
        except ValueError:
            raise PydanticCustomError("date", "Due date must be a valid date") from None
        return v


def validate_task_draft(draft: TaskDraft) -> dict[str, str]:
    """
    Validate editor form values.

    Empty optional strings count as absent. Only the first violation per
    field is reported.

    Args:
        draft: Current form values

    Returns:
        Mapping of field name to message; empty when the draft is valid
    """
    try:
        _TaskFormSchema(
            title=draft.title,
            description=draft.description or None,
            status=draft.status,
            priority=draft.priority,
            due_date=draft.due_date or None,
        )
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            if err["loc"]:
                errors.setdefault(str(err["loc"][0]), err["msg"])
        return errors
    return {}


def normalize_draft(draft: TaskDraft) -> dict[str, Any]:
    """
    Turn a validated draft into store fields.

    Empty description and due date become None; due dates are sent as
    YYYY-MM-DD.
    """
    return {
        "title": draft.title,
        "description": draft.description or None,
        "status": draft.status,
        "priority": draft.priority,
        "due_date": _parse_due_date(draft.due_date).isoformat() if draft.due_date else None,
    }
