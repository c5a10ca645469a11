"""Core task models for TaskFlow MCP."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from taskflow_mcp.enums import Priority, TaskStatus

EDITABLE_FIELDS = ("title", "description", "status", "priority", "due_date")


class TaskModel(BaseModel):
    """Model representing a stored task owned by one user."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime
    user_id: str


class Profile(BaseModel):
    """Read-only profile of the signed-in user, used for header display."""

    id: str
    full_name: str | None = None
    email: str | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email or "User"


class TaskStats(BaseModel):
    """Aggregate counts over the full (unfiltered) task collection."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
