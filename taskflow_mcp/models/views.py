"""Presentation models derived from tasks for the list view."""

from pydantic import BaseModel, Field

from taskflow_mcp.enums import BadgeVariant, TaskStatus
from taskflow_mcp.models.task import TaskModel


class StatusAction(BaseModel):
    """A quick status transition offered on a task card."""

    label: str
    target: TaskStatus


class TaskCardView(BaseModel):
    """Everything a card needs to render one task."""

    task: TaskModel
    overdue: bool = False
    due_soon: bool = False
    priority_variant: BadgeVariant
    status_variant: BadgeVariant
    status_icon: str
    status_label: str
    actions: list[StatusAction] = Field(default_factory=list)
