"""Form, filter and tool input models for TaskFlow MCP."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from taskflow_mcp.enums import Priority, ResponseFormat, TaskStatus

# ============================================================================
# Dashboard State Models
# ============================================================================


class TaskDraft(BaseModel):
    """Raw editor form values. Unvalidated; every field is a plain string."""

    model_config = ConfigDict(validate_assignment=True)

    title: str = ""
    description: str = ""
    status: str = TaskStatus.PENDING.value
    priority: str = Priority.MEDIUM.value
    due_date: str = ""


class FilterCriteria(BaseModel):
    """Transient dashboard filters, AND-combined."""

    search: str = ""
    status: TaskStatus | Literal["all"] = "all"
    priority: Priority | Literal["all"] = "all"


# ============================================================================
# Tool Input Models
# ============================================================================


class DashboardInput(BaseModel):
    """Input model for rendering the dashboard."""

    model_config = ConfigDict(str_strip_whitespace=True)

    search: str = Field(default="", description="Case-insensitive text matched against title and description")
    status: TaskStatus | Literal["all"] = Field(
        default="all",
        description="Status filter: pending, in-progress, completed, or all",
    )
    priority: Priority | Literal["all"] = Field(
        default="all",
        description="Priority filter: low, medium, high, or all",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class RefreshInput(BaseModel):
    """Input model for reloading tasks from the store."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class GetTaskInput(BaseModel):
    """Input model for showing a single task card."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id as shown on its card", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class CreateTaskInput(BaseModel):
    """Input model for creating a task through the editor form.

    Field constraints are checked by the form validator, so invalid values are
    reported as inline field errors instead of being rejected here.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(default="", description="Task title (required, at most 100 characters)")
    description: str | None = Field(default=None, description="Optional description (at most 500 characters)")
    status: str | None = Field(default=None, description="pending (default), in-progress or completed")
    priority: str | None = Field(default=None, description="low, medium (default) or high")
    due_date: str | None = Field(default=None, description="Optional due date, e.g. '2025-03-31'")


class EditTaskInput(BaseModel):
    """Input model for editing a task through the editor form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to edit", min_length=1)
    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(default=None, description="New description (use empty string to remove)")
    status: str | None = Field(default=None, description="New status: pending, in-progress or completed")
    priority: str | None = Field(default=None, description="New priority: low, medium or high")
    due_date: str | None = Field(default=None, description="New due date (use empty string to remove)")


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to delete", min_length=1)


class SetStatusInput(BaseModel):
    """Input model for a quick status action on a card."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task id to update", min_length=1)
    status: TaskStatus = Field(..., description="Target status offered by the card's quick actions")


class SignOutInput(BaseModel):
    """Input model for ending the session."""

    model_config = ConfigDict(str_strip_whitespace=True)
    # No parameters needed - the session is global to the server
