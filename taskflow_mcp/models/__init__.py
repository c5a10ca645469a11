"""Pydantic models for TaskFlow MCP."""

from taskflow_mcp.models.inputs import (
    CreateTaskInput,
    DashboardInput,
    DeleteTaskInput,
    EditTaskInput,
    FilterCriteria,
    GetTaskInput,
    RefreshInput,
    SetStatusInput,
    SignOutInput,
    TaskDraft,
)
from taskflow_mcp.models.task import EDITABLE_FIELDS, Profile, TaskModel, TaskStats
from taskflow_mcp.models.views import StatusAction, TaskCardView

__all__ = [
    # Task models
    "EDITABLE_FIELDS",
    "TaskModel",
    "Profile",
    "TaskStats",
    # Dashboard state models
    "TaskDraft",
    "FilterCriteria",
    # Tool input models
    "DashboardInput",
    "RefreshInput",
    "GetTaskInput",
    "CreateTaskInput",
    "EditTaskInput",
    "DeleteTaskInput",
    "SetStatusInput",
    "SignOutInput",
    # View models
    "StatusAction",
    "TaskCardView",
]
