"""
MCP Server for the TaskFlow dashboard.

This server exposes a personal task dashboard: it loads the signed-in user's
tasks, filters them and counts them per status, and creates, edits, deletes
and moves tasks through the same form and card actions as the web app.
"""

# Re-export enums and errors
from taskflow_mcp.enums import ALL, BadgeVariant, Priority, ResponseFormat, Severity, TaskStatus
from taskflow_mcp.errors import ErrorKind, TaskStoreError

# Re-export models
from taskflow_mcp.models import (
    CreateTaskInput,
    DashboardInput,
    DeleteTaskInput,
    EditTaskInput,
    FilterCriteria,
    GetTaskInput,
    Profile,
    RefreshInput,
    SetStatusInput,
    SignOutInput,
    StatusAction,
    TaskCardView,
    TaskDraft,
    TaskModel,
    TaskStats,
)

# Re-export the dashboard core
from taskflow_mcp.auth import AuthContext, User
from taskflow_mcp.dashboard import DashboardController, format_status
from taskflow_mcp.editor import TaskEditorDialog
from taskflow_mcp.notifications import Notification, NotificationLog
from taskflow_mcp.runtime import DashboardApp, build_app, get_app, set_app
from taskflow_mcp.store import InMemoryTaskStore
from taskflow_mcp.views import TaskListView, build_card, is_due_soon, is_overdue, status_actions

# Re-export MCP server instance
from taskflow_mcp.server import mcp

# Re-export tools
from taskflow_mcp.tools import (
    taskflow_create_task,
    taskflow_dashboard,
    taskflow_delete_task,
    taskflow_edit_task,
    taskflow_get_task,
    taskflow_refresh,
    taskflow_set_status,
    taskflow_sign_out,
)

# Re-export utilities
from taskflow_mcp.utils import compute_task_stats, filter_tasks, normalize_draft, validate_task_draft

__all__ = [
    # Enums and errors
    "ALL",
    "BadgeVariant",
    "Priority",
    "ResponseFormat",
    "Severity",
    "TaskStatus",
    "ErrorKind",
    "TaskStoreError",
    # Models
    "TaskModel",
    "Profile",
    "TaskStats",
    "TaskDraft",
    "FilterCriteria",
    "StatusAction",
    "TaskCardView",
    # Tool input models
    "DashboardInput",
    "RefreshInput",
    "GetTaskInput",
    "CreateTaskInput",
    "EditTaskInput",
    "DeleteTaskInput",
    "SetStatusInput",
    "SignOutInput",
    # Dashboard core
    "AuthContext",
    "User",
    "DashboardController",
    "format_status",
    "TaskEditorDialog",
    "Notification",
    "NotificationLog",
    "InMemoryTaskStore",
    "TaskListView",
    "build_card",
    "is_overdue",
    "is_due_soon",
    "status_actions",
    "DashboardApp",
    "build_app",
    "get_app",
    "set_app",
    # Utility functions
    "filter_tasks",
    "compute_task_stats",
    "validate_task_draft",
    "normalize_draft",
    # Tools
    "taskflow_dashboard",
    "taskflow_refresh",
    "taskflow_get_task",
    "taskflow_create_task",
    "taskflow_edit_task",
    "taskflow_delete_task",
    "taskflow_set_status",
    "taskflow_sign_out",
    # MCP server instance
    "mcp",
]
