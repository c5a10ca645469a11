"""MCP tool definitions for TaskFlow."""

# Import all tools to register them with the MCP server
from taskflow_mcp.tools.dashboard import taskflow_dashboard, taskflow_get_task, taskflow_refresh
from taskflow_mcp.tools.tasks import (
    taskflow_create_task,
    taskflow_delete_task,
    taskflow_edit_task,
    taskflow_set_status,
    taskflow_sign_out,
)

__all__ = [
    # Read tools
    "taskflow_dashboard",
    "taskflow_refresh",
    "taskflow_get_task",
    # Mutating tools
    "taskflow_create_task",
    "taskflow_edit_task",
    "taskflow_delete_task",
    "taskflow_set_status",
    "taskflow_sign_out",
]
