"""Utility functions for TaskFlow MCP."""

from taskflow_mcp.utils.filters import compute_task_stats, filter_tasks
from taskflow_mcp.utils.formatters import (
    _format_card_concise,
    _format_card_markdown,
    _format_cards_concise,
    _format_dashboard_json,
    _format_dashboard_markdown,
    _format_field_errors,
    _format_notifications,
)
from taskflow_mcp.utils.parsers import _parse_profile, _parse_task, _parse_tasks
from taskflow_mcp.utils.validation import normalize_draft, validate_task_draft

__all__ = [
    "filter_tasks",
    "compute_task_stats",
    "validate_task_draft",
    "normalize_draft",
    "_parse_task",
    "_parse_tasks",
    "_parse_profile",
    "_format_card_concise",
    "_format_card_markdown",
    "_format_cards_concise",
    "_format_dashboard_json",
    "_format_dashboard_markdown",
    "_format_field_errors",
    "_format_notifications",
]
