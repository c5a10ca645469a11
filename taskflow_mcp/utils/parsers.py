"""Parser helpers for stored task rows."""

from typing import Any

from taskflow_mcp.models.task import Profile, TaskModel


def _parse_task(row: dict[str, Any]) -> TaskModel:
    """
    Parse a stored row into a TaskModel.

    Args:
        row: Dictionary as held by the task store

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(row)


def _parse_tasks(rows: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of stored rows into TaskModel instances.

    Args:
        rows: List of dictionaries as held by the task store

    Returns:
        List of TaskModel instances
    """
    return [TaskModel.model_validate(r) for r in rows]


def _parse_profile(row: dict[str, Any]) -> Profile:
    return Profile.model_validate(row)
