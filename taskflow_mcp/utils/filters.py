"""Derived views over the task collection."""

from collections.abc import Sequence

from taskflow_mcp.enums import ALL, TaskStatus
from taskflow_mcp.models.inputs import FilterCriteria
from taskflow_mcp.models.task import TaskModel, TaskStats


def _matches_search(task: TaskModel, term: str) -> bool:
    term = term.lower()
    if term in task.title.lower():
        return True
    return bool(task.description) and term in task.description.lower()


def filter_tasks(tasks: Sequence[TaskModel], criteria: FilterCriteria) -> list[TaskModel]:
    """
    Apply search, status and priority filters (all must match).

    Order of the input is preserved.
    """
    return [
        t
        for t in tasks
        if _matches_search(t, criteria.search)
        and (criteria.status == ALL or t.status == criteria.status)
        and (criteria.priority == ALL or t.priority == criteria.priority)
    ]


def compute_task_stats(tasks: Sequence[TaskModel]) -> TaskStats:
    """Count tasks in total and per status."""
    stats = TaskStats(total=len(tasks))
    for t in tasks:
        if t.status == TaskStatus.PENDING:
            stats.pending += 1
        elif t.status == TaskStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif t.status == TaskStatus.COMPLETED:
            stats.completed += 1
    return stats
