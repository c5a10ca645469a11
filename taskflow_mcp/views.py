"""Task list view: per-card presentation flags and quick status actions."""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta, timezone

from taskflow_mcp.dashboard import DashboardController, format_status
from taskflow_mcp.enums import BadgeVariant, Priority, TaskStatus
from taskflow_mcp.models.task import TaskModel
from taskflow_mcp.models.views import StatusAction, TaskCardView

logger = logging.getLogger(__name__)

DUE_SOON_WINDOW = timedelta(days=3)

# Total mappings: every enum member has exactly one display value.
PRIORITY_BADGES: dict[Priority, BadgeVariant] = {
    Priority.HIGH: BadgeVariant.DESTRUCTIVE,
    Priority.MEDIUM: BadgeVariant.WARNING,
    Priority.LOW: BadgeVariant.SECONDARY,
}

STATUS_BADGES: dict[TaskStatus, BadgeVariant] = {
    TaskStatus.COMPLETED: BadgeVariant.DEFAULT,
    TaskStatus.IN_PROGRESS: BadgeVariant.SECONDARY,
    TaskStatus.PENDING: BadgeVariant.OUTLINE,
}

STATUS_ICONS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "[ ]",
    TaskStatus.IN_PROGRESS: "[~]",
    TaskStatus.COMPLETED: "[x]",
}

# Forward moves plus "reopen"; in-progress never goes back to pending here.
STATUS_ACTIONS: dict[TaskStatus, tuple[StatusAction, ...]] = {
    TaskStatus.PENDING: (
        StatusAction(label="Mark Complete", target=TaskStatus.COMPLETED),
        StatusAction(label="Start Task", target=TaskStatus.IN_PROGRESS),
    ),
    TaskStatus.IN_PROGRESS: (StatusAction(label="Mark Complete", target=TaskStatus.COMPLETED),),
    TaskStatus.COMPLETED: (StatusAction(label="Reopen", target=TaskStatus.PENDING),),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _due_at(task: TaskModel) -> datetime | None:
    # Calendar due dates count from midnight UTC.
    if task.due_date is None:
        return None
    return datetime.combine(task.due_date, time.min, tzinfo=timezone.utc)


def is_overdue(task: TaskModel, now: datetime | None = None) -> bool:
    due = _due_at(task)
    if due is None or task.status == TaskStatus.COMPLETED:
        return False
    return due < (now or _utcnow())


def is_due_soon(task: TaskModel, now: datetime | None = None) -> bool:
    due = _due_at(task)
    if due is None or task.status == TaskStatus.COMPLETED:
        return False
    return due < (now or _utcnow()) + DUE_SOON_WINDOW


def status_actions(status: TaskStatus) -> list[StatusAction]:
    return list(STATUS_ACTIONS[status])


def build_card(task: TaskModel, now: datetime | None = None) -> TaskCardView:
    now = now or _utcnow()
    overdue = is_overdue(task, now)
    return TaskCardView(
        task=task,
        overdue=overdue,
        due_soon=not overdue and is_due_soon(task, now),
        priority_variant=PRIORITY_BADGES[task.priority],
        status_variant=STATUS_BADGES[task.status],
        status_icon=STATUS_ICONS[task.status],
        status_label=format_status(task.status),
        actions=status_actions(task.status),
    )


class TaskListView:
    """
    Renders the controller's filtered tasks as cards.

    Holds the per-card "changing" guard: while a quick status change for a
    task is in flight, further quick changes on that card are refused.
    """

    def __init__(self, controller: DashboardController) -> None:
        self.controller = controller
        self.changing: set[str] = set()

    def cards(self, now: datetime | None = None) -> list[TaskCardView]:
        now = now or _utcnow()
        return [build_card(t, now) for t in self.controller.filtered_tasks]

    async def change_status(self, task_id: str, status: TaskStatus) -> bool:
        """
        Run a quick status action from a card.

        Returns:
            False when the card is busy, unknown, or does not offer the move
        """
        if task_id in self.changing:
            logger.debug("Status change for %s already in flight", task_id)
            return False

        task = self.controller.get_task(task_id)
        if task is None:
            return False
        if status not in {a.target for a in status_actions(task.status)}:
            return False

        self.changing.add(task_id)
        try:
            return await self.controller.change_status(task_id, status) is not None
        finally:
            self.changing.discard(task_id)
