"""Modal editor for creating and editing a task."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from taskflow_mcp.enums import Severity
from taskflow_mcp.errors import TaskStoreError
from taskflow_mcp.models.inputs import TaskDraft
from taskflow_mcp.models.task import EDITABLE_FIELDS, TaskModel
from taskflow_mcp.ports import Notifier
from taskflow_mcp.utils.validation import normalize_draft, validate_task_draft

logger = logging.getLogger(__name__)

SaveCallback = Callable[[dict[str, Any]], Awaitable[Any]]


def _draft_from_task(task: TaskModel | None) -> TaskDraft:
    if task is None:
        return TaskDraft()
    return TaskDraft(
        title=task.title,
        description=task.description or "",
        status=task.status.value,
        priority=task.priority.value,
        due_date=task.due_date.isoformat() if task.due_date else "",
    )


class TaskEditorDialog:
    """
    Form state for one task.

    Create mode when no target task is set, edit mode otherwise. Reopening
    always resets the form from the target and clears errors; closing drops
    the target, and a closed dialog never saves.
    """

    def __init__(
        self,
        save: SaveCallback,
        notifier: Notifier,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._save = save
        self._notifier = notifier
        self._on_close = on_close
        self.is_open = False
        self.task: TaskModel | None = None
        self.form = TaskDraft()
        self.errors: dict[str, str] = {}
        self.busy = False

    @property
    def editing(self) -> bool:
        return self.task is not None

    @property
    def title(self) -> str:
        return "Edit Task" if self.editing else "Create New Task"

    @property
    def submit_label(self) -> str:
        if self.busy:
            return "Saving..."
        return "Update Task" if self.editing else "Create Task"

    def open(self, task: TaskModel | None = None) -> None:
        self.task = task
        self.form = _draft_from_task(task)
        self.errors = {}
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.task = None
        if self._on_close is not None:
            self._on_close()

    def set_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        setattr(self.form, name, value)
        self.errors.pop(name, None)

    async def submit(self) -> bool:
        """
        Validate and save the form.

        Returns:
            True when the task was saved and the dialog closed
        """
        if self.busy or not self.is_open:
            return False

        self.errors = validate_task_draft(self.form)
        if self.errors:
            return False

        editing = self.editing
        self.busy = True
        try:
            await self._save(normalize_draft(self.form))
        except TaskStoreError as e:
            logger.warning("Saving task failed: %r", e)
            self._notifier.notify("Something went wrong", "Please try again later.", Severity.DESTRUCTIVE)
            return False
        finally:
            self.busy = False

        if editing:
            self._notifier.notify("Task updated!", "Your task has been updated successfully.")
        else:
            self._notifier.notify("Task created!", "Your new task has been created successfully.")
        self.close()
        return True
