"""Dashboard controller: owns the signed-in user's task collection."""

from __future__ import annotations

import logging
from typing import Any

from taskflow_mcp.auth import AuthContext, User
from taskflow_mcp.editor import TaskEditorDialog
from taskflow_mcp.enums import Priority, Severity, TaskStatus
from taskflow_mcp.errors import ErrorKind, TaskStoreError
from taskflow_mcp.models.inputs import FilterCriteria
from taskflow_mcp.models.task import Profile, TaskModel, TaskStats
from taskflow_mcp.ports import Notifier, TaskStore
from taskflow_mcp.utils.filters import compute_task_stats, filter_tasks

logger = logging.getLogger(__name__)


def format_status(status: TaskStatus) -> str:
    """Status value for display: 'in-progress' -> 'in progress'."""
    return status.value.replace("-", " ")


class DashboardController:
    """
    Authoritative in-memory task state for the current user.

    Every local mutation happens only after the store confirms it:
    - load replaces the collection
    - create prepends, update/status change replace in place, delete removes

    No subscription to the store: the collection is as fresh as the last
    load or the last successful mutation.
    """

    def __init__(self, store: TaskStore, auth: AuthContext, notifier: Notifier) -> None:
        self.store = store
        self.auth = auth
        self.notifier = notifier

        self.tasks: list[TaskModel] = []
        self.profile: Profile | None = None
        self.loading = False
        self.loaded = False
        self.filters = FilterCriteria()

        self.editing_task: TaskModel | None = None
        self.dialog_open = False
        self.editor = TaskEditorDialog(save=self._save_from_editor, notifier=notifier, on_close=self._editor_closed)

    # ---------- derived views ----------

    @property
    def filtered_tasks(self) -> list[TaskModel]:
        return filter_tasks(self.tasks, self.filters)

    @property
    def stats(self) -> TaskStats:
        return compute_task_stats(self.tasks)

    def set_filters(
        self,
        *,
        search: str | None = None,
        status: TaskStatus | str | None = None,
        priority: Priority | str | None = None,
    ) -> FilterCriteria:
        updates: dict[str, Any] = {}
        if search is not None:
            updates["search"] = search
        if status is not None:
            updates["status"] = status
        if priority is not None:
            updates["priority"] = priority
        self.filters = FilterCriteria.model_validate({**self.filters.model_dump(), **updates})
        return self.filters

    def get_task(self, task_id: str) -> TaskModel | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # ---------- loading ----------

    async def load(self) -> None:
        """Fetch profile and tasks for the signed-in user."""
        user = self.auth.user
        if user is None:
            return

        self.loading = True
        try:
            await self._load_profile(user.id)
            try:
                self.tasks = await self.store.list_tasks(user.id)
            except TaskStoreError as e:
                logger.error("Error fetching tasks: %r", e)
                self.notifier.notify("Error loading tasks", "Please try refreshing the page.", Severity.DESTRUCTIVE)
        finally:
            self.loading = False
            self.loaded = True

    async def _load_profile(self, user_id: str) -> None:
        try:
            self.profile = await self.store.get_profile(user_id)
        except TaskStoreError as e:
            # Header falls back to a generic name; no notification.
            logger.error("Error fetching profile: %r", e)

    # ---------- mutations ----------

    async def create_task(self, fields: dict[str, Any]) -> TaskModel:
        """
        Insert a task and prepend it to the collection.

        Raises:
            TaskStoreError: the insert failed or nobody is signed in
        """
        user = self._require_user()
        payload = {
            "title": fields["title"],
            "description": fields.get("description"),
            "status": fields.get("status") or TaskStatus.PENDING.value,
            "priority": fields.get("priority") or Priority.MEDIUM.value,
            "due_date": fields.get("due_date"),
        }
        try:
            task = await self.store.insert_task(user.id, payload)
        except TaskStoreError as e:
            logger.error("Error creating task: %r", e)
            raise

        self.tasks = [task, *self.tasks]
        return task

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> TaskModel | None:
        """
        Patch the targeted task and replace it in place.

        Does nothing and returns None when no task is targeted for editing.

        Raises:
            TaskStoreError: the update failed
        """
        if self.editing_task is None:
            logger.warning("update_task(%s) called with no task targeted for editing", task_id)
            return None

        try:
            task = await self.store.update_task(self._require_user().id, task_id, changes)
        except TaskStoreError as e:
            logger.error("Error updating task: %r", e)
            raise

        self._replace(task)
        self.editing_task = None
        return task

    async def delete_task(self, task_id: str) -> bool:
        try:
            await self.store.delete_task(self._require_user().id, task_id)
        except TaskStoreError as e:
            logger.error("Error deleting task: %r", e)
            self.notifier.notify("Error deleting task", "Please try again later.", Severity.DESTRUCTIVE)
            return False

        self.tasks = [t for t in self.tasks if t.id != task_id]
        self.notifier.notify("Task deleted", "The task has been removed successfully.")
        return True

    async def change_status(self, task_id: str, status: TaskStatus) -> TaskModel | None:
        try:
            task = await self.store.update_task(self._require_user().id, task_id, {"status": status.value})
        except TaskStoreError as e:
            logger.error("Error updating task status: %r", e)
            self.notifier.notify("Error updating task", "Please try again later.", Severity.DESTRUCTIVE)
            return None

        self._replace(task)
        self.notifier.notify("Task updated", f"Task status changed to {format_status(status)}.")
        return task

    def _require_user(self) -> User:
        user = self.auth.user
        if user is None:
            raise TaskStoreError(ErrorKind.UNAUTHENTICATED, "no signed-in user")
        return user

    def _replace(self, task: TaskModel) -> None:
        self.tasks = [task if t.id == task.id else t for t in self.tasks]

    # ---------- editor ----------

    def open_editor(self, task: TaskModel | None = None) -> TaskEditorDialog:
        self.editing_task = task
        self.dialog_open = True
        self.editor.open(task)
        return self.editor

    def close_editor(self) -> None:
        self.editor.close()

    def _editor_closed(self) -> None:
        self.dialog_open = False
        self.editing_task = None

    async def _save_from_editor(self, fields: dict[str, Any]) -> Any:
        # The dialog's own target decides create vs. update.
        target = self.editor.task
        if target is None:
            return await self.create_task(fields)
        self.editing_task = target
        return await self.update_task(target.id, fields)

    # ---------- session ----------

    async def sign_out(self) -> None:
        try:
            await self.auth.sign_out()
        except Exception as e:
            logger.error("Error signing out: %r", e)
            return

        self.tasks = []
        self.profile = None
        self.loaded = False
        self.close_editor()
        self.notifier.notify("Signed out", "You have been signed out successfully.")
