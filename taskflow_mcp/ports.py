"""
Ports (interfaces) the dashboard core depends on.

The controller talks to Protocols instead of concrete services, so the
remote store and the notification surface are swappable and easy to fake.
"""

from __future__ import annotations

from typing import Any, Protocol

from taskflow_mcp.enums import Severity
from taskflow_mcp.models.task import Profile, TaskModel


class TaskStore(Protocol):
    """Row-based task persistence, scoped per user.

    Every method raises TaskStoreError on failure. Rows owned by
    another user raise not-found.
    """

    async def list_tasks(self, user_id: str) -> list[TaskModel]: ...

    async def get_profile(self, user_id: str) -> Profile: ...

    async def insert_task(self, user_id: str, fields: dict[str, Any]) -> TaskModel: ...

    async def update_task(self, user_id: str, task_id: str, changes: dict[str, Any]) -> TaskModel: ...

    async def delete_task(self, user_id: str, task_id: str) -> None: ...


class Notifier(Protocol):
    """Transient user-facing messages (toasts). Fire and forget."""

    def notify(self, title: str, description: str = "", severity: Severity = Severity.DEFAULT) -> None: ...
