"""In-memory implementation of the remote task store."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from taskflow_mcp.errors import ErrorKind, TaskStoreError
from taskflow_mcp.models.task import EDITABLE_FIELDS, Profile, TaskModel
from taskflow_mcp.utils.parsers import _parse_profile, _parse_task, _parse_tasks

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskStore:
    """
    Row store with the same contract as the hosted tasks/profiles tables.

    - rows are plain dicts; callers only ever see parsed models
    - ids and timestamps are assigned here, never by the caller
    - every read and write is scoped to one user; other users' rows are not found
    - list_tasks returns one user's rows, newest first
    """

    def __init__(self) -> None:
        self._tasks: dict[str, dict[str, Any]] = {}
        self._profiles: dict[str, dict[str, Any]] = {}

    # ---------- profiles ----------

    def add_profile(self, user_id: str, *, full_name: str | None = None, email: str | None = None) -> Profile:
        row = {"id": user_id, "full_name": full_name, "email": email}
        self._profiles[user_id] = row
        return _parse_profile(row)

    async def get_profile(self, user_id: str) -> Profile:
        row = self._profiles.get(user_id)
        if row is None:
            raise TaskStoreError(ErrorKind.NOT_FOUND, f"profile {user_id!r} not found")
        return _parse_profile(row)

    # ---------- tasks ----------

    async def list_tasks(self, user_id: str) -> list[TaskModel]:
        rows = [r for r in reversed(list(self._tasks.values())) if r["user_id"] == user_id]
        # Stable sort; ties keep the most recently inserted row first.
        rows.sort(key=lambda r: r["created_at"], reverse=True)
        return _parse_tasks(rows)

    async def insert_task(self, user_id: str, fields: dict[str, Any]) -> TaskModel:
        self._check_fields(fields)
        if not fields.get("title"):
            raise TaskStoreError(ErrorKind.VALIDATION_REJECTED, "title is required")

        now = _utcnow()
        row = {
            "id": str(uuid.uuid4()),
            "title": fields["title"],
            "description": fields.get("description"),
            "status": fields.get("status") or "pending",
            "priority": fields.get("priority") or "medium",
            "due_date": fields.get("due_date"),
            "created_at": now,
            "updated_at": now,
            "user_id": user_id,
        }
        task = self._validate(row)
        self._tasks[task.id] = task.model_dump()
        logger.debug("Inserted task %s for user %s", task.id, user_id)
        return task

    async def update_task(self, user_id: str, task_id: str, changes: dict[str, Any]) -> TaskModel:
        self._check_fields(changes)
        row = self._owned_row(user_id, task_id)

        task = self._validate({**row, **changes, "updated_at": _utcnow()})
        self._tasks[task_id] = task.model_dump()
        logger.debug("Updated task %s: %s", task_id, sorted(changes))
        return task

    async def delete_task(self, user_id: str, task_id: str) -> None:
        self._owned_row(user_id, task_id)
        del self._tasks[task_id]
        logger.debug("Deleted task %s", task_id)

    # ---------- helpers ----------

    def _owned_row(self, user_id: str, task_id: str) -> dict[str, Any]:
        row = self._tasks.get(task_id)
        if row is None or row["user_id"] != user_id:
            raise TaskStoreError(ErrorKind.NOT_FOUND, f"task {task_id!r} not found")
        return row

    @staticmethod
    def _check_fields(fields: dict[str, Any]) -> None:
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise TaskStoreError(ErrorKind.VALIDATION_REJECTED, f"unknown fields: {', '.join(sorted(unknown))}")

    @staticmethod
    def _validate(row: dict[str, Any]) -> TaskModel:
        try:
            return _parse_task(row)
        except ValidationError as e:
            raise TaskStoreError(ErrorKind.VALIDATION_REJECTED, str(e)) from e
