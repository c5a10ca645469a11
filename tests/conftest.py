"""Pytest configuration and fixtures for taskflow-mcp tests."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from taskflow_mcp import (
    AuthContext,
    DashboardController,
    InMemoryTaskStore,
    NotificationLog,
    TaskListView,
    User,
)
from taskflow_mcp.runtime import DashboardApp, set_app

USER_ID = "user-1"
BASE_TIME = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def seed_task(store: InMemoryTaskStore, user_id: str = USER_ID, minutes: int = 0, **fields) -> str:
    """Put a row straight into the store, created `minutes` after BASE_TIME."""
    task_id = fields.pop("id", None) or str(uuid.uuid4())
    created = BASE_TIME + timedelta(minutes=minutes)
    store._tasks[task_id] = {
        "id": task_id,
        "title": fields.pop("title", "Task"),
        "description": fields.pop("description", None),
        "status": fields.pop("status", "pending"),
        "priority": fields.pop("priority", "medium"),
        "due_date": fields.pop("due_date", None),
        "created_at": created,
        "updated_at": created,
        "user_id": user_id,
    }
    return task_id


@pytest.fixture
def store():
    """Store with a profile for the test user."""
    s = InMemoryTaskStore()
    s.add_profile(USER_ID, full_name="Ada Lovelace", email="ada@example.com")
    return s


@pytest.fixture
def seeded_store(store):
    """Three tasks for the test user (2 pending, 1 completed) and one for somebody else."""
    seed_task(store, minutes=1, id="t-milk", title="Buy milk", description="Semi-skimmed", priority="low")
    seed_task(store, minutes=2, id="t-report", title="Write report", description="Quarterly numbers", priority="high")
    seed_task(store, minutes=3, id="t-gym", title="Gym", status="completed")
    seed_task(store, user_id="someone-else", minutes=4, id="t-other", title="Not mine")
    return store


@pytest.fixture
def auth():
    return AuthContext(User(id=USER_ID, email="ada@example.com", full_name="Ada Lovelace"))


@pytest.fixture
def notifications():
    return NotificationLog()


@pytest.fixture
def controller(store, auth, notifications):
    return DashboardController(store=store, auth=auth, notifier=notifications)


@pytest.fixture
def seeded_controller(seeded_store, auth, notifications):
    return DashboardController(store=seeded_store, auth=auth, notifier=notifications)


@pytest.fixture
def app(seeded_store, auth, notifications):
    """Process-wide app used by the MCP tools, reset after each test."""
    controller = DashboardController(store=seeded_store, auth=auth, notifier=notifications)
    dashboard_app = DashboardApp(
        store=seeded_store,
        auth=auth,
        notifications=notifications,
        controller=controller,
        list_view=TaskListView(controller),
    )
    set_app(dashboard_app)
    yield dashboard_app
    set_app(None)
