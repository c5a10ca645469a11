"""Process-wide dashboard wiring used by the MCP tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from taskflow_mcp.auth import AuthContext, User
from taskflow_mcp.config import Settings, load_settings
from taskflow_mcp.dashboard import DashboardController
from taskflow_mcp.notifications import NotificationLog
from taskflow_mcp.store import InMemoryTaskStore
from taskflow_mcp.views import TaskListView

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DashboardApp:
    store: InMemoryTaskStore
    auth: AuthContext
    notifications: NotificationLog
    controller: DashboardController
    list_view: TaskListView


def build_app(settings: Settings) -> DashboardApp:
    store = InMemoryTaskStore()
    user = None
    if settings.user_id:
        user = User(id=settings.user_id, email=settings.user_email, full_name=settings.user_name)
        store.add_profile(user.id, full_name=user.full_name, email=user.email)

    auth = AuthContext(user)
    notifications = NotificationLog()
    controller = DashboardController(store=store, auth=auth, notifier=notifications)
    logger.info("Dashboard ready (user=%s)", user.id if user else None)
    return DashboardApp(
        store=store,
        auth=auth,
        notifications=notifications,
        controller=controller,
        list_view=TaskListView(controller),
    )


_app: DashboardApp | None = None


def get_app() -> DashboardApp:
    global _app
    if _app is None:
        _app = build_app(load_settings())
    return _app


def set_app(app: DashboardApp | None) -> None:
    """Replace the process-wide app (None rebuilds it lazily)."""
    global _app
    _app = app
