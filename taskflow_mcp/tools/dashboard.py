"""Read-side MCP tools: dashboard, refresh and single task cards."""

import json

from mcp.types import ToolAnnotations

from taskflow_mcp.enums import ResponseFormat
from taskflow_mcp.models.inputs import DashboardInput, FilterCriteria, GetTaskInput, RefreshInput
from taskflow_mcp.runtime import DashboardApp, get_app
from taskflow_mcp.server import mcp
from taskflow_mcp.utils.formatters import (
    _format_card_concise,
    _format_card_markdown,
    _format_cards_concise,
    _format_dashboard_json,
    _format_dashboard_markdown,
    _format_notifications,
)
from taskflow_mcp.views import build_card

NOT_SIGNED_IN = "Error: Not signed in.\nTip: Set TASKFLOW_USER_ID and restart the server to start a session."


def _respond(app: DashboardApp, body: str) -> str:
    """Append toasts raised while handling the call."""
    toasts = _format_notifications(app.notifications.drain())
    if not toasts:
        return body
    if not body:
        return toasts
    return f"{body}\n\n{toasts}"


async def _ensure_loaded(app: DashboardApp) -> None:
    if not app.controller.loaded:
        await app.controller.load()


def _render_dashboard(app: DashboardApp, response_format: ResponseFormat) -> str:
    controller = app.controller
    cards = app.list_view.cards()
    stats = controller.stats

    if response_format == ResponseFormat.JSON:
        return _format_dashboard_json(cards, stats, controller.profile)

    if response_format == ResponseFormat.CONCISE:
        title = None
        if controller.filters != FilterCriteria():
            title = f"{stats.total} total"
        return _format_cards_concise(cards, title)

    return _format_dashboard_markdown(
        cards,
        stats,
        controller.profile,
        filtered=controller.filters != FilterCriteria(),
    )


@mcp.tool(
    name="taskflow_dashboard",
    annotations=ToolAnnotations(
        title="Show Dashboard",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_dashboard(params: DashboardInput) -> str:
    """
    Show the task dashboard: statistics and the filtered task cards.

    USE THIS WHEN:
    - Getting an overview of your tasks and their counts per status
    - Searching tasks by text, or narrowing them by status or priority
    - Looking up task ids before editing, deleting or changing status

    Filters are AND-combined. Statistics always cover all tasks, not just
    the filtered ones. Tasks are loaded on first use; use taskflow_refresh
    to reload them.

    Args:
        params: DashboardInput containing search, status, priority and response_format

    Returns:
        Rendered dashboard (markdown, concise or JSON)

    Examples:
        - Everything: params with default values
        - Search: params with search="milk"
        - Completed high-priority tasks: params with status="completed", priority="high"
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await _ensure_loaded(app)
    app.controller.set_filters(search=params.search, status=params.status, priority=params.priority)
    return _respond(app, _render_dashboard(app, params.response_format))


@mcp.tool(
    name="taskflow_refresh",
    annotations=ToolAnnotations(
        title="Reload Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_refresh(params: RefreshInput) -> str:
    """
    Reload the profile and all tasks from the store, keeping current filters.

    Args:
        params: RefreshInput with response_format

    Returns:
        Rendered dashboard after reloading
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await app.controller.load()
    return _respond(app, _render_dashboard(app, params.response_format))


@mcp.tool(
    name="taskflow_get_task",
    annotations=ToolAnnotations(
        title="Get Task Card",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_get_task(params: GetTaskInput) -> str:
    """
    Show a single task card, including its overdue/due-soon flags and quick actions.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        The task card (markdown, concise or JSON)
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await _ensure_loaded(app)
    task = app.controller.get_task(params.task_id)
    if task is None:
        return _respond(
            app,
            f"Error: Task '{params.task_id}' not found.\nTip: Use taskflow_dashboard to find valid task ids.",
        )

    card = build_card(task)
    if params.response_format == ResponseFormat.JSON:
        return _respond(app, json.dumps(card.model_dump(mode="json"), indent=2))
    if params.response_format == ResponseFormat.CONCISE:
        return _respond(app, _format_card_concise(card))
    return _respond(app, _format_card_markdown(card))
