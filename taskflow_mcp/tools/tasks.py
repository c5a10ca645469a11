"""Mutating MCP tools: create, edit, delete, quick status changes and sign out."""

from mcp.types import ToolAnnotations

from taskflow_mcp.editor import TaskEditorDialog
from taskflow_mcp.models.inputs import (
    CreateTaskInput,
    DeleteTaskInput,
    EditTaskInput,
    SetStatusInput,
    SignOutInput,
)
from taskflow_mcp.models.task import EDITABLE_FIELDS
from taskflow_mcp.runtime import get_app
from taskflow_mcp.server import mcp
from taskflow_mcp.tools.dashboard import NOT_SIGNED_IN, _ensure_loaded, _respond
from taskflow_mcp.utils.formatters import _format_card_markdown, _format_field_errors
from taskflow_mcp.views import build_card, status_actions


def _fill_form(editor: TaskEditorDialog, params: CreateTaskInput | EditTaskInput) -> None:
    for name in EDITABLE_FIELDS:
        value = getattr(params, name)
        if value is not None:
            editor.set_field(name, value)


@mcp.tool(
    name="taskflow_create_task",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskflow_create_task(params: CreateTaskInput) -> str:
    """
    Create a new task through the task form.

    USE THIS WHEN:
    - Adding a new task to track

    DO NOT USE WHEN:
    - Changing an existing task → use taskflow_edit_task instead
    - Only moving a task forward (start, complete, reopen) → use taskflow_set_status

    Omitted status defaults to pending and omitted priority to medium. Invalid
    fields are reported per field and nothing is saved.

    Args:
        params: CreateTaskInput containing title and optional attributes

    Returns:
        The new task card, or the form's field errors

    Examples:
        - Simple task: params with title="Buy milk"
        - With details: params with title="Submit report", priority="high", due_date="2025-03-31"
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await _ensure_loaded(app)
    editor = app.controller.open_editor(None)
    _fill_form(editor, params)

    if not await editor.submit():
        if editor.errors:
            return _respond(app, _format_field_errors(editor.errors))
        return _respond(app, "")

    return _respond(app, _format_card_markdown(build_card(app.controller.tasks[0])))


@mcp.tool(
    name="taskflow_edit_task",
    annotations=ToolAnnotations(
        title="Edit Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_edit_task(params: EditTaskInput) -> str:
    """
    Edit any field of an existing task through the task form.

    The form starts from the task's current values; only the fields you pass
    are changed. Any status can be set here, including moving an in-progress
    task back to pending.

    CLEARING VALUES: Use empty string to clear description or due_date.

    Args:
        params: EditTaskInput containing task_id and fields to change

    Returns:
        The updated task card, or the form's field errors

    Examples:
        - Rename: params with task_id="<id>", title="Buy oat milk"
        - Remove due date: params with task_id="<id>", due_date=""
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

    editor = app.controller.open_editor(task)
    _fill_form(editor, params)

    if not await editor.submit():
        if editor.errors:
            return _respond(app, _format_field_errors(editor.errors))
        return _respond(app, "")

    updated = app.controller.get_task(params.task_id)
    return _respond(app, _format_card_markdown(build_card(updated)) if updated else "")


@mcp.tool(
    name="taskflow_delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_delete_task(params: DeleteTaskInput) -> str:
    """
    Delete a task permanently.

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation or error notification
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await _ensure_loaded(app)
    if app.controller.get_task(params.task_id) is None:
        return _respond(
            app,
            f"Error: Task '{params.task_id}' not found.\nTip: Use taskflow_dashboard to find valid task ids.",
        )

    await app.controller.delete_task(params.task_id)
    return _respond(app, "")


@mcp.tool(
    name="taskflow_set_status",
    annotations=ToolAnnotations(
        title="Change Task Status",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_set_status(params: SetStatusInput) -> str:
    """
    Run a quick status action from a task card.

    Offered actions:
    - pending → in-progress ("Start Task") or completed ("Mark Complete")
    - in-progress → completed ("Mark Complete")
    - completed → pending ("Reopen")

    Any other move (e.g. in-progress → pending) needs taskflow_edit_task.

    Args:
        params: SetStatusInput containing task_id and target status

    Returns:
        The updated task card and a notification
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

    offered = status_actions(task.status)
    if params.status not in {a.target for a in offered}:
        choices = ", ".join(f"{a.label} (-> {a.target.value})" for a in offered)
        return _respond(
            app,
            f"Error: '{params.status.value}' is not a quick action for a {task.status.value} task.\n"
            f"Available: {choices}. Use taskflow_edit_task to set any status.",
        )

    if not await app.list_view.change_status(params.task_id, params.status):
        if params.task_id in app.list_view.changing:
            return _respond(app, f"Error: A status change for task '{params.task_id}' is already in progress.")
        return _respond(app, "")

    updated = app.controller.get_task(params.task_id)
    return _respond(app, _format_card_markdown(build_card(updated)) if updated else "")


@mcp.tool(
    name="taskflow_sign_out",
    annotations=ToolAnnotations(
        title="Sign Out",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskflow_sign_out(params: SignOutInput) -> str:
    """
    End the session and clear the dashboard.

    Args:
        params: SignOutInput (no parameters)

    Returns:
        Confirmation notification
    """
    app = get_app()
    if not app.auth.signed_in:
        return NOT_SIGNED_IN

    await app.controller.sign_out()
    return _respond(app, "")
