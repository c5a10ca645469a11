"""Formatting utilities for dashboard output."""

import json

from taskflow_mcp.enums import Severity, TaskStatus
from taskflow_mcp.models.task import Profile, TaskStats
from taskflow_mcp.models.views import TaskCardView
from taskflow_mcp.notifications import Notification


def _format_due(card: TaskCardView) -> str:
    due = card.task.due_date
    return due.strftime("%b %d, %Y") if due else ""


def _format_card_concise(card: TaskCardView) -> str:
    """
    Format a single card on one line.

    Output: "[ ] Buy milk (high, pending, due:2025-03-31, OVERDUE) #<id>"
    """
    task = card.task
    meta = [task.priority.value, card.status_label]
    if task.due_date:
        meta.append(f"due:{task.due_date.isoformat()}")
    if card.overdue:
        meta.append("OVERDUE")
    elif card.due_soon:
        meta.append("due soon")
    return f"{card.status_icon} {task.title} ({', '.join(meta)}) #{task.id}"


def _format_cards_concise(cards: list[TaskCardView], title: str | None = None) -> str:
    if not cards:
        return "0 tasks"

    header = f"{len(cards)} task(s)"
    if title:
        header = f"{len(cards)} task(s) | {title}"
    return "\n".join([header] + [_format_card_concise(c) for c in cards])


def _format_card_markdown(card: TaskCardView) -> str:
    """Format a single task card as markdown."""
    task = card.task
    title = f"~~{task.title}~~" if task.status == TaskStatus.COMPLETED else task.title
    lines = [f"### {card.status_icon} {title}"]

    badges = [
        f"`{task.priority.value}` ({card.priority_variant.value})",
        f"`{card.status_label}` ({card.status_variant.value})",
    ]
    if card.overdue:
        badges.append("**Overdue**")
    elif card.due_soon:
        badges.append("**Due Soon**")
    lines.append(" ".join(badges))

    if task.description:
        lines.append(task.description)
    if task.due_date:
        lines.append(f"Due: {_format_due(card)}")
    if card.actions:
        lines.append("Actions: " + " | ".join(f"{a.label} (-> {a.target.value})" for a in card.actions))
    lines.append(f"*id: {task.id}*")

    return "\n".join(lines)


def _format_stats_markdown(stats: TaskStats) -> str:
    return (
        f"**Total Tasks**: {stats.total} | **Completed**: {stats.completed} | "
        f"**In Progress**: {stats.in_progress} | **Pending**: {stats.pending}"
    )


def _format_dashboard_markdown(
    cards: list[TaskCardView],
    stats: TaskStats,
    profile: Profile | None,
    filtered: bool = False,
) -> str:
    """Format header, stat cards and the task grid as markdown."""
    name = profile.display_name if profile else "User"
    lines = ["# TaskFlow Dashboard", f"*Signed in as {name}*", "", _format_stats_markdown(stats), ""]

    if not cards:
        if stats.total == 0:
            lines.append("## No tasks yet")
            lines.append("Create your first task to get started!")
        else:
            lines.append("## No tasks match your filters")
            lines.append("Try adjusting your search or filter criteria.")
        return "\n".join(lines)

    heading = f"*{len(cards)} of {stats.total} task(s)*" if filtered else f"*{len(cards)} task(s)*"
    lines.append(heading)
    lines.append("")
    for card in cards:
        lines.append(_format_card_markdown(card))
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _format_dashboard_json(cards: list[TaskCardView], stats: TaskStats, profile: Profile | None) -> str:
    return json.dumps(
        {
            "profile": profile.model_dump(mode="json") if profile else None,
            "stats": stats.model_dump(),
            "count": len(cards),
            "tasks": [c.model_dump(mode="json") for c in cards],
        },
        indent=2,
    )


def _format_notifications(notifications: list[Notification]) -> str:
    """Format toasts shown after an action."""
    lines = []
    for n in notifications:
        prefix = "> [!] " if n.severity == Severity.DESTRUCTIVE else "> "
        text = f"**{n.title}**"
        if n.description:
            text += f" {n.description}"
        lines.append(prefix + text)
    return "\n".join(lines)


def _format_field_errors(errors: dict[str, str]) -> str:
    lines = ["Error: The task form has invalid fields:"]
    for name, message in errors.items():
        lines.append(f"- **{name}**: {message}")
    return "\n".join(lines)
