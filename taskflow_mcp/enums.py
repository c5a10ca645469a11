"""Enums for TaskFlow MCP."""

from enum import Enum

ALL = "all"


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Priority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(str, Enum):
    """Notification severity (toast variant)."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class BadgeVariant(str, Enum):
    """Display variant of a card badge."""

    DEFAULT = "default"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"
