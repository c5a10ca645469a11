"""Toast notifications collected for the MCP surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from taskflow_mcp.enums import Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    description: str = ""
    severity: Severity = Severity.DEFAULT


@dataclass(slots=True)
class NotificationLog:
    """
    Notifier that keeps messages until the surface shows them.

    Tools call drain() after each action and print the toasts under the
    response, the way the web app displayed them over the page.
    """

    pending: list[Notification] = field(default_factory=list)

    def notify(self, title: str, description: str = "", severity: Severity = Severity.DEFAULT) -> None:
        logger.debug("notify [%s] %s: %s", severity.value, title, description)
        self.pending.append(Notification(title=title, description=description, severity=severity))

    def drain(self) -> list[Notification]:
        out, self.pending = self.pending, []
        return out
