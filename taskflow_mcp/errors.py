"""Errors raised by the remote task store."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by a TaskStore."""

    NOT_FOUND = "not-found"
    VALIDATION_REJECTED = "validation-rejected"
    SERVICE_UNAVAILABLE = "service-unavailable"
    UNAUTHENTICATED = "unauthenticated"


class TaskStoreError(Exception):
    """A remote store call failed.

    The message is technical and meant for logs only; user-facing
    notifications never include it.
    """

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value

    def __repr__(self) -> str:
        return f"TaskStoreError({self.kind.value!r}, {self.message!r})"
