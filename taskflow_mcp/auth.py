"""Session context supplying the signed-in user."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class User:
    id: str
    email: str | None = None
    full_name: str | None = None


class AuthContext:
    """
    Externally owned session state.

    `user` is None when nobody is signed in; the dashboard renders nothing
    and fetches nothing in that state.
    """

    def __init__(self, user: User | None = None) -> None:
        self.user = user

    @property
    def signed_in(self) -> bool:
        return self.user is not None

    async def sign_out(self) -> None:
        if self.user is not None:
            logger.info("Signing out user %s", self.user.id)
        self.user = None
