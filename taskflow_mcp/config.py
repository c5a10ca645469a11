"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKFLOW"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def _env_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True, slots=True)
class Settings:
    # Signed-in user; None means no session.
    user_id: str | None = "local-user"
    user_email: str | None = None
    user_name: str | None = None

    log_level: int = logging.INFO
    log_dir: Path | None = None


def load_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv(override=False)

    log_dir = _env_optional(_k("LOG_DIR"))
    return Settings(
        user_id=_env(_k("USER_ID"), "local-user").strip() or None,
        user_email=_env_optional(_k("USER_EMAIL")),
        user_name=_env_optional(_k("USER_NAME")),
        log_level=_env_level(_k("LOG_LEVEL"), logging.INFO),
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )
