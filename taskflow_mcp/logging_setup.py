"""Logging configuration for the MCP server process."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable:
    - allow taskflow_mcp logs at the configured level
    - third-party libraries (mcp, httpx, ...) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskflow_mcp"):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int = logging.INFO,
    log_dir: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - stderr handler (stdout carries the MCP stdio transport)
    - optional file handler with full logs for debugging

    Call this once, before the server starts.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "taskflow.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
