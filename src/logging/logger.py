# src/logging/logger.py — v1
"""Log output for audit runs.

Library modules log through ``logging.getLogger(__name__)`` and never touch
handlers. Output is configured on the ``relaudit`` logger, either by the
host application calling setup_logging(), or by the facade calling
ensure_logging() at the start of every scan when LOG_CONFIGURE is on.

JSON lines carry the audit run fields at top level:

    {"ts": ..., "level": "INFO", "logger": "relaudit.api.facade",
     "msg": "...", "archive_id": "...", "run_id": "...", "stage": "detection"}

Run fields are absent outside a facade call. ``data`` holds
``extra={"data": {...}}`` payloads and ``exc`` a formatted traceback.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from relaudit.logging.context import get_context

if TYPE_CHECKING:
    from relaudit.config.settings import Settings

ROOT_LOGGER = "relaudit"

_configured = False


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, run fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(get_context().as_dict())

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line console format: ``time LEVEL archive/stage logger: msg``."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        line = f"{_timestamp(record):%H:%M:%S} {record.levelname:<7}"
        if ctx.archive_id:
            line += f" {ctx.archive_id[:8]}/{ctx.stage or '-'}"
        line += f" {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Logger:
    """Attach a stderr handler, plus an optional rotating file, to ``relaudit``.

    Replaces any handlers installed by a previous call.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_format: "json" or "text".
        log_file: Rotating log file path. None logs to stderr only.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files kept.

    Returns:
        The configured ``relaudit`` logger.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _close_handlers(root)

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        from relaudit.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(log_file, rotation=rotation, retention=retention)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return root


def setup_logging_from_settings(settings: Settings) -> logging.Logger:
    return setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


def ensure_logging(settings: Settings) -> bool:
    """Configure from settings once per process if LOG_CONFIGURE is on.

    Returns:
        True if this call installed the handlers.
    """
    global _configured
    if _configured or not settings.log_configure:
        return False
    setup_logging_from_settings(settings)
    _configured = True
    return True


def reset_logging() -> None:
    """Remove installed handlers so the next ensure_logging() reconfigures."""
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    _close_handlers(root)
    root.setLevel(logging.NOTSET)
    _configured = False


def _close_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
