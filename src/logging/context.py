# src/logging/context.py — v1
"""Contextual logging support: attach archive_id, run_id and stage to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per audit run.
_archive_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "archive_id", default=None
)
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass
class LogContext:
    """Snapshot of current logging context."""

    archive_id: str | None = None
    run_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        archive_id=_archive_id.get(),
        run_id=_run_id.get(),
        stage=_stage.get(),
    )


def set_run_context(archive_id: str, run_id: str) -> None:
    """Set run-level context (called once per facade call)."""
    _archive_id.set(archive_id)
    _run_id.set(run_id)


def set_stage(stage: str | None) -> None:
    """Set the pipeline stage currently executing."""
    _stage.set(stage)


def clear_context() -> None:
    """Reset all context variables."""
    _archive_id.set(None)
    _run_id.set(None)
    _stage.set(None)
