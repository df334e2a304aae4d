# src/logging/handlers.py — v1
"""Size-rotated log file for LOG_FILE / LOG_ROTATION / LOG_RETENTION."""

from __future__ import annotations

import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE_PATTERN = re.compile(r"^(\d+)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_UNITS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size_str: str) -> int:
    """Parse a LOG_ROTATION value into bytes.

    Args:
        size_str: Number with optional unit B, KB, MB or GB, case-insensitive
            ("10MB", "512 kb"). A bare number is a byte count.

    Returns:
        Size in bytes.

    Raises:
        ValueError: If the value is not a size.
    """
    match = _SIZE_PATTERN.match(size_str.strip())
    if not match:
        raise ValueError(f"Invalid size format: {size_str!r}. Use e.g. '10MB'.")
    unit = (match.group(2) or "B").upper()
    return int(match.group(1)) * _UNITS[unit]


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> RotatingFileHandler:
    """Open the audit log file for appending, creating parent directories.

    Args:
        log_file: Log file path; ``~`` is expanded.
        rotation: Size at which the file is rolled over (see parse_size).
        retention: Number of rolled-over files kept beside the live one.

    Returns:
        UTF-8 RotatingFileHandler without a formatter.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(path),
        maxBytes=parse_size(rotation),
        backupCount=retention,
        encoding="utf-8",
    )
