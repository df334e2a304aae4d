# src/export/checklist.py — v1
"""Plain-text manual checklist: one action item per selected record.

Nothing here performs an action on any account. The checklist is for a
person working through the list by hand.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from relaudit.core.models import IdentityRecord

logger = logging.getLogger(__name__)

SAFETY_NOTICE = (
    "WARNING: This is a manual checklist. No actions are automated. "
    "Do not use scripts. Respect the platform's daily limits."
)


def build_checklist(
    records: Sequence[IdentityRecord],
    title: str = "Manual Review Checklist",
    action: str = "Review and unfollow if desired.",
) -> str:
    """Render the checklist text for the given records, in order."""
    lines = [
        f"# {title}",
        "",
        SAFETY_NOTICE,
        "",
        f"Selected accounts: {len(records)}",
        "",
    ]
    for i, record in enumerate(records, start=1):
        lines.append(f'[ ] {i}. Search for "{record.username}"')
        if record.href:
            lines.append(f"     Profile: {record.href}")
        lines.append(f"     Action: {action}")
        lines.append("")
    return "\n".join(lines)


def write_checklist(
    records: Sequence[IdentityRecord],
    path: Path,
    title: str = "Manual Review Checklist",
) -> Path:
    """Write the checklist to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_checklist(records, title=title), encoding="utf-8")
    logger.info("Wrote checklist with %d items to %s", len(records), path)
    return path
