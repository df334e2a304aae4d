# src/core/normalization.py — v1
"""Username and profile-link normalization shared by every stage."""

from __future__ import annotations

from typing import Any


def normalize_username(username: Any) -> str | None:
    """Trim and lower-case a username. Returns None if not a non-empty string."""
    if not isinstance(username, str):
        return None
    normalized = username.strip().lower()
    return normalized or None


def normalize_href(href: Any) -> str | None:
    """Trim a profile link. Empty, whitespace-only or non-string links become None."""
    if not isinstance(href, str):
        return None
    stripped = href.strip()
    return stripped or None


def identity_key(username: str) -> str:
    """Key under which two records count as the same identity."""
    return username.strip().lower()
