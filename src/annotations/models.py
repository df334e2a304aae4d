# src/annotations/models.py — v1
"""Annotation models: user-assigned category and activity tags per identity."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

CategoryTag = Literal["creator", "celebrity", "business", "personal", "unknown"]
ActivityTag = Literal["high", "medium", "low", "unknown"]


class AnnotationData(BaseModel):
    """Tags stored for one normalized username.

    ``updated_at`` is epoch milliseconds of the last write, 0 when never set.
    """

    category: CategoryTag = "unknown"
    activity: ActivityTag = "unknown"
    updated_at: int = 0


DEFAULT_ANNOTATION = AnnotationData()
