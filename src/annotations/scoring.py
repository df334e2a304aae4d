# src/annotations/scoring.py — v1
"""Annotation score used to order review lists.

Lower means a better candidate for removal (little credibility or
activity), higher means worth keeping.
"""

from __future__ import annotations

from relaudit.annotations.models import AnnotationData

CATEGORY_WEIGHTS: dict[str, int] = {
    "celebrity": 10,
    "creator": 8,
    "personal": 5,
    "business": 3,
    "unknown": 0,
}

ACTIVITY_WEIGHTS: dict[str, int] = {
    "high": 5,
    "medium": 3,
    "low": -2,
    "unknown": 0,
}


def annotation_score(data: AnnotationData) -> int:
    return CATEGORY_WEIGHTS[data.category] + ACTIVITY_WEIGHTS[data.activity]
