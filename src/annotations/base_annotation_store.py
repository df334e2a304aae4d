# src/annotations/base_annotation_store.py — v1
"""Abstract annotation store interface.

Stores are an explicit collaborator handed to review and export helpers.
Reconciliation never reads them.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from relaudit.annotations.models import ActivityTag, AnnotationData, CategoryTag


def _now_ms() -> int:
    return int(time.time() * 1000)


class BaseAnnotationStore(ABC):
    """Key-value side table of AnnotationData keyed by normalized username."""

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock

    @abstractmethod
    def _load(self, key: str) -> AnnotationData | None:
        """Return the stored annotation for a normalized key, if any."""

    @abstractmethod
    def _save(self, key: str, data: AnnotationData) -> None:
        """Persist the annotation under a normalized key."""

    @abstractmethod
    def _remove(self, key: str) -> None:
        """Drop a normalized key if present."""

    @abstractmethod
    def all(self) -> dict[str, AnnotationData]:
        """Every stored annotation keyed by normalized username."""

    def get(self, username: str) -> AnnotationData:
        """Annotation for a username, or the unknown/unknown/0 default."""
        return self._load(self.key(username)) or AnnotationData()

    def set(
        self,
        username: str,
        category: CategoryTag | None = None,
        activity: ActivityTag | None = None,
    ) -> AnnotationData:
        """Apply a partial update and stamp ``updated_at``. Returns the stored value."""
        key = self.key(username)
        current = self._load(key) or AnnotationData()
        updates: dict[str, object] = {"updated_at": self._clock()}
        if category is not None:
            updates["category"] = category
        if activity is not None:
            updates["activity"] = activity
        data = AnnotationData.model_validate({**current.model_dump(), **updates})
        self._save(key, data)
        return data

    def delete(self, username: str) -> None:
        self._remove(self.key(username))

    @staticmethod
    def key(username: str) -> str:
        return username.strip().lower()
