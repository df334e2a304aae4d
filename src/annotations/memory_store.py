# src/annotations/memory_store.py — v1
"""In-process annotation store (default ANNOTATION_BACKEND=memory)."""

from __future__ import annotations

from relaudit.annotations.base_annotation_store import BaseAnnotationStore
from relaudit.annotations.models import AnnotationData


class InMemoryAnnotationStore(BaseAnnotationStore):
    """Dict-backed store. Contents live as long as the instance."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._data: dict[str, AnnotationData] = {}

    def _load(self, key: str) -> AnnotationData | None:
        return self._data.get(key)

    def _save(self, key: str, data: AnnotationData) -> None:
        self._data[key] = data

    def _remove(self, key: str) -> None:
        self._data.pop(key, None)

    def all(self) -> dict[str, AnnotationData]:
        return dict(self._data)
