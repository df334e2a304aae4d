# src/annotations/store_factory.py — v1
"""Factory for annotation store instantiation."""

from __future__ import annotations

from relaudit.annotations.base_annotation_store import BaseAnnotationStore
from relaudit.config.settings import Settings


def create_annotation_store(settings: Settings | None = None) -> BaseAnnotationStore:
    """Instantiate the configured annotation backend.

    Args:
        settings: Application settings. Defaults to the in-memory backend.
    """
    backend = "memory" if settings is None else settings.annotation_backend

    if backend == "memory":
        from relaudit.annotations.memory_store import InMemoryAnnotationStore

        return InMemoryAnnotationStore()

    if backend == "json":
        from relaudit.annotations.json_store import JsonAnnotationStore

        return JsonAnnotationStore(path=settings.annotation_path)

    raise ValueError(f"Unsupported annotation backend: {backend!r}")
