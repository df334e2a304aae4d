# src/annotations/json_store.py — v1
"""JSON file-based annotation store (ANNOTATION_BACKEND=json).

All annotations live in a single JSON object keyed by normalized username.
The file is rewritten on every update through a temp file and an atomic
replace.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from relaudit.annotations.base_annotation_store import BaseAnnotationStore
from relaudit.annotations.models import AnnotationData

logger = logging.getLogger(__name__)


class JsonAnnotationStore(BaseAnnotationStore):
    """Annotation store persisted to one JSON file."""

    def __init__(self, path: Path | str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self, key: str) -> AnnotationData | None:
        return self.all().get(key)

    def _save(self, key: str, data: AnnotationData) -> None:
        entries = self.all()
        entries[key] = data
        self._write(entries)

    def _remove(self, key: str) -> None:
        entries = self.all()
        if entries.pop(key, None) is not None:
            self._write(entries)

    def all(self) -> dict[str, AnnotationData]:
        """Read every entry. An unreadable file is logged and treated as empty."""
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read annotation file %s: %s", self._path, e)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Annotation file %s is not a JSON object, ignoring", self._path)
            return {}

        entries: dict[str, AnnotationData] = {}
        for key, value in raw.items():
            try:
                entries[key] = AnnotationData.model_validate(value)
            except ValidationError:
                logger.warning("Skipping invalid annotation for %s", key)
        return entries

    def _write(self, entries: dict[str, AnnotationData]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {key: data.model_dump() for key, data in entries.items()}
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp_path, self._path)
