# src/export/csv_exporter.py — v1
"""Tabular CSV export of review records with their annotations."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from relaudit.annotations.models import AnnotationData
from relaudit.annotations.scoring import annotation_score
from relaudit.core.models import IdentityRecord

if TYPE_CHECKING:
    from relaudit.annotations.base_annotation_store import BaseAnnotationStore

logger = logging.getLogger(__name__)

CSV_HEADER = ["Username", "Link", "Category", "Activity", "Score"]


def export_records_csv(
    records: Iterable[IdentityRecord],
    store: BaseAnnotationStore | None = None,
) -> str:
    """Render records as CSV text, one row per record.

    Args:
        records: Records to export, in output order.
        store: Annotation source. Without one, default annotations are used.

    Returns:
        CSV document with a header row and ``\\n`` line endings.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        data = store.get(record.username) if store is not None else AnnotationData()
        writer.writerow([
            record.username,
            record.href or "",
            data.category,
            data.activity,
            annotation_score(data),
        ])
    return buffer.getvalue()


def write_records_csv(
    records: Iterable[IdentityRecord],
    path: Path,
    store: BaseAnnotationStore | None = None,
) -> Path:
    """Write the CSV export to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(export_records_csv(records, store), encoding="utf-8")
    logger.info("Wrote CSV export to %s", path)
    return path
