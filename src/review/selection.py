# src/review/selection.py — v1
"""Filter, sort, paginate and select reconciled records for review.

Annotation-dependent operations take the store explicitly; without a
store every record carries the default annotation.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from relaudit.annotations.models import AnnotationData
from relaudit.annotations.scoring import annotation_score
from relaudit.core.models import IdentityRecord
from relaudit.core.normalization import identity_key
from relaudit.reconciliation.reconciler import sort_key

if TYPE_CHECKING:
    from relaudit.annotations.base_annotation_store import BaseAnnotationStore

SortOrder = Literal["score_asc", "score_desc", "alpha"]

DEFAULT_PAGE_SIZE = 50


class Page(BaseModel):
    """One page of review records."""

    records: list[IdentityRecord] = Field(default_factory=list)
    page: int
    per_page: int
    total_records: int
    total_pages: int


def _annotation(record: IdentityRecord, store: BaseAnnotationStore | None) -> AnnotationData:
    if store is None:
        return AnnotationData()
    return store.get(record.username)


def filter_records(
    records: Iterable[IdentityRecord],
    text: str | None = None,
    category: str | None = None,
    store: BaseAnnotationStore | None = None,
) -> list[IdentityRecord]:
    """Keep records whose username contains ``text`` and whose category matches.

    ``category`` of None or "all" disables the category filter.
    """
    needle = text.lower() if text else None
    result: list[IdentityRecord] = []
    for record in records:
        if needle and needle not in record.username.lower():
            continue
        if category and category != "all":
            if _annotation(record, store).category != category:
                continue
        result.append(record)
    return result


def sort_records(
    records: Iterable[IdentityRecord],
    order: SortOrder = "score_asc",
    store: BaseAnnotationStore | None = None,
) -> list[IdentityRecord]:
    """Order records by annotation score (stable) or alphabetically."""
    items = list(records)
    if order == "alpha":
        return sorted(items, key=sort_key)
    if order not in ("score_asc", "score_desc"):
        raise ValueError(f"Unknown sort order: {order!r}")
    scores = {id(r): annotation_score(_annotation(r, store)) for r in items}
    return sorted(items, key=lambda r: scores[id(r)], reverse=order == "score_desc")


def paginate(
    records: Sequence[IdentityRecord], page: int = 1, per_page: int = DEFAULT_PAGE_SIZE
) -> Page:
    """Slice out a 1-based page. Pages past the end are empty."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    start = (page - 1) * per_page
    return Page(
        records=list(records[start:start + per_page]),
        page=page,
        per_page=per_page,
        total_records=len(records),
        total_pages=math.ceil(len(records) / per_page),
    )


def select_records(
    records: Iterable[IdentityRecord], usernames: Iterable[str]
) -> list[IdentityRecord]:
    """Records whose identity is in ``usernames`` (any casing), in record order."""
    wanted = {identity_key(u) for u in usernames}
    return [r for r in records if identity_key(r.username) in wanted]
