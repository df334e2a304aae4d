# src/reconciliation/reconciler.py — v1
"""Reconcile two identity lists into mutual / A-only / B-only partitions.

Identities match on case-normalized username. Within the overlap, role B's
record is kept (its casing and href win). Duplicate input entries are not
an error: the last occurrence per identity wins.

Each rate is taken over the list its records come from: ``a_only`` over
A, ``b_only`` and ``mutual`` over B. Rates therefore stay within 0..100.
"""

from __future__ import annotations

from collections.abc import Iterable

from relaudit.core.models import IdentityRecord, ReconciliationResult, RelationStats
from relaudit.core.normalization import identity_key


def reconcile(
    list_a: Iterable[IdentityRecord],
    list_b: Iterable[IdentityRecord],
) -> ReconciliationResult:
    """Compute the overlap and both one-sided differences of two identity lists.

    Args:
        list_a: Role A records (accounts followed).
        list_b: Role B records (followers). Authoritative within the overlap.

    Returns:
        ReconciliationResult with username-sorted lists and percentage stats.
    """
    index_a = build_index(list_a)
    index_b = build_index(list_b)

    mutual = [record for key, record in index_b.items() if key in index_a]
    b_only = [record for key, record in index_b.items() if key not in index_a]
    a_only = [record for key, record in index_a.items() if key not in index_b]

    count_a = len(index_a)
    count_b = len(index_b)

    stats = RelationStats(
        count_a=count_a,
        count_b=count_b,
        mutual_count=len(mutual),
        a_only_count=len(a_only),
        b_only_count=len(b_only),
        mutual_pct=percentage(len(mutual), count_b),
        a_only_pct=percentage(len(a_only), count_a),
        b_only_pct=percentage(len(b_only), count_b),
    )
    return ReconciliationResult(
        mutual=sort_records(mutual),
        a_only=sort_records(a_only),
        b_only=sort_records(b_only),
        stats=stats,
    )


def build_index(records: Iterable[IdentityRecord]) -> dict[str, IdentityRecord]:
    """Map normalized username to the last record seen for it."""
    index: dict[str, IdentityRecord] = {}
    for record in records:
        index[identity_key(record.username)] = record
    return index


def sort_key(record: IdentityRecord) -> tuple[str, str]:
    """Case-insensitive primary order, original username as tiebreak."""
    return (record.username.casefold(), record.username)


def sort_records(records: Iterable[IdentityRecord]) -> list[IdentityRecord]:
    return sorted(records, key=sort_key)


def percentage(count: int, denominator: int) -> float:
    """``count / denominator * 100``, or 0.0 for an empty denominator."""
    if denominator <= 0:
        return 0.0
    return count / denominator * 100
