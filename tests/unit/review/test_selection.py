# tests/unit/review/test_selection.py — v1
"""Tests for review/selection.py — filter, sort, paginate, select."""

from __future__ import annotations

import pytest

from relaudit.annotations.memory_store import InMemoryAnnotationStore
from relaudit.core.models import IdentityRecord
from relaudit.review.selection import (
    filter_records,
    paginate,
    select_records,
    sort_records,
)


def _names(records):
    return [r.username for r in records]


@pytest.fixture
def store():
    store = InMemoryAnnotationStore(clock=lambda: 1)
    store.set("zoe", category="celebrity", activity="high")
    store.set("adam", category="business", activity="low")
    return store


class TestFilterRecords:
    def test_no_filters(self, sample_records):
        assert filter_records(sample_records) == sample_records

    def test_text_case_insensitive(self, sample_records):
        assert _names(filter_records(sample_records, text="ZO")) == ["zoe"]

    def test_category(self, sample_records, store):
        assert _names(filter_records(sample_records, category="business", store=store)) == ["adam"]

    def test_category_all(self, sample_records, store):
        assert filter_records(sample_records, category="all", store=store) == sample_records

    def test_unknown_category_without_store(self, sample_records):
        assert len(filter_records(sample_records, category="unknown")) == 3


class TestSortRecords:
    def test_score_ascending(self, sample_records, store):
        # adam=1, mia=0, zoe=15
        ordered = sort_records(sample_records, "score_asc", store)
        assert _names(ordered) == ["mia", "adam", "zoe"]

    def test_score_descending(self, sample_records, store):
        ordered = sort_records(sample_records, "score_desc", store)
        assert _names(ordered) == ["zoe", "adam", "mia"]

    def test_alpha(self, sample_records):
        assert _names(sort_records(sample_records, "alpha")) == ["adam", "mia", "zoe"]

    def test_stable_without_annotations(self, sample_records):
        assert sort_records(sample_records, "score_asc") == sample_records

    def test_unknown_order(self, sample_records):
        with pytest.raises(ValueError, match="Unknown sort order"):
            sort_records(sample_records, "random")


class TestPaginate:
    def _records(self, n):
        return [IdentityRecord(username=f"user{i:03d}") for i in range(n)]

    def test_first_page(self):
        page = paginate(self._records(120), page=1)
        assert len(page.records) == 50
        assert page.total_records == 120
        assert page.total_pages == 3

    def test_last_page(self):
        page = paginate(self._records(120), page=3)
        assert _names(page.records)[0] == "user100"
        assert len(page.records) == 20

    def test_past_end(self):
        assert paginate(self._records(5), page=4, per_page=2).records == []

    def test_empty(self):
        page = paginate([])
        assert page.total_pages == 0
        assert page.records == []

    @pytest.mark.parametrize("page,per_page", [(0, 10), (1, 0)])
    def test_invalid(self, page, per_page):
        with pytest.raises(ValueError):
            paginate(self._records(3), page=page, per_page=per_page)


class TestSelectRecords:
    def test_any_casing_record_order(self, sample_records):
        selected = select_records(sample_records, ["MIA", "zoe", "ghost"])
        assert _names(selected) == ["zoe", "mia"]
