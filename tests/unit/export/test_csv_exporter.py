# tests/unit/export/test_csv_exporter.py — v1
"""Tests for export/csv_exporter.py."""

from __future__ import annotations

import csv
import io

from relaudit.annotations.memory_store import InMemoryAnnotationStore
from relaudit.core.models import IdentityRecord
from relaudit.export.csv_exporter import CSV_HEADER, export_records_csv, write_records_csv


class TestExportRecordsCsv:
    def test_header_only(self):
        assert export_records_csv([]) == "Username,Link,Category,Activity,Score\n"

    def test_default_annotations(self, sample_records):
        rows = list(csv.reader(io.StringIO(export_records_csv(sample_records))))
        assert rows[0] == CSV_HEADER
        assert rows[1] == ["zoe", "https://www.instagram.com/zoe", "unknown", "unknown", "0"]
        assert rows[2] == ["adam", "", "unknown", "unknown", "0"]

    def test_with_store(self, sample_records):
        store = InMemoryAnnotationStore()
        store.set("Adam", category="business", activity="low")
        rows = list(csv.reader(io.StringIO(export_records_csv(sample_records, store))))
        assert rows[2] == ["adam", "", "business", "low", "1"]

    def test_quotes_special_characters(self):
        record = IdentityRecord(username="a", href="https://x/?q=1,2")
        text = export_records_csv([record])
        assert '"https://x/?q=1,2"' in text


class TestWriteRecordsCsv:
    def test_writes_file(self, tmp_path, sample_records):
        path = write_records_csv(sample_records, tmp_path / "out" / "audit.csv")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Username,Link,Category,Activity,Score"
        assert len(lines) == 4
