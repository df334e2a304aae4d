# tests/unit/export/test_checklist.py — v1
"""Tests for export/checklist.py."""

from __future__ import annotations

from relaudit.export.checklist import SAFETY_NOTICE, build_checklist, write_checklist


class TestBuildChecklist:
    def test_layout(self, sample_records):
        lines = build_checklist(sample_records[:2]).split("\n")
        assert lines[:6] == [
            "# Manual Review Checklist",
            "",
            SAFETY_NOTICE,
            "",
            "Selected accounts: 2",
            "",
        ]
        assert lines[6] == '[ ] 1. Search for "zoe"'
        assert lines[7] == "     Profile: https://www.instagram.com/zoe"
        assert lines[8] == "     Action: Review and unfollow if desired."
        assert lines[10] == '[ ] 2. Search for "adam"'
        assert lines[11] == "     Action: Review and unfollow if desired."

    def test_custom_title_and_action(self, sample_records):
        text = build_checklist(sample_records, title="Cleanup", action="Check profile.")
        assert text.startswith("# Cleanup\n")
        assert text.count("Action: Check profile.") == 3

    def test_empty(self):
        assert "Selected accounts: 0" in build_checklist([])


def test_write_checklist(tmp_path, sample_records):
    path = write_checklist(sample_records, tmp_path / "checklist.txt", title="Mine")
    text = path.read_text(encoding="utf-8")
    assert text.startswith("# Mine")
    assert '[ ] 3. Search for "mia"' in text
