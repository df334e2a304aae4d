# tests/unit/logging/test_unit_context.py — v1
"""Tests for logging/context.py — run context variables."""

from __future__ import annotations

from relaudit.logging.context import clear_context, get_context, set_run_context, set_stage


def test_empty_by_default():
    assert get_context().as_dict() == {}


def test_set_and_clear():
    set_run_context("a1", "r1")
    set_stage("extraction")
    ctx = get_context()
    assert ctx.archive_id == "a1"
    assert ctx.run_id == "r1"
    assert ctx.stage == "extraction"

    clear_context()
    assert get_context().as_dict() == {}


def test_as_dict_skips_none():
    set_run_context("a1", "r1")
    assert get_context().as_dict() == {"archive_id": "a1", "run_id": "r1"}
