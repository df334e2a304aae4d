# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides an in-memory ZIP builder, sample export documents and isolated
settings. No external dependencies; archives are built in memory.
"""

from __future__ import annotations

import io
import json
import zipfile
from collections.abc import Callable
from typing import Any

import pytest

from relaudit.config.settings import Settings
from relaudit.core.models import IdentityRecord
from relaudit.logging.context import clear_context


def build_zip(entries: dict[str, str | bytes]) -> bytes:
    """Build ZIP bytes from name -> text/bytes entries."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def string_list_doc(*usernames: str, href_prefix: str | None = None) -> list[dict[str, Any]]:
    """Export shape: list of wrappers each holding one string_list_data entry."""
    doc = []
    for username in usernames:
        entry: dict[str, Any] = {"value": username, "timestamp": 1700000000}
        if href_prefix is not None:
            entry["href"] = f"{href_prefix}{username}"
        doc.append({"title": "", "media_list_data": [], "string_list_data": [entry]})
    return doc


# === FIXTURES: Builders ===


@pytest.fixture
def make_zip() -> Callable[[dict[str, str | bytes]], bytes]:
    return build_zip


@pytest.fixture
def make_string_list_doc() -> Callable[..., list[dict[str, Any]]]:
    return string_list_doc


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


# === FIXTURES: Sample data ===


@pytest.fixture
def typical_export_documents() -> dict[str, Any]:
    """Parsed documents of a typical export: followers, following, profile."""
    return {
        "connections/followers_1.json": string_list_doc(
            "f1", "f2", "shared", href_prefix="https://www.instagram.com/"
        ),
        "connections/following.json": {
            "relationships_following": string_list_doc(
                "g1", "Shared", href_prefix="https://www.instagram.com/"
            )
        },
        "personal_information/personal_information.json": {
            "profile_user": [{"string_map_data": {"Name": {"value": "Test"}}}]
        },
    }


@pytest.fixture
def typical_export_zip(typical_export_documents: dict[str, Any]) -> bytes:
    entries: dict[str, str | bytes] = {
        name: json.dumps(doc) for name, doc in typical_export_documents.items()
    }
    entries["media/posts/photo.jpg"] = b"\xff\xd8\xff fake jpeg"
    entries["index.html"] = "<html></html>"
    return build_zip(entries)


@pytest.fixture
def sample_records() -> list[IdentityRecord]:
    return [
        IdentityRecord(username="zoe", href="https://www.instagram.com/zoe"),
        IdentityRecord(username="adam"),
        IdentityRecord(username="mia", href="https://www.instagram.com/mia"),
    ]
