# tests/unit/extraction/test_worker.py — v1
"""Tests for extraction/worker.py — message-based background extraction."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from relaudit.core.models import DocumentFault
from relaudit.extraction.archive_extractor import ArchiveError, extract_documents
from relaudit.extraction.worker import (
    ExtractionRequest,
    build_request,
    extract_documents_async,
    run_extraction,
)


class TestBuildRequest:
    def test_defaults(self):
        request = build_request(b"data")
        assert request.document_extension == ".json"
        assert request.fault_preview_chars == 300

    def test_from_settings(self, settings):
        custom = settings.model_copy(update={"fault_preview_chars": 20})
        assert build_request(b"data", custom).fault_preview_chars == 20


class TestRunExtraction:
    def test_success(self, make_zip):
        data = make_zip({"a.json": json.dumps([1])})
        response = run_extraction(ExtractionRequest(data=data))
        assert response.status == "success"
        assert response.documents == {"a.json": [1]}
        assert response.error is None

    def test_fatal_error_becomes_reply(self):
        response = run_extraction(ExtractionRequest(data=b"not a zip"))
        assert response.status == "error"
        assert response.error
        assert response.documents == {}

    def test_faults_travel_in_documents(self, make_zip):
        response = run_extraction(ExtractionRequest(data=make_zip({"bad.json": "{"})))
        assert response.status == "success"
        assert isinstance(response.documents["bad.json"], DocumentFault)


class TestExtractDocumentsAsync:
    @pytest.mark.asyncio
    async def test_matches_sync_result(self, typical_export_zip):
        result = await extract_documents_async(typical_export_zip)
        assert result == extract_documents(typical_export_zip)

    @pytest.mark.asyncio
    async def test_custom_executor(self, make_zip):
        with ThreadPoolExecutor(max_workers=1) as executor:
            result = await extract_documents_async(
                make_zip({"x.json": "{}"}), executor=executor
            )
        assert result == {"x.json": {}}

    @pytest.mark.asyncio
    async def test_raises_archive_error(self):
        with pytest.raises(ArchiveError):
            await extract_documents_async(b"garbage")
