# src/extraction/worker.py — v1
"""Run archive extraction off the calling thread or process.

Only plain messages cross the boundary: an ExtractionRequest carrying the
raw bytes in, an ExtractionResponse carrying the documents or a single
fatal error out. Results and error semantics match extract_documents().
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field

from relaudit.extraction.archive_extractor import ArchiveError, extract_documents

if TYPE_CHECKING:
    from relaudit.config.settings import Settings

logger = logging.getLogger(__name__)


class ExtractionRequest(BaseModel):
    """Work item sent to the extraction worker."""

    data: bytes
    document_extension: str = ".json"
    fault_preview_chars: int = 300


class ExtractionResponse(BaseModel):
    """Worker reply: the documents, or the reason the archive was rejected."""

    status: Literal["success", "error"]
    documents: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


def build_request(data: bytes, settings: Settings | None = None) -> ExtractionRequest:
    if settings is None:
        return ExtractionRequest(data=data)
    return ExtractionRequest(
        data=data,
        document_extension=settings.document_extension,
        fault_preview_chars=settings.fault_preview_chars,
    )


def run_extraction(request: ExtractionRequest) -> ExtractionResponse:
    """Worker entry point. Never raises: a fatal archive error becomes an error reply."""
    from relaudit.config.settings import Settings

    settings = Settings(
        _env_file=None,  # type: ignore[call-arg]
        document_extension=request.document_extension,
        fault_preview_chars=request.fault_preview_chars,
    )
    try:
        documents = extract_documents(request.data, settings)
    except ArchiveError as exc:
        return ExtractionResponse(status="error", error=str(exc))
    return ExtractionResponse(status="success", documents=documents)


async def extract_documents_async(
    data: bytes,
    settings: Settings | None = None,
    executor: Executor | None = None,
) -> dict[str, Any]:
    """Extract documents in an executor (default: the loop's thread pool).

    Pass a ProcessPoolExecutor to move parsing to another process.

    Raises:
        ArchiveError: If the worker reports a fatal archive error.
    """
    request = build_request(data, settings)
    loop = asyncio.get_running_loop()
    logger.debug("Dispatching %d bytes to extraction worker", len(data))
    response = await loop.run_in_executor(executor, run_extraction, request)
    if response.status == "error":
        raise ArchiveError(response.error or "Archive extraction failed")
    return response.documents
