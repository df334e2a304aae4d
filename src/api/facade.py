# src/api/facade.py — v1
"""Public API facade: archive bytes in, detection and reconciliation out.

Usage:
    from relaudit.api.facade import audit_archive
    result = audit_archive(zip_bytes)

    scan = scan_archive(zip_bytes)          # inspect detection first
    result = audit(scan, set_b_document="connections/followers_1.json")
"""

from __future__ import annotations

import hashlib
import logging
import time
import uuid
from concurrent.futures import Executor
from typing import Any

from relaudit.api.models import ArchiveScan, AuditResult, DocumentStatus
from relaudit.config.settings import Settings
from relaudit.core.models import DocumentFault
from relaudit.detection.candidate_scorer import detect_candidates
from relaudit.extraction.archive_extractor import extract_documents
from relaudit.extraction.identity_extractor import extract_identities
from relaudit.extraction.worker import extract_documents_async
from relaudit.logging.context import clear_context, set_run_context, set_stage
from relaudit.logging.logger import ensure_logging
from relaudit.reconciliation.reconciler import reconcile

logger = logging.getLogger(__name__)


class ArchiveTooLargeError(ValueError):
    """Raised when the input exceeds MAX_ARCHIVE_SIZE_MB."""


class DocumentSelectionError(ValueError):
    """Raised when a role has no usable document to reconcile."""


def scan_archive(data: bytes, settings: Settings | None = None) -> ArchiveScan:
    """Extract documents from an archive and detect the two identity lists.

    Args:
        data: Raw ZIP bytes.
        settings: Global settings. Loaded from .env if None.

    Returns:
        ArchiveScan with documents, per-document statuses and detection.

    Raises:
        ArchiveTooLargeError: If the input exceeds the configured size limit.
        ArchiveError: If the bytes are not a readable archive.
    """
    settings = settings or Settings()
    archive_id = _begin_run(data, settings)
    try:
        t0 = time.perf_counter()
        set_stage("extraction")
        documents = extract_documents(data, settings)
        return _finish_scan(archive_id, data, documents, settings, t0)
    finally:
        clear_context()


async def scan_archive_async(
    data: bytes,
    settings: Settings | None = None,
    executor: Executor | None = None,
) -> ArchiveScan:
    """Same as scan_archive(); large inputs are extracted in an executor.

    Inputs above WORKER_THRESHOLD_MB go through the extraction worker so the
    event loop stays responsive. The result is identical either way.
    """
    settings = settings or Settings()
    archive_id = _begin_run(data, settings)
    try:
        t0 = time.perf_counter()
        set_stage("extraction")
        if len(data) > settings.worker_threshold_bytes:
            logger.info("Archive above worker threshold, extracting in background")
            documents = await extract_documents_async(data, settings, executor)
        else:
            documents = extract_documents(data, settings)
        return _finish_scan(archive_id, data, documents, settings, t0)
    finally:
        clear_context()


def audit(
    scan: ArchiveScan,
    set_a_document: str | None = None,
    set_b_document: str | None = None,
    settings: Settings | None = None,
) -> AuditResult:
    """Reconcile the role A and role B documents of a scanned archive.

    Args:
        scan: Result of scan_archive().
        set_a_document: Override for the role A (following) document.
        set_b_document: Override for the role B (followers) document.
        settings: Global settings. Loaded from .env if None.

    Raises:
        DocumentSelectionError: If a role has no document, or a chosen
            document is unknown or failed to parse.
    """
    settings = settings or Settings()
    detection = scan.detection

    name_a = set_a_document
    if name_a is None and detection.best_set_a is not None:
        name_a = detection.best_set_a.document_name
    name_b = set_b_document
    if name_b is None and detection.best_set_b is not None:
        name_b = detection.best_set_b.document_name
    auto_detected = set_a_document is None and set_b_document is None

    value_a = _selected_document(scan, name_a, "set A")
    value_b = _selected_document(scan, name_b, "set B")
    if name_a == name_b:
        raise DocumentSelectionError(
            f"Set A and set B must be different documents, both are {name_a!r}"
        )

    set_stage("reconciliation")
    try:
        list_a = extract_identities(value_a, max_depth=settings.max_search_depth)
        list_b = extract_identities(value_b, max_depth=settings.max_search_depth)
        result = reconcile(list_a, list_b)
    finally:
        set_stage(None)

    logger.info(
        "Audit %s: A=%s (%d), B=%s (%d), mutual=%d",
        scan.archive_id, name_a, result.stats.count_a,
        name_b, result.stats.count_b, result.stats.mutual_count,
    )
    return AuditResult(
        archive_id=scan.archive_id,
        set_a_document=name_a,
        set_b_document=name_b,
        auto_detected=auto_detected,
        reconciliation=result,
    )


def audit_archive(
    data: bytes,
    set_a_document: str | None = None,
    set_b_document: str | None = None,
    settings: Settings | None = None,
) -> AuditResult:
    """Scan an archive and reconcile its two identity lists in one call."""
    settings = settings or Settings()
    scan = scan_archive(data, settings)
    return audit(scan, set_a_document, set_b_document, settings)


def _begin_run(data: bytes, settings: Settings) -> str:
    ensure_logging(settings)
    if len(data) > settings.max_archive_bytes:
        size_mb = len(data) / (1024 * 1024)
        raise ArchiveTooLargeError(
            f"Archive too large ({size_mb:.1f}MB). "
            f"Max allowed is {settings.max_archive_size_mb}MB."
        )
    archive_id = _generate_archive_id(data)
    set_run_context(archive_id, uuid.uuid4().hex[:12])
    logger.info("Scanning archive %s (%d bytes)", archive_id, len(data))
    return archive_id


def _finish_scan(
    archive_id: str,
    data: bytes,
    documents: dict[str, Any],
    settings: Settings,
    t0: float,
) -> ArchiveScan:
    set_stage("detection")
    detection = detect_candidates(
        documents,
        weights=settings.scoring_weights(),
        max_depth=settings.max_search_depth,
    )
    statuses = _build_statuses(documents, settings)
    duration = time.perf_counter() - t0
    logger.info(
        "Scan complete: %d documents, %d faults, %.2fs",
        len(documents),
        sum(1 for s in statuses if s.status == "fault"),
        duration,
    )
    return ArchiveScan(
        archive_id=archive_id,
        documents=documents,
        statuses=statuses,
        detection=detection,
        size_bytes=len(data),
        duration_seconds=round(duration, 3),
    )


def _build_statuses(documents: dict[str, Any], settings: Settings) -> list[DocumentStatus]:
    statuses: list[DocumentStatus] = []
    for name in sorted(documents):
        payload = documents[name]
        if isinstance(payload, DocumentFault):
            statuses.append(DocumentStatus(
                name=name,
                status="fault",
                error_message=payload.message,
                raw_preview=payload.raw_preview,
            ))
            continue
        count = len(extract_identities(payload, max_depth=settings.max_search_depth))
        statuses.append(DocumentStatus(name=name, status="ok", identity_count=count))
    return statuses


def _selected_document(scan: ArchiveScan, name: str | None, role_label: str) -> Any:
    if name is None:
        raise DocumentSelectionError(
            f"No document detected for {role_label}; choose one manually"
        )
    if name not in scan.documents:
        raise DocumentSelectionError(f"Unknown document for {role_label}: {name!r}")
    value = scan.documents[name]
    if isinstance(value, DocumentFault):
        raise DocumentSelectionError(
            f"Document for {role_label} failed to parse: {name!r} ({value.message})"
        )
    return value


def _generate_archive_id(data: bytes) -> str:
    """Short content hash, stable for identical archives."""
    return hashlib.sha256(data).hexdigest()[:16]
