# src/api/models.py — v1
"""API-level models: DocumentStatus, ArchiveScan, AuditResult."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from relaudit.core.models import DetectionResult, DocumentFault, ReconciliationResult


class DocumentStatus(BaseModel):
    """Per-document outcome of extraction, for display and diagnosis."""

    name: str
    status: Literal["ok", "fault"]
    identity_count: int = 0
    error_message: str | None = None
    raw_preview: str | None = None


class ArchiveScan(BaseModel):
    """Return value of facade.scan_archive(): documents plus detection."""

    archive_id: str
    documents: dict[str, Any] = Field(default_factory=dict)
    statuses: list[DocumentStatus] = Field(default_factory=list)
    detection: DetectionResult = Field(default_factory=DetectionResult)
    size_bytes: int = 0
    duration_seconds: float = 0.0

    @property
    def document_names(self) -> list[str]:
        return sorted(self.documents)

    @property
    def fault_count(self) -> int:
        return sum(1 for v in self.documents.values() if isinstance(v, DocumentFault))


class AuditResult(BaseModel):
    """Return value of facade.audit(): which documents were compared and how."""

    archive_id: str
    set_a_document: str
    set_b_document: str
    auto_detected: bool
    reconciliation: ReconciliationResult
