# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
Value objects are frozen: they are built fresh for one audit run and
never mutated afterwards.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from relaudit.core.normalization import normalize_href

Role = Literal["a", "b"]


# === ARCHIVE DOCUMENTS ===


class DocumentFault(BaseModel):
    """A document that failed to parse. Excluded from detection and extraction."""

    model_config = ConfigDict(frozen=True)

    message: str
    raw_preview: str = ""


class RawDocumentEntry(BaseModel):
    """One matching archive entry: parsed JSON value or a fault."""

    model_config = ConfigDict(frozen=True)

    name: str
    payload: Any = None

    @property
    def is_fault(self) -> bool:
        return isinstance(self.payload, DocumentFault)


def is_fault(value: Any) -> bool:
    """True if a document payload is a parse fault rather than parsed data."""
    return isinstance(value, DocumentFault)


# === IDENTITIES ===


class IdentityRecord(BaseModel):
    """A single account reference: username plus optional profile link."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    href: str | None = None

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("href", mode="before")
    @classmethod
    def clean_href(cls, v: Any) -> str | None:
        return normalize_href(v)


# === DETECTION ===


class DetectionCandidate(BaseModel):
    """A document scored as a possible source for one role."""

    model_config = ConfigDict(frozen=True)

    document_name: str
    identity_count: int = Field(ge=0)
    score: int
    role: Role
    explanation: str


class DetectionResult(BaseModel):
    """Best picks per role plus the full ranked candidate list."""

    model_config = ConfigDict(frozen=True)

    best_set_a: DetectionCandidate | None = None
    best_set_b: DetectionCandidate | None = None
    candidates: list[DetectionCandidate] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_distinct_documents(self) -> DetectionResult:
        if (
            self.best_set_a is not None
            and self.best_set_b is not None
            and self.best_set_a.document_name == self.best_set_b.document_name
        ):
            raise ValueError("best_set_a and best_set_b must reference different documents")
        return self


# === RECONCILIATION ===


class RelationStats(BaseModel):
    """Counts and percentages for one reconciliation."""

    model_config = ConfigDict(frozen=True)

    count_a: int = 0
    count_b: int = 0
    mutual_count: int = 0
    a_only_count: int = 0
    b_only_count: int = 0
    mutual_pct: float = 0.0
    a_only_pct: float = 0.0
    b_only_pct: float = 0.0


class ReconciliationResult(BaseModel):
    """Three username-sorted partitions of two identity lists."""

    model_config = ConfigDict(frozen=True)

    mutual: list[IdentityRecord] = Field(default_factory=list)
    a_only: list[IdentityRecord] = Field(default_factory=list)
    b_only: list[IdentityRecord] = Field(default_factory=list)
    stats: RelationStats = Field(default_factory=RelationStats)
