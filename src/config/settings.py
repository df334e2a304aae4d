# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for extraction limits, detection weights,
annotation storage and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from relaudit.detection.roles import ScoringWeights


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Archive extraction ===
    document_extension: str = ".json"
    fault_preview_chars: int = 300
    max_search_depth: int = 32

    # === Input limits (enforced by the facade, before extraction) ===
    max_archive_size_mb: int = 500
    worker_threshold_mb: int = 10

    # === Detection weights ===
    score_primary_bonus: int = 50
    score_synonym_bonus: int = 30
    score_phrase_bonus: int = 20
    score_opposite_penalty: int = 30
    score_filename_cap: int = 100

    # === Annotations ===
    annotation_backend: Literal["memory", "json"] = "memory"
    annotation_path: Path = Path("~/.relaudit/annotations.json")

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30
    log_configure: bool = False  # facade installs handlers on first scan

    # --- Validators ---

    @field_validator("document_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        ext = v.strip().lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        return ext

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if not self.document_extension or self.document_extension == ".":
            errors.append("DOCUMENT_EXTENSION must not be empty")

        if self.fault_preview_chars <= 0:
            errors.append("FAULT_PREVIEW_CHARS must be > 0")

        if self.max_search_depth <= 0:
            errors.append("MAX_SEARCH_DEPTH must be > 0")

        if self.worker_threshold_mb > self.max_archive_size_mb:
            errors.append("WORKER_THRESHOLD_MB must be <= MAX_ARCHIVE_SIZE_MB")

        if self.score_filename_cap <= 0:
            errors.append("SCORE_FILENAME_CAP must be > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def max_archive_bytes(self) -> int:
        return self.max_archive_size_mb * 1024 * 1024

    @property
    def worker_threshold_bytes(self) -> int:
        return self.worker_threshold_mb * 1024 * 1024

    def scoring_weights(self) -> ScoringWeights:
        """Detection weights as a ScoringWeights value."""
        from relaudit.detection.roles import ScoringWeights

        return ScoringWeights(
            primary_bonus=self.score_primary_bonus,
            synonym_bonus=self.score_synonym_bonus,
            phrase_bonus=self.score_phrase_bonus,
            opposite_penalty=self.score_opposite_penalty,
            filename_cap=self.score_filename_cap,
        )


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
