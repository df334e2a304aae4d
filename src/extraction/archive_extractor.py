# src/extraction/archive_extractor.py — v1
"""Archive extractor: ZIP bytes to parsed JSON documents.

Only an unreadable container is fatal. Every matching entry yields either
its parsed value or a DocumentFault, so one corrupt file never aborts the
batch.
"""

from __future__ import annotations

import io
import json
import logging
import zipfile
import zlib
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from relaudit.core.models import DocumentFault, RawDocumentEntry

if TYPE_CHECKING:
    from relaudit.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".json"
DEFAULT_PREVIEW_CHARS = 300


class ArchiveError(ValueError):
    """Raised when the input bytes are not a readable archive container."""


def extract_documents(
    data: bytes, settings: Settings | None = None
) -> dict[str, Any | DocumentFault]:
    """Extract and parse every structured document in a ZIP archive.

    Args:
        data: Raw archive bytes.
        settings: Extension filter and preview length. Defaults apply if None.

    Returns:
        Mapping of archive path to parsed value or DocumentFault, in archive order.

    Raises:
        ArchiveError: If the bytes are not a valid ZIP container.
    """
    return {entry.name: entry.payload for entry in iter_document_entries(data, settings)}


def iter_document_entries(
    data: bytes, settings: Settings | None = None
) -> Iterator[RawDocumentEntry]:
    """Yield one RawDocumentEntry per matching archive member.

    The archive is opened eagerly so ArchiveError surfaces on the first
    ``next()`` call, before any entry is produced.
    """
    extension = (
        DEFAULT_EXTENSION if settings is None else settings.document_extension
    ).lower()
    preview_chars = (
        DEFAULT_PREVIEW_CHARS if settings is None else settings.fault_preview_chars
    )

    archive = _open_archive(data)
    with archive:
        names = [
            info.filename
            for info in archive.infolist()
            if not info.is_dir() and info.filename.lower().endswith(extension)
        ]
        logger.info("Archive opened: %d matching documents", len(names))

        faults = 0
        for name in names:
            entry = _read_entry(archive, name, preview_chars)
            if entry.is_fault:
                faults += 1
            yield entry

        if faults:
            logger.info("Archive extraction finished with %d faulted documents", faults)


def _open_archive(data: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as exc:
        raise ArchiveError(f"Not a valid ZIP archive: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise ArchiveError(f"Unreadable archive: {exc}") from exc


def _read_entry(archive: zipfile.ZipFile, name: str, preview_chars: int) -> RawDocumentEntry:
    """Read, decode and parse one member, converting failures into a fault."""
    try:
        raw = archive.read(name)
    except (
        zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, OSError, ValueError
    ) as exc:
        logger.warning("Failed to read archive entry %s: %s", name, exc)
        return RawDocumentEntry(
            name=name,
            payload=DocumentFault(message=f"Unreadable entry: {exc}"),
        )

    # utf-8-sig drops a leading BOM, which json.loads rejects
    text = raw.decode("utf-8-sig", errors="replace")
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as exc:
        logger.warning("Failed to parse %s: %s", name, exc)
        return RawDocumentEntry(
            name=name,
            payload=DocumentFault(message=str(exc), raw_preview=text[:preview_chars]),
        )
    return RawDocumentEntry(name=name, payload=payload)
