# src/extraction/identity_extractor.py — v1
"""Schema-agnostic identity extraction from parsed export documents.

Recognized shapes, tried in order on every value:
  1. A list: extract from each element and concatenate.
  2. A mapping holding a list under a relationship wrapper key
     (``relationships_following``, then ``relationships_followers``).
  3. A mapping holding a ``string_list_data`` entry list, whose elements
     are ``{"value": <username>, "href": <link>}``.
  4. Any other mapping: depth-first search of its values for the first
     nested list that yields at least one identity.

Never raises. Unrecognized shapes yield an empty list.
"""

from __future__ import annotations

from typing import Any

from relaudit.core.models import IdentityRecord
from relaudit.core.normalization import normalize_href, normalize_username

WRAPPER_KEYS: tuple[str, ...] = ("relationships_following", "relationships_followers")
ENTRY_LIST_KEY = "string_list_data"
DEFAULT_MAX_DEPTH = 32


def extract_identities(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> list[IdentityRecord]:
    """Recover the ordered identity records contained in a parsed document.

    Args:
        value: Any JSON-compatible value (dict, list, scalar).
        max_depth: Nesting depth beyond which branches are ignored.

    Returns:
        Identity records in document order. Duplicates are kept.
    """
    return _extract(value, 0, max_depth)


def _extract(value: Any, depth: int, max_depth: int) -> list[IdentityRecord]:
    if depth > max_depth:
        return []

    if isinstance(value, list):
        return _extract_each(value, depth, max_depth)

    if not isinstance(value, dict):
        return []

    for key in WRAPPER_KEYS:
        wrapped = value.get(key)
        if isinstance(wrapped, list):
            return _extract_each(wrapped, depth, max_depth)

    entries = value.get(ENTRY_LIST_KEY)
    if isinstance(entries, list):
        return _parse_entry_list(entries)

    for nested in value.values():
        found = _search_nested(nested, depth + 1, max_depth)
        if found:
            return found
    return []


def _extract_each(items: list[Any], depth: int, max_depth: int) -> list[IdentityRecord]:
    records: list[IdentityRecord] = []
    for item in items:
        records.extend(_extract(item, depth + 1, max_depth))
    return records


def _search_nested(value: Any, depth: int, max_depth: int) -> list[IdentityRecord]:
    """Find the first nested list that yields identities. Mappings are only descended."""
    if depth > max_depth:
        return []
    if isinstance(value, list):
        return _extract_each(value, depth, max_depth)
    if isinstance(value, dict):
        for nested in value.values():
            found = _search_nested(nested, depth + 1, max_depth)
            if found:
                return found
    return []


def _parse_entry_list(entries: list[Any]) -> list[IdentityRecord]:
    records: list[IdentityRecord] = []
    for entry in entries:
        record = _parse_entry(entry)
        if record is not None:
            records.append(record)
    return records


def _parse_entry(entry: Any) -> IdentityRecord | None:
    if not isinstance(entry, dict):
        return None
    username = normalize_username(entry.get("value"))
    if username is None:
        return None
    return IdentityRecord(username=username, href=normalize_href(entry.get("href")))
