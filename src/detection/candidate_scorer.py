# src/detection/candidate_scorer.py — v1
"""Pick the two documents most likely to hold the role A and role B lists.

Each informative document is scored per role as
``identity_count + filename_score`` where the filename score comes from
keyword substrings (see detection.roles). Candidates are ranked, then the
best distinct pair is resolved with filename-keyword preference and
positional fallbacks.
"""

from __future__ import annotations

import logging
from typing import Any

from relaudit.core.models import DetectionCandidate, DetectionResult, Role, is_fault
from relaudit.detection.roles import ROLE_A, ROLE_B, ROLE_PROFILES, ScoringWeights
from relaudit.extraction.identity_extractor import DEFAULT_MAX_DEPTH, extract_identities

logger = logging.getLogger(__name__)


def score_filename(filename: str, role: Role, weights: ScoringWeights | None = None) -> int:
    """Score how strongly a filename suggests the given role, clamped to [0, cap]."""
    weights = weights or ScoringWeights()
    profile = ROLE_PROFILES[role]
    lower = filename.lower()
    score = 0

    if profile.primary in lower:
        score += weights.primary_bonus
    if any(s in lower for s in profile.synonyms):
        score += weights.synonym_bonus
    if any(p in lower for p in profile.phrases):
        score += weights.phrase_bonus
    if any(o in lower for o in profile.opposite):
        score -= weights.opposite_penalty

    return max(0, min(weights.filename_cap, score))


def detect_candidates(
    documents: dict[str, Any],
    weights: ScoringWeights | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DetectionResult:
    """Score every parsed document and resolve the best role A / role B pair.

    Faulted documents and documents without identities are skipped. Never
    raises; either best pick may be None.
    """
    weights = weights or ScoringWeights()
    candidates: list[DetectionCandidate] = []

    for name, payload in documents.items():
        if is_fault(payload):
            continue
        count = len(extract_identities(payload, max_depth=max_depth))
        if count == 0:
            continue

        score_a = score_filename(name, "a", weights)
        score_b = score_filename(name, "b", weights)
        candidates.append(_candidate(name, count, score_a, "a", weights.filename_cap))
        # No second entry when the filename carries no role signal
        if score_b != score_a:
            candidates.append(_candidate(name, count, score_b, "b", weights.filename_cap))

    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)

    best_a = _first_matching(ranked, ROLE_A.matches)
    if best_a is None and ranked:
        best_a = ranked[0]

    best_b = _first_matching(ranked, ROLE_B.matches)
    if best_b is None:
        if len(ranked) > 1:
            best_b = ranked[1]
        elif (
            len(ranked) == 1
            and best_a is not None
            and best_a.document_name != ranked[0].document_name
        ):
            best_b = ranked[0]

    if (
        best_a is not None
        and best_b is not None
        and best_a.document_name == best_b.document_name
    ):
        best_b = next(
            (c for c in ranked if c.document_name != best_a.document_name), None
        )

    logger.info(
        "Detection: %d candidates, set_a=%s, set_b=%s",
        len(ranked),
        best_a.document_name if best_a else None,
        best_b.document_name if best_b else None,
    )
    return DetectionResult(best_set_a=best_a, best_set_b=best_b, candidates=ranked)


def _candidate(
    name: str, count: int, filename_score: int, role: Role, cap: int
) -> DetectionCandidate:
    return DetectionCandidate(
        document_name=name,
        identity_count=count,
        score=count + filename_score,
        role=role,
        explanation=f"Extracted {count} identities, filename score: {filename_score}/{cap}",
    )


def _first_matching(ranked: list[DetectionCandidate], predicate) -> DetectionCandidate | None:
    for candidate in ranked:
        if predicate(candidate.document_name):
            return candidate
    return None
