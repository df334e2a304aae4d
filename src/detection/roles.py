# src/detection/roles.py — v1
"""Role keyword profiles and tunable filename-scoring weights.

Role "a" is the list of accounts the exporting user follows; role "b" is
the list of accounts following them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from relaudit.core.models import Role


class ScoringWeights(BaseModel):
    """Filename heuristic weights. Product tuning constants, not a model."""

    model_config = ConfigDict(frozen=True)

    primary_bonus: int = 50
    synonym_bonus: int = 30
    phrase_bonus: int = 20
    opposite_penalty: int = 30
    filename_cap: int = 100


class RoleProfile(BaseModel):
    """Substrings that signal (or contradict) one role in a lower-cased filename."""

    model_config = ConfigDict(frozen=True)

    role: Role
    primary: str
    synonyms: tuple[str, ...]
    phrases: tuple[str, ...]
    opposite: tuple[str, ...]

    @property
    def keywords(self) -> tuple[str, ...]:
        """Every substring that counts as a filename match for this role."""
        return (self.primary, *self.synonyms, *self.phrases)

    def matches(self, filename: str) -> bool:
        lower = filename.lower()
        return any(keyword in lower for keyword in self.keywords)


ROLE_A = RoleProfile(
    role="a",
    primary="following",
    synonyms=("following", "follows"),
    phrases=("you_follow", "you-follow"),
    opposite=("follower",),
)

ROLE_B = RoleProfile(
    role="b",
    primary="followers",
    synonyms=("followers", "follower"),
    phrases=("follow_you", "follow-you"),
    opposite=("following", "follows"),
)

ROLE_PROFILES: dict[str, RoleProfile] = {"a": ROLE_A, "b": ROLE_B}
