"""Heuristic confidence scoring."""

from __future__ import annotations

from shelly.core.catalog import RuleMatch
from shelly.types import Family

BASE_CONFIDENCE: dict[Family, float] = {
    "git": 0.95,
    "docker": 0.9,
    "package-manager": 0.9,
    "file-ops": 0.8,
    "generic": 0.6,
}
FALLBACK_CONFIDENCE = 0.3
SHORT_MATCH_LENGTH = 5
SHORT_MATCH_PENALTY = 0.7
ARGUMENT_BONUS = 1.1
MAX_CONFIDENCE = 1.0


def score_match(found: RuleMatch) -> float:
    """Score how reliably a line was classified.

    Short matches are penalized, lines with concrete arguments rewarded. Both
    adjustments are plain multipliers, so their order does not matter.
    """

    confidence = BASE_CONFIDENCE[found.family]
    if len(found.text) < SHORT_MATCH_LENGTH:
        confidence *= SHORT_MATCH_PENALTY
    if found.args.strip():
        confidence *= ARGUMENT_BONUS
    return min(MAX_CONFIDENCE, confidence)
