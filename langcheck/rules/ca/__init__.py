"""Catalan grammar rules."""

from __future__ import annotations

from .complex_adjective_concordance import (
    EXCEPTION_CHECKS,
    MAX_LEVELS,
    AdjectiveCandidate,
    ComplexAdjectiveConcordanceRule,
    LevelCounts,
    count_levels,
)

__all__ = [
    "AdjectiveCandidate",
    "ComplexAdjectiveConcordanceRule",
    "EXCEPTION_CHECKS",
    "LevelCounts",
    "MAX_LEVELS",
    "count_levels",
]
