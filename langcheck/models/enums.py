"""Enumerations shared by the rules and the reporting code."""

from __future__ import annotations

from enum import Enum


class IssueType(str, Enum):
    """Kind of entry written to a language check report.

    Values:
        GRAMMAR: A rule match.
        ERROR: The document could not be checked at all.
        WARNING: Some rule failed but other results are available.
    """

    GRAMMAR = "grammar"
    ERROR = "error"
    WARNING = "warning"


class CheckOutcome(str, Enum):
    """Result of a single exception check in a rule's exception cascade."""

    NO_OPINION = "NO_OPINION"
    EXCEPTION = "EXCEPTION"
