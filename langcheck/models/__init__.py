"""Public model exports for the project.

Keep the :mod:`langcheck` namespace clean: tests and other modules should
import ``from langcheck.models import AnalyzedSentence, RuleMatch``.
"""

from __future__ import annotations

from .enums import CheckOutcome, IssueType
from .language_issue import LanguageIssue
from .rule_match import RuleMatch
from .sentence import AnalyzedSentence
from .token import SENTENCE_START_TAG, AnalyzedToken, AnalyzedTokenReadings

__all__ = [
    "AnalyzedToken",
    "AnalyzedTokenReadings",
    "AnalyzedSentence",
    "RuleMatch",
    "LanguageIssue",
    "IssueType",
    "CheckOutcome",
    "SENTENCE_START_TAG",
]
