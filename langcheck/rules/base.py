"""Base class for pattern rules.

A rule looks at one analysed sentence at a time and returns its matches.
Rules keep no state between sentences, so one instance can be shared by
several threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from langcheck.models import AnalyzedSentence, AnalyzedTokenReadings, RuleMatch


class Rule(ABC):
    """Abstract interface for every grammar rule."""

    category: str = "Grammar"

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Stable identifier, used to disable the rule and in reports."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line human readable description."""

    @abstractmethod
    def match(self, sentence: AnalyzedSentence) -> list[RuleMatch]:
        """Return the matches found in ``sentence`` (possibly none)."""

    def reset(self) -> None:
        """Forget any state kept between sentences. Most rules keep none."""
        return None

    def _to_rule_match(
        self,
        token: AnalyzedTokenReadings,
        message: str,
        short_message: str = "",
    ) -> RuleMatch:
        """Anchor a match on exactly the characters of ``token``."""
        return RuleMatch(
            rule_id=self.rule_id,
            from_pos=token.start_pos,
            to_pos=token.end_pos,
            message=message,
            short_message=short_message,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id})"
