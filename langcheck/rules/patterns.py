"""Token predicates built on regular expressions.

A :class:`PosTagPattern` tests the readings of a token and succeeds when
*any* reading's tag matches: without disambiguation a token may be a noun
and an adjective at the same time, and the rules prefer a possible match
over a missed one. A :class:`TokenPattern` tests the surface string only.

Patterns hold no state and are shared by every rule and thread.
"""

from __future__ import annotations

from typing import Iterable

import regex

from langcheck.models import AnalyzedTokenReadings


class PosTagPattern:
    """Matches a token when one of its POS tags fully matches ``expression``."""

    __slots__ = ("expression", "_compiled")

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._compiled = regex.compile(expression)

    def matches(self, token: AnalyzedTokenReadings | None) -> bool:
        if token is None:
            return False
        readings = getattr(token, "readings", None) or ()
        for reading in readings:
            pos_tag = getattr(reading, "pos_tag", None)
            if pos_tag is not None and self._compiled.fullmatch(pos_tag):
                return True
        return False

    __call__ = matches

    def __repr__(self) -> str:
        return f"PosTagPattern({self.expression!r})"


class TokenPattern:
    """Matches a token (or a plain string) whose surface form fully matches."""

    __slots__ = ("expression", "_compiled")

    def __init__(self, expression: str, *, ignore_case: bool = False) -> None:
        self.expression = expression
        flags = regex.IGNORECASE if ignore_case else 0
        self._compiled = regex.compile(expression, flags)

    def matches(self, token: AnalyzedTokenReadings | str | None) -> bool:
        if token is None:
            return False
        text = token if isinstance(token, str) else token.token
        return self._compiled.fullmatch(text) is not None

    __call__ = matches

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "TokenPattern":
        """Build a literal alternation from a word list."""
        return cls("|".join(regex.escape(word) for word in words))

    def __repr__(self) -> str:
        return f"TokenPattern({self.expression!r})"


# Uppercase initial followed by lowercase letters (or the Catalan middle dot)
UPPERCASE = TokenPattern(r"\p{Lu}[\p{Ll}·]*")
