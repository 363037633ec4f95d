"""Analysed sentence: the token sequence rules operate on."""

from __future__ import annotations

from typing import Iterable

from .token import AnalyzedTokenReadings


class AnalyzedSentence:
    """Ordered tokens of one sentence, with and without whitespace.

    The first token is always the synthetic sentence-start token. Both views
    hold the very same token objects, so offsets read from the
    whitespace-free view still point into the original sentence text.
    """

    def __init__(self, tokens: Iterable[AnalyzedTokenReadings]) -> None:
        token_list = list(tokens)
        if not token_list or not token_list[0].is_sentence_start:
            token_list.insert(0, AnalyzedTokenReadings.sentence_start())

        previous = 0
        for token in token_list:
            if token.start_pos < previous:
                raise ValueError(
                    f"Token offsets must not decrease: {token.token!r} at "
                    f"{token.start_pos} follows offset {previous}"
                )
            previous = token.start_pos

        self._tokens = tuple(token_list)
        self._tokens_without_whitespace = tuple(
            token
            for index, token in enumerate(self._tokens)
            if index == 0 or not token.is_whitespace
        )

    @property
    def tokens(self) -> tuple[AnalyzedTokenReadings, ...]:
        return self._tokens

    @property
    def tokens_without_whitespace(self) -> tuple[AnalyzedTokenReadings, ...]:
        return self._tokens_without_whitespace

    @property
    def text(self) -> str:
        return "".join(token.token for token in self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __str__(self) -> str:
        return " ".join(str(token) for token in self._tokens_without_whitespace[1:])

    def __repr__(self) -> str:
        return f"AnalyzedSentence({self.text!r})"
