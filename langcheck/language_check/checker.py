"""Runs a set of rules over plain text.

The checker splits the text into sentences, analyses each sentence with the
word tokenizer and tagger, and asks every enabled rule for matches. Match
offsets are turned from sentence-relative into document-relative.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from langcheck.models import AnalyzedSentence, RuleMatch
from langcheck.rules import Rule
from langcheck.tagging import Tagger, analyze_sentence
from langcheck.tokenizers import SentenceTokenizer, WordTokenizer

LOGGER = logging.getLogger(__name__)


class LanguageChecker:
    """Sentence-by-sentence rule runner for one language."""

    def __init__(
        self,
        language: str,
        sentence_tokenizer: SentenceTokenizer,
        word_tokenizer: WordTokenizer,
        tagger: Tagger,
        rules: Sequence[Rule],
        disabled_rules: Iterable[str] | None = None,
    ) -> None:
        self.language = language
        self.sentence_tokenizer = sentence_tokenizer
        self.word_tokenizer = word_tokenizer
        self.tagger = tagger
        self.rules = list(rules)
        self.disabled_rules = set(disabled_rules or [])

    @property
    def enabled_rules(self) -> list[Rule]:
        return [rule for rule in self.rules if rule.rule_id not in self.disabled_rules]

    def analyze_text(self, text: str) -> list[tuple[int, AnalyzedSentence]]:
        """Return ``(offset, sentence)`` pairs for every sentence of ``text``."""
        analysed: list[tuple[int, AnalyzedSentence]] = []
        offset = 0
        for sentence in self.sentence_tokenizer.split(text):
            analysed.append((offset, analyze_sentence(sentence, self.tagger, self.word_tokenizer)))
            offset += len(sentence)
        return analysed

    def _check_sentence(self, item: tuple[int, AnalyzedSentence]) -> list[RuleMatch]:
        offset, sentence = item
        matches: list[RuleMatch] = []
        for rule in self.enabled_rules:
            matches.extend(match.shifted(offset) for match in rule.match(sentence))
        return matches

    def check(self, text: str, *, max_workers: int = 1) -> list[RuleMatch]:
        """Return all matches in ``text`` ordered by position.

        With ``max_workers > 1`` sentences are checked on a thread pool.
        Exceptions raised by a rule propagate to the caller.
        """
        sentences = self.analyze_text(text)
        if max_workers > 1 and len(sentences) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                per_sentence = list(executor.map(self._check_sentence, sentences))
        else:
            per_sentence = [self._check_sentence(item) for item in sentences]

        matches = [match for sentence_matches in per_sentence for match in sentence_matches]
        matches.sort(key=lambda match: (match.from_pos, match.to_pos))
        LOGGER.debug(
            "Checked %d sentence(s) in %s: %d match(es)", len(sentences), self.language, len(matches)
        )
        return matches

    def __repr__(self) -> str:
        return f"LanguageChecker({self.language!r}, rules={[rule.rule_id for rule in self.rules]})"
