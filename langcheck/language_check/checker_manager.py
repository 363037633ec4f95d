"""Checker setup helpers.

This module centralises :class:`LanguageChecker` construction so that the
tagger, tokenizer settings and disabled rules stay in one place.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from langcheck.tagging import LexiconTagger, Tagger
from langcheck.tokenizers import SentenceTokenizer, WordTokenizer

from .checker import LanguageChecker
from .languages import get_language


class CheckerManager:
    """Factory class responsible for configuring LanguageChecker instances."""

    def __init__(
        self,
        *,
        disabled_rules: Iterable[str] | None = None,
        tagger: Tagger | None = None,
        single_line_breaks_marks_paragraph: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.disabled_rules = set(disabled_rules or [])
        self.tagger: Tagger = tagger if tagger is not None else LexiconTagger()
        self.single_line_breaks_marks_paragraph = single_line_breaks_marks_paragraph

    def build_checker(
        self,
        language: str,
        *,
        extra_disabled_rules: Iterable[str] | None = None,
    ) -> LanguageChecker:
        """Build a LanguageChecker for ``language``; unknown codes raise ``ValueError``."""

        definition = get_language(language)
        rules = set(self.disabled_rules)
        if extra_disabled_rules:
            rules.update(extra_disabled_rules)

        sentence_tokenizer = SentenceTokenizer(
            definition.abbreviations,
            definition.month_names,
            single_line_breaks_marks_paragraph=self.single_line_breaks_marks_paragraph,
        )
        checker = LanguageChecker(
            definition.code,
            sentence_tokenizer,
            WordTokenizer(),
            self.tagger,
            definition.create_rules(),
            disabled_rules=rules,
        )
        self.logger.info(
            "Created checker for %s with %d enabled rule(s)",
            definition.name,
            len(checker.enabled_rules),
        )
        return checker

    def build_checkers(
        self,
        languages: Sequence[str],
        *,
        extra_disabled_rules: Iterable[str] | None = None,
    ) -> list[LanguageChecker]:
        """Build LanguageChecker instances for each language in ``languages``."""

        return [
            self.build_checker(language, extra_disabled_rules=extra_disabled_rules)
            for language in languages
        ]
