"""Agreement between a post-posed adjective and the nouns before it.

The rule flags an adjective that agrees neither with the noun right before
it nor with any noun or determiner further left in the same noun phrase,
for example "les cases blanc" or "un pis i una casa antigues".

Where the antecedent is cannot be decided from a fixed window: prepositional
phrases ("la porta de les cases blanca") and coordinated lists push the
real antecedent arbitrarily far to the left. The rule therefore walks
backwards from the adjective and groups what it sees into "levels", one per
prepositional phrase crossed, counting nouns and determiners by gender and
number at each level. A cascade of exception checks then removes known false
positives before the final agreement decision.

Everything is decided from part-of-speech readings only. A token with
several readings matches a class when any of its readings does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Callable, Sequence

from langcheck.models import AnalyzedSentence, AnalyzedTokenReadings, CheckOutcome, RuleMatch
from langcheck.rules.base import Rule
from langcheck.rules.patterns import UPPERCASE, PosTagPattern

from . import tagset as ts

LOGGER = logging.getLogger(__name__)

MAX_LEVELS = 4
# How far a coordination may look ahead for a preposition
COORDINATION_LOOKAHEAD = 4

RULE_ID = "CONCORDANCES_ADJECTIU_POSPOSAT"


def _keeps_counting(token: AnalyzedTokenReadings) -> bool:
    return ts.KEEP_COUNT.matches(token) or ts.KEEP_COUNT_TOKENS.matches(token)


@dataclass
class LevelCounts:
    """Noun and determiner counts for each clause level.

    The storage has exactly :data:`MAX_LEVELS` slots. Increments for a level
    past the last slot go to the last slot.
    """

    nouns: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    noun_ms: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    noun_fs: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    noun_mp: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    noun_fp: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    det_ms: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    det_fs: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    det_mp: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)
    det_fp: list[int] = field(default_factory=lambda: [0] * MAX_LEVELS)

    @staticmethod
    def _slot(level: int) -> int:
        return max(0, min(level, MAX_LEVELS - 1))

    def increment(self, counter: str, level: int) -> None:
        getattr(self, counter)[self._slot(level)] += 1

    def noun_count(self, level: int) -> int:
        s = self._slot(level)
        return self.noun_ms[s] + self.noun_fs[s] + self.noun_mp[s] + self.noun_fp[s]

    def determiner_count(self, level: int) -> int:
        s = self._slot(level)
        return self.det_ms[s] + self.det_fs[s] + self.det_mp[s] + self.det_fp[s]

    def masculine_count(self, level: int) -> int:
        s = self._slot(level)
        return self.noun_ms[s] + self.noun_mp[s] + self.det_ms[s] + self.det_mp[s]

    def feminine_noun_count(self, level: int) -> int:
        s = self._slot(level)
        return self.noun_fs[s] + self.noun_fp[s]

    def total_nouns(self, level: int) -> int:
        return self.nouns[self._slot(level)]


def count_levels(tokens: Sequence[AnalyzedTokenReadings], index: int) -> tuple[LevelCounts, int]:
    """Walk left from ``tokens[index]`` and count nouns and determiners per level.

    Returns the counts and the number of levels in use (1..MAX_LEVELS).
    Index 0 (sentence start) is never counted.
    """
    counts = LevelCounts()
    level = 0
    j = 1
    keep_counting = True
    is_prev_noun = False
    # stops before index 0, the sentence start, and so does the coordination fold
    while keep_counting and index - j > 0 and level < MAX_LEVELS:
        token = tokens[index - j]
        # two consecutive nouns count once
        if not is_prev_noun:
            if ts.NOUN_MS.matches(token):
                counts.increment("noun_ms", level)
            if ts.NOUN_FS.matches(token):
                counts.increment("noun_fs", level)
            if ts.NOUN_MP.matches(token):
                counts.increment("noun_mp", level)
            if ts.NOUN_FP.matches(token):
                counts.increment("noun_fp", level)
        is_prev_noun = ts.NOUN.matches(token)
        if is_prev_noun:
            counts.increment("nouns", level)

        # a common-gender determiner takes the gender of its noun
        if ts.DET_CS.matches(token):
            following = tokens[index - j + 1]
            if ts.NOUN_MS.matches(following):
                counts.increment("det_ms", level)
            if ts.NOUN_FS.matches(following):
                counts.increment("det_fs", level)
        if ts.DET_MS.matches(token):
            counts.increment("det_ms", level)
        if ts.DET_FS.matches(token):
            counts.increment("det_fs", level)
        if ts.DET_MP.matches(token):
            counts.increment("det_mp", level)
        if ts.DET_FP.matches(token):
            counts.increment("det_fp", level)

        if ts.PREPOSITION.matches(token) and not ts.COORDINATION_IONI.matches(tokens[index - j - 1]):
            level += 1

        # "de la casa i de l'hort": jump to the preposition after the coordination
        if level > 0 and ts.COORDINATION_IONI.matches(token):
            k = 1
            while (
                k < COORDINATION_LOOKAHEAD
                and index - j - k > 0
                and _keeps_counting(tokens[index - j - k])
            ):
                if ts.PREPOSITION.matches(tokens[index - j - k]):
                    j += k
                    break
                k += 1

        j += 1
        keep_counting = _keeps_counting(tokens[index - j])

    return counts, min(level + 1, MAX_LEVELS)


@dataclass
class AdjectiveCandidate:
    """An adjective under examination and its neighbourhood."""

    tokens: Sequence[AnalyzedTokenReadings]
    index: int

    @property
    def token(self) -> AnalyzedTokenReadings:
        return self.tokens[self.index]

    @property
    def text(self) -> str:
        return self.token.token

    @property
    def previous(self) -> AnalyzedTokenReadings:
        return self.tokens[self.index - 1]

    @property
    def next_text(self) -> str:
        if self.index < len(self.tokens) - 1:
            return self.tokens[self.index + 1].token
        return ""

    @cached_property
    def level_scan(self) -> tuple[LevelCounts, int]:
        return count_levels(self.tokens, self.index)

    @property
    def counts(self) -> LevelCounts:
        return self.level_scan[0]

    @property
    def levels(self) -> int:
        return self.level_scan[1]

    @property
    def antecedent_is_plural(self) -> bool:
        """True when every level holding nouns or determiners has several determiners."""
        counts, levels = self.level_scan
        plural = True
        for level in range(levels):
            if counts.noun_count(level) + counts.determiner_count(level) > 0:
                plural = plural and counts.determiner_count(level) > 1
        return plural


ExceptionCheck = Callable[[AdjectiveCandidate], CheckOutcome]


def mixed_gender_plural(candidate: AdjectiveCandidate) -> CheckOutcome:
    """A plural adjective after several nouns of different gender.

    "un pis i una casa antics": the masculine plural covers both nouns.
    """
    token = candidate.token
    is_mp = ts.ADJECTIVE_MP.matches(token)
    is_fp = ts.ADJECTIVE_FP.matches(token)
    if not (is_mp or is_fp):
        return CheckOutcome.NO_OPINION
    counts = candidate.counts
    for level in range(candidate.levels):
        several = counts.noun_count(level) > 1 or counts.determiner_count(level) > 1
        if not several:
            continue
        masculine = counts.masculine_count(level)
        feminine_nouns = counts.feminine_noun_count(level)
        total_nouns = counts.total_nouns(level)
        if is_mp and masculine > 0 and feminine_nouns <= total_nouns:
            return CheckOutcome.EXCEPTION
        if is_fp and (masculine == 0 or feminine_nouns >= total_nouns):
            return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


def coordinated_adjectives(candidate: AdjectiveCandidate) -> CheckOutcome:
    """Plural noun followed by two coordinated adjectives: "cases blanques i vermelles"."""
    tokens, i = candidate.tokens, candidate.index
    if i >= len(tokens) - 2 or not ts.COORDINATION.matches(candidate.next_text):
        return CheckOutcome.NO_OPINION
    previous, token, after = tokens[i - 1], tokens[i], tokens[i + 2]
    masculine = (
        (ts.NOUN_MP.matches(previous) or ts.ADJECTIVE_MP.matches(previous))
        and ts.ADJECTIVE_M.matches(token)
        and ts.ADJECTIVE_M.matches(after)
    )
    feminine = (
        (ts.NOUN_FP.matches(previous) or ts.ADJECTIVE_FP.matches(previous))
        and ts.ADJECTIVE_F.matches(token)
        and ts.ADJECTIVE_F.matches(after)
    )
    if masculine or feminine:
        return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


def idiomatic_predecessor(candidate: AdjectiveCandidate) -> CheckOutcome:
    """"una vegada acabat", "a vegades", "el terme emprat"."""
    if ts.PREVIOUS_WORD_EXCEPTIONS.matches(candidate.previous):
        return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


def fixed_expressions(candidate: AdjectiveCandidate) -> CheckOutcome:
    """"tret de", "llevat de", "primer", "junts" and capitalised words."""
    text = candidate.text
    if text in ("tret", "llevat") and candidate.next_text == "de":
        return CheckOutcome.EXCEPTION
    if text in ("primer", "junts") or UPPERCASE.matches(text):
        return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


def participle_exceptions(candidate: AdjectiveCandidate) -> CheckOutcome:
    """"atès", "donat"... used as conjunctions."""
    if ts.PARTICIPLE_EXCEPTIONS.matches(candidate.text):
        return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


def comparison_before_que(candidate: AdjectiveCandidate) -> CheckOutcome:
    """"segur que", "major que", "menor que"."""
    if candidate.text in ("segur", "major", "menor") and candidate.next_text == "que":
        return CheckOutcome.EXCEPTION
    return CheckOutcome.NO_OPINION


EXCEPTION_CHECKS: tuple[ExceptionCheck, ...] = (
    mixed_gender_plural,
    coordinated_adjectives,
    idiomatic_predecessor,
    fixed_expressions,
    participle_exceptions,
    comparison_before_que,
)

# (adjective class, agreeing noun group, agreeing adjective), in priority order
AGREEMENT_CLASSES: tuple[tuple[PosTagPattern, PosTagPattern, PosTagPattern], ...] = (
    (ts.ADJECTIVE_CS, ts.GROUP_CS, ts.ADJECTIVE_S),
    (ts.ADJECTIVE_CP, ts.GROUP_CP, ts.ADJECTIVE_P),
    (ts.ADJECTIVE_MS, ts.GROUP_MS, ts.ADJECTIVE_MS),
    (ts.ADJECTIVE_FS, ts.GROUP_FS, ts.ADJECTIVE_FS),
    (ts.ADJECTIVE_MP, ts.GROUP_MP, ts.ADJECTIVE_MP),
    (ts.ADJECTIVE_FP, ts.GROUP_FP, ts.ADJECTIVE_FP),
)


class ComplexAdjectiveConcordanceRule(Rule):
    """Checks that an adjective agrees with the noun phrase before it."""

    category = "Concordances en grups nominals"

    def __init__(self, exception_checks: Sequence[ExceptionCheck] | None = None) -> None:
        self.exception_checks: tuple[ExceptionCheck, ...] = tuple(
            EXCEPTION_CHECKS if exception_checks is None else exception_checks
        )

    @property
    def rule_id(self) -> str:
        return RULE_ID

    @property
    def description(self) -> str:
        return "Comprova si un adjectiu concorda amb noms del voltant."

    def match(self, sentence: AnalyzedSentence) -> list[RuleMatch]:
        tokens = sentence.tokens_without_whitespace
        matches: list[RuleMatch] = []
        # token 0 is the sentence start
        for i in range(1, len(tokens)):
            token = tokens[i]
            if not ts.ADJECTIVE.matches(token) or ts.AGREES.matches(token):
                continue
            candidate = AdjectiveCandidate(tokens, i)
            if self._is_exception(candidate):
                continue
            if self._disagrees(candidate):
                matches.append(
                    self._to_rule_match(
                        token,
                        f"L'adjectiu «{token.token}» no concorda apropiadament.",
                        "Falta de concordança.",
                    )
                )
        return matches

    def _is_exception(self, candidate: AdjectiveCandidate) -> bool:
        for check in self.exception_checks:
            if check(candidate) is CheckOutcome.EXCEPTION:
                LOGGER.debug(
                    "Adjective %r at %d excepted by %s",
                    candidate.text,
                    candidate.token.start_pos,
                    getattr(check, "__name__", repr(check)),
                )
                return True
        return False

    def _disagrees(self, candidate: AdjectiveCandidate) -> bool:
        tokens, i = candidate.tokens, candidate.index
        token = candidate.token
        for adjective_class, group_pattern, adjective_pattern in AGREEMENT_CLASSES:
            if adjective_class.matches(token):
                break
        else:
            return False

        previous = tokens[i - 1]
        previous_noun_disagrees = ts.NOUN.matches(previous) and not group_pattern.matches(previous)
        previous_adjective_disagrees = (
            i > 3
            and ts.ADJECTIVE.matches(previous)
            and not adjective_pattern.matches(previous)
            and not ts.AUXILIARY_VERB.matches(tokens[i - 2])
            and not ts.AUXILIARY_VERB.matches(tokens[i - 3])
        )
        if not (previous_noun_disagrees or previous_adjective_disagrees):
            return False

        # look further left for anything the adjective agrees with
        agrees = False
        j = 1
        keep_counting = True
        while i - j > 0 and not agrees and keep_counting:
            if group_pattern.matches(tokens[i - j]):
                agrees = True
            j += 1
            keep_counting = _keeps_counting(tokens[i - j])

        if not agrees:
            return True
        # a singular adjective cannot follow a plural noun group
        return candidate.antecedent_is_plural and ts.ADJECTIVE_S.matches(token)
