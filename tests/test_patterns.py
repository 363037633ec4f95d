from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from langcheck.models import AnalyzedToken, AnalyzedTokenReadings
from langcheck.rules import UPPERCASE, PosTagPattern, TokenPattern
from langcheck.rules.ca import tagset


def _token(word: str, *tags: str) -> AnalyzedTokenReadings:
    return AnalyzedTokenReadings(word, 0, tuple(AnalyzedToken(word, tag, word) for tag in tags))


def test_pos_tag_pattern_matches_any_reading() -> None:
    # "blanc" is both an adjective and a noun
    token = _token("blanc", "AQ0MS0", "NCMS000")
    assert tagset.ADJECTIVE.matches(token)
    assert tagset.NOUN.matches(token)
    assert not tagset.PREPOSITION.matches(token)


def test_pos_tag_pattern_requires_full_match() -> None:
    pattern = PosTagPattern(r"N.[MC]S.*|D.0MS0")
    assert pattern(_token("pis", "NCMS000"))
    assert not pattern(_token("el", "DA0MS0X"))


def test_pos_tag_pattern_without_tags() -> None:
    assert not tagset.NOUN.matches(_token("xyz"))
    assert not tagset.NOUN.matches(None)


def test_token_pattern_matches_surface_string() -> None:
    assert tagset.COORDINATION_IONI.matches("ni")
    assert tagset.COORDINATION_IONI.matches(_token("i", "CC"))
    assert not tagset.COORDINATION_IONI.matches("nit")
    assert not tagset.COORDINATION.matches(None)


def test_token_pattern_from_words_escapes_input() -> None:
    pattern = TokenPattern.from_words(["etc.", "p.ex"])
    assert pattern.matches("etc.")
    assert not pattern.matches("etcX")


def test_token_pattern_ignore_case() -> None:
    assert TokenPattern("vegada", ignore_case=True).matches("Vegada")
    assert not TokenPattern("vegada").matches("Vegada")


def test_uppercase_pattern() -> None:
    assert UPPERCASE.matches("Barcelona")
    assert UPPERCASE.matches("Col·legi")
    assert not UPPERCASE.matches("barcelona")
    assert not UPPERCASE.matches("ONU")


def test_gender_and_number_classes() -> None:
    common = _token("alegre", "AQ0CS0")
    assert tagset.ADJECTIVE_CS.matches(common)
    assert tagset.ADJECTIVE_MS.matches(common)
    assert tagset.ADJECTIVE_FS.matches(common)
    assert not tagset.ADJECTIVE_P.matches(common)

    participle = _token("acabades", "VMP00PF")
    assert tagset.ADJECTIVE.matches(participle)
    assert tagset.ADJECTIVE_FP.matches(participle)
    assert not tagset.ADJECTIVE_MP.matches(participle)

    assert tagset.GROUP_FP.matches(_token("les", "DA0FP0"))
    assert tagset.GROUP_CP.matches(_token("els", "DA0MP0"))
    assert tagset.KEEP_COUNT_TOKENS.matches(",")
