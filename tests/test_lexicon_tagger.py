from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from langcheck.tagging import LexiconTagger, analyze_sentence
from langcheck.tokenizers import WordTokenizer

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def tagger() -> LexiconTagger:
    return LexiconTagger.from_file(FIXTURES / "lexicon_ca.tsv")


def test_from_file_loads_every_reading(tagger: LexiconTagger) -> None:
    assert "blanc" in tagger
    readings = tagger.readings_for("blanc")
    assert [r.pos_tag for r in readings] == ["AQ0MS0", "NCMS000"]
    assert readings[0].lemma == "blanc"


def test_from_file_skips_malformed_lines(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    lexicon = tmp_path / "lexicon.tsv"
    lexicon.write_text("casa\tcasa\tNCFS000\nbroken line\n\n# comment\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        tagger = LexiconTagger.from_file(lexicon)

    assert len(tagger) == 1
    assert "malformed" in caplog.text


def test_lookup_falls_back_to_lowercase(tagger: LexiconTagger) -> None:
    readings = tagger.readings_for("Casa")
    assert readings[0].pos_tag == "NCFS000"
    assert readings[0].token == "Casa"


def test_unknown_word_gets_untagged_reading(tagger: LexiconTagger) -> None:
    readings = tagger.readings_for("xyzzy")
    assert len(readings) == 1
    assert readings[0].pos_tag is None


def test_add_keeps_existing_readings() -> None:
    tagger = LexiconTagger({"blanc": [("blanc", "AQ0MS0")]})
    tagger.add("blanc", [("blanc", "NCMS000"), ("blanc", "AQ0MS0")])
    assert [r.pos_tag for r in tagger.readings_for("blanc")] == ["AQ0MS0", "NCMS000"]


def test_word_tokenizer_round_trip() -> None:
    sentence = "L'home va dir: col·lecció d'estiu, mig-any!"
    tokens = WordTokenizer().tokenize(sentence)
    assert "".join(tokens) == sentence
    assert "L'" in tokens
    assert "col·lecció" in tokens
    assert "mig-any" in tokens
    assert "!" in tokens


def test_analyze_sentence_offsets(tagger: LexiconTagger) -> None:
    sentence = analyze_sentence("les cases blanc.", tagger)

    assert sentence.text == "les cases blanc."
    words = sentence.tokens_without_whitespace
    assert [t.token for t in words] == ["", "les", "cases", "blanc", "."]
    assert [t.start_pos for t in words[1:]] == [0, 4, 10, 15]
    assert words[3].pos_tags == ("AQ0MS0", "NCMS000")
    assert words[4].pos_tags == ()
    assert any(t.is_whitespace for t in sentence.tokens)
