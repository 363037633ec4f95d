"""Dictionary based part-of-speech tagging.

Morphological analysis itself is outside this project: the tagger only looks
words up in an already prepared lexicon (``word -> [(lemma, tag), ...]``)
and attaches every reading it finds. No disambiguation happens here, so a
word such as "blanc" keeps both its adjective and its noun readings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Protocol, Sequence

from langcheck.models import AnalyzedSentence, AnalyzedToken, AnalyzedTokenReadings
from langcheck.tokenizers import WordTokenizer

LOGGER = logging.getLogger(__name__)

Lexicon = Mapping[str, Sequence[tuple[str, str]]]


class Tagger(Protocol):
    """Anything that can attach readings to a list of tokens."""

    def tag(self, tokens: Sequence[str]) -> list[tuple[AnalyzedToken, ...]]:
        ...


class LexiconTagger:
    """Tagger backed by an in-memory lexicon.

    Lookup is exact first and lowercase second, so sentence-initial
    capitalised words still find their readings. Unknown tokens get a single
    reading without a tag.
    """

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon: dict[str, tuple[tuple[str, str], ...]] = {}
        for word, entries in (lexicon or {}).items():
            self.add(word, entries)

    def __len__(self) -> int:
        return len(self._lexicon)

    def __contains__(self, word: object) -> bool:
        return word in self._lexicon

    def add(self, word: str, entries: Iterable[tuple[str, str]]) -> None:
        """Add readings for ``word``, keeping the ones already known."""
        existing = list(self._lexicon.get(word, ()))
        for lemma, tag in entries:
            if (lemma, tag) not in existing:
                existing.append((lemma, tag))
        self._lexicon[word] = tuple(existing)

    def readings_for(self, word: str) -> tuple[AnalyzedToken, ...]:
        entries = self._lexicon.get(word)
        if entries is None:
            entries = self._lexicon.get(word.lower())
        if not entries:
            return (AnalyzedToken(word),)
        return tuple(AnalyzedToken(word, tag, lemma) for lemma, tag in entries)

    def tag(self, tokens: Sequence[str]) -> list[tuple[AnalyzedToken, ...]]:
        return [self.readings_for(token) for token in tokens]

    @classmethod
    def from_file(cls, path: Path) -> "LexiconTagger":
        """Load a tab separated ``word<TAB>lemma<TAB>tag`` file.

        Blank lines and lines starting with ``#`` are skipped. Malformed
        lines are logged and skipped.
        """
        tagger = cls()
        with path.open("r", encoding="utf-8") as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                line = raw_line.rstrip("\n")
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                parts = line.split("\t")
                if len(parts) != 3 or not all(part.strip() for part in parts):
                    LOGGER.warning(
                        "Skipping malformed lexicon line %d in %s: %r",
                        line_number,
                        path,
                        line,
                    )
                    continue
                word, lemma, tag = (part.strip() for part in parts)
                tagger.add(word, [(lemma, tag)])
        LOGGER.info("Loaded %d lexicon entries from %s", len(tagger), path)
        return tagger


def analyze_sentence(
    sentence: str,
    tagger: Tagger,
    word_tokenizer: WordTokenizer | None = None,
) -> AnalyzedSentence:
    """Tokenize and tag one sentence.

    Offsets are relative to the start of ``sentence``. Whitespace tokens are
    flagged and not tagged.
    """
    tokenizer = word_tokenizer or WordTokenizer()
    words = tokenizer.tokenize(sentence)
    word_positions = [index for index, word in enumerate(words) if not word.isspace()]
    tagged = tagger.tag([words[index] for index in word_positions])
    readings_by_index = dict(zip(word_positions, tagged))

    tokens: list[AnalyzedTokenReadings] = []
    position = 0
    for index, word in enumerate(words):
        tokens.append(
            AnalyzedTokenReadings(
                token=word,
                start_pos=position,
                readings=readings_by_index.get(index, ()),
                is_whitespace=word.isspace(),
            )
        )
        position += len(word)
    return AnalyzedSentence(tokens)
