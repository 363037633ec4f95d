"""Split text into sentences.

The tokenizer looks for typical end-of-sentence markers and then takes
back the boundaries that turn out to be abbreviations, dates, quoted
punctuation and the like. It never drops or changes a character: joining
the returned sentences gives back the input text.

The work is done with a sequence of regular expression passes over the
whole text. The first passes insert an end-of-sentence marker character at
every candidate boundary, the later passes remove the marker again where
there is no real boundary, and the text is finally cut at the remaining
markers.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import regex


# Punctuation that can end a sentence
_P = r"[\.!?…]"
# Quote or closing bracket that may follow the punctuation
_AP = r"(?:'|«|»|\"|”|’|\)|\]|\})?"
_PAP = _P + _AP
_PARENS = r"[\(\)\[\]]"

# Abbreviations that are valid for every language.
GLOBAL_ABBREVIATIONS: tuple[str, ...] = (
    "Mr", "Mrs", "No", "pp", "St", "no",
    "Sr", "Jr", "Bros", "etc", "vs", "esp", "Fig", "fig",
    "Jan", "Feb", "Mar", "Apr", "Jun", "Jul", "Aug", "Sep", "Sept", "Oct",
    "Okt", "Nov", "Dec",
    "Ph.D", "PhD",
    "al",  # et al.
    "cf", "Inc", "Ms", "Gen", "Sen", "Prof", "Corp", "Co",
)

_PARAGRAPH_BY_TWO_LINE_BREAKS = regex.compile(r"([\n\r]\s*[\n\r])")
_PARAGRAPH_BY_LINE_BREAK = regex.compile(r"(\n\s*)")
# \u0002 marks an unbreakable field such as a footnote
_PUNCT_WHITESPACE = regex.compile("(" + _PAP + r"(\u0002)?\s)")
_PUNCT_UPPER_LOWER = regex.compile("(" + _PAP + r")(\p{Lu}[^\p{Lu}.])")
_LETTER_PUNCT = regex.compile(r"(\s\w" + _P + ")")

# Marker character candidates, tried in order until one is absent from the text.
_EOS_CANDIDATES = "\x00" + "".join(chr(code) for code in range(0xE000, 0xF8FF))


def _choose_marker(text: str) -> str:
    for candidate in _EOS_CANDIDATES:
        if candidate not in text:
            return candidate
    # Every candidate occurs in the text; fall back to a plane-15 code point.
    code = 0xF0000
    while chr(code) in text:
        code += 1
    return chr(code)


def _check_table(name: str, values: Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return tuple()
    if isinstance(values, str):
        raise TypeError(f"{name} must be an iterable of strings, not a single string")
    result: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{name} entries must be strings, got {type(value).__name__}")
        if value:
            result.append(value)
    return tuple(result)


class _MarkerPatterns:
    """Patterns that mention the end-of-sentence marker, compiled per marker."""

    def __init__(self, eos: str, abbreviations: tuple[str, ...], month_names: tuple[str, ...]) -> None:
        e = regex.escape(eos)
        self.abbrev1 = regex.compile(r"([^-\w]\w" + _PAP + r"\s)" + e)
        self.abbrev2 = regex.compile(r"([^-\w]\w" + _P + ")" + e)
        self.abbrev3 = regex.compile(r"(\s\w\.\s+)" + e)
        self.abbrev4 = regex.compile(r"(\.\.\. )" + e + r"(\p{Ll})")
        self.abbrev5 = regex.compile(r"(['\"]" + _P + r"['\"]\s+)" + e)
        self.abbrev6 = regex.compile(r"([\"']\s*)" + e + r"(\s*\p{Ll})")
        # dates like "3.10. datiert"
        self.abbrev8 = regex.compile(r"(\d{1,2}\.\d{1,2}\.\s+)" + e)
        self.repair10 = regex.compile(r"([\(\[])([!?]+)([\]\)]) " + e)
        self.repair11 = regex.compile(r"([!?]+)([\)\]]) " + e)
        self.repair12 = regex.compile("(" + _PARENS + ") " + e)
        self.abbreviations = tuple(
            regex.compile(r"(\b" + regex.escape(abbreviation) + _PAP + r"\s)" + e)
            for abbreviation in abbreviations
        )
        self.months = tuple(
            regex.compile(r"(\d+\.) " + e + "(" + regex.escape(month) + ")")
            for month in month_names
        )


class SentenceTokenizer:
    """Splits text into sentences at end-of-sentence punctuation and paragraph breaks.

    Args:
        abbreviations: Language-specific abbreviations (without the final
            period) after which a period does not end a sentence. They are
            added to :data:`GLOBAL_ABBREVIATIONS` and matched case-sensitively.
        month_names: Words that do not start a new sentence when they follow
            a number and a period, as in ``"13. Dezember"``.
        single_line_breaks_marks_paragraph: When true a single line break
            ends a sentence; otherwise only an empty line does.
    """

    def __init__(
        self,
        abbreviations: Iterable[str] | None = None,
        month_names: Iterable[str] | None = None,
        *,
        single_line_breaks_marks_paragraph: bool = False,
    ) -> None:
        extra = _check_table("abbreviations", abbreviations)
        self.abbreviations: tuple[str, ...] = tuple(dict.fromkeys(GLOBAL_ABBREVIATIONS + extra))
        self.month_names: tuple[str, ...] = _check_table("month_names", month_names)
        self._paragraph = _PARAGRAPH_BY_TWO_LINE_BREAKS
        self.set_single_line_breaks_marks_paragraph(single_line_breaks_marks_paragraph)
        self._pattern_cache: dict[str, _MarkerPatterns] = {}

    @property
    def single_line_breaks_marks_paragraph(self) -> bool:
        return self._paragraph is _PARAGRAPH_BY_LINE_BREAK

    def set_single_line_breaks_marks_paragraph(self, line_break_paragraphs: bool) -> None:
        if not isinstance(line_break_paragraphs, bool):
            raise TypeError("single_line_breaks_marks_paragraph must be a bool")
        if line_break_paragraphs:
            self._paragraph = _PARAGRAPH_BY_LINE_BREAK
        else:
            self._paragraph = _PARAGRAPH_BY_TWO_LINE_BREAKS

    def _patterns(self, eos: str) -> _MarkerPatterns:
        patterns = self._pattern_cache.get(eos)
        if patterns is None:
            patterns = _MarkerPatterns(eos, self.abbreviations, self.month_names)
            self._pattern_cache[eos] = patterns
        return patterns

    def tokenize(self, text: str) -> list[str]:
        """Return the sentences of ``text`` as a list."""
        return list(self.split(text))

    def split(self, text: str) -> Iterator[str]:
        """Yield the sentences of ``text``, each with its trailing whitespace.

        Text without final punctuation is yielded as the last sentence, so
        partially typed text can be checked too.
        """
        if not text:
            return
        eos = _choose_marker(text)
        patterns = self._patterns(eos)
        marked = self._first_sentence_splitting(text, eos)
        marked = self._remove_false_end_of_sentence(marked, patterns)
        marked = self._split_unsplit_stuff(marked, patterns)
        for sentence in marked.split(eos):
            if sentence:
                yield sentence

    def _first_sentence_splitting(self, s: str, eos: str) -> str:
        """Insert the marker at every place with a typical sentence delimiter."""
        s = self._paragraph.sub(r"\1" + eos, s)
        s = _PUNCT_WHITESPACE.sub(r"\1" + eos, s)
        # punctuation followed by an uppercase and a non-uppercase character
        s = _PUNCT_UPPER_LOWER.sub(r"\1" + eos + r"\2", s)
        s = _LETTER_PUNCT.sub(r"\1" + eos, s)
        return s

    def _remove_false_end_of_sentence(self, s: str, patterns: _MarkerPatterns) -> str:
        """Drop the marker again where there is no real sentence boundary."""
        # "U. S. A."
        s = patterns.abbrev1.sub(r"\1", s)
        # "U.S.A."
        s = patterns.abbrev2.sub(r"\1", s)
        # " p. "
        s = patterns.abbrev3.sub(r"\1", s)
        # "bla bla... yada yada"
        s = patterns.abbrev4.sub(r"\1\2", s)
        # quoted punctuation: '"."'
        s = patterns.abbrev5.sub(r"\1", s)
        for abbreviation in patterns.abbreviations:
            s = abbreviation.sub(r"\1", s)
        # no break after a quote unless a capital letter follows:
        # "That's right!" he said.
        s = patterns.abbrev6.sub(r"\1\2", s)
        # "Die Feuerwehr hat 3.10. Abends gelöscht."
        s = patterns.abbrev8.sub(r"\1", s)
        # "(?)", "(!!!)"
        s = patterns.repair10.sub(r"\1\2\3 ", s)
        # "?!)"
        s = patterns.repair11.sub(r"\1\2 ", s)
        s = patterns.repair12.sub(r"\1 ", s)
        return s

    def _split_unsplit_stuff(self, s: str, patterns: _MarkerPatterns) -> str:
        # "13. Dezember" is a date, not a sentence end
        for month in patterns.months:
            s = month.sub(r"\1 \2", s)
        return s
