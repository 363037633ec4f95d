"""Split a sentence into word, punctuation and whitespace tokens."""

from __future__ import annotations

import regex

# Words may contain hyphens and the Catalan middle dot (col·lecció). An
# apostrophe directly followed by a letter closes an elided article or
# pronoun (l'home, d'aigua).
_TOKEN_PATTERN = regex.compile(
    r"\w+(?:[·\-]\w+)*(?:['’](?=\w))?"
    r"|\s"
    r"|[^\w\s]"
)


class WordTokenizer:
    """Tokenizer whose tokens concatenate back to the input sentence.

    Every whitespace character is its own token so that the analysed
    sentence can keep an exact whitespace-inclusive view.
    """

    def tokenize(self, sentence: str) -> list[str]:
        return _TOKEN_PATTERN.findall(sentence)
