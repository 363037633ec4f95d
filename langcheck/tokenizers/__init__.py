"""Sentence and word tokenizers."""

from __future__ import annotations

from .sentence_tokenizer import GLOBAL_ABBREVIATIONS, SentenceTokenizer
from .word_tokenizer import WordTokenizer

__all__ = ["SentenceTokenizer", "WordTokenizer", "GLOBAL_ABBREVIATIONS"]
