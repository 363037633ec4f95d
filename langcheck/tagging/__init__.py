"""Part-of-speech tagging interface and the lexicon tagger."""

from __future__ import annotations

from .lexicon_tagger import LexiconTagger, Tagger, analyze_sentence

__all__ = ["LexiconTagger", "Tagger", "analyze_sentence"]
