"""Markup filters producing plain text for checking."""

from __future__ import annotations

from .wikipedia_text_filter import PlainText, WikipediaTextFilter

__all__ = ["PlainText", "WikipediaTextFilter"]
