"""Rule-based grammar checking: tokenizers, tagging, rules and reports."""

__version__ = "0.1.0"
