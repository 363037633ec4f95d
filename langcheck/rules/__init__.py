"""Rule base class and the token predicates rules are written with."""

from __future__ import annotations

from .base import Rule
from .patterns import UPPERCASE, PosTagPattern, TokenPattern

__all__ = ["Rule", "PosTagPattern", "TokenPattern", "UPPERCASE"]
