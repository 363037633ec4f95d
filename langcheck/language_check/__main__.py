"""Allow ``python -m langcheck.language_check``."""

from __future__ import annotations

from .language_check import main

raise SystemExit(main())
