"""Environment-driven settings for the language check command.

Values come from the process environment, after loading a ``.env`` file with
python-dotenv. Invalid values are logged and replaced by the defaults;
command-line flags override whatever is read here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

ENV_LANGUAGE = "LANGCHECK_LANGUAGE"
ENV_SINGLE_LINE_BREAKS = "LANGCHECK_SINGLE_LINE_BREAKS"
ENV_MAX_WORKERS = "LANGCHECK_MAX_WORKERS"
ENV_LEXICON = "LANGCHECK_LEXICON"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    LOGGER.warning("Ignoring invalid boolean %s=%r; using %s", name, value, default)
    return default


def _parse_positive_int(name: str, value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        LOGGER.warning("Ignoring invalid integer %s=%r; using %d", name, value, default)
        return default
    if parsed < 1:
        LOGGER.warning("Ignoring non-positive %s=%r; using %d", name, value, default)
        return default
    return parsed


@dataclass(frozen=True)
class CheckSettings:
    language: str = "ca"
    single_line_breaks: bool = False
    max_workers: int = 1
    lexicon: Path | None = None

    @classmethod
    def from_env(
        cls,
        *,
        dotenv_path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "CheckSettings":
        """Build settings from ``environ`` (default: ``os.environ`` after loading ``.env``)."""
        if environ is None:
            if dotenv_path is not None:
                load_dotenv(dotenv_path=Path(dotenv_path))
            else:
                load_dotenv()
            environ = os.environ

        language = (environ.get(ENV_LANGUAGE) or "").strip() or cls.language
        lexicon_value = (environ.get(ENV_LEXICON) or "").strip()
        return cls(
            language=language,
            single_line_breaks=_parse_bool(
                ENV_SINGLE_LINE_BREAKS, environ.get(ENV_SINGLE_LINE_BREAKS), cls.single_line_breaks
            ),
            max_workers=_parse_positive_int(
                ENV_MAX_WORKERS, environ.get(ENV_MAX_WORKERS), cls.max_workers
            ),
            lexicon=Path(lexicon_value) if lexicon_value else None,
        )
