"""Language check package exports.

This package exposes the checker, its factory and the document-level
helpers so callers can import from ``langcheck.language_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .checker import LanguageChecker
    from .checker_manager import CheckerManager
    from .language_check import (
        DocumentReport,
        build_checker,
        check_document,
        iter_documents,
        run_language_checks,
    )
    from .language_check_config import DEFAULT_DISABLED_RULES, DEFAULT_IGNORED_WORDS
    from .languages import get_language, supported_languages
    from .report_utils import build_report_csv, build_report_markdown
    from .settings import CheckSettings

__all__ = [
    "LanguageChecker",
    "CheckerManager",
    "DocumentReport",
    "build_checker",
    "check_document",
    "iter_documents",
    "run_language_checks",
    "build_report_markdown",
    "build_report_csv",
    "get_language",
    "supported_languages",
    "CheckSettings",
    "DEFAULT_DISABLED_RULES",
    "DEFAULT_IGNORED_WORDS",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "LanguageChecker": (".checker", "LanguageChecker"),
    "CheckerManager": (".checker_manager", "CheckerManager"),
    "DocumentReport": (".language_check", "DocumentReport"),
    "build_checker": (".language_check", "build_checker"),
    "check_document": (".language_check", "check_document"),
    "iter_documents": (".language_check", "iter_documents"),
    "run_language_checks": (".language_check", "run_language_checks"),
    "build_report_csv": (".report_utils", "build_report_csv"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "get_language": (".languages", "get_language"),
    "supported_languages": (".languages", "supported_languages"),
    "CheckSettings": (".settings", "CheckSettings"),
    "DEFAULT_DISABLED_RULES": (".language_check_config", "DEFAULT_DISABLED_RULES"),
    "DEFAULT_IGNORED_WORDS": (".language_check_config", "DEFAULT_IGNORED_WORDS"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when first used, so importing a single
    helper does not pull in the whole checker stack.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"langcheck.language_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
