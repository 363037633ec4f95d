"""Registry of the languages the checker knows about.

Each language bundles the tokenizer tables and the rules to run. Adding a
language means adding one :class:`LanguageDefinition` to ``LANGUAGES``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from langcheck.rules import Rule
from langcheck.rules.ca import ComplexAdjectiveConcordanceRule

from .language_check_config import ABBREVIATIONS, MONTH_NAMES

RuleFactory = Callable[[], Rule]


@dataclass(frozen=True)
class LanguageDefinition:
    code: str
    name: str
    abbreviations: tuple[str, ...] = ()
    month_names: tuple[str, ...] = ()
    rule_factories: tuple[RuleFactory, ...] = field(default_factory=tuple)

    def create_rules(self) -> list[Rule]:
        return [factory() for factory in self.rule_factories]


LANGUAGES: dict[str, LanguageDefinition] = {
    "ca": LanguageDefinition(
        code="ca",
        name="Catalan",
        abbreviations=ABBREVIATIONS["ca"],
        month_names=MONTH_NAMES["ca"],
        rule_factories=(ComplexAdjectiveConcordanceRule,),
    ),
    "en": LanguageDefinition(
        code="en",
        name="English",
        abbreviations=ABBREVIATIONS["en"],
        month_names=MONTH_NAMES["en"],
    ),
    "ru": LanguageDefinition(
        code="ru",
        name="Russian",
        abbreviations=ABBREVIATIONS["ru"],
        month_names=MONTH_NAMES["ru"],
    ),
}


def supported_languages() -> list[str]:
    return sorted(LANGUAGES)


def get_language(code: str) -> LanguageDefinition:
    """Return the definition for ``code`` (case-insensitive, ``ca-ES`` resolves to ``ca``)."""
    key = (code or "").strip().lower().replace("_", "-").split("-", 1)[0]
    try:
        return LANGUAGES[key]
    except KeyError:
        raise ValueError(
            f"Unsupported language '{code}'. Supported: {', '.join(supported_languages())}"
        ) from None
