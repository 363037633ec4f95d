"""Configuration for language checking rules, ignored words and tokenizer tables.

This module defines the default rules to disable, the words to ignore and
the per-language abbreviation and month-name tables used by the sentence
tokenizer.
"""

# Default rules to disable (can be extended via command-line arguments)
DEFAULT_DISABLED_RULES: set[str] = set()


# Default words to ignore (case-sensitive; can be extended via command-line)
# Casing is preserved because entries are case-specific (acronyms, names).
DEFAULT_IGNORED_WORDS = {
    # --- Organisations / acronyms ---
    "UNESCO", "ONU", "UE", "OTAN", "PIB", "IVA", "NIF", "DNI",

    # --- Catalan institutions and proper nouns ---
    "Generalitat", "Softcatalà", "Termcat", "IEC",

    # --- Technical terms seen in documents ---
    "PDF", "HTML", "CSV", "URL", "Wi-Fi", "online",
}


# Abbreviations (without the final period) after which a period does not end
# a sentence. The tokenizer always adds its global list to these.
ABBREVIATIONS: dict[str, tuple[str, ...]] = {
    "ca": (),
    "en": (),
    "ru": (
        "м", "мм", "в", "вв", "г", "гг", "гл", "др", "д", "ед",
        "к", "кв", "кл", "кол", "коп", "куб", "л", "лл", "мл",
        "млн", "млрд", "наб", "нач", "обл", "обр", "ок", "пер", "п",
        "пл", "пос", "пр", "просп", "р", "руб", "с", "сб", "св", "см",
        "соч", "ср", "ст", "стр", "т", "тт", "туп", "тыс", "ч", "шт", "экз",
        "мин", "макс",
    ),
}


# Words that do not start a new sentence after "<number>." as in "13. Декабрь"
MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "ca": (),
    "en": (),
    "ru": (
        "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
        "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
    ),
}
