"""Hypothesis strategies for posixlocale property-based testing.

- locale: language, territory, code set, and modifier fields, complete
  identifiers, and malformed identifier strings

Usage:
    from tests.strategies.locale import locale_strings, known_language_codes

Event-Emitting Strategies (HypoFuzz-Optimized):
    locale_strings, malformed_locale_strings
"""

from .locale import (
    code_sets,
    known_code_sets,
    known_language_codes,
    known_territory_codes,
    language_codes,
    locale_strings,
    malformed_locale_strings,
    modifiers,
    territory_codes,
)

__all__ = [
    "code_sets",
    "known_code_sets",
    "known_language_codes",
    "known_territory_codes",
    "language_codes",
    "locale_strings",
    "malformed_locale_strings",
    "modifiers",
    "territory_codes",
]
