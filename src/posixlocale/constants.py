"""Shared constants for posixlocale.

Centralizes the identifier grammar, separators, and cache bounds used by
the permissive and strict tiers. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Field separators
    "SEP_TERRITORY",
    "SEP_CODE_SET",
    "SEP_MODIFIER",
    # Modifier conventions
    "MODIFIER_PAIR_SEPARATOR",
    "MODIFIER_KEY_VALUE_SEPARATOR",
    # Grammar
    "LANGUAGE_CODE_LENGTH",
    "TERRITORY_CODE_LENGTH",
    "LOCALE_STRING_PATTERN",
    "POSIX_PSEUDO_LOCALES",
    # Reference data
    "CODE_SET_NAME_PATTERN",
    "DEFAULT_REFERENCE_LOCALE",
    "MAX_REFERENCE_CACHE_SIZE",
]

# ============================================================================
# FIELD SEPARATORS
# ============================================================================

SEP_TERRITORY: str = "_"
SEP_CODE_SET: str = "."
SEP_MODIFIER: str = "@"

# ============================================================================
# MODIFIER CONVENTIONS
# ============================================================================
#
# Modifiers are free-form. The key=value;key=value shape is only produced by
# with_modifiers() and is never enforced on input.

MODIFIER_PAIR_SEPARATOR: str = ";"
MODIFIER_KEY_VALUE_SEPARATOR: str = "="

# ============================================================================
# GRAMMAR
# ============================================================================

# ISO 639-1 language codes and ISO 3166-1 alpha-2 territory codes.
LANGUAGE_CODE_LENGTH: int = 2
TERRITORY_CODE_LENGTH: int = 2

# Shape-only grammar. Field setters re-apply the exact rules afterwards, so
# the language and territory groups deliberately accept 2 or more letters.
# Groups: 1=language, 2=_territory, 3=.code_set, 4=@modifier
LOCALE_STRING_PATTERN: str = (
    r"([a-z][a-z]+)"
    r"(_[A-Z][A-Z]+)?"
    r"(\.[A-Z][a-zA-Z0-9\-_]+)?"
    r"(@[\w=;]+)?"
)

# Valid POSIX locale names that are not identifiers in this model.
POSIX_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})

# ============================================================================
# REFERENCE DATA
# ============================================================================

# Display locale used for CLDR names in reference-table entries.
DEFAULT_REFERENCE_LOCALE: str = "en"

# Code set names the strict tier will hand to the codec registry. The registry
# normalizes whitespace and case, so anything else is rejected beforehand.
CODE_SET_NAME_PATTERN: str = r"[A-Za-z0-9_\-]+"

# Bound for each reference lookup cache. CLDR lists ~600 languages and
# ~300 territories; 1024 covers every known code plus a margin of misses.
MAX_REFERENCE_CACHE_SIZE: int = 1024
