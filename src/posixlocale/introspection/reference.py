"""Reference tables of known languages, territories, and code sets.

The strict tier treats each table as an opaque lookup: a code is valid if and
only if ``lookup(code)`` returns an entry. Three default tables are provided:

    LanguageTable   ISO 639-1 languages from Babel CLDR data
    TerritoryTable  ISO 3166-1 alpha-2 territories from Babel CLDR data
    CodeSetTable    text encodings known to Python's codec registry

Lookups are exact-match: ``"US"`` is a territory, ``"us"`` is not. Case rules
belong to the identifier grammar, and a table must not relax them.

All entry types are immutable, hashable, and thread-safe. Results are cached
per (code, display locale) pair; call clear_reference_cache() to release
them.

Python 3.13+.
"""

from __future__ import annotations

import codecs
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

from posixlocale.constants import (
    CODE_SET_NAME_PATTERN,
    DEFAULT_REFERENCE_LOCALE,
    LANGUAGE_CODE_LENGTH,
    MAX_REFERENCE_CACHE_SIZE,
    TERRITORY_CODE_LENGTH,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LanguageCode",
    "TerritoryCode",
    "CodeSetName",
    # Entry types
    "LanguageInfo",
    "TerritoryInfo",
    "CodeSetInfo",
    # Tables
    "ReferenceTable",
    "LanguageTable",
    "TerritoryTable",
    "CodeSetTable",
    "MappingTable",
    "ReferenceTables",
    "default_reference_tables",
    # Predicates
    "is_known_language",
    "is_known_territory",
    "is_known_code_set",
    # Cache management
    "clear_reference_cache",
]

logger = logging.getLogger(__name__)

_CODE_SET_NAME_RE: re.Pattern[str] = re.compile(CODE_SET_NAME_PATTERN)


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type LanguageCode = str
"""ISO 639-1 language code (e.g., 'en', 'fr', 'zh')."""

type TerritoryCode = str
"""ISO 3166-1 alpha-2 territory code (e.g., 'US', 'LV', 'DE')."""

type CodeSetName = str
"""Character encoding name as written in the identifier (e.g., 'UTF-8')."""


# ============================================================================
# ENTRY TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """ISO 639-1 language with localized name.

    Attributes:
        code: Two-letter language code (e.g., 'en').
        name: Display name in the table's display locale.
    """

    code: LanguageCode
    name: str


@dataclass(frozen=True, slots=True)
class TerritoryInfo:
    """ISO 3166-1 territory with localized name.

    Attributes:
        alpha2: Alpha-2 code (e.g., 'US').
        name: Display name in the table's display locale.
    """

    alpha2: TerritoryCode
    name: str


@dataclass(frozen=True, slots=True)
class CodeSetInfo:
    """Character encoding known to the codec registry.

    Attributes:
        name: Code set name exactly as looked up (e.g., 'UTF-8').
        codec: Canonical Python codec name (e.g., 'utf-8').
    """

    name: CodeSetName
    codec: str


# ============================================================================
# BABEL INTERFACE (LAZY IMPORT)
# ============================================================================


@lru_cache(maxsize=16)
def _get_babel_display_names(display_locale: str, attribute: str) -> Mapping[str, str]:
    """Get a CLDR display-name mapping ('languages' or 'territories').

    Returns an empty mapping if the display locale is unknown to CLDR, which
    makes every lookup against it miss.
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = Locale.parse(display_locale.replace("-", "_"))
    except (ValueError, UnknownLocaleError) as e:
        logger.warning("Unknown reference display locale '%s': %s", display_locale, e)
        return {}
    names: Mapping[str, str] = getattr(locale, attribute)
    return names


@lru_cache(maxsize=MAX_REFERENCE_CACHE_SIZE)
def _lookup_language_impl(code: str, display_locale: str) -> LanguageInfo | None:
    if not isinstance(code, str) or len(code) != LANGUAGE_CODE_LENGTH:
        return None
    if not (code.isascii() and code.islower()):
        return None
    names = _get_babel_display_names(display_locale, "languages")
    if code not in names:
        logger.debug("Language '%s' not found in CLDR data", code)
        return None
    return LanguageInfo(code=code, name=names[code])


@lru_cache(maxsize=MAX_REFERENCE_CACHE_SIZE)
def _lookup_territory_impl(code: str, display_locale: str) -> TerritoryInfo | None:
    # CLDR also lists numeric UN M.49 regions ("001", "419"); only alpha-2 apply.
    if not isinstance(code, str) or len(code) != TERRITORY_CODE_LENGTH:
        return None
    if not (code.isascii() and code.isupper()):
        return None
    names = _get_babel_display_names(display_locale, "territories")
    if code not in names:
        logger.debug("Territory '%s' not found in CLDR data", code)
        return None
    return TerritoryInfo(alpha2=code, name=names[code])


@lru_cache(maxsize=MAX_REFERENCE_CACHE_SIZE)
def _lookup_code_set_impl(name: str) -> CodeSetInfo | None:
    if not isinstance(name, str) or _CODE_SET_NAME_RE.fullmatch(name) is None:
        logger.debug("Code set %r is not a bare encoding name", name)
        return None
    try:
        info = codecs.lookup(name)
    except (LookupError, ValueError, UnicodeError):
        logger.debug("Code set '%s' not found in codec registry", name)
        return None
    # Binary transforms such as base64 and zlib are codecs but not charsets.
    if not getattr(info, "_is_text_encoding", True):
        logger.debug("Code set '%s' is not a text encoding", name)
        return None
    return CodeSetInfo(name=name, codec=info.name)


# ============================================================================
# TABLES
# ============================================================================


# pylint: disable=unnecessary-ellipsis
class ReferenceTable[EntryT](Protocol):
    """Protocol for a reference table of known codes.

    Any object with a matching ``lookup`` method is a table; a miss is
    signalled by None, never by an exception.
    """

    def lookup(self, code: str) -> EntryT | None:
        """Return the entry for ``code``, or None if unknown."""
        ...


@dataclass(frozen=True, slots=True)
class LanguageTable:
    """ISO 639-1 languages known to Babel's CLDR data.

    Attributes:
        display_locale: Locale used for entry names (BCP-47 or POSIX).
    """

    display_locale: str = DEFAULT_REFERENCE_LOCALE

    def lookup(self, code: str) -> LanguageInfo | None:
        """Look up a two-letter lowercase language code."""
        return _lookup_language_impl(code, self.display_locale)


@dataclass(frozen=True, slots=True)
class TerritoryTable:
    """ISO 3166-1 alpha-2 territories known to Babel's CLDR data.

    Attributes:
        display_locale: Locale used for entry names (BCP-47 or POSIX).
    """

    display_locale: str = DEFAULT_REFERENCE_LOCALE

    def lookup(self, code: str) -> TerritoryInfo | None:
        """Look up a two-letter uppercase territory code."""
        return _lookup_territory_impl(code, self.display_locale)


@dataclass(frozen=True, slots=True)
class CodeSetTable:
    """Text encodings known to Python's codec registry.

    Accepts any spelling the registry resolves (``UTF-8``, ``utf8``,
    ``ISO8859-1``), since POSIX systems spell code sets inconsistently.
    Names must be bare tokens of letters, digits, ``-`` and ``_``; the
    registry would otherwise resolve ``" utf-8\\n"`` too.
    """

    def lookup(self, code: str) -> CodeSetInfo | None:
        """Look up a code set name."""
        return _lookup_code_set_impl(code)


class MappingTable[EntryT]:
    """Reference table backed by a fixed mapping of code to entry.

    Useful for restricting the strict tier to a curated set of values.

    Example:
        >>> table = MappingTable({"en": "English", "fr": "French"})
        >>> table.lookup("en")
        'English'
        >>> table.lookup("de") is None
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, EntryT]) -> None:
        self._entries = dict(entries)

    def lookup(self, code: str) -> EntryT | None:
        """Return the entry for ``code``, or None if absent."""
        return self._entries.get(code)

    def __repr__(self) -> str:
        return f"MappingTable({sorted(self._entries)!r})"


@dataclass(frozen=True, slots=True)
class ReferenceTables:
    """The three tables consulted by the strict tier.

    Attributes:
        languages: Table of valid language codes.
        territories: Table of valid territory codes.
        code_sets: Table of valid code set names.
    """

    languages: ReferenceTable[object]
    territories: ReferenceTable[object]
    code_sets: ReferenceTable[object]


@lru_cache(maxsize=1)
def default_reference_tables() -> ReferenceTables:
    """Return the shared CLDR/codec-backed table bundle."""
    return ReferenceTables(
        languages=LanguageTable(),
        territories=TerritoryTable(),
        code_sets=CodeSetTable(),
    )


# ============================================================================
# PREDICATES
# ============================================================================


def is_known_language(code: str) -> bool:
    """Check if ``code`` is a known ISO 639-1 language code."""
    return LanguageTable().lookup(code) is not None


def is_known_territory(code: str) -> bool:
    """Check if ``code`` is a known ISO 3166-1 alpha-2 territory code."""
    return TerritoryTable().lookup(code) is not None


def is_known_code_set(name: str) -> bool:
    """Check if ``name`` is a text encoding known to the codec registry."""
    return CodeSetTable().lookup(name) is not None


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_reference_cache() -> None:
    """Clear all reference lookup caches.

    Thread-safe.
    """
    _lookup_language_impl.cache_clear()
    _lookup_territory_impl.cache_clear()
    _lookup_code_set_impl.cache_clear()
    _get_babel_display_names.cache_clear()
