"""Locale identifiers validated against reference tables.

StrictLocaleString wraps a LocaleString and adds one gate in front of every
operation that sets a language, territory, or code set: the candidate must be
present in the corresponding reference table. Only then is the call delegated
to the wrapped value, which applies its own shape rules.

Modifiers are never looked up; with_modifier() and with_modifiers() delegate
directly.

The relationship is composition, not inheritance: a StrictLocaleString is not
a LocaleString, and both satisfy LocaleIdentifier independently.

Thread Safety:
    Instances are immutable. Reference lookups are cached with lru_cache.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING, Any, Self

from posixlocale.diagnostics import LocaleError, LocaleParseError
from posixlocale.enums import LocaleErrorKind
from posixlocale.introspection import default_reference_tables
from posixlocale.locale_string import LocaleString

if TYPE_CHECKING:
    from collections.abc import Mapping

    from posixlocale.introspection import ReferenceTable, ReferenceTables

__all__ = ["StrictLocaleString"]

logger = logging.getLogger(__name__)


def _require(table: ReferenceTable[object], code: str, kind: LocaleErrorKind) -> None:
    """Raise LocaleError(kind) unless ``code`` is present in ``table``."""
    if table.lookup(code) is None:
        logger.debug("Rejected '%s': %s (not in reference table)", code, kind)
        raise LocaleError(kind, str(code))


class StrictLocaleString:
    """POSIX locale identifier whose fields are known ISO/IANA values.

    Immutable, hashable, thread-safe. Reads and serialization delegate to the
    wrapped LocaleString. Two instances are equal when their wrapped values
    are equal; the reference tables do not take part in equality.

    Args:
        locale: Permissive identifier to promote. Each present language,
            territory, and code set is checked against ``tables``.
        tables: Reference tables to validate against. Defaults to the
            CLDR/codec-backed tables.

    Raises:
        LocaleError: If a field of ``locale`` is missing from its table.

    Example:
        >>> locale = (
        ...     StrictLocaleString.new("en")
        ...     .with_territory("US")
        ...     .with_code_set("UTF-8")
        ...     .with_modifier("collation=pinyin;currency=CNY")
        ... )
        >>> str(locale)
        'en_US.UTF-8@collation=pinyin;currency=CNY'
    """

    __slots__ = ("_locale", "_tables")

    _locale: LocaleString
    _tables: ReferenceTables

    def __init__(self, locale: LocaleString, tables: ReferenceTables | None = None) -> None:
        tables = tables if tables is not None else default_reference_tables()
        _require(tables.languages, locale.language_code, LocaleErrorKind.INVALID_LANGUAGE_CODE)
        if locale.territory is not None:
            _require(tables.territories, locale.territory, LocaleErrorKind.INVALID_TERRITORY_CODE)
        if locale.code_set is not None:
            _require(tables.code_sets, locale.code_set, LocaleErrorKind.INVALID_CODE_SET)
        object.__setattr__(self, "_locale", locale)
        object.__setattr__(self, "_tables", tables)

    @classmethod
    def _wrap(cls, locale: LocaleString, tables: ReferenceTables) -> Self:
        """Wrap a value whose fields have already passed their lookups."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_locale", locale)
        object.__setattr__(instance, "_tables", tables)
        return instance

    # ------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------

    @classmethod
    def new(cls, language_code: str, *, tables: ReferenceTables | None = None) -> Self:
        """Construct an identifier holding only a known language code.

        Raises:
            LocaleError: INVALID_LANGUAGE_CODE if unknown or malformed.
        """
        tables = tables if tables is not None else default_reference_tables()
        _require(tables.languages, language_code, LocaleErrorKind.INVALID_LANGUAGE_CODE)
        return cls._wrap(LocaleString.new(language_code), tables)

    @classmethod
    def from_locale_string(
        cls, locale: LocaleString, *, tables: ReferenceTables | None = None
    ) -> Self:
        """Promote a permissive identifier, checking each present field.

        Raises:
            LocaleError: If a field is missing from its reference table.
        """
        return cls(locale, tables)

    def with_language(self, language_code: str) -> Self:
        """Return a copy with a new, known language code.

        Raises:
            LocaleError: INVALID_LANGUAGE_CODE
        """
        _require(self._tables.languages, language_code, LocaleErrorKind.INVALID_LANGUAGE_CODE)
        return self._wrap(self._locale.with_language(language_code), self._tables)

    def with_territory(self, territory: str) -> Self:
        """Return a copy with a new, known territory code.

        Raises:
            LocaleError: INVALID_TERRITORY_CODE
        """
        _require(self._tables.territories, territory, LocaleErrorKind.INVALID_TERRITORY_CODE)
        return self._wrap(self._locale.with_territory(territory), self._tables)

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with a new, known code set.

        Raises:
            LocaleError: INVALID_CODE_SET
        """
        _require(self._tables.code_sets, code_set, LocaleErrorKind.INVALID_CODE_SET)
        return self._wrap(self._locale.with_code_set(code_set), self._tables)

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with a new modifier. Never fails."""
        return self._wrap(self._locale.with_modifier(modifier), self._tables)

    def with_modifiers(self, modifiers: Mapping[Any, object]) -> Self:
        """Return a copy whose modifier is built from ``modifiers``. Never fails."""
        return self._wrap(self._locale.with_modifiers(modifiers), self._tables)

    # ------------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------------

    @property
    def language_code(self) -> str:
        """The language code."""
        return self._locale.language_code

    @property
    def territory(self) -> str | None:
        """The territory code, or None if absent."""
        return self._locale.territory

    @property
    def code_set(self) -> str | None:
        """The code set name, or None if absent."""
        return self._locale.code_set

    @property
    def modifier(self) -> str | None:
        """The modifier string, or None if absent."""
        return self._locale.modifier

    @property
    def tables(self) -> ReferenceTables:
        """The reference tables this identifier validates against."""
        return self._tables

    def unwrap(self) -> LocaleString:
        """Return the wrapped permissive identifier."""
        return self._locale

    # ------------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------------

    def format(self) -> str:
        """Serialize to ``language[_territory][.codeset][@modifier]``."""
        return self._locale.format()

    def __str__(self) -> str:
        return self._locale.format()

    def __repr__(self) -> str:
        return f"StrictLocaleString({self._locale.format()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrictLocaleString):
            return NotImplemented
        return self._locale == other._locale

    def __hash__(self) -> int:
        return hash(self._locale)

    def __setattr__(self, name: str, value: object) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    @classmethod
    def parse(cls, text: str, *, tables: ReferenceTables | None = None) -> Self:
        """Parse a locale identifier string and check it against the tables.

        The permissive parse runs first and its failures surface unchanged.
        Each field is then re-applied through new() and the with_* methods,
        so a well-formed but unknown value is still rejected.

        Raises:
            LocaleParseError: The permissive parse kinds, or INVALID_* when
                a field is missing from its reference table.
        """
        permissive = LocaleString.parse(text)
        try:
            locale = cls.new(permissive.language_code, tables=tables)
            if permissive.territory is not None:
                locale = locale.with_territory(permissive.territory)
            if permissive.code_set is not None:
                locale = locale.with_code_set(permissive.code_set)
            if permissive.modifier is not None:
                locale = locale.with_modifier(permissive.modifier)
        except LocaleError as e:
            raise LocaleParseError.from_locale_error(e, text) from e
        return locale
