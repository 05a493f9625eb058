"""POSIX locale identifier strings with syntactic validation.

On POSIX platforms locale identifiers are defined by ISO/IEC 15897, which is
similar to the BCP 47 definition of language tags, but the variant modifier
is defined differently and the character set is part of the identifier:

    language[_territory][.codeset][@modifier]

For example, Australian English using the UTF-8 encoding is ``en_AU.UTF-8``.

Fields:
    language: ISO 639-1 two-letter code, lowercase (``en``)
    territory: ISO 3166-1 alpha-2 code, uppercase (``AU``)
    codeset: character encoding name, conventionally from the IANA
        character sets list (``UTF-8``, ``ISO8859-1``)
    modifier: ``;``-separated identifiers or ``name=value`` pairs, often an
        ISO 15924 script (``Latn``) or a collation hint

Validation here is purely syntactic (length and case). Membership in the
ISO/IANA registries is checked by posixlocale.strict.

See also:
    https://www.gnu.org/software/libc/manual/html_node/Locale-Names.html
    https://www.iso.org/standard/50707.html

Thread Safety:
    LocaleString is frozen. Parsing uses a module-level compiled pattern and
    no other shared state. Safe for concurrent use across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Self

from posixlocale.constants import (
    LANGUAGE_CODE_LENGTH,
    LOCALE_STRING_PATTERN,
    MODIFIER_KEY_VALUE_SEPARATOR,
    MODIFIER_PAIR_SEPARATOR,
    POSIX_PSEUDO_LOCALES,
    SEP_CODE_SET,
    SEP_MODIFIER,
    SEP_TERRITORY,
    TERRITORY_CODE_LENGTH,
)
from posixlocale.diagnostics import LocaleError, LocaleParseError
from posixlocale.enums import LocaleErrorKind, ParseErrorKind

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "LocaleString",
    "is_valid_locale_string",
    "join_modifiers",
]

# Compiled once at module load and shared by every parse() call.
_LOCALE_STRING_RE: re.Pattern[str] = re.compile(LOCALE_STRING_PATTERN)


def _is_language_code(value: object) -> bool:
    return (
        isinstance(value, str)
        and len(value) == LANGUAGE_CODE_LENGTH
        and all(c.islower() for c in value)
    )


def _is_territory_code(value: object) -> bool:
    return (
        isinstance(value, str)
        and len(value) == TERRITORY_CODE_LENGTH
        and all(c.isupper() for c in value)
    )


def _is_code_set(value: object) -> bool:
    # Any non-blank string. Registry membership is the strict tier's concern.
    return isinstance(value, str) and value.strip() != ""


def join_modifiers(modifiers: Mapping[Any, object]) -> str:
    """Build a modifier string from key/value pairs.

    Pairs are rendered as ``key=value`` and joined with ``;``. Keys are
    sorted by their string form so equal mappings always produce equal
    modifiers.

    Example:
        >>> join_modifiers({"currency": "CNY", "collation": "pinyin"})
        'collation=pinyin;currency=CNY'
    """
    pairs = sorted((str(key), str(value)) for key, value in modifiers.items())
    return MODIFIER_PAIR_SEPARATOR.join(
        f"{key}{MODIFIER_KEY_VALUE_SEPARATOR}{value}" for key, value in pairs
    )


@dataclass(frozen=True, slots=True)
class LocaleString:
    """POSIX locale identifier with shape-only validation.

    Immutable, hashable, thread-safe. Construct with ``new()`` or ``parse()``;
    derive variants with the ``with_*`` methods, each of which returns a new
    value and leaves the receiver unchanged.

    ``None`` marks an absent field. An empty modifier (``""``) is present and
    serializes as a trailing ``@``.

    Attributes:
        language_code: Two lowercase letters (``"en"``)
        territory: Two uppercase letters (``"US"``) or None
        code_set: Non-blank encoding name (``"UTF-8"``) or None
        modifier: Free-form modifier text or None

    Raises:
        LocaleError: On construction with a field that breaks its rule.

    Example:
        >>> locale = (
        ...     LocaleString.new("en")
        ...     .with_territory("US")
        ...     .with_code_set("UTF-8")
        ...     .with_modifier("collation=pinyin;currency=CNY")
        ... )
        >>> str(locale)
        'en_US.UTF-8@collation=pinyin;currency=CNY'
    """

    language_code: str
    territory: str | None = None
    code_set: str | None = None
    modifier: str | None = None

    def __post_init__(self) -> None:
        """Enforce field rules for every construction path, replace() included."""
        if not _is_language_code(self.language_code):
            raise LocaleError(LocaleErrorKind.INVALID_LANGUAGE_CODE, str(self.language_code))
        if self.territory is not None and not _is_territory_code(self.territory):
            raise LocaleError(LocaleErrorKind.INVALID_TERRITORY_CODE, str(self.territory))
        if self.code_set is not None and not _is_code_set(self.code_set):
            raise LocaleError(LocaleErrorKind.INVALID_CODE_SET, str(self.code_set))

    # ------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------

    @classmethod
    def new(cls, language_code: str) -> Self:
        """Construct an identifier holding only a language code.

        Raises:
            LocaleError: INVALID_LANGUAGE_CODE unless exactly two lowercase
                characters.
        """
        return cls(language_code)

    def with_language(self, language_code: str) -> Self:
        """Return a copy with ``language_code`` replaced.

        Raises:
            LocaleError: INVALID_LANGUAGE_CODE
        """
        return replace(self, language_code=language_code)

    def with_territory(self, territory: str) -> Self:
        """Return a copy with ``territory`` replaced.

        Raises:
            LocaleError: INVALID_TERRITORY_CODE unless exactly two uppercase
                characters.
        """
        return replace(self, territory=territory)

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with ``code_set`` replaced.

        Raises:
            LocaleError: INVALID_CODE_SET if blank.
        """
        return replace(self, code_set=code_set)

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with ``modifier`` replaced. Never fails."""
        return replace(self, modifier=modifier)

    def with_modifiers(self, modifiers: Mapping[Any, object]) -> Self:
        """Return a copy whose modifier is built from ``modifiers``.

        See join_modifiers() for the format. Never fails.
        """
        return replace(self, modifier=join_modifiers(modifiers))

    # ------------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------------

    def format(self) -> str:
        """Serialize to ``language[_territory][.codeset][@modifier]``."""
        parts = [self.language_code]
        if self.territory is not None:
            parts.append(f"{SEP_TERRITORY}{self.territory}")
        if self.code_set is not None:
            parts.append(f"{SEP_CODE_SET}{self.code_set}")
        if self.modifier is not None:
            parts.append(f"{SEP_MODIFIER}{self.modifier}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a locale identifier string.

        The grammar checks the shape of each field; the field rules are then
        applied again by ``new()`` and ``with_*()``, so strings such as
        ``"eng"`` match the grammar but are still rejected.

        Args:
            text: Identifier such as ``"en_US.UTF-8@Latn"``

        Returns:
            The parsed identifier.

        Raises:
            LocaleParseError: EMPTY_STRING, POSIX_UNSUPPORTED, REGEX_FAILURE,
                or the INVALID_* kind of the field rule that rejected a
                grammar-accepted group.
        """
        if not text:
            raise LocaleParseError(ParseErrorKind.EMPTY_STRING, text)

        if text in POSIX_PSEUDO_LOCALES:
            raise LocaleParseError(ParseErrorKind.POSIX_UNSUPPORTED, text)

        match = _LOCALE_STRING_RE.fullmatch(text)
        if match is None:
            raise LocaleParseError(ParseErrorKind.REGEX_FAILURE, text)

        language, territory, code_set, modifier = match.groups()
        try:
            locale = cls.new(language)
            if territory is not None:
                locale = locale.with_territory(territory[1:])
            if code_set is not None:
                locale = locale.with_code_set(code_set[1:])
            if modifier is not None:
                locale = locale.with_modifier(modifier[1:])
        except LocaleError as e:
            raise LocaleParseError.from_locale_error(e, text) from e
        return locale


def is_valid_locale_string(text: str) -> bool:
    """Check whether LocaleString.parse() would accept ``text``.

    Example:
        >>> is_valid_locale_string("de_DE.UTF-8")
        True
        >>> is_valid_locale_string("POSIX")
        False
    """
    try:
        LocaleString.parse(text)
    except LocaleParseError:
        return False
    return True
