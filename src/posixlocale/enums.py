"""Enumerations for posixlocale error kinds.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

The two enumerations are parallel taxonomies and are never merged:
LocaleErrorKind covers construction and field updates, ParseErrorKind covers
parsing a complete identifier string.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum


class LocaleErrorKind(StrEnum):
    """Reason a locale identifier could not be constructed or updated.

    StrEnum provides automatic string conversion:
    str(LocaleErrorKind.INVALID_LANGUAGE_CODE) == "invalid_language_code"
    """

    INVALID_LANGUAGE_CODE = "invalid_language_code"
    """Language code is not exactly two lowercase letters, or is unknown."""

    INVALID_TERRITORY_CODE = "invalid_territory_code"
    """Territory code is not exactly two uppercase letters, or is unknown."""

    INVALID_CODE_SET = "invalid_code_set"
    """Code set is blank, or is not a known character encoding."""

    INVALID_MODIFIER = "invalid_modifier"
    """Reserved. No validator currently rejects a modifier."""

    UNKNOWN_LOCALE = "unknown_locale"
    """Reserved for locale management outside identifier handling."""

    UNSET_CATEGORY = "unset_category"
    """Reserved for locale management outside identifier handling."""

    OS_ERROR = "os_error"
    """Reserved for locale management outside identifier handling."""

    UNSUPPORTED = "unsupported"
    """Reserved for locale management outside identifier handling."""


class ParseErrorKind(StrEnum):
    """Reason a locale identifier string could not be parsed.

    StrEnum provides automatic string conversion:
    str(ParseErrorKind.EMPTY_STRING) == "empty_string"
    """

    EMPTY_STRING = "empty_string"
    """The empty string is not a valid identifier."""

    POSIX_UNSUPPORTED = "posix_unsupported"
    """"C" and "POSIX" are valid POSIX locales but not identifiers here."""

    REGEX_FAILURE = "regex_failure"
    """The string does not match the identifier grammar."""

    INVALID_LANGUAGE_CODE = "invalid_language_code"
    INVALID_TERRITORY_CODE = "invalid_territory_code"
    INVALID_CODE_SET = "invalid_code_set"
    INVALID_MODIFIER = "invalid_modifier"

    INVALID_PATH = "invalid_path"
    """Reserved. String parsing never produces it."""

    @classmethod
    def from_locale_error_kind(cls, kind: LocaleErrorKind) -> ParseErrorKind:
        """Map a field validation kind onto the parse taxonomy.

        Only the four field kinds exist in both taxonomies.

        Raises:
            ValueError: If kind has no parse counterpart.
        """
        try:
            return _FIELD_KINDS[kind]
        except KeyError:
            msg = f"{kind!r} has no parse error counterpart"
            raise ValueError(msg) from None


_FIELD_KINDS: dict[LocaleErrorKind, ParseErrorKind] = {
    LocaleErrorKind.INVALID_LANGUAGE_CODE: ParseErrorKind.INVALID_LANGUAGE_CODE,
    LocaleErrorKind.INVALID_TERRITORY_CODE: ParseErrorKind.INVALID_TERRITORY_CODE,
    LocaleErrorKind.INVALID_CODE_SET: ParseErrorKind.INVALID_CODE_SET,
    LocaleErrorKind.INVALID_MODIFIER: ParseErrorKind.INVALID_MODIFIER,
}


__all__ = [
    "LocaleErrorKind",
    "ParseErrorKind",
]
