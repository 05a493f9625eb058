"""posixlocale exception hierarchy.

Two parallel taxonomies share one base class but never each other:

    PosixLocaleError
    ├── LocaleError       construction and with_* failures (LocaleErrorKind)
    └── LocaleParseError  parse failures (ParseErrorKind)

Every exception carries a machine-readable ``kind`` so callers can branch on
the specific failure instead of matching message text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from posixlocale.enums import LocaleErrorKind, ParseErrorKind

__all__ = [
    "LocaleError",
    "LocaleParseError",
    "PosixLocaleError",
]


class PosixLocaleError(Exception):
    """Base exception for all posixlocale errors."""


class LocaleError(PosixLocaleError):
    """A locale identifier could not be constructed or updated.

    Raised by ``new()`` and the ``with_*`` family. The receiver of a failed
    ``with_*`` call is never modified.

    Attributes:
        kind: Which field rule was violated
        value: The rejected input
    """

    def __init__(self, kind: LocaleErrorKind, value: str = "") -> None:
        """Initialize LocaleError.

        Args:
            kind: Which field rule was violated
            value: The rejected input
        """
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value.replace('_', ' ')}: {value!r}")


class LocaleParseError(PosixLocaleError):
    """A locale identifier string could not be parsed.

    Attributes:
        kind: Why the string was rejected
        input_value: The complete string passed to ``parse()``

    Example:
        >>> from posixlocale import LocaleString
        >>> try:
        ...     LocaleString.parse("POSIX")
        ... except LocaleParseError as e:
        ...     print(e.kind)
        posix_unsupported
    """

    def __init__(self, kind: ParseErrorKind, input_value: str = "") -> None:
        """Initialize LocaleParseError.

        Args:
            kind: Why the string was rejected
            input_value: The complete string passed to ``parse()``
        """
        self.kind = kind
        self.input_value = input_value
        super().__init__(f"{kind.value.replace('_', ' ')}: {input_value!r}")

    @classmethod
    def from_locale_error(cls, error: LocaleError, input_value: str) -> LocaleParseError:
        """Translate a field validation failure raised while parsing.

        The caller is expected to chain the original with ``raise ... from``.
        """
        return cls(ParseErrorKind.from_locale_error_kind(error.kind), input_value)
