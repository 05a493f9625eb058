"""Error types for locale identifier construction and parsing.

Python 3.13+. Zero external dependencies.
"""

from .errors import LocaleError, LocaleParseError, PosixLocaleError

__all__ = [
    "LocaleError",
    "LocaleParseError",
    "PosixLocaleError",
]
