"""posixlocale - POSIX locale identifiers: parse, validate, build, serialize.

Handles identifiers of the form ``language[_territory][.codeset][@modifier]``
(ISO/IEC 15897 style), e.g. ``en_US.UTF-8@collation=pinyin``, at two
validation tiers:

    LocaleString - Shape-only validation (length and case rules)
    StrictLocaleString - Additionally requires known ISO 639-1 languages,
        ISO 3166-1 territories, and code sets (Babel CLDR data and the
        Python codec registry)

Both are immutable and satisfy the LocaleIdentifier protocol.

Exceptions:
    PosixLocaleError - Base exception class
    LocaleError - Construction and with_* failures (kind: LocaleErrorKind)
    LocaleParseError - Parse failures (kind: ParseErrorKind)

Submodules:
    posixlocale.introspection - Reference tables used by the strict tier
    posixlocale.constants - Grammar, separators, and cache bounds

Example:
    >>> from posixlocale import LocaleString
    >>> locale = LocaleString.parse("en_US.UTF-8@Latn")
    >>> locale.territory, locale.code_set
    ('US', 'UTF-8')
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import LocaleError, LocaleParseError, PosixLocaleError
from .enums import LocaleErrorKind, ParseErrorKind
from .identifier import LocaleIdentifier
from .locale_string import LocaleString, is_valid_locale_string, join_modifiers
from .strict import StrictLocaleString

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("posixlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LocaleError",
    "LocaleErrorKind",
    "LocaleIdentifier",
    "LocaleParseError",
    "LocaleString",
    "ParseErrorKind",
    "PosixLocaleError",
    "StrictLocaleString",
    "__version__",
    "is_valid_locale_string",
    "join_modifiers",
]
