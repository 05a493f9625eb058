"""Common structure shared by every kind of locale identifier.

A locale identifier is comprised of:

1. a ``language`` code (ISO 639-1, required),
2. a ``territory``, or country, code (ISO 3166-1 alpha-2, optional),
3. a ``code_set``, or charset, name (optional),
4. a ``modifier`` string, commonly naming the script or collation (optional).

LocaleIdentifier is a Protocol (structural typing) rather than an ABC: the
permissive and strict tiers satisfy it without sharing a base class, and
callers can be generic over either tier.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["LocaleIdentifier"]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class LocaleIdentifier(Protocol):
    """Protocol for immutable locale identifier values.

    Every ``with_*`` method returns a new identifier and leaves the receiver
    untouched. Failures raise LocaleError; parse failures raise
    LocaleParseError.

    Example:
        >>> def describe(locale: LocaleIdentifier) -> str:
        ...     return f"{locale.language_code} ({locale.territory or 'any'})"
    """

    @classmethod
    def new(cls, language_code: str) -> Self:
        """Construct a new identifier with the given language code only."""
        ...

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a complete identifier string."""
        ...

    def with_language(self, language_code: str) -> Self:
        """Return a copy with a new language code."""
        ...

    def with_territory(self, territory: str) -> Self:
        """Return a copy with a new territory code."""
        ...

    def with_code_set(self, code_set: str) -> Self:
        """Return a copy with a new code set name."""
        ...

    def with_modifier(self, modifier: str) -> Self:
        """Return a copy with a new modifier string."""
        ...

    def with_modifiers(self, modifiers: Mapping[Any, object]) -> Self:
        """Return a copy with a modifier built from key/value pairs."""
        ...

    @property
    def language_code(self) -> str:
        """The language code (never absent)."""
        ...

    @property
    def territory(self) -> str | None:
        """The territory code, or None if absent."""
        ...

    @property
    def code_set(self) -> str | None:
        """The code set name, or None if absent."""
        ...

    @property
    def modifier(self) -> str | None:
        """The modifier string, or None if absent."""
        ...
