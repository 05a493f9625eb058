"""Tests for StrictLocaleString.

Tests cover:
- Reference-table gates on new() and the with_* family
- Pass-through of modifiers, accessors, and serialization
- Strict parsing on top of the permissive parse
- Injected reference tables
- Equality, hashing, and protocol conformance
"""

import dataclasses
import logging

import pytest
from hypothesis import given

from posixlocale import (
    LocaleError,
    LocaleErrorKind,
    LocaleIdentifier,
    LocaleParseError,
    LocaleString,
    ParseErrorKind,
    StrictLocaleString,
)
from posixlocale.introspection import MappingTable, ReferenceTables
from tests.strategies.locale import (
    known_code_sets,
    known_language_codes,
    known_territory_codes,
    locale_strings,
)


@pytest.fixture
def tiny_tables() -> ReferenceTables:
    """Reference tables knowing only English, French, the US, and UTF-8."""
    return ReferenceTables(
        languages=MappingTable({"en": "English", "fr": "French"}),
        territories=MappingTable({"US": "United States"}),
        code_sets=MappingTable({"UTF-8": "utf-8"}),
    )


class TestStrictGates:
    """Each field setter consults its reference table first."""

    def test_constructor(self) -> None:
        """Known languages construct."""
        locale = StrictLocaleString.new("en")
        assert locale.language_code == "en"
        assert locale.territory is None
        assert locale.code_set is None
        assert locale.modifier is None

    def test_unknown_language(self) -> None:
        """Unassigned language codes are rejected."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("xx")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_LANGUAGE_CODE

    @pytest.mark.parametrize("code", ["EN", "eng", ""])
    def test_malformed_language(self, code: str) -> None:
        """Malformed language codes are rejected by the lookup."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new(code)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_LANGUAGE_CODE

    def test_unknown_territory(self) -> None:
        """Unassigned territory codes are rejected."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_territory("XX")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_TERRITORY_CODE

    def test_lowercase_territory(self) -> None:
        """Lookups are exact-case; 'us' is not a territory."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_territory("us")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_TERRITORY_CODE

    def test_unknown_code_set(self) -> None:
        """Unknown code sets are rejected."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_code_set("UNKNOWN")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_CODE_SET

    @pytest.mark.parametrize("code_set", ["utf\x00", "\ud800", "UTF-8\n", " utf-8", "UTF-8 "])
    def test_code_set_outside_registry_grammar(self, code_set: str) -> None:
        """Names the permissive tier accepts but no registry entry matches."""
        permissive = LocaleString.new("en").with_code_set(code_set)
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_code_set(code_set)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_CODE_SET
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.from_locale_string(permissive)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_CODE_SET

    @pytest.mark.parametrize("code_set", ["base64", "zlib", "rot13"])
    def test_binary_codec_is_not_a_code_set(self, code_set: str) -> None:
        """Codecs that are not text encodings are rejected."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_code_set(code_set)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_CODE_SET

    def test_with_language_unknown(self) -> None:
        """with_language() applies the language lookup."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("en").with_language("qq")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_LANGUAGE_CODE

    def test_receiver_unchanged_after_failure(self) -> None:
        """A rejected update leaves the receiver as it was."""
        locale = StrictLocaleString.new("en").with_territory("US")
        with pytest.raises(LocaleError):
            locale.with_territory("XX")
        assert locale.territory == "US"

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejections are visible at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="posixlocale.strict"):
            with pytest.raises(LocaleError):
                StrictLocaleString.new("en").with_territory("XX")
        assert any("XX" in record.getMessage() for record in caplog.records)


class TestStrictPassThrough:
    """Known values produce the same identifier as the permissive tier."""

    def test_to_string(self) -> None:
        """Canonical formatting matches the permissive tier."""
        locale = (
            StrictLocaleString.new("en")
            .with_territory("US")
            .with_code_set("UTF-8")
            .with_modifier("collation=pinyin;currency=CNY")
        )
        assert str(locale) == "en_US.UTF-8@collation=pinyin;currency=CNY"
        assert locale.format() == str(locale)

    def test_modifier_not_looked_up(self) -> None:
        """Modifiers are accepted as in the permissive tier."""
        locale = StrictLocaleString.new("en").with_modifier("anything goes")
        assert locale.modifier == "anything goes"

    def test_with_modifiers(self) -> None:
        """with_modifiers() delegates to the permissive implementation."""
        locale = StrictLocaleString.new("en").with_modifiers(
            {"currency": "CNY", "collation": "pinyin"}
        )
        assert locale.modifier == "collation=pinyin;currency=CNY"

    def test_registry_spelling_accepted(self) -> None:
        """Any spelling the codec registry resolves is a known code set."""
        assert StrictLocaleString.new("de").with_code_set("utf8").code_set == "utf8"

    @given(
        language=known_language_codes,
        territory=known_territory_codes,
        code_set=known_code_sets,
    )
    def test_same_fields_as_permissive(self, language: str, territory: str, code_set: str) -> None:
        """Strict and permissive builds agree field-for-field."""
        strict = (
            StrictLocaleString.new(language).with_territory(territory).with_code_set(code_set)
        )
        permissive = LocaleString.new(language).with_territory(territory).with_code_set(code_set)
        assert strict.unwrap() == permissive
        assert str(strict) == str(permissive)


class TestStrictParse:
    """StrictLocaleString.parse() layers lookups over the permissive parse."""

    def test_from_str(self) -> None:
        """A fully known identifier parses."""
        locale = StrictLocaleString.parse("en_US.UTF-8@Latn")
        assert locale.language_code == "en"
        assert locale.territory == "US"
        assert locale.code_set == "UTF-8"
        assert locale.modifier == "Latn"

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("", ParseErrorKind.EMPTY_STRING),
            ("POSIX", ParseErrorKind.POSIX_UNSUPPORTED),
            ("en-US", ParseErrorKind.REGEX_FAILURE),
            ("eng", ParseErrorKind.INVALID_LANGUAGE_CODE),
        ],
    )
    def test_permissive_failures_surface(self, text: str, kind: ParseErrorKind) -> None:
        """Permissive parse failures are reported unchanged."""
        with pytest.raises(LocaleParseError) as exc_info:
            StrictLocaleString.parse(text)
        assert exc_info.value.kind is kind

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("xx_US", ParseErrorKind.INVALID_LANGUAGE_CODE),
            ("en_XX", ParseErrorKind.INVALID_TERRITORY_CODE),
            ("en_US.UNKNOWN", ParseErrorKind.INVALID_CODE_SET),
        ],
    )
    def test_reference_misses(self, text: str, kind: ParseErrorKind) -> None:
        """Well-formed but unknown fields fail with the matching kind."""
        with pytest.raises(LocaleParseError) as exc_info:
            StrictLocaleString.parse(text)
        assert exc_info.value.kind is kind
        assert exc_info.value.input_value == text
        assert isinstance(exc_info.value.__cause__, LocaleError)

    @given(locale=locale_strings(known=True))
    def test_round_trip(self, locale: LocaleString) -> None:
        """Known identifiers survive a strict round-trip."""
        parsed = StrictLocaleString.parse(str(locale))
        assert parsed.unwrap() == locale


class TestInjectedTables:
    """Callers may restrict the strict tier with their own tables."""

    def test_known_values(self, tiny_tables: ReferenceTables) -> None:
        """Values in the injected tables are accepted."""
        locale = (
            StrictLocaleString.new("fr", tables=tiny_tables)
            .with_territory("US")
            .with_code_set("UTF-8")
        )
        assert str(locale) == "fr_US.UTF-8"
        assert locale.tables is tiny_tables

    def test_tables_carried_through_updates(self, tiny_tables: ReferenceTables) -> None:
        """Derived values validate against the same tables."""
        locale = StrictLocaleString.new("en", tables=tiny_tables)
        with pytest.raises(LocaleError) as exc_info:
            locale.with_territory("GB")
        assert exc_info.value.kind is LocaleErrorKind.INVALID_TERRITORY_CODE
        with pytest.raises(LocaleError):
            locale.with_modifier("x").with_language("de")

    def test_parse_with_tables(self, tiny_tables: ReferenceTables) -> None:
        """parse() accepts injected tables."""
        with pytest.raises(LocaleParseError) as exc_info:
            StrictLocaleString.parse("de_US", tables=tiny_tables)
        assert exc_info.value.kind is ParseErrorKind.INVALID_LANGUAGE_CODE
        assert str(StrictLocaleString.parse("en_US", tables=tiny_tables)) == "en_US"

    def test_table_must_not_relax_shape_rules(self) -> None:
        """A table that knows a malformed code still hits the permissive rule."""
        tables = ReferenceTables(
            languages=MappingTable({"eng": "English"}),
            territories=MappingTable({}),
            code_sets=MappingTable({}),
        )
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.new("eng", tables=tables)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_LANGUAGE_CODE


class TestPromotion:
    """Wrapping an existing LocaleString."""

    def test_from_locale_string(self) -> None:
        """Known permissive values promote."""
        permissive = LocaleString.parse("pt_BR.UTF-8")
        strict = StrictLocaleString.from_locale_string(permissive)
        assert strict.unwrap() is permissive

    def test_from_locale_string_rejects_unknown(self) -> None:
        """Each present field is checked."""
        permissive = LocaleString.parse("pt_BR.NOPE")
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString.from_locale_string(permissive)
        assert exc_info.value.kind is LocaleErrorKind.INVALID_CODE_SET

    def test_constructor_checks_fields(self) -> None:
        """Direct construction performs the same checks."""
        with pytest.raises(LocaleError) as exc_info:
            StrictLocaleString(LocaleString.new("xx"))
        assert exc_info.value.kind is LocaleErrorKind.INVALID_LANGUAGE_CODE


class TestValueSemantics:
    """Equality, hashing, repr, and protocol conformance."""

    def test_equality(self, tiny_tables: ReferenceTables) -> None:
        """Equality compares fields, not tables."""
        first = StrictLocaleString.new("en").with_territory("US")
        second = StrictLocaleString.parse("en_US", tables=tiny_tables)
        assert first == second
        assert hash(first) == hash(second)

    def test_not_equal_to_permissive(self) -> None:
        """The two tiers are distinct types."""
        strict = StrictLocaleString.new("en")
        assert strict != LocaleString.new("en")
        assert not isinstance(strict, LocaleString)

    def test_repr(self) -> None:
        """repr shows the serialized form."""
        assert repr(StrictLocaleString.new("en")) == "StrictLocaleString('en')"

    def test_isinstance(self) -> None:
        """StrictLocaleString satisfies LocaleIdentifier."""
        assert isinstance(StrictLocaleString.new("en"), LocaleIdentifier)

    def test_fields_cannot_be_reassigned(self) -> None:
        """The wrapped value and tables are fixed after construction."""
        locale = StrictLocaleString.new("en")
        before = hash(locale)
        with pytest.raises(dataclasses.FrozenInstanceError):
            locale._locale = LocaleString.new("en").with_territory("US")  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            del locale._tables
        assert locale.territory is None
        assert hash(locale) == before
