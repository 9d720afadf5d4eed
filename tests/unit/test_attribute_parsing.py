"""Tests for top-level option parsing shared by every family."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from guardspec.core.capabilities import Capabilities
from guardspec.core.errors import CapabilityError, ParseError, UnknownOptionError
from guardspec.core.ir.attributes import DefaultValue
from guardspec.core.ir.spans import Spanned
from guardspec.core.lexer import TokenType
from guardspec.core.parser import parse_attributes
from guardspec.core.parser_impl.attributes import parse_guard_attributes


def parse_word(cursor) -> Spanned[str]:
    token = cursor.expect(TokenType.IDENTIFIER)
    return Spanned(item=token.value, span=token.span)


def parse_string_default(cursor) -> DefaultValue:
    token = cursor.expect(TokenType.STRING)
    return DefaultValue(value=token.value, span=token.span)


@pytest.fixture
def word_parser():
    """Attribute parser whose items are bare identifiers."""
    return parse_guard_attributes(
        parse_word, parse_word, parse_string_default, Capabilities(new_unchecked=True)
    )


class TestGenericOptions:
    """The option loop works with any item parsers."""

    def test_items_in_order(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor("sanitize(a, b), validate(c)"))
        assert [s.item for s in raw.guard.sanitizers] == ["a", "b"]
        assert [v.item for v in raw.guard.validators] == ["c"]

    def test_options_without_commas(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor('validate(x) default = "d" new_unchecked'))
        assert [v.item for v in raw.guard.validators] == ["x"]
        assert raw.default.value == "d"
        assert raw.new_unchecked

    def test_validate_before_sanitize(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor("validate(v), sanitize(s)"))
        assert raw.guard.sanitizers[0].item == "s"
        assert raw.guard.validators[0].item == "v"

    def test_item_spans(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor("sanitize(abc)"))
        span = raw.guard.sanitizers[0].span
        assert (span.start, span.end) == (9, 12)

    def test_empty_group(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor("sanitize()"))
        assert raw.guard.sanitizers == []

    def test_empty_source(self, word_parser, make_cursor) -> None:
        raw = word_parser(make_cursor(""))
        assert raw.guard.sanitizers == []
        assert raw.guard.validators == []
        assert raw.default is None
        assert not raw.new_unchecked

    def test_missing_comma_in_group(self, word_parser, make_cursor) -> None:
        source = "sanitize(a,  b c)"
        with pytest.raises(ParseError, match="Expected `,`") as exc_info:
            word_parser(make_cursor(source))
        assert exc_info.value.span.start == source.index("c")


class TestOptionErrors:
    """Malformed top-level options."""

    def test_unknown_option(self, string_family) -> None:
        with pytest.raises(UnknownOptionError, match="Unknown option `sanitise`") as exc_info:
            parse_attributes("sanitise(trim)", string_family)
        assert "sanitize, validate, default, new_unchecked" in exc_info.value.message
        assert exc_info.value.span.start == 0

    def test_number_as_option(self, string_family) -> None:
        with pytest.raises(ParseError, match="Expected an option name, got `5`"):
            parse_attributes("5", string_family)

    def test_missing_group(self, string_family) -> None:
        with pytest.raises(ParseError, match="Expected `\\(` after `sanitize`"):
            parse_attributes("sanitize trim", string_family)

    def test_duplicate_option(self, string_family) -> None:
        source = "validate(not_empty), validate(max_len = 5)"
        with pytest.raises(ParseError, match="Duplicate option `validate`") as exc_info:
            parse_attributes(source, string_family)
        assert exc_info.value.span.start == source.rindex("validate")

    def test_default_without_equals(self, string_family) -> None:
        with pytest.raises(ParseError, match="Expected `=`"):
            parse_attributes('default "x"', string_family)

    def test_double_comma(self, string_family) -> None:
        with pytest.raises(ParseError, match="got `,`"):
            parse_attributes("sanitize(trim),, validate(not_empty)", string_family)


class TestNewUnchecked:
    """The ``new_unchecked`` option is gated by its capability."""

    def test_disabled(self, string_family) -> None:
        with pytest.raises(CapabilityError) as exc_info:
            parse_attributes("new_unchecked", string_family)
        assert exc_info.value.capability == "new_unchecked"

    def test_enabled(self, string_family, all_capabilities) -> None:
        attributes = parse_attributes(
            "sanitize(trim), new_unchecked", string_family, all_capabilities
        )
        assert attributes.new_unchecked

    def test_default_off(self, string_family, all_capabilities) -> None:
        attributes = parse_attributes("sanitize(trim)", string_family, all_capabilities)
        assert not attributes.new_unchecked


class TestParseAttributes:
    """End-to-end entry point."""

    def test_family_by_type_name(self) -> None:
        attributes = parse_attributes("validate(less = 100)", "u16")
        assert attributes.guard.number_type.name == "u16"

    def test_attributes_are_frozen(self, string_family) -> None:
        attributes = parse_attributes("sanitize(trim)", string_family)
        with pytest.raises(PydanticValidationError):
            attributes.new_unchecked = True

    def test_calls_are_independent(self, string_family) -> None:
        first = parse_attributes("sanitize(trim)", string_family)
        second = parse_attributes("validate(not_empty)", string_family)
        assert len(first.guard.validators) == 0
        assert len(second.guard.sanitizers) == 0
