"""
Grammar for string-backed types.

Examples:
    sanitize(trim, lowercase)
    validate(not_empty, max_len = 255, regex = "^[a-z_]+$")
    validate(with = |s: &str| s.contains('@'))
"""

from ..capabilities import Capabilities
from ..errors import make_parse_error
from ..ir.attributes import DefaultValue, RawGuard
from ..ir.functions import FunctionRole
from ..ir.numbers import LENGTH_TYPE
from ..ir.spans import Span, Spanned
from ..ir.string_guard import (
    RegexDef,
    RegexDefKind,
    StringGuard,
    StringSanitizer,
    StringSanitizerKind,
    StringValidator,
    StringValidatorKind,
)
from ..lexer import TokenType
from ..parser_impl.base import TokenCursor, describe_token, parse_path, try_parse
from ..parser_impl.numbers import parse_value_as_number
from ..validator import validate_string_guard
from .base import TypeFamily

# Sanitizers act on the owned string, validators on a borrowed view of it
OWNED_INPUT_TYPE = "String"
BORROWED_INPUT_TYPE = "&str"


class StringFamily(TypeFamily):
    """String type family."""

    name = "string"
    sanitizer_keywords = tuple(kind.value for kind in StringSanitizerKind)
    validator_keywords = tuple(kind.value for kind in StringValidatorKind)

    def input_type(self, role: FunctionRole) -> str:
        if role == FunctionRole.SANITIZER:
            return OWNED_INPUT_TYPE
        return BORROWED_INPUT_TYPE

    def parse_sanitizer(
        self, cursor: TokenCursor, capabilities: Capabilities
    ) -> Spanned[StringSanitizer]:
        keyword = self.read_keyword(cursor, "sanitizer")

        if keyword.value == "with":
            function, span = self.parse_with(cursor, keyword, FunctionRole.SANITIZER)
            return Spanned(
                item=StringSanitizer(kind=StringSanitizerKind.WITH, function=function),
                span=span,
            )

        if keyword.value in (
            StringSanitizerKind.TRIM,
            StringSanitizerKind.LOWERCASE,
            StringSanitizerKind.UPPERCASE,
        ):
            return Spanned(
                item=StringSanitizer(kind=StringSanitizerKind(keyword.value)),
                span=keyword.span,
            )

        raise self.unknown_sanitizer(keyword)

    def parse_validator(
        self, cursor: TokenCursor, capabilities: Capabilities
    ) -> Spanned[StringValidator]:
        keyword = self.read_keyword(cursor, "validator")

        if keyword.value in (StringValidatorKind.MIN_LEN, StringValidatorKind.MAX_LEN):
            self.require_equals(cursor, keyword)
            length, span = parse_value_as_number(cursor, LENGTH_TYPE)
            return Spanned(
                item=StringValidator(kind=StringValidatorKind(keyword.value), length=length),
                span=keyword.span.join(span),
            )

        if keyword.value == "not_empty":
            return Spanned(
                item=StringValidator(kind=StringValidatorKind.NOT_EMPTY),
                span=keyword.span,
            )

        if keyword.value == "with":
            function, span = self.parse_with(cursor, keyword, FunctionRole.VALIDATOR)
            return Spanned(
                item=StringValidator(kind=StringValidatorKind.WITH, function=function),
                span=span,
            )

        if keyword.value == "regex":
            capabilities.require("regex", keyword.span)
            self.require_equals(cursor, keyword)
            cursor.advance()
            regex, span = parse_regex_def(cursor)
            return Spanned(
                item=StringValidator(kind=StringValidatorKind.REGEX, regex=regex),
                span=keyword.span.join(span),
            )

        raise self.unknown_validator(keyword)

    def parse_default(self, cursor: TokenCursor) -> DefaultValue:
        token = cursor.current_token()
        if token.type != TokenType.STRING:
            raise make_parse_error(
                f"Expected a string literal as default, got {describe_token(token)}",
                token.span,
            )
        cursor.advance()
        return DefaultValue(value=token.value, span=token.span)

    def validate(self, raw: RawGuard) -> StringGuard:
        return validate_string_guard(raw)


def parse_regex_def(cursor: TokenCursor) -> tuple[RegexDef, Span]:
    """
    Parse a regex given as a string literal or as a path to a pattern constant.

    The string form is tried first; a failed alternative leaves the cursor
    where it was.

    Raises:
        ParseError: If neither form is present
    """
    literal = try_parse(cursor, lambda c: c.expect(TokenType.STRING))
    if literal is not None:
        return RegexDef(kind=RegexDefKind.STRING_LITERAL, value=literal.value), literal.span

    path = try_parse(cursor, parse_path)
    if path is not None:
        value, span = path
        return RegexDef(kind=RegexDefKind.PATH, value=value), span

    token = cursor.current_token()
    raise make_parse_error(
        "regex must be either a string literal or a path that refers to a regex constant, "
        f"got {describe_token(token)}",
        token.span,
    )
