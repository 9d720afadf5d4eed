"""
Top-level option parsing for guard annotations.

Recognizes ``sanitize(...)``, ``validate(...)``, ``default = ...`` and
``new_unchecked`` and hands the contents of each group to parse functions
supplied by the type family. Nothing here knows family keywords.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from ..capabilities import Capabilities
from ..errors import UnknownOptionError, make_parse_error
from ..ir.attributes import DefaultValue, RawAttributes, RawGuard
from ..ir.spans import Spanned
from ..lexer import Token, TokenType
from .base import TokenCursor, describe_token, parse_punctuated

logger = logging.getLogger(__name__)

S = TypeVar("S")
V = TypeVar("V")

TOP_LEVEL_OPTIONS = ("sanitize", "validate", "default", "new_unchecked")


def parse_guard_attributes(
    parse_sanitizer: Callable[[TokenCursor], Spanned[S]],
    parse_validator: Callable[[TokenCursor], Spanned[V]],
    parse_default: Callable[[TokenCursor], DefaultValue],
    capabilities: Capabilities,
) -> Callable[[TokenCursor], RawAttributes]:
    """
    Build a parser for one annotation's top-level options.

    Args:
        parse_sanitizer: Parses one item of a ``sanitize(...)`` group
        parse_validator: Parses one item of a ``validate(...)`` group
        parse_default: Parses the value after ``default =``
        capabilities: Enabled capabilities (gates ``new_unchecked``)

    Returns:
        Function consuming a cursor and returning the raw attributes in
        declaration order
    """

    def parse(cursor: TokenCursor) -> RawAttributes:
        sanitizers: list[Spanned[S]] = []
        validators: list[Spanned[V]] = []
        default: DefaultValue | None = None
        new_unchecked = False
        seen: set[str] = set()

        while not cursor.at_end():
            token = cursor.advance()
            if token.type != TokenType.IDENTIFIER:
                raise make_parse_error(
                    f"Expected an option name, got {describe_token(token)}", token.span
                )

            keyword = token.value
            if keyword in seen:
                raise make_parse_error(f"Duplicate option `{keyword}`", token.span)

            if keyword == "sanitize":
                group = _read_option_group(cursor, token)
                sanitizers = parse_punctuated(group, parse_sanitizer)
            elif keyword == "validate":
                group = _read_option_group(cursor, token)
                validators = parse_punctuated(group, parse_validator)
            elif keyword == "default":
                cursor.expect(TokenType.EQUALS)
                default = parse_default(cursor)
            elif keyword == "new_unchecked":
                capabilities.require("new_unchecked", token.span)
                new_unchecked = True
            else:
                raise UnknownOptionError(
                    f"Unknown option `{keyword}`. Expected one of: {', '.join(TOP_LEVEL_OPTIONS)}",
                    token.span,
                )

            seen.add(keyword)
            logger.debug("Parsed option %s at %s", keyword, token.span)

            # Options may be separated by commas
            if cursor.match(TokenType.COMMA):
                cursor.advance()

        return RawAttributes(
            guard=RawGuard(sanitizers=sanitizers, validators=validators),
            new_unchecked=new_unchecked,
            default=default,
        )

    return parse


def _read_option_group(cursor: TokenCursor, keyword: Token) -> TokenCursor:
    """The group right after ``sanitize``/``validate``, or a located error."""
    if not cursor.match(TokenType.LPAREN):
        raise make_parse_error(f"Expected `(` after `{keyword.value}`", keyword.span)
    group, _ = cursor.read_group()
    return group
