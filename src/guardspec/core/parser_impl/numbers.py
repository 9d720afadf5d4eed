"""
Numeric literal parsing.

Reads an optionally signed literal such as ``-2_000`` from the cursor and
parses it into the requested number type.
"""

from ..errors import GrammarContractError, TypeMismatchError, make_parse_error
from ..ir.numbers import NumberType
from ..ir.spans import Span
from ..lexer import Token, TokenType
from .base import TokenCursor, describe_token


def parse_value_as_number(
    cursor: TokenCursor, number_type: NumberType
) -> tuple[int | float, Span]:
    """
    Consume ``= <number>`` and parse the number.

    Callers match the ``=`` before delegating here; finding anything else
    means the family grammar is wrong, not the user's input.

    Example:
        Input tokens:  = -1_000
        Output value:  -1000

    Raises:
        GrammarContractError: If the cursor is not positioned on ``=``
        TypeMismatchError: If the literal is not a valid ``number_type``
    """
    token = cursor.advance()
    if token.type != TokenType.EQUALS:
        raise GrammarContractError(f"Expected token `=`, got {describe_token(token)}")
    return parse_number(cursor, number_type)


def parse_number(cursor: TokenCursor, number_type: NumberType) -> tuple[int | float, Span]:
    """
    Parse an optionally signed numeric literal into ``number_type``.

    Returns:
        Tuple of (value, span of sign and literal)

    Raises:
        TypeMismatchError: If the text does not parse as ``number_type``
    """
    sign, literal, span = read_number(cursor)
    text = f"{sign}{literal.span.text(cursor.source)}"
    mismatch = TypeMismatchError(f"Expected {number_type.name}, got `{text}`", span)
    if literal.type != TokenType.NUMBER:
        raise mismatch
    try:
        value = number_type.parse(f"{sign}{sanitize_number(literal.value)}")
    except ValueError:
        raise mismatch from None
    return value, span


def read_number(cursor: TokenCursor) -> tuple[str, Token, Span]:
    """
    Read an optional ``-`` followed by one literal token.

    Returns:
        Tuple of (sign, literal token, joined span of sign and literal)
    """
    token = cursor.advance()
    if token.type == TokenType.EOF:
        raise make_parse_error("Expected number, got end of input", token.span)

    sign = ""
    span = token.span

    # A leading `-` is its own token; the literal follows it
    if token.type == TokenType.MINUS:
        sign = token.value
        token = cursor.advance()
        if token.type == TokenType.EOF:
            raise make_parse_error("Expected number after `-`", span)
        span = span.join(token.span)

    return sign, token, span


def sanitize_number(digits: str) -> str:
    """Drop ``_`` separators from a literal's digit run."""
    return digits.replace("_", "")
