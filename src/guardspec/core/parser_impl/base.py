"""
Token cursor for guard annotation parsing.

Provides the token navigation, matching, lookahead and group splitting used
by the attribute list parser and every family parser.
"""

from collections.abc import Callable
from typing import TypeVar

from ..errors import ParseError, make_parse_error
from ..ir.spans import Span
from ..lexer import CLOSERS, OPENERS, Token, TokenType

T = TypeVar("T")


class TokenCursor:
    """
    Forward-only cursor over a token list ending in EOF.

    The cursor is consumed left to right. ``mark``/``reset`` allow a parse
    alternative to be tried without consuming tokens when it fails.
    """

    def __init__(self, tokens: list[Token], source: str):
        """
        Initialize cursor.

        Args:
            tokens: Tokens from the lexer, or the inner tokens of a group,
                terminated by EOF
            source: Full annotation text (for slicing closure bodies)
        """
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            raise make_parse_error(
                f"Expected `{token_type.value}`, got {describe_token(token)}",
                token.span,
            )
        return self.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def at_end(self) -> bool:
        return self.match(TokenType.EOF)

    def mark(self) -> int:
        """Remember the current position for a later ``reset``."""
        return self.pos

    def reset(self, mark: int) -> None:
        """Rewind to a position returned by ``mark``."""
        self.pos = mark

    def read_group(self) -> tuple["TokenCursor", Span]:
        """
        Consume a parenthesised group and return a cursor over its contents.

        The child cursor ends in an EOF token located at the closing
        parenthesis, so "unexpected end" errors inside the group point there.

        Returns:
            Tuple of (inner cursor, span of the whole group)

        Raises:
            ParseError: If the current token is not ``(``
        """
        opener = self.expect(TokenType.LPAREN)
        depth = 1
        inner: list[Token] = []
        while True:
            token = self.advance()
            if token.type in OPENERS:
                depth += 1
            elif token.type in CLOSERS:
                depth -= 1
                if depth == 0:
                    break
            elif token.type == TokenType.EOF:
                # The lexer balances delimiters, so only hand-built token lists get here
                raise make_parse_error("Unclosed delimiter `(`", opener.span)
            inner.append(token)

        closer_span = token.span
        eof = Token(
            TokenType.EOF,
            "",
            Span(
                start=closer_span.start,
                end=closer_span.start,
                line=closer_span.line,
                column=closer_span.column,
            ),
        )
        return TokenCursor([*inner, eof], self.source), opener.span.join(closer_span)


def try_parse(cursor: TokenCursor, parse: Callable[[TokenCursor], T]) -> T | None:
    """
    Try one parse alternative.

    On ParseError the cursor is rewound, so a failed alternative consumes
    nothing, and None is returned.
    """
    mark = cursor.mark()
    try:
        return parse(cursor)
    except ParseError:
        cursor.reset(mark)
        return None


def describe_token(token: Token) -> str:
    """Human-readable token description for error messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    return f"`{token.value}`"


def parse_punctuated(cursor: TokenCursor, parse_item: Callable[[TokenCursor], T]) -> list[T]:
    """
    Parse a comma-separated list until the cursor is exhausted.

    A trailing comma is accepted.

    Raises:
        ParseError: If two items are not separated by a comma
    """
    items: list[T] = []
    while not cursor.at_end():
        items.append(parse_item(cursor))
        if cursor.at_end():
            break
        cursor.expect(TokenType.COMMA)
    return items


def parse_path(cursor: TokenCursor) -> tuple[str, Span]:
    """
    Parse a path such as ``is_valid``, ``checks.is_valid`` or ``checks::is_valid``.

    Returns:
        Tuple of (path text, span)
    """
    first = cursor.expect(TokenType.IDENTIFIER)
    parts = [first.value]
    span = first.span

    while cursor.match(TokenType.DOT, TokenType.PATH_SEP):
        separator = cursor.advance().value
        segment = cursor.expect(TokenType.IDENTIFIER)
        parts.append(separator)
        parts.append(segment.value)
        span = span.join(segment.span)

    return "".join(parts), span


def parse_type(cursor: TokenCursor) -> tuple[str, Span]:
    """
    Parse a type such as ``String``, ``&str``, ``&'static str`` or ``core::num::i32``.

    Returns:
        Tuple of (type text, span)
    """
    if cursor.match(TokenType.AMPERSAND):
        ampersand = cursor.advance()
        lifetime = ""
        if cursor.match(TokenType.LIFETIME):
            lifetime = f"{cursor.advance().value} "
        path, span = parse_path(cursor)
        return f"&{lifetime}{path}", ampersand.span.join(span)
    return parse_path(cursor)
