"""
Lexer/Tokenizer for guard annotations.

Converts annotation text into a stream of tokens with source span tracking.
Delimiters must balance, so every ``(``, ``[`` and ``{`` in the token stream
has a matching closer and bracketed groups can be split out safely.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import make_parse_error
from .ir.spans import Span


class TokenType(Enum):
    """Token types in guard annotations."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    CHAR = "CHAR"
    NUMBER = "NUMBER"
    LIFETIME = "LIFETIME"

    # Structural punctuation
    EQUALS = "="
    MINUS = "-"
    COMMA = ","
    DOT = "."
    COLON = ":"
    PATH_SEP = "::"
    PIPE = "|"
    AMPERSAND = "&"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"

    # Any other operator, only meaningful inside closure bodies
    OPERATOR = "OPERATOR"

    # Special
    EOF = "EOF"


OPENERS = {
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACKET: TokenType.RBRACKET,
    TokenType.LBRACE: TokenType.RBRACE,
}
CLOSERS = {closer: opener for opener, closer in OPENERS.items()}

SINGLE_CHAR_TOKENS = {
    "=": TokenType.EQUALS,
    "-": TokenType.MINUS,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    "|": TokenType.PIPE,
    "&": TokenType.AMPERSAND,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

TWO_CHAR_OPERATORS = ("==", "!=", "<=", ">=", "&&", "||", "->", "=>", "+=", "-=")

SINGLE_CHAR_OPERATORS = "+*/%<>!^?;~"

# Escapes accepted in string and character literals
STRING_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def is_digit(ch: str | None) -> bool:
    """ASCII digits only; other Unicode digits are not numeric literals."""
    return ch is not None and ch.isascii() and ch.isdigit()


@dataclass
class Token:
    """
    A single token in an annotation.

    Attributes:
        type: Type of token
        value: String value of the token (unquoted and unescaped for strings
            and character literals)
        span: Source span covering the token text, quotes included
    """

    type: TokenType
    value: str
    span: Span

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for guard annotations.

    Converts source text into a flat token stream terminated by EOF.
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Annotation source text
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.delimiter_stack: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while (ch := self.current_char()) is not None and ch.isspace():
            self.advance()

    def span_from(self, start: int, line: int, column: int) -> Span:
        return Span(start=start, end=self.pos, line=line, column=column)

    def read_string(self) -> str:
        """Read a double-quoted string, resolving escapes."""
        start, start_line, start_col = self.pos, self.line, self.column
        self.advance()  # skip opening quote

        chars = []
        while True:
            current = self.current_char()
            if not current or current == '"':
                break

            if current == "\\":
                chars.append(self.read_escape())
            else:
                chars.append(current)
                self.advance()

        if self.current_char() != '"':
            raise make_parse_error(
                "Unterminated string literal",
                self.span_from(start, start_line, start_col),
            )

        self.advance()  # skip closing quote
        return "".join(chars)

    def read_escape(self) -> str:
        """
        Read a backslash escape and return the character it stands for.

        Raises:
            ParseError: If the escape is not one of ``STRING_ESCAPES``
        """
        start, start_line, start_col = self.pos, self.line, self.column
        self.advance()  # skip backslash
        escape_char = self.current_char()
        if escape_char is None:
            # Reported as an unterminated literal by the caller
            return ""
        if escape_char not in STRING_ESCAPES:
            raise make_parse_error(
                f"Unknown character escape `\\{escape_char}`",
                Span(start=start, end=self.pos + 1, line=start_line, column=start_col),
            )
        self.advance()
        return STRING_ESCAPES[escape_char]

    def at_raw_string(self) -> bool:
        """Whether the current ``r`` opens ``r"..."`` or ``r#"..."#``."""
        offset = 1
        while self.peek_char(offset) == "#":
            offset += 1
        return self.peek_char(offset) == '"'

    def read_raw_string(self) -> str:
        """Read a raw string; backslashes are kept as written."""
        start, start_line, start_col = self.pos, self.line, self.column
        self.advance()  # skip `r`
        hashes = 0
        while self.current_char() == "#":
            hashes += 1
            self.advance()
        self.advance()  # skip opening quote

        terminator = '"' + "#" * hashes
        end = self.text.find(terminator, self.pos)
        if end == -1:
            raise make_parse_error(
                "Unterminated raw string literal",
                Span(start=start, end=len(self.text), line=start_line, column=start_col),
            )

        value = self.text[self.pos : end]
        while self.pos < end + len(terminator):
            self.advance()
        return value

    def read_char_or_lifetime(self) -> tuple[str, TokenType]:
        """Read a character literal such as ``'@'`` or a lifetime such as ``'static``."""
        start, start_line, start_col = self.pos, self.line, self.column
        self.advance()  # skip opening quote

        current = self.current_char()
        if current == "\\":
            value = self.read_escape()
        elif current is not None and current != "'" and self.peek_char() == "'":
            value = current
            self.advance()
        elif current is not None and (current.isalpha() or current == "_"):
            return f"'{self.read_identifier()}", TokenType.LIFETIME
        else:
            value = ""

        if not value or self.current_char() != "'":
            raise make_parse_error(
                "Unterminated character literal",
                self.span_from(start, start_line, start_col),
            )

        self.advance()  # skip closing quote
        return value, TokenType.CHAR

    def read_number(self) -> str:
        """
        Read a numeric literal.

        Digits may be separated by underscores. A fractional part and an
        exponent are accepted; whether they are valid for the target type is
        decided by the number parser, not here.
        """
        chars = []
        current = self.current_char()
        while current and (is_digit(current) or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()

        # Fraction only when a digit follows, so `1.max(2)` stays a method call
        next_char = self.peek_char()
        if current == "." and is_digit(next_char):
            chars.append(current)
            self.advance()
            current = self.current_char()
            while current and (is_digit(current) or current == "_"):
                chars.append(current)
                self.advance()
                current = self.current_char()

        if current in ("e", "E"):
            sign_offset = 2 if self.peek_char() in ("+", "-") else 1
            digit = self.peek_char(sign_offset)
            if is_digit(digit):
                for _ in range(sign_offset):
                    chars.append(self.current_char() or "")
                    self.advance()
                current = self.current_char()
                while current and (is_digit(current) or current == "_"):
                    chars.append(current)
                    self.advance()
                    current = self.current_char()

        return "".join(chars)

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def track_delimiter(self, token: Token) -> None:
        """Keep the open delimiter stack balanced."""
        if token.type in OPENERS:
            self.delimiter_stack.append(token)
        elif token.type in CLOSERS:
            if not self.delimiter_stack:
                raise make_parse_error(f"Unexpected closing delimiter `{token.value}`", token.span)
            opener = self.delimiter_stack.pop()
            if OPENERS[opener.type] != token.type:
                raise make_parse_error(
                    f"Mismatched closing delimiter `{token.value}` for `{opener.value}`",
                    token.span,
                )

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF

        Raises:
            ParseError: If syntax error encountered
        """
        while True:
            self.skip_whitespace()

            ch = self.current_char()
            if ch is None:
                break

            # Save position for token
            start, token_line, token_col = self.pos, self.line, self.column

            # Strings
            if ch == '"':
                value = self.read_string()
                token_type = TokenType.STRING

            elif ch == "r" and self.at_raw_string():
                value = self.read_raw_string()
                token_type = TokenType.STRING

            # Character literals and lifetimes
            elif ch == "'":
                value, token_type = self.read_char_or_lifetime()

            # Numbers
            elif is_digit(ch):
                value = self.read_number()
                token_type = TokenType.NUMBER

            # Identifiers and keywords
            elif ch.isalpha() or ch == "_":
                value = self.read_identifier()
                token_type = TokenType.IDENTIFIER

            elif ch == ":" and self.peek_char() == ":":
                self.advance()
                self.advance()
                value, token_type = "::", TokenType.PATH_SEP

            elif f"{ch}{self.peek_char() or ''}" in TWO_CHAR_OPERATORS:
                value = f"{ch}{self.peek_char()}"
                self.advance()
                self.advance()
                token_type = TokenType.OPERATOR

            elif ch in SINGLE_CHAR_TOKENS:
                self.advance()
                value, token_type = ch, SINGLE_CHAR_TOKENS[ch]

            elif ch in SINGLE_CHAR_OPERATORS:
                self.advance()
                value, token_type = ch, TokenType.OPERATOR

            else:
                raise make_parse_error(
                    f"Unexpected character: {ch!r}",
                    Span(start=start, end=start + 1, line=token_line, column=token_col),
                )

            token = Token(token_type, value, self.span_from(start, token_line, token_col))
            self.track_delimiter(token)
            self.tokens.append(token)

        if self.delimiter_stack:
            opener = self.delimiter_stack[-1]
            raise make_parse_error(f"Unclosed delimiter `{opener.value}`", opener.span)

        # Add EOF token
        eof_span = self.span_from(self.pos, self.line, self.column)
        self.tokens.append(Token(TokenType.EOF, "", eof_span))

        return self.tokens


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize annotation text.

    Args:
        text: Source text

    Returns:
        List of tokens
    """
    lexer = Lexer(text)
    return lexer.tokenize()
