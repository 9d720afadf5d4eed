"""
Common interface for type family parsers.

Each guarded type family (string, integer, float) owns a closed keyword table
for its sanitizers and validators. The attribute list parser only sees the
family through this interface.
"""

from abc import ABC, abstractmethod
from functools import partial
from typing import Any, ClassVar

from ..capabilities import Capabilities
from ..errors import UnknownOptionError, make_parse_error
from ..ir.attributes import DefaultValue, Guard, RawAttributes, RawGuard
from ..ir.functions import FunctionRole, TypedCustomFunction
from ..ir.spans import Span, Spanned
from ..lexer import Token, TokenType
from ..parser_impl.attributes import parse_guard_attributes
from ..parser_impl.base import TokenCursor, describe_token
from ..parser_impl.functions import parse_typed_custom_function


class TypeFamily(ABC):
    """
    Grammar and validation rules for one guarded type family.

    Subclasses define the keyword tables and the per-item parse functions;
    ``parse_attributes`` wires them into the generic attribute list parser.
    """

    name: ClassVar[str]
    sanitizer_keywords: ClassVar[tuple[str, ...]]
    validator_keywords: ClassVar[tuple[str, ...]]

    @abstractmethod
    def input_type(self, role: FunctionRole) -> str:
        """Type a custom function in ``role`` must accept."""

    @abstractmethod
    def parse_sanitizer(self, cursor: TokenCursor, capabilities: Capabilities) -> Spanned[Any]:
        """Parse one sanitizer from a ``sanitize(...)`` group."""

    @abstractmethod
    def parse_validator(self, cursor: TokenCursor, capabilities: Capabilities) -> Spanned[Any]:
        """Parse one validator from a ``validate(...)`` group."""

    @abstractmethod
    def parse_default(self, cursor: TokenCursor) -> DefaultValue:
        """Parse the literal after ``default =``."""

    @abstractmethod
    def validate(self, raw: RawGuard) -> Guard:
        """Check cross-item consistency and build the finalized guard."""

    def parse_attributes(self, cursor: TokenCursor, capabilities: Capabilities) -> RawAttributes:
        parse = parse_guard_attributes(
            partial(self.parse_sanitizer, capabilities=capabilities),
            partial(self.parse_validator, capabilities=capabilities),
            self.parse_default,
            capabilities,
        )
        return parse(cursor)

    # -- Helpers shared by family grammars --

    def read_keyword(self, cursor: TokenCursor, what: str) -> Token:
        token = cursor.current_token()
        if token.type != TokenType.IDENTIFIER:
            raise make_parse_error(f"Expected {what} name, got {describe_token(token)}", token.span)
        return cursor.advance()

    def require_equals(self, cursor: TokenCursor, keyword: Token) -> None:
        """Fail unless ``=`` follows ``keyword``; the ``=`` itself is not consumed."""
        if not cursor.match(TokenType.EQUALS):
            raise make_parse_error(f"Expected `=` after `{keyword.value}`", keyword.span)

    def parse_with(
        self, cursor: TokenCursor, keyword: Token, role: FunctionRole
    ) -> tuple[TypedCustomFunction, Span]:
        """Parse ``= <function>`` after ``with`` and bind it to the role's input type."""
        self.require_equals(cursor, keyword)
        cursor.advance()
        return parse_typed_custom_function(cursor, self.input_type(role))

    def unknown_sanitizer(self, keyword: Token) -> UnknownOptionError:
        return UnknownOptionError(
            f"Unknown sanitizer `{keyword.value}`. "
            f"Expected one of: {', '.join(self.sanitizer_keywords)}",
            keyword.span,
        )

    def unknown_validator(self, keyword: Token) -> UnknownOptionError:
        return UnknownOptionError(
            f"Unknown validator `{keyword.value}`. "
            f"Expected one of: {', '.join(self.validator_keywords)}",
            keyword.span,
        )
