"""
Parsing of custom function references in ``with = <function>`` arguments.

Supported forms:
    with = is_valid
    with = checks.is_valid            (or checks::is_valid)
    with = |s| s.len() % 2 == 0
    with = |s: &str| s.contains('@')
"""

from ..errors import make_parse_error
from ..ir.functions import CustomFunction, CustomFunctionKind, TypedCustomFunction
from ..ir.spans import Span
from ..lexer import CLOSERS, OPENERS, TokenType
from .base import TokenCursor, describe_token, parse_path, parse_type


def parse_custom_function(cursor: TokenCursor) -> CustomFunction:
    """
    Parse a path or closure.

    Raises:
        ParseError: If neither form is present
    """
    if cursor.match(TokenType.IDENTIFIER):
        path, span = parse_path(cursor)
        return CustomFunction(kind=CustomFunctionKind.PATH, path=path, span=span)

    if cursor.match(TokenType.PIPE):
        return parse_closure(cursor)

    token = cursor.current_token()
    raise make_parse_error(
        f"Expected a function path or closure, got {describe_token(token)}",
        token.span,
    )


def parse_closure(cursor: TokenCursor) -> CustomFunction:
    """
    Parse ``|param| body`` or ``|param: Type| body``.

    The body extends to the next comma outside any brackets, or to the end of
    the group, and is kept as source text.
    """
    opening = cursor.expect(TokenType.PIPE)
    param = cursor.expect(TokenType.IDENTIFIER).value

    param_type = None
    if cursor.match(TokenType.COLON):
        cursor.advance()
        param_type, _ = parse_type(cursor)

    closing = cursor.expect(TokenType.PIPE)

    body_span: Span | None = None
    depth = 0
    while not cursor.at_end():
        token = cursor.current_token()
        if depth == 0 and token.type == TokenType.COMMA:
            break
        if token.type in OPENERS:
            depth += 1
        elif token.type in CLOSERS:
            depth -= 1
        body_span = token.span if body_span is None else body_span.join(token.span)
        cursor.advance()

    if body_span is None:
        raise make_parse_error("Expected closure body", closing.span)

    return CustomFunction(
        kind=CustomFunctionKind.CLOSURE,
        param=param,
        param_type=param_type,
        body=body_span.text(cursor.source),
        span=opening.span.join(body_span),
    )


def parse_typed_custom_function(
    cursor: TokenCursor, expected_type: str
) -> tuple[TypedCustomFunction, Span]:
    """
    Parse a function reference and bind it to ``expected_type``.

    Returns:
        Tuple of (typed function, span of the whole function expression)

    Raises:
        TypeMismatchError: If an annotated closure expects another type
    """
    function = parse_custom_function(cursor)
    return function.bind(expected_type), function.span
