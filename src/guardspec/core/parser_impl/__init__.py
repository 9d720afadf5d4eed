"""
Guard annotation parser package.

Token cursor, number parsing, custom function parsing and the generic
attribute list parser. Family-specific grammars live in ``core.families``.
"""

from .attributes import parse_guard_attributes
from .base import TokenCursor, parse_path, parse_punctuated, parse_type, try_parse
from .functions import parse_custom_function, parse_typed_custom_function
from .numbers import parse_number, parse_value_as_number

__all__ = [
    "TokenCursor",
    "parse_custom_function",
    "parse_guard_attributes",
    "parse_number",
    "parse_path",
    "parse_punctuated",
    "parse_type",
    "parse_typed_custom_function",
    "parse_value_as_number",
    "try_parse",
]
