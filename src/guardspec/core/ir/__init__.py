"""
Guard annotation Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

# Attributes and guards
from .attributes import (
    Attributes,
    DefaultValue,
    Guard,
    RawAttributes,
    RawGuard,
)

# Custom functions
from .functions import (
    CustomFunction,
    CustomFunctionKind,
    FunctionRole,
    TypedCustomFunction,
)

# Number types
from .numbers import (
    LENGTH_TYPE,
    NUMBER_TYPES,
    NumberKind,
    NumberType,
    get_number_type,
)

# Numeric guards
from .numeric_guard import (
    FloatGuard,
    FloatValidator,
    IntegerGuard,
    IntegerValidator,
    NumericSanitizer,
    NumericSanitizerKind,
    NumericValidatorKind,
)

# Spans
from .spans import Span, Spanned

# String guards
from .string_guard import (
    RegexDef,
    RegexDefKind,
    StringGuard,
    StringSanitizer,
    StringSanitizerKind,
    StringValidator,
    StringValidatorKind,
)

__all__ = [
    # Attributes and guards
    "Attributes",
    "DefaultValue",
    "Guard",
    "RawAttributes",
    "RawGuard",
    # Custom functions
    "CustomFunction",
    "CustomFunctionKind",
    "FunctionRole",
    "TypedCustomFunction",
    # Number types
    "LENGTH_TYPE",
    "NUMBER_TYPES",
    "NumberKind",
    "NumberType",
    "get_number_type",
    # Numeric guards
    "FloatGuard",
    "FloatValidator",
    "IntegerGuard",
    "IntegerValidator",
    "NumericSanitizer",
    "NumericSanitizerKind",
    "NumericValidatorKind",
    # Spans
    "Span",
    "Spanned",
    # String guards
    "RegexDef",
    "RegexDefKind",
    "StringGuard",
    "StringSanitizer",
    "StringSanitizerKind",
    "StringValidator",
    "StringValidatorKind",
]
