"""
Grammar for integer- and float-backed types.

Examples:
    validate(greater_or_equal = -1_000, less = 5_000)
    validate(finite, less_or_equal = 1.0)            (floats only)
    sanitize(with = |n| n.clamp(0, 100))
"""

from typing import Any

from ..capabilities import Capabilities
from ..errors import GuardError
from ..ir.attributes import DefaultValue, RawGuard
from ..ir.functions import FunctionRole
from ..ir.numbers import NumberKind, NumberType
from ..ir.numeric_guard import (
    FloatGuard,
    FloatValidator,
    IntegerGuard,
    IntegerValidator,
    NumericSanitizer,
    NumericSanitizerKind,
    NumericValidatorKind,
)
from ..ir.spans import Spanned
from ..parser_impl.base import TokenCursor
from ..parser_impl.numbers import parse_number, parse_value_as_number
from ..validator import validate_float_guard, validate_integer_guard
from .base import TypeFamily

BOUND_KEYWORDS = (
    NumericValidatorKind.GREATER,
    NumericValidatorKind.GREATER_OR_EQUAL,
    NumericValidatorKind.LESS,
    NumericValidatorKind.LESS_OR_EQUAL,
)


class NumericFamily(TypeFamily):
    """
    Shared grammar for numeric families.

    Sanitizers and validators both receive the owned inner value; numbers are
    cheap to copy.
    """

    number_kind: NumberKind
    validator_model: type[IntegerValidator] | type[FloatValidator]

    sanitizer_keywords = (NumericSanitizerKind.WITH.value,)

    def __init__(self, number_type: NumberType):
        if number_type.kind != self.number_kind:
            raise GuardError(
                f"`{number_type.name}` is not a valid inner type for the {self.name} family"
            )
        self.number_type = number_type

    def input_type(self, role: FunctionRole) -> str:
        return self.number_type.name

    def parse_sanitizer(
        self, cursor: TokenCursor, capabilities: Capabilities
    ) -> Spanned[NumericSanitizer]:
        keyword = self.read_keyword(cursor, "sanitizer")

        if keyword.value == "with":
            function, span = self.parse_with(cursor, keyword, FunctionRole.SANITIZER)
            return Spanned(
                item=NumericSanitizer(kind=NumericSanitizerKind.WITH, function=function),
                span=span,
            )

        raise self.unknown_sanitizer(keyword)

    def parse_validator(self, cursor: TokenCursor, capabilities: Capabilities) -> Spanned[Any]:
        keyword = self.read_keyword(cursor, "validator")

        if keyword.value in BOUND_KEYWORDS:
            self.require_equals(cursor, keyword)
            value, span = parse_value_as_number(cursor, self.number_type)
            return Spanned(
                item=self.validator_model(kind=NumericValidatorKind(keyword.value), value=value),
                span=keyword.span.join(span),
            )

        if keyword.value == "with":
            function, span = self.parse_with(cursor, keyword, FunctionRole.VALIDATOR)
            return Spanned(
                item=self.validator_model(kind=NumericValidatorKind.WITH, function=function),
                span=span,
            )

        if keyword.value in self.validator_keywords:
            return Spanned(
                item=self.validator_model(kind=NumericValidatorKind(keyword.value)),
                span=keyword.span,
            )

        raise self.unknown_validator(keyword)

    def parse_default(self, cursor: TokenCursor) -> DefaultValue:
        value, span = parse_number(cursor, self.number_type)
        return DefaultValue(value=value, span=span)


class IntegerFamily(NumericFamily):
    """Integer type family (``i8`` .. ``u128``, ``isize``, ``usize``)."""

    name = "integer"
    number_kind = NumberKind.INTEGER
    validator_model = IntegerValidator
    validator_keywords = (*(kind.value for kind in BOUND_KEYWORDS), "with")

    def validate(self, raw: RawGuard) -> IntegerGuard:
        return validate_integer_guard(raw, self.number_type)


class FloatFamily(NumericFamily):
    """Float type family (``f32``, ``f64``)."""

    name = "float"
    number_kind = NumberKind.FLOAT
    validator_model = FloatValidator
    validator_keywords = (*(kind.value for kind in BOUND_KEYWORDS), "with", "finite")

    def validate(self, raw: RawGuard) -> FloatGuard:
        return validate_float_guard(raw, self.number_type)
