"""
Sanitizers, validators and finalized guards for integer and float types.

Both families share one validator kind enum; ``finite`` only parses for
floats.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .functions import TypedCustomFunction
from .numbers import NumberType


class NumericSanitizerKind(StrEnum):
    """Numeric sanitizers."""

    WITH = "with"


class NumericSanitizer(BaseModel):
    kind: NumericSanitizerKind
    function: TypedCustomFunction | None = None

    model_config = ConfigDict(frozen=True)


class NumericValidatorKind(StrEnum):
    """Numeric validators."""

    GREATER = "greater"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS = "less"
    LESS_OR_EQUAL = "less_or_equal"
    WITH = "with"
    FINITE = "finite"


LOWER_BOUND_KINDS = (NumericValidatorKind.GREATER, NumericValidatorKind.GREATER_OR_EQUAL)
UPPER_BOUND_KINDS = (NumericValidatorKind.LESS, NumericValidatorKind.LESS_OR_EQUAL)
STRICT_BOUND_KINDS = (NumericValidatorKind.GREATER, NumericValidatorKind.LESS)


class IntegerValidator(BaseModel):
    """An integer validator; ``value`` is set for bounds, ``function`` for ``with``."""

    kind: NumericValidatorKind
    value: int | None = None
    function: TypedCustomFunction | None = None

    model_config = ConfigDict(frozen=True)


class FloatValidator(BaseModel):
    """A float validator; ``value`` is set for bounds, ``function`` for ``with``."""

    kind: NumericValidatorKind
    value: float | None = None
    function: TypedCustomFunction | None = None

    model_config = ConfigDict(frozen=True)


class IntegerGuard(BaseModel):
    """Validated sanitize/validate configuration for an integer type."""

    number_type: NumberType
    sanitizers: tuple[NumericSanitizer, ...] = Field(default_factory=tuple)
    validators: tuple[IntegerValidator, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def has_validation(self) -> bool:
        return bool(self.validators)


class FloatGuard(BaseModel):
    """Validated sanitize/validate configuration for a float type."""

    number_type: NumberType
    sanitizers: tuple[NumericSanitizer, ...] = Field(default_factory=tuple)
    validators: tuple[FloatValidator, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def has_validation(self) -> bool:
        return bool(self.validators)
