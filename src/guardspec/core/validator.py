"""
Semantic validation of parsed guard annotations.

Checks cross-item consistency of the raw validator lists (duplicates,
mutually exclusive bounds, empty ranges) and builds the finalized guards.
Tokens are never re-read here; every error is located with the spans the
parser attached to each item.
"""

import logging
from collections.abc import Sequence
from typing import Any

from .errors import DuplicateValidatorError, InvalidRangeError
from .ir.attributes import RawGuard
from .ir.numbers import NumberType
from .ir.numeric_guard import (
    LOWER_BOUND_KINDS,
    STRICT_BOUND_KINDS,
    UPPER_BOUND_KINDS,
    FloatGuard,
    IntegerGuard,
    NumericValidatorKind,
)
from .ir.spans import Spanned
from .ir.string_guard import StringGuard, StringValidatorKind

logger = logging.getLogger(__name__)

# Pairs where only one direction form may be declared
EXCLUSIVE_BOUNDS = (
    (NumericValidatorKind.GREATER, NumericValidatorKind.GREATER_OR_EQUAL),
    (NumericValidatorKind.LESS, NumericValidatorKind.LESS_OR_EQUAL),
)


# =============================================================================
# Shared checks
# =============================================================================


def check_duplicates(validators: Sequence[Spanned[Any]]) -> None:
    """
    Reject a validator kind that appears more than once.

    Raises:
        DuplicateValidatorError: Located at the second occurrence
    """
    seen: set[str] = set()
    for validator in validators:
        kind = validator.item.kind
        if kind in seen:
            raise DuplicateValidatorError(f"Duplicated validator `{kind}`", validator.span)
        seen.add(kind)


def check_exclusive(validators: Sequence[Spanned[Any]], first: str, second: str) -> None:
    """
    Reject declaring both ``first`` and ``second``.

    Raises:
        DuplicateValidatorError: Located at whichever was declared later
    """
    a = find_validator(validators, first)
    b = find_validator(validators, second)
    if a is None or b is None:
        return
    later = a if a.span.start > b.span.start else b
    raise DuplicateValidatorError(
        f"The validators `{first}` and `{second}` are mutually exclusive", later.span
    )


def find_validator(validators: Sequence[Spanned[Any]], kind: str) -> Spanned[Any] | None:
    for validator in validators:
        if validator.item.kind == kind:
            return validator
    return None


def interval_is_empty(
    lower: int | float,
    lower_strict: bool,
    upper: int | float,
    upper_strict: bool,
    discrete: bool,
) -> bool:
    """
    Whether no value satisfies both bounds.

    Discrete (integer) bounds are normalized to inclusive ones first, so
    ``greater = 4, less = 5`` is empty. Continuous (float) bounds are empty
    when they cross, or meet at a point either of them excludes.
    """
    if discrete:
        low = lower + 1 if lower_strict else lower
        high = upper - 1 if upper_strict else upper
        return low > high

    if lower != upper:
        return lower > upper
    return lower_strict or upper_strict


def _check_numeric_validators(validators: Sequence[Spanned[Any]], discrete: bool) -> None:
    check_duplicates(validators)
    for first, second in EXCLUSIVE_BOUNDS:
        check_exclusive(validators, first, second)

    # Custom predicates carry no bound and never take part in range checks
    lower = next((v for v in validators if v.item.kind in LOWER_BOUND_KINDS), None)
    upper = next((v for v in validators if v.item.kind in UPPER_BOUND_KINDS), None)
    if lower is None or upper is None:
        return

    if interval_is_empty(
        lower.item.value,
        lower.item.kind in STRICT_BOUND_KINDS,
        upper.item.value,
        upper.item.kind in STRICT_BOUND_KINDS,
        discrete,
    ):
        raise InvalidRangeError(
            f"`{lower.item.kind} = {lower.item.value}` and "
            f"`{upper.item.kind} = {upper.item.value}` leave no valid values",
            lower.span.join(upper.span),
        )


# =============================================================================
# Family validation
# =============================================================================


def validate_string_guard(raw: RawGuard) -> StringGuard:
    """
    Validate string sanitizers/validators and build the guard.

    Raises:
        DuplicateValidatorError: If a validator kind is repeated
        InvalidRangeError: If ``min_len`` exceeds ``max_len``
    """
    validators = raw.validators
    check_duplicates(validators)

    min_len = find_validator(validators, StringValidatorKind.MIN_LEN)
    max_len = find_validator(validators, StringValidatorKind.MAX_LEN)
    if min_len is not None and max_len is not None and min_len.item.length > max_len.item.length:
        raise InvalidRangeError(
            "`min_len` cannot be greater than `max_len`",
            min_len.span.join(max_len.span),
        )

    not_empty = find_validator(validators, StringValidatorKind.NOT_EMPTY)
    if not_empty is not None and min_len is not None and min_len.item.length >= 1:
        logger.warning(
            "`not_empty` at %s is redundant with `min_len = %d`",
            not_empty.span,
            min_len.item.length,
        )

    guard = StringGuard(
        sanitizers=tuple(s.item for s in raw.sanitizers),
        validators=tuple(v.item for v in validators),
    )
    logger.debug(
        "Built string guard with %d sanitizers and %d validators",
        len(guard.sanitizers),
        len(guard.validators),
    )
    return guard


def validate_integer_guard(raw: RawGuard, number_type: NumberType) -> IntegerGuard:
    """
    Validate integer sanitizers/validators and build the guard.

    Raises:
        DuplicateValidatorError: If a validator kind is repeated, or both the
            strict and inclusive form of one bound direction are declared
        InvalidRangeError: If no integer satisfies both bounds
    """
    _check_numeric_validators(raw.validators, discrete=True)
    guard = IntegerGuard(
        number_type=number_type,
        sanitizers=tuple(s.item for s in raw.sanitizers),
        validators=tuple(v.item for v in raw.validators),
    )
    logger.debug("Built %s guard with %d validators", number_type.name, len(guard.validators))
    return guard


def validate_float_guard(raw: RawGuard, number_type: NumberType) -> FloatGuard:
    """
    Validate float sanitizers/validators and build the guard.

    Raises:
        DuplicateValidatorError: If a validator kind is repeated, or both the
            strict and inclusive form of one bound direction are declared
        InvalidRangeError: If no float satisfies both bounds
    """
    _check_numeric_validators(raw.validators, discrete=False)
    guard = FloatGuard(
        number_type=number_type,
        sanitizers=tuple(s.item for s in raw.sanitizers),
        validators=tuple(v.item for v in raw.validators),
    )
    logger.debug("Built %s guard with %d validators", number_type.name, len(guard.validators))
    return guard
