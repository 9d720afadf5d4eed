"""Tests for semantic validation of raw guards."""

import logging

import pytest

from guardspec.core.errors import DuplicateValidatorError, InvalidRangeError
from guardspec.core.ir import (
    NUMBER_TYPES,
    FloatValidator,
    IntegerValidator,
    NumericValidatorKind,
    RawGuard,
    Span,
    Spanned,
    StringSanitizer,
    StringSanitizerKind,
    StringValidator,
    StringValidatorKind,
)
from guardspec.core.validator import (
    check_duplicates,
    interval_is_empty,
    validate_float_guard,
    validate_integer_guard,
    validate_string_guard,
)


def at(start: int, end: int) -> Span:
    return Span(start=start, end=end, line=1, column=start + 1)


def int_bound(kind: str, value: int, start: int) -> Spanned[IntegerValidator]:
    return Spanned(
        item=IntegerValidator(kind=NumericValidatorKind(kind), value=value),
        span=at(start, start + 5),
    )


def length(kind: StringValidatorKind, value: int, start: int) -> Spanned[StringValidator]:
    return Spanned(item=StringValidator(kind=kind, length=value), span=at(start, start + 10))


class TestCheckDuplicates:
    """Repeated validator kinds."""

    def test_distinct(self) -> None:
        check_duplicates([int_bound("greater", 0, 0), int_bound("less", 9, 10)])

    def test_second_occurrence_is_reported(self) -> None:
        validators = [
            int_bound("less", 1, 0),
            int_bound("greater", 0, 10),
            int_bound("less", 2, 20),
        ]
        with pytest.raises(DuplicateValidatorError) as exc_info:
            check_duplicates(validators)
        assert exc_info.value.span.start == 20


class TestIntervalIsEmpty:
    """Bound normalization for discrete and continuous ranges."""

    @pytest.mark.parametrize(
        "lower, lower_strict, upper, upper_strict, expected",
        [
            (5, False, 5, False, False),
            (5, True, 5, False, True),
            (4, True, 5, True, True),
            (4, True, 6, True, False),
            (20, False, 0, False, True),
            (-3, False, 3, True, False),
        ],
    )
    def test_discrete(self, lower, lower_strict, upper, upper_strict, expected) -> None:
        assert interval_is_empty(lower, lower_strict, upper, upper_strict, True) is expected

    @pytest.mark.parametrize(
        "lower, lower_strict, upper, upper_strict, expected",
        [
            (5.0, False, 5.0, False, False),
            (5.0, True, 5.0, False, True),
            (5.0, False, 5.0, True, True),
            (4.0, True, 5.0, True, False),
            (0.5, False, -0.5, False, True),
        ],
    )
    def test_continuous(self, lower, lower_strict, upper, upper_strict, expected) -> None:
        assert interval_is_empty(lower, lower_strict, upper, upper_strict, False) is expected


class TestValidateStringGuard:
    """String guard finalization."""

    def test_builds_guard_in_order(self) -> None:
        raw = RawGuard(
            sanitizers=[
                Spanned(item=StringSanitizer(kind=StringSanitizerKind.TRIM), span=at(0, 4)),
                Spanned(item=StringSanitizer(kind=StringSanitizerKind.UPPERCASE), span=at(6, 15)),
            ],
            validators=[length(StringValidatorKind.MAX_LEN, 10, 20)],
        )
        guard = validate_string_guard(raw)
        assert [s.kind for s in guard.sanitizers] == ["trim", "uppercase"]
        assert guard.has_validation()

    def test_empty_guard(self) -> None:
        guard = validate_string_guard(RawGuard())
        assert guard.sanitizers == ()
        assert not guard.has_validation()

    def test_min_len_above_max_len(self) -> None:
        raw = RawGuard(
            validators=[
                length(StringValidatorKind.MAX_LEN, 2, 0),
                length(StringValidatorKind.MIN_LEN, 5, 20),
            ]
        )
        with pytest.raises(InvalidRangeError) as exc_info:
            validate_string_guard(raw)
        assert (exc_info.value.span.start, exc_info.value.span.end) == (0, 30)

    def test_redundant_not_empty_is_logged(self, caplog) -> None:
        raw = RawGuard(
            validators=[
                Spanned(item=StringValidator(kind=StringValidatorKind.NOT_EMPTY), span=at(0, 9)),
                length(StringValidatorKind.MIN_LEN, 1, 11),
            ]
        )
        with caplog.at_level(logging.WARNING, logger="guardspec.core.validator"):
            validate_string_guard(raw)
        assert "redundant" in caplog.text

    def test_not_empty_with_zero_min_len_is_silent(self, caplog) -> None:
        raw = RawGuard(
            validators=[
                Spanned(item=StringValidator(kind=StringValidatorKind.NOT_EMPTY), span=at(0, 9)),
                length(StringValidatorKind.MIN_LEN, 0, 11),
            ]
        )
        with caplog.at_level(logging.WARNING, logger="guardspec.core.validator"):
            validate_string_guard(raw)
        assert "redundant" not in caplog.text


class TestValidateNumericGuards:
    """Integer and float guard finalization."""

    def test_integer_guard(self) -> None:
        raw = RawGuard(validators=[int_bound("greater_or_equal", 0, 0), int_bound("less", 10, 10)])
        guard = validate_integer_guard(raw, NUMBER_TYPES["u8"])
        assert guard.number_type.name == "u8"
        assert [v.value for v in guard.validators] == [0, 10]

    def test_integer_range_error_message(self) -> None:
        raw = RawGuard(validators=[int_bound("greater", 9, 0), int_bound("less", 3, 10)])
        with pytest.raises(InvalidRangeError, match="`greater = 9` and `less = 3`"):
            validate_integer_guard(raw, NUMBER_TYPES["i64"])

    def test_exclusive_pair_reported_at_later(self) -> None:
        raw = RawGuard(
            validators=[int_bound("less_or_equal", 3, 0), int_bound("less", 4, 10)]
        )
        with pytest.raises(DuplicateValidatorError, match="mutually exclusive") as exc_info:
            validate_integer_guard(raw, NUMBER_TYPES["i32"])
        assert exc_info.value.span.start == 10

    def test_float_guard_with_finite_only(self) -> None:
        raw = RawGuard(
            validators=[
                Spanned(item=FloatValidator(kind=NumericValidatorKind.FINITE), span=at(0, 6))
            ]
        )
        guard = validate_float_guard(raw, NUMBER_TYPES["f32"])
        assert guard.validators[0].kind == NumericValidatorKind.FINITE

    def test_float_half_open_point(self) -> None:
        raw = RawGuard(
            validators=[
                Spanned(
                    item=FloatValidator(kind=NumericValidatorKind.GREATER, value=1.5),
                    span=at(0, 5),
                ),
                Spanned(
                    item=FloatValidator(kind=NumericValidatorKind.LESS_OR_EQUAL, value=1.5),
                    span=at(10, 15),
                ),
            ]
        )
        with pytest.raises(InvalidRangeError):
            validate_float_guard(raw, NUMBER_TYPES["f64"])
