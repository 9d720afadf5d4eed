"""
Property-based tests using Hypothesis.

These tests check parser and validator invariants across generated
annotations rather than hand-picked examples.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from guardspec.core.errors import (
    DuplicateValidatorError,
    GuardError,
    InvalidRangeError,
    ParseError,
)
from guardspec.core.lexer import tokenize
from guardspec.core.parser import parse_guard

BOUNDS = ("greater", "greater_or_equal", "less", "less_or_equal")
LOWER = ("greater", "greater_or_equal")
UPPER = ("less", "less_or_equal")

# Single characters plus multi-character pieces of the annotation grammar
FRAGMENTS = [
    *"abcdefglmnrstuvwxyz_0123456789 =-,.:|&()\"'<>#\\",
    "::",
    "r\"",
    "r#\"",
    "\"#",
    "'static",
    "sanitize(",
    "validate(",
    "default = ",
]

# =============================================================================
# Lexer and parser robustness
# =============================================================================


class TestRobustness:
    """Malformed input only ever fails with a located GuardError."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_tokenize_never_crashes(self, text: str) -> None:
        try:
            tokens = tokenize(text)
        except ParseError as e:
            assert e.span is not None
        else:
            assert tokens[-1].span.start == len(text)

    @given(st.lists(st.sampled_from(FRAGMENTS), max_size=30).map("".join))
    @settings(max_examples=300)
    def test_parse_only_raises_guard_errors(self, source: str) -> None:
        for family in ("String", "i32", "f64"):
            try:
                parse_guard(source, family)
            except GuardError:
                pass


# =============================================================================
# Numeric literals
# =============================================================================


class TestNumericLiterals:
    """Underscore separators never change a literal's value."""

    @given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
    @settings(max_examples=100)
    def test_grouped_digits(self, value: int) -> None:
        grouped = format(value, "_")
        guard = parse_guard(f"validate(less_or_equal = {grouped})", "i64")
        assert guard.validators[0].value == value

    @given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=1, max_value=4))
    @settings(max_examples=100)
    def test_arbitrary_separators(self, value: int, every: int) -> None:
        digits = str(value)
        text = "_".join(digits[i : i + every] for i in range(0, len(digits), every))
        guard = parse_guard(f"validate(max_len = {text})", "String")
        assert guard.validators[0].length == value


# =============================================================================
# Range consistency
# =============================================================================


def satisfies(x: float, kind: str, bound: float) -> bool:
    return {
        "greater": x > bound,
        "greater_or_equal": x >= bound,
        "less": x < bound,
        "less_or_equal": x <= bound,
    }[kind]


class TestRangeConsistency:
    """A pair of bounds is rejected exactly when nothing satisfies it."""

    @given(
        st.sampled_from(LOWER),
        st.integers(min_value=-10, max_value=10),
        st.sampled_from(UPPER),
        st.integers(min_value=-10, max_value=10),
    )
    @settings(max_examples=300)
    def test_integer_bounds(self, lower: str, lo: int, upper: str, hi: int) -> None:
        source = f"validate({lower} = {lo}, {upper} = {hi})"
        has_value = any(
            satisfies(x, lower, lo) and satisfies(x, upper, hi) for x in range(-12, 13)
        )
        if has_value:
            parse_guard(source, "i32")
        else:
            with pytest.raises(InvalidRangeError):
                parse_guard(source, "i32")

    @given(
        st.sampled_from(LOWER),
        st.integers(min_value=-10, max_value=10),
        st.sampled_from(UPPER),
        st.integers(min_value=-10, max_value=10),
    )
    @settings(max_examples=300)
    def test_float_bounds(self, lower: str, lo: int, upper: str, hi: int) -> None:
        source = f"validate({lower} = {lo}, {upper} = {hi})"
        # Halfway points stand in for the values between integer bounds
        candidates = [x / 2 for x in range(-24, 25)]
        has_value = any(satisfies(x, lower, lo) and satisfies(x, upper, hi) for x in candidates)
        if has_value:
            parse_guard(source, "f64")
        else:
            with pytest.raises(InvalidRangeError):
                parse_guard(source, "f64")

    @given(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=50))
    @settings(max_examples=100)
    def test_length_bounds(self, min_len: int, max_len: int) -> None:
        source = f"validate(min_len = {min_len}, max_len = {max_len})"
        if min_len <= max_len:
            parse_guard(source, "String")
        else:
            with pytest.raises(InvalidRangeError):
                parse_guard(source, "String")


# =============================================================================
# Duplicates and ordering
# =============================================================================


class TestDuplicatesAndOrder:
    """Validators are unique per kind; sanitizers keep their order."""

    @given(
        st.lists(st.sampled_from(BOUNDS), min_size=1, max_size=3),
        st.integers(min_value=0, max_value=2),
    )
    @settings(max_examples=100)
    def test_repeated_bound_is_rejected(self, kinds: list[str], index: int) -> None:
        repeated = kinds[index % len(kinds)]
        items = [f"{kind} = 0" for kind in [*kinds, repeated]]
        with pytest.raises(DuplicateValidatorError):
            parse_guard(f"validate({', '.join(items)})", "i32")

    @given(st.lists(st.sampled_from(["trim", "lowercase", "uppercase"]), max_size=8))
    @settings(max_examples=100)
    def test_sanitizer_order_preserved(self, names: list[str]) -> None:
        guard = parse_guard(f"sanitize({', '.join(names)})", "String")
        assert [s.kind.value for s in guard.sanitizers] == names
