"""Shared pytest fixtures for guardspec tests."""

import pytest

from guardspec.core import ir
from guardspec.core.capabilities import Capabilities
from guardspec.core.families import FloatFamily, IntegerFamily, StringFamily
from guardspec.core.lexer import tokenize
from guardspec.core.parser_impl.base import TokenCursor


@pytest.fixture
def string_family() -> StringFamily:
    """Return the string family."""
    return StringFamily()


@pytest.fixture
def i32_family() -> IntegerFamily:
    """Return the integer family over i32."""
    return IntegerFamily(ir.NUMBER_TYPES["i32"])


@pytest.fixture
def f64_family() -> FloatFamily:
    """Return the float family over f64."""
    return FloatFamily(ir.NUMBER_TYPES["f64"])


@pytest.fixture
def all_capabilities() -> Capabilities:
    """Return capabilities with every flag enabled."""
    return Capabilities(regex=True, new_unchecked=True)


@pytest.fixture
def make_cursor():
    """Return a factory building a cursor over annotation text."""

    def _make(source: str) -> TokenCursor:
        return TokenCursor(tokenize(source), source)

    return _make
