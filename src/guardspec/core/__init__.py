"""Core guardspec functionality: IR, lexer, parser, family grammars, validator."""

from . import ir
from .capabilities import Capabilities
from .errors import (
    CapabilityError,
    DuplicateValidatorError,
    GrammarContractError,
    GuardError,
    InvalidRangeError,
    ParseError,
    TypeMismatchError,
    UnknownOptionError,
    ValidationError,
)
from .families import FloatFamily, IntegerFamily, StringFamily, TypeFamily, get_family
from .parser import parse_attributes, parse_guard

__all__ = [
    "ir",
    "Capabilities",
    "CapabilityError",
    "DuplicateValidatorError",
    "FloatFamily",
    "GrammarContractError",
    "GuardError",
    "IntegerFamily",
    "InvalidRangeError",
    "ParseError",
    "StringFamily",
    "TypeFamily",
    "TypeMismatchError",
    "UnknownOptionError",
    "ValidationError",
    "get_family",
    "parse_attributes",
    "parse_guard",
]
