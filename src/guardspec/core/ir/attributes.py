"""
Intermediate and final results of parsing one annotation.

``RawGuard`` and ``RawAttributes`` are produced by the parser and keep spans
for every item. ``Attributes`` is the finalized artifact handed to the
generator.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from .numeric_guard import FloatGuard, IntegerGuard
from .spans import Span, Spanned
from .string_guard import StringGuard

Guard: TypeAlias = StringGuard | IntegerGuard | FloatGuard


class RawGuard(BaseModel):
    """
    Parsed but not yet validated sanitizers and validators.

    Both lists keep declaration order and each item keeps its span. Item
    types depend on the family that produced them.
    """

    sanitizers: list[Spanned] = Field(default_factory=list)
    validators: list[Spanned] = Field(default_factory=list)


class DefaultValue(BaseModel):
    """Literal given with ``default = ...``."""

    value: str | int | float
    span: Span

    model_config = ConfigDict(frozen=True)


class RawAttributes(BaseModel):
    """Everything the attribute list parser collected for one annotation."""

    guard: RawGuard = Field(default_factory=RawGuard)
    new_unchecked: bool = False
    default: DefaultValue | None = None


class Attributes(BaseModel):
    """
    Finalized annotation configuration.

    Attributes:
        guard: Validated sanitizers and validators for the type family
        new_unchecked: Whether an unchecked constructor was requested
        default: Default value literal, if declared
    """

    guard: Guard
    new_unchecked: bool = False
    default: DefaultValue | None = None

    model_config = ConfigDict(frozen=True)
