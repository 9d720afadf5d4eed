"""
Sanitizers, validators and the finalized guard for string types.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .functions import TypedCustomFunction


class StringSanitizerKind(StrEnum):
    """String sanitizers, applied in declaration order."""

    TRIM = "trim"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    WITH = "with"


class StringSanitizer(BaseModel):
    """A single string sanitizer; ``function`` is set only for ``with``."""

    kind: StringSanitizerKind
    function: TypedCustomFunction | None = None

    model_config = ConfigDict(frozen=True)


class RegexDefKind(StrEnum):
    """How a regex is given."""

    STRING_LITERAL = "string_literal"
    PATH = "path"


class RegexDef(BaseModel):
    """
    A pattern definition, resolved later by the generator.

    Examples:
        - RegexDef(kind=STRING_LITERAL, value="^[a-z]+$")
        - RegexDef(kind=PATH, value="patterns.EMAIL")
    """

    kind: RegexDefKind
    value: str

    model_config = ConfigDict(frozen=True)


class StringValidatorKind(StrEnum):
    """String validators."""

    MIN_LEN = "min_len"
    MAX_LEN = "max_len"
    NOT_EMPTY = "not_empty"
    WITH = "with"
    REGEX = "regex"


class StringValidator(BaseModel):
    """
    A single string validator.

    Only the field matching ``kind`` is set: ``length`` for ``min_len`` and
    ``max_len``, ``function`` for ``with``, ``regex`` for ``regex``.
    """

    kind: StringValidatorKind
    length: int | None = None
    function: TypedCustomFunction | None = None
    regex: RegexDef | None = None

    model_config = ConfigDict(frozen=True)


class StringGuard(BaseModel):
    """Validated sanitize/validate configuration for a string type."""

    sanitizers: tuple[StringSanitizer, ...] = Field(default_factory=tuple)
    validators: tuple[StringValidator, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def has_validation(self) -> bool:
        return bool(self.validators)
