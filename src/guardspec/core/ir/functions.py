"""
Custom function references used by ``with = <function>`` arguments.

A reference is either a path to a named function or an inline closure.
References are type-checked against the slot they are used in but never
resolved or executed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from ..errors import TypeMismatchError
from .spans import Span


class FunctionRole(StrEnum):
    """Slot a custom function is bound to."""

    SANITIZER = "sanitizer"
    VALIDATOR = "validator"


class CustomFunctionKind(StrEnum):
    """How the function is referenced."""

    PATH = "path"
    CLOSURE = "closure"


def normalize_type(type_text: str) -> str:
    """Canonical spelling of a type for comparison (``& str`` == ``&str``)."""
    return "".join(type_text.split())


class CustomFunction(BaseModel):
    """
    An unbound function reference.

    Examples:
        - CustomFunction(kind=PATH, path="checks.is_even")
        - CustomFunction(kind=CLOSURE, param="s", param_type="&str", body="s.len() > 3")
    """

    kind: CustomFunctionKind
    path: str | None = None
    param: str | None = None
    param_type: str | None = None
    body: str | None = None
    span: Span

    model_config = ConfigDict(frozen=True)

    def bind(self, expected_type: str) -> TypedCustomFunction:
        """
        Attach the input type the function must accept.

        Paths and closures without a parameter annotation take the expected
        type. An annotated closure must already accept it.

        Raises:
            TypeMismatchError: If the closure's annotation differs from
                ``expected_type``
        """
        if self.param_type is not None and normalize_type(self.param_type) != normalize_type(
            expected_type
        ):
            raise TypeMismatchError(
                f"Expected a function with input type `{expected_type}`, "
                f"got `{self.param_type}`",
                self.span,
            )
        return TypedCustomFunction(
            kind=self.kind,
            path=self.path,
            param=self.param,
            body=self.body,
            input_type=expected_type,
        )

    def __str__(self) -> str:
        if self.kind == CustomFunctionKind.PATH:
            return self.path or ""
        annotation = f": {self.param_type}" if self.param_type else ""
        return f"|{self.param}{annotation}| {self.body}"


class TypedCustomFunction(BaseModel):
    """A function reference whose input type has been checked."""

    kind: CustomFunctionKind
    path: str | None = None
    param: str | None = None
    body: str | None = None
    input_type: str

    model_config = ConfigDict(frozen=True)
