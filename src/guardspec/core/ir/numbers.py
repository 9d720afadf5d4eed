"""
Number types accepted as the inner type of numeric guards.

Each type knows its textual name, whether it is integral, and its bounds,
so numeric literals in annotations can be checked against the declared
field type.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class NumberKind(StrEnum):
    """Broad number category."""

    INTEGER = "integer"
    FLOAT = "float"


class NumberType(BaseModel):
    """
    A concrete number type such as ``i32`` or ``f64``.

    Attributes:
        name: Type name as written in declarations
        kind: Integer or float
        minimum: Smallest representable value (integers only)
        maximum: Largest representable value (integers), or largest finite
            magnitude (floats)
    """

    name: str
    kind: NumberKind
    minimum: int | None = None
    maximum: int | float | None = None

    model_config = ConfigDict(frozen=True)

    def parse(self, text: str) -> int | float:
        """
        Parse literal text into a value of this type.

        Raises:
            ValueError: If the text is not a literal of this type or is out
                of range
        """
        if self.kind == NumberKind.INTEGER:
            value = int(text, 10)
            if self.minimum is not None and value < self.minimum:
                raise ValueError(f"{value} is below the minimum of {self.name}")
            if self.maximum is not None and value > self.maximum:
                raise ValueError(f"{value} is above the maximum of {self.name}")
            return value

        result = float(text)
        if self.maximum is not None and abs(result) > self.maximum:
            raise ValueError(f"{text} overflows {self.name}")
        return result

    def __str__(self) -> str:
        return self.name


def _signed(name: str, bits: int) -> NumberType:
    return NumberType(
        name=name,
        kind=NumberKind.INTEGER,
        minimum=-(2 ** (bits - 1)),
        maximum=2 ** (bits - 1) - 1,
    )


def _unsigned(name: str, bits: int) -> NumberType:
    return NumberType(name=name, kind=NumberKind.INTEGER, minimum=0, maximum=2**bits - 1)


NUMBER_TYPES: dict[str, NumberType] = {
    "i8": _signed("i8", 8),
    "i16": _signed("i16", 16),
    "i32": _signed("i32", 32),
    "i64": _signed("i64", 64),
    "i128": _signed("i128", 128),
    "isize": _signed("isize", 64),
    "u8": _unsigned("u8", 8),
    "u16": _unsigned("u16", 16),
    "u32": _unsigned("u32", 32),
    "u64": _unsigned("u64", 64),
    "u128": _unsigned("u128", 128),
    "usize": _unsigned("usize", 64),
    "f32": NumberType(name="f32", kind=NumberKind.FLOAT, maximum=3.4028234663852886e38),
    "f64": NumberType(name="f64", kind=NumberKind.FLOAT, maximum=1.7976931348623157e308),
}

# Lengths are counted in characters and can never be negative
LENGTH_TYPE = NUMBER_TYPES["usize"]


def get_number_type(name: str) -> NumberType:
    """
    Look up a number type by name.

    Raises:
        KeyError: If the name is not a supported number type
    """
    return NUMBER_TYPES[name]
