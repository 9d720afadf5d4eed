"""
Type families supported by guard annotations.

The set is closed: string, integer and float. ``get_family`` picks the
family for a declared inner type name.
"""

from ..errors import GuardError
from ..ir.numbers import NUMBER_TYPES, NumberKind
from .base import TypeFamily
from .numeric import FloatFamily, IntegerFamily, NumericFamily
from .string import StringFamily

STRING_TYPE_NAMES = ("String", "str")


def get_family(type_name: str) -> TypeFamily:
    """
    Select the family for a declared inner type.

    Args:
        type_name: Inner type as written in the declaration (``String``,
            ``i32``, ``f64``, ...)

    Raises:
        GuardError: If the type is not supported
    """
    if type_name in STRING_TYPE_NAMES:
        return StringFamily()

    number_type = NUMBER_TYPES.get(type_name)
    if number_type is None:
        supported = ", ".join([*STRING_TYPE_NAMES, *NUMBER_TYPES])
        raise GuardError(f"Type `{type_name}` is not supported. Supported types: {supported}")

    if number_type.kind == NumberKind.INTEGER:
        return IntegerFamily(number_type)
    return FloatFamily(number_type)


__all__ = [
    "FloatFamily",
    "IntegerFamily",
    "NumericFamily",
    "StringFamily",
    "TypeFamily",
    "get_family",
]
