"""
Optional capabilities that gate annotation keywords.

Capabilities are passed explicitly into parsing; nothing here reads the
environment or keeps global state.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from .errors import make_capability_error
from .ir.spans import Span

# Remediation shown when a gated keyword is used with the capability disabled
CAPABILITY_HINTS: dict[str, str] = {
    "regex": (
        "To validate string types with regex, enable the `regex` capability.\n"
        "IMPORTANT: the generated crate must EXPLICITLY depend on the `regex` "
        "and `lazy_static` crates."
    ),
    "new_unchecked": (
        "To generate an unchecked constructor, enable the `new_unchecked` capability."
    ),
}


class Capabilities(BaseModel):
    """
    Capability flags for one parse.

    Attributes:
        regex: Allow the ``regex`` string validator
        new_unchecked: Allow the top-level ``new_unchecked`` option
    """

    regex: bool = False
    new_unchecked: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Capabilities:
        """
        Build capabilities from a list of enabled names.

        Raises:
            ValueError: If a name is not a known capability
        """
        enabled: dict[str, bool] = {}
        for name in names:
            if name not in cls.model_fields:
                known = ", ".join(sorted(cls.model_fields))
                raise ValueError(f"Unknown capability {name!r} (known: {known})")
            enabled[name] = True
        return cls(**enabled)

    def require(self, name: str, span: Span) -> None:
        """
        Fail unless capability ``name`` is enabled.

        Raises:
            CapabilityError: With remediation guidance located at ``span``
        """
        if not getattr(self, name):
            raise make_capability_error(name, CAPABILITY_HINTS[name], span)


__all__ = ["CAPABILITY_HINTS", "Capabilities"]
