"""
guardspec - sanitize/validate annotations for wrapper types.

Parses the annotation attached to a single-field wrapper type declaration,
checks it for consistency and produces the guard a code generator consumes.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.capabilities import Capabilities
from .core.errors import GuardError, ParseError, ValidationError
from .core.parser import parse_attributes, parse_guard

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Capabilities",
    "GuardError",
    "ParseError",
    "ValidationError",
    "parse_attributes",
    "parse_guard",
]
