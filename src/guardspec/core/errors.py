"""
Error types for guard annotation parsing and validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir.spans import Span


class GuardError(Exception):
    """Base exception for all annotation errors."""

    def __init__(self, message: str, span: Span | None = None):
        self.message = message
        self.span = span
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with location if available."""
        if self.span:
            return f"{self.span.line}:{self.span.column}: {self.message}"
        return self.message

    def render(self, source: str, origin: str = "<annotation>") -> str:
        """
        Render the error with a snippet of the annotation source.

        Args:
            source: The annotation text the error was raised for
            origin: Label shown in the location line (e.g. a file path)

        Returns:
            Formatted string like "<annotation>:1:10" followed by the offending
            line and a ``^`` marker under the span
        """
        if not self.span:
            return f"{origin}\n{self.message}"
        location = f"{origin}:{self.span.line}:{self.span.column}"
        return f"{location}\n{self._format_snippet(source)}\n{self.message}"

    def _format_snippet(self, source: str) -> str:
        assert self.span is not None
        lines = source.split("\n")
        line = lines[self.span.line - 1] if self.span.line <= len(lines) else ""
        prefix = f"{self.span.line:4d} | "

        # Markers stop at the end of the first line for multi-line spans
        width = max(1, min(self.span.end - self.span.start, len(line) - self.span.column + 1))
        marker = " " * (len(prefix) + self.span.column - 1) + "^" * width
        return f"{prefix}{line}\n{marker}"


class ParseError(GuardError):
    """
    Raised when annotation syntax cannot be parsed.

    Examples:
    - Unexpected characters or tokens
    - Unbalanced delimiters
    - Missing ``=`` after a keyword that takes an argument
    """

    pass


class UnknownOptionError(ParseError):
    """
    Raised for an unrecognised keyword.

    Examples:
    - ``sanitise(...)`` at the top level
    - ``validate(max_length = 5)`` inside a family group
    """

    pass


class TypeMismatchError(ParseError):
    """
    Raised when a literal or function does not fit the slot it is used in.

    Examples:
    - ``min_len = -1`` (lengths are unsigned)
    - ``greater = 1.5`` on an integer type
    - ``with = |s: String| ...`` where a ``&str`` view is expected
    """

    pass


class CapabilityError(ParseError):
    """Raised when a recognised keyword needs a capability that is disabled."""

    def __init__(self, message: str, span: Span | None = None, capability: str = ""):
        self.capability = capability
        super().__init__(message, span)


class ValidationError(GuardError):
    """
    Raised when parsed validators are inconsistent with each other.

    Examples:
    - The same validator declared twice
    - ``min_len`` greater than ``max_len``
    """

    pass


class DuplicateValidatorError(ValidationError):
    """Raised for a repeated or ambiguous validator."""

    pass


class InvalidRangeError(ValidationError):
    """Raised when lower and upper bounds describe an empty interval."""

    pass


class GrammarContractError(RuntimeError):
    """
    Raised when a grammar precondition guaranteed by the caller does not hold.

    This signals a bug in a family parser, not invalid user input, so it
    carries no span and is not a GuardError.
    """

    pass


def make_parse_error(message: str, span: Span | None) -> ParseError:
    """
    Helper to create a ParseError located at a span.

    Args:
        message: Error description
        span: Location of the offending tokens

    Returns:
        ParseError with location attached
    """
    return ParseError(message, span)


def make_capability_error(capability: str, hint: str, span: Span | None) -> CapabilityError:
    """
    Helper to create a CapabilityError with remediation guidance.

    Args:
        capability: Name of the disabled capability
        hint: Remediation text appended to the message
        span: Location of the gated keyword

    Returns:
        CapabilityError naming the capability
    """
    message = f"The `{capability}` capability must be enabled to use this option.\n{hint}"
    return CapabilityError(message, span, capability=capability)
