"""Source spans for annotation tokens and parsed items.

Every parsed sanitizer and validator keeps the span of the tokens it came
from, so semantic errors can point back at the exact text.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ItemT = TypeVar("ItemT")


class Span(BaseModel):
    """Character range in the annotation source.

    Attributes:
        start: 0-indexed offset of the first character
        end: 0-indexed offset one past the last character
        line: 1-indexed line number of ``start``
        column: 1-indexed column number of ``start``
    """

    start: int
    end: int
    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    def join(self, other: Span) -> Span:
        """Smallest span covering both ``self`` and ``other``."""
        first = self if self.start <= other.start else other
        return Span(
            start=first.start,
            end=max(self.end, other.end),
            line=first.line,
            column=first.column,
        )

    def text(self, source: str) -> str:
        return source[self.start : self.end]

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Spanned(BaseModel, Generic[ItemT]):
    """A parsed item paired with the span of its defining tokens."""

    item: ItemT
    span: Span

    model_config = ConfigDict(frozen=True)
