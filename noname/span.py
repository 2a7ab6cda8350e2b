"""Source locations attached to tokens, AST nodes and errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """A region of a source file, identified by file id, offset and length."""

    filename_id: int = 0
    start: int = 0
    length: int = 0

    def is_empty(self) -> bool:
        """Return True when the span starts at offset zero."""
        return self.start == 0

    def end(self) -> int:
        """Return the offset just past the last character of the span."""
        return self.start + self.length

    def merge_with(self, other: Span) -> Span:
        """Return a span running from the start of this one to the end of ``other``."""
        if self.filename_id != other.filename_id:
            raise ValueError(
                f"cannot merge spans from different files "
                f"({self.filename_id} and {other.filename_id})"
            )
        return Span(self.filename_id, self.start, other.end() - self.start)