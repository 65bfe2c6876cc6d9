"""Source location tracking for AST nodes.

Every node records the lines of the top-level document it was built from.
Nested bodies (blockquotes, ``<details>`` regions) are parsed with a line
offset so their locations still point into the outer source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line span of a node in the source document.

    Line numbers are 1-indexed and inclusive.

    Attributes:
        lineno: First source line of the node
        end_lineno: Last source line of the node (None when equal to lineno)

    Examples:
        >>> loc = SourceLocation(lineno=3, end_lineno=5)
        >>> str(loc)
        '3-5'
    """

    lineno: int
    end_lineno: int | None = None

    def __str__(self) -> str:
        if self.end_lineno is None or self.end_lineno == self.lineno:
            return str(self.lineno)
        return f"{self.lineno}-{self.end_lineno}"

    @property
    def line_count(self) -> int:
        """Number of source lines covered by the span."""
        if self.end_lineno is None:
            return 1
        return self.end_lineno - self.lineno + 1

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            end_lineno=end.end_lineno or end.lineno,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes built outside the parser."""
        return cls(lineno=0)
