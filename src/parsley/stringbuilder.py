"""StringBuilder for O(n) HTML accumulation.

Collects fragments in a list and joins them once, instead of repeated
string concatenation.
"""

from __future__ import annotations


class StringBuilder:
    """Append-only fragment buffer.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("hi").append("</p>").build()
        '<p>hi</p>'
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped); returns self."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
