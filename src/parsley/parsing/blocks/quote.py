"""Block quote parsing for Parsley."""

from __future__ import annotations

from parsley.nodes import BlockQuote
from parsley.parsing.patterns import QUOTE_MARKER


class BlockQuoteParsingMixin:
    """Mixin for block quotes.

    Consecutive lines starting with ``>`` lose the marker (and at most one
    following whitespace character) and are parsed as a nested document.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - _parse_nested(source, start) -> tuple[Block, ...]

    """

    _lines: list[str]

    def _parse_block_quote(self, start: int) -> tuple[BlockQuote, int]:
        lines = self._lines
        content: list[str] = []
        pos = start

        while pos < len(lines) and lines[pos].startswith(">"):
            line = lines[pos]
            content.append(line[QUOTE_MARKER.match(line).end() :])  # type: ignore[union-attr]
            pos += 1

        children = self._parse_nested("\n".join(content), start)
        return BlockQuote(location=self._location(start, pos - 1), children=children), pos
