"""Core block parsing for Parsley.

Provides the block dispatcher plus the simple blocks (headings, fenced code,
thematic breaks, paragraphs). Lists, tables, block quotes and raw HTML
blocks live in their own mixins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley.location import SourceLocation
from parsley.nodes import (
    Block,
    FencedCode,
    Heading,
    Inline,
    LineBreak,
    Paragraph,
    ThematicBreak,
)
from parsley.parsing.patterns import (
    FENCE,
    HEADING,
    HTML_BLOCK_OPEN,
    LIST_MARKER,
    ORDERED_MARKER,
    THEMATIC_BREAK,
)
from parsley.utils.logger import get_logger

if TYPE_CHECKING:
    from parsley.config import ParseOptions

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Block dispatcher and simple block parsing.

    Required Host Attributes:
        - _lines: list[str]
        - _options: ParseOptions
        - _line_offset: int

    Required Host Methods:
        - _parse_inline(text, location) -> tuple[Inline, ...]
        - _parse_list(start, indent, ordered) -> tuple[List, int]
        - _parse_block_quote(start) -> tuple[BlockQuote, int]
        - _is_table_start(index) -> bool
        - _parse_table(start) -> tuple[Table, int]
        - _parse_html_block(start) -> tuple[HtmlBlock, int]

    """

    _lines: list[str]
    _options: ParseOptions
    _line_offset: int

    def _location(self, start: int, end: int | None = None) -> SourceLocation:
        """Location for line indexes ``start``..``end`` of this (sub)document."""
        lineno = self._line_offset + start + 1
        if end is None or end == start:
            return SourceLocation(lineno=lineno)
        return SourceLocation(lineno=lineno, end_lineno=self._line_offset + end + 1)

    def _parse_blocks(self) -> list[Block]:
        """Parse all lines into blocks with a single forward cursor."""
        lines = self._lines
        blocks: list[Block] = []
        pos = 0

        while pos < len(lines):
            if not lines[pos].strip():
                pos += 1
                continue
            block, pos = self._parse_block(pos)
            blocks.append(block)

        return blocks

    def _parse_block(self, pos: int) -> tuple[Block, int]:
        """Recognise the block starting at ``pos`` (a non-blank line).

        Returns the block and the index of the first unconsumed line.
        """
        line = self._lines[pos]

        match = HEADING.fullmatch(line)
        if match:
            level = len(match.group(1))
            loc = self._location(pos)
            heading = Heading(
                location=loc,
                level=level,  # type: ignore[arg-type]
                children=self._parse_inline(match.group(2), loc),
            )
            return heading, pos + 1

        if FENCE.match(line):
            return self._parse_fenced_code(pos)

        if THEMATIC_BREAK.fullmatch(line):
            return ThematicBreak(location=self._location(pos)), pos + 1

        if line.startswith(">"):
            return self._parse_block_quote(pos)

        match = LIST_MARKER.match(line)
        if match:
            ordered = ORDERED_MARKER.fullmatch(match.group(2)) is not None
            return self._parse_list(pos, len(match.group(1)), ordered)

        if self._is_table_start(pos):
            return self._parse_table(pos)

        if HTML_BLOCK_OPEN.match(line):
            return self._parse_html_block(pos)

        return self._parse_paragraph(pos)

    def _is_block_start(self, pos: int) -> bool:
        """True if the line at ``pos`` would open a non-paragraph block."""
        line = self._lines[pos]
        return bool(
            HEADING.fullmatch(line)
            or FENCE.match(line)
            or THEMATIC_BREAK.fullmatch(line)
            or line.startswith(">")
            or LIST_MARKER.match(line)
            or HTML_BLOCK_OPEN.match(line)
            or self._is_table_start(pos)
        )

    def _parse_fenced_code(self, start: int) -> tuple[FencedCode, int]:
        """Parse a ``` fence. Body lines are kept raw; no inline scanning.

        An unterminated fence runs to the end of input.
        """
        lines = self._lines
        info = lines[start][3:].strip() or None
        pos = start + 1
        body: list[str] = []

        while pos < len(lines) and not FENCE.match(lines[pos]):
            body.append(lines[pos])
            pos += 1

        if pos >= len(lines):
            logger.debug(
                "Unterminated code fence at line %d runs to end of input",
                self._line_offset + start + 1,
            )
            end = len(lines) - 1
        else:
            end = pos

        code = FencedCode(location=self._location(start, end), code="\n".join(body), info=info)
        return code, pos + 1

    def _parse_paragraph(self, start: int) -> tuple[Paragraph, int]:
        """Collect lines until a blank line or another block start.

        The first line is always taken, so the cursor always advances.
        """
        lines = self._lines
        para_lines = [lines[start]]
        pos = start + 1

        while pos < len(lines) and lines[pos].strip() and not self._is_block_start(pos):
            para_lines.append(lines[pos])
            pos += 1

        loc = self._location(start, pos - 1)
        children: tuple[Inline, ...]
        if self._options.breaks:
            parts: list[Inline] = []
            for index, text in enumerate(para_lines):
                line_loc = self._location(start + index)
                if index:
                    parts.append(LineBreak(location=line_loc))
                parts.extend(self._parse_inline(text, line_loc))
            children = tuple(parts)
        else:
            children = self._parse_inline("\n".join(para_lines), loc)

        return Paragraph(location=loc, children=children), pos
