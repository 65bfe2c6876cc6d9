"""Table parsing for Parsley.

Handles GFM (GitHub Flavored Markdown) pipe tables.
"""

from __future__ import annotations

from typing import Literal

from parsley.nodes import Table, TableCell, TableRow
from parsley.parsing.patterns import TABLE_SEPARATOR
from parsley.utils.logger import get_logger

logger = get_logger(__name__)

type Alignment = Literal["left", "center", "right"]


def split_row(line: str) -> list[str]:
    """Split a table row into trimmed cells.

    One optional leading and one optional trailing pipe are dropped first.

    Example:
        >>> split_row("| a | b |")
        ['a', 'b']
    """
    line = line.strip()
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]
    return [cell.strip() for cell in line.split("|")]


def cell_alignment(separator: str) -> Alignment:
    """Alignment for one separator cell (:--, :-:, --:)."""
    if separator.startswith(":") and separator.endswith(":"):
        return "center"
    if separator.endswith(":"):
        return "right"
    return "left"


class TableParsingMixin:
    """Mixin for GFM table parsing.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    _lines: list[str]

    def _is_table_start(self, pos: int) -> bool:
        """A line with a pipe followed by a separator row that also has one.

        The table region stops at the first line without a pipe, so a
        separator lacking one would leave a header-only region. Such a pair
        is not a table and stays paragraph text.
        """
        lines = self._lines
        if "|" not in lines[pos] or pos + 1 >= len(lines):
            return False
        separator = lines[pos + 1]
        if TABLE_SEPARATOR.fullmatch(separator) is None:
            return False
        if "|" not in separator:
            logger.debug(
                "Table candidate at line %d falls back to paragraph",
                self._location(pos).lineno,
            )
            return False
        return True

    def _parse_table(self, start: int) -> tuple[Table, int]:
        """Parse lines from ``start`` as a GFM table.

        GFM table structure:
        | Header 1 | Header 2 |   <- header row
        |----------|---------:|   <- separator row (required)
        | Cell 1   | Cell 2   |   <- body rows, until a line without a pipe

        Callers check ``_is_table_start`` first.
        """
        lines = self._lines
        end = start + 2
        while end < len(lines) and "|" in lines[end]:
            end += 1

        headers = split_row(lines[start])
        separators = split_row(lines[start + 1])
        alignments: tuple[Alignment, ...] = tuple(
            cell_alignment(separators[i]) if i < len(separators) else "left"
            for i in range(len(headers))
        )

        head = self._build_row(headers, alignments, start, is_header=True)
        body = tuple(
            self._build_row(split_row(lines[pos]), alignments, pos, is_header=False)
            for pos in range(start + 2, end)
        )

        table = Table(
            location=self._location(start, end - 1),
            alignments=alignments,
            head=head,
            body=body,
        )
        return table, end

    def _build_row(
        self,
        cells: list[str],
        alignments: tuple[Alignment, ...],
        pos: int,
        *,
        is_header: bool,
    ) -> TableRow:
        """One cell per header column; missing trailing cells are empty."""
        loc = self._location(pos)
        return TableRow(
            location=loc,
            cells=tuple(
                TableCell(
                    location=loc,
                    children=self._parse_inline(cells[i] if i < len(cells) else "", loc),
                    align=align,
                    is_header=is_header,
                )
                for i, align in enumerate(alignments)
            ),
            is_header=is_header,
        )
