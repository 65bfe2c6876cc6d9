"""Recursive descent parser producing typed AST.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (lists, tables, quotes, HTML)

Block quotes and ``<details>`` bodies are parsed by a sub-parser of the
same class that shares the options record of its parent.

Thread Safety:
- Parser instances are single-use; create one per parse operation
- Options are captured once at construction
- The resulting AST is immutable and safe to share

"""

from __future__ import annotations

from parsley.config import ParseOptions, get_options
from parsley.nodes import Block
from parsley.parsing import BlockParsingMixin, InlineParsingMixin
from parsley.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_newlines(source: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    if "\r" not in source:
        return source
    return source.replace("\r\n", "\n").replace("\r", "\n")


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for Markdown.

    Usage:
        >>> parser = Parser("# Hello\\n\\nWorld")
        >>> blocks = parser.parse()
        >>> blocks[0]
        Heading(location=SourceLocation(lineno=1, ...), level=1, ...)

    Args:
        source: Markdown source text
        options: Options for this parse; defaults to the process-wide record
        line_offset: Lines preceding ``source`` in the enclosing document,
            used by sub-parsers so node locations refer to the outer source

    """

    __slots__ = (
        "_source",
        "_lines",
        "_options",
        "_line_offset",
    )

    def __init__(
        self,
        source: str,
        *,
        options: ParseOptions | None = None,
        line_offset: int = 0,
    ) -> None:
        self._source = normalize_newlines(source)
        self._lines = self._source.split("\n")
        self._options = options if options is not None else get_options()
        self._line_offset = line_offset

    @property
    def options(self) -> ParseOptions:
        return self._options

    def parse(self) -> tuple[Block, ...]:
        """Parse the source into a tuple of top-level blocks."""
        blocks = tuple(self._parse_blocks())
        logger.debug(
            "Parsed %d lines (%d chars) at line offset %d into %d blocks",
            len(self._lines),
            len(self._source),
            self._line_offset,
            len(blocks),
        )
        return blocks

    def _parse_nested(self, source: str, start: int) -> tuple[Block, ...]:
        """Parse a nested document found at line index ``start``."""
        sub_parser = Parser(
            source,
            options=self._options,
            line_offset=self._line_offset + start,
        )
        return sub_parser.parse()
