"""Block parsing subsystem for Parsley.

Combines the block mixins into BlockParsingMixin:
- `BlockParsingCoreMixin`: dispatcher, headings, fences, breaks, paragraphs
- `ListParsingMixin`: nested and task lists
- `TableParsingMixin`: GFM pipe tables
- `BlockQuoteParsingMixin`: block quotes (nested documents)
- `HtmlBlockParsingMixin`: allow-listed raw HTML blocks
"""

from parsley.parsing.blocks.core import BlockParsingCoreMixin
from parsley.parsing.blocks.html import HtmlBlockParsingMixin
from parsley.parsing.blocks.list import ListParsingMixin
from parsley.parsing.blocks.quote import BlockQuoteParsingMixin
from parsley.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
    TableParsingMixin,
    BlockQuoteParsingMixin,
    HtmlBlockParsingMixin,
):
    """Combined block parsing mixin."""


__all__ = [
    "BlockParsingMixin",
    "BlockParsingCoreMixin",
    "BlockQuoteParsingMixin",
    "HtmlBlockParsingMixin",
    "ListParsingMixin",
    "TableParsingMixin",
]
