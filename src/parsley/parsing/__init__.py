"""Parsing subsystem for Parsley.

Provides mixin classes for modular parsing functionality:
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (lists, tables, quotes, HTML)

Example:
    >>> from parsley.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from parsley.parsing.blocks import BlockParsingMixin
from parsley.parsing.inline import InlineParsingMixin

__all__ = [
    "InlineParsingMixin",
    "BlockParsingMixin",
]
