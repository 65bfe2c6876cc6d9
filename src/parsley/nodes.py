"""Typed AST nodes for Parsley.

All AST nodes are frozen dataclasses with slots, safe to share across
threads and usable with ``match`` statements.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── FencedCode
│   ├── ThematicBreak
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   ├── Table / TableRow / TableCell
│   └── HtmlBlock
└── Inline (inline elements)
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── Strikethrough
    ├── Link
    ├── Image
    ├── CodeSpan
    ├── HtmlInline
    └── LineBreak

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from parsley.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text. Escaped when rendered."""

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    A triple run (***text***) is a Strong wrapping a single Emphasis.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Deleted text.

    Markdown: ~~text~~
    HTML: <del>text</del>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink, either inline or a bare autolinked URL.

    Markdown: [text](url) or https://example.com
    HTML: <a href="url">text</a>

    """

    url: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image. Alt text is kept literal, never scanned for markup.

    Markdown: ![alt](url)
    HTML: <img src="url" alt="alt">

    """

    url: str
    alt: str


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class HtmlInline(Node):
    """Allow-listed inline tag passed through verbatim (kbd, sub, sup, ...)."""

    html: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break between paragraph lines when ``breaks`` is enabled."""


type Inline = (
    Text
    | Emphasis
    | Strong
    | Strikethrough
    | Link
    | Image
    | CodeSpan
    | HtmlInline
    | LineBreak
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Run of text lines ended by a blank line or another block."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class FencedCode(Node):
    """Fenced code block.

    ``code`` is the raw body, unescaped; ``info`` is the language tag
    from the opening fence, or None.

    """

    code: str
    info: str | None = None


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Horizontal rule (---, ***, ___)."""


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Quoted region, parsed as a nested document."""

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Attributes:
        children: Inline content (may span lines via lazy continuation)
        checked: Task checkbox state, or None for a plain item
        sublists: Nested lists, in source order. Usually zero or one; a
            nested region that switches kind starts another.

    """

    children: tuple[Inline, ...]
    checked: bool | None = None
    sublists: tuple[List, ...] = ()


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list. The kind is fixed by its first item."""

    ordered: bool
    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    children: tuple[Inline, ...]
    align: Literal["left", "center", "right"] = "left"
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    cells: tuple[TableCell, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class Table(Node):
    """GFM pipe table.

    Every row carries exactly one cell per header column.

    """

    alignments: tuple[Literal["left", "center", "right"], ...]
    head: TableRow
    body: tuple[TableRow, ...]


@dataclass(frozen=True, slots=True)
class HtmlBlock(Node):
    """Allow-listed block tag region.

    ``html`` holds the captured text verbatim. For a ``<details>`` region
    whose body was parsed as Markdown, ``html`` is the head up to and
    including ``</summary>``, ``body`` the parsed blocks and ``closing``
    the closing tag.

    """

    tag: str
    html: str
    body: tuple[Block, ...] | None = None
    closing: str = ""


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node."""

    children: tuple[Block, ...]


type Block = (
    Document
    | Heading
    | Paragraph
    | FencedCode
    | ThematicBreak
    | BlockQuote
    | List
    | ListItem
    | Table
    | TableRow
    | TableCell
    | HtmlBlock
)
