"""HTML renderer using StringBuilder pattern.

Renders the typed AST to an HTML5 fragment. There is no wrapping document
and no sanitisation: text nodes, code, and URLs are escaped, while
allow-listed raw HTML passes through unchanged.

Thread Safety:
HtmlRenderer holds no per-render state. A single instance can be shared
across threads.
"""

from __future__ import annotations

from parsley.errors import RenderError
from parsley.nodes import (
    Block,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Inline,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableRow,
    Text,
    ThematicBreak,
)
from parsley.stringbuilder import StringBuilder
from parsley.utils.text import escape_html

_CHECKBOX_CHECKED = '<input type="checkbox" checked disabled>'
_CHECKBOX_UNCHECKED = '<input type="checkbox" disabled>'


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
        >>> from parsley import parse_ast
        >>> HtmlRenderer().render(parse_ast("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to HTML string."""
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        """Render a block node followed by a newline."""
        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.children, sb)
                sb.append(f"</h{block.level}>\n")
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb)
                sb.append("</p>\n")
            case FencedCode():
                self._render_fenced_code(block, sb)
            case ThematicBreak():
                sb.append("<hr>\n")
            case BlockQuote():
                sb.append("<blockquote>\n")
                for child in block.children:
                    self._render_block(child, sb)
                sb.append("</blockquote>\n")
            case List():
                self._render_list(block, sb)
                sb.append("\n")
            case Table():
                self._render_table(block, sb)
            case HtmlBlock():
                self._render_html_block(block, sb)
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case _:
                raise RenderError(block)

    def _render_fenced_code(self, code: FencedCode, sb: StringBuilder) -> None:
        if code.info:
            sb.append(f'<pre><code class="language-{escape_html(code.info)}">')
        else:
            sb.append("<pre><code>")
        sb.append(escape_html(code.code))
        sb.append("</code></pre>\n")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render a list without a trailing newline.

        Nested lists close directly against their parent's ``</li>``.
        """
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>\n")
        for item in lst.items:
            self._render_list_item(item, sb)
        sb.append(f"</{tag}>")

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        sb.append("<li>")
        if item.checked is not None:
            sb.append(_CHECKBOX_CHECKED if item.checked else _CHECKBOX_UNCHECKED)
        self._render_inlines(item.children, sb)
        for sublist in item.sublists:
            sb.append("\n")
            self._render_list(sublist, sb)
        sb.append("</li>\n")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render GFM-style table with align attributes on every cell."""
        sb.append("<table>\n<thead>\n")
        self._render_table_row(table.head, sb)
        sb.append("</thead>\n<tbody>\n")
        for row in table.body:
            self._render_table_row(row, sb)
        sb.append("</tbody>\n</table>\n")

    def _render_table_row(self, row: TableRow, sb: StringBuilder) -> None:
        sb.append("<tr>\n")
        tag = "th" if row.is_header else "td"
        for cell in row.cells:
            sb.append(f'<{tag} align="{cell.align}">')
            self._render_inlines(cell.children, sb)
            sb.append(f"</{tag}>\n")
        sb.append("</tr>\n")

    def _render_html_block(self, block: HtmlBlock, sb: StringBuilder) -> None:
        sb.append(block.html).append("\n")
        if block.body is None:
            return
        for child in block.body:
            self._render_block(child, sb)
        sb.append(block.closing).append("\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        match inline:
            case Text():
                sb.append(escape_html(inline.content))
            case Emphasis():
                sb.append("<em>")
                self._render_inlines(inline.children, sb)
                sb.append("</em>")
            case Strong():
                sb.append("<strong>")
                self._render_inlines(inline.children, sb)
                sb.append("</strong>")
            case Strikethrough():
                sb.append("<del>")
                self._render_inlines(inline.children, sb)
                sb.append("</del>")
            case Link():
                sb.append(f'<a href="{escape_html(inline.url)}">')
                self._render_inlines(inline.children, sb)
                sb.append("</a>")
            case Image():
                src = escape_html(inline.url)
                alt = escape_html(inline.alt)
                sb.append(f'<img src="{src}" alt="{alt}">')
            case CodeSpan():
                sb.append("<code>")
                sb.append(escape_html(inline.code))
                sb.append("</code>")
            case HtmlInline():
                sb.append(inline.html)
            case LineBreak():
                sb.append("<br>\n")
            case _:
                raise RenderError(inline)
