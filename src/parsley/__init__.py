"""
Parsley: dependency-free Markdown to HTML converter

Converts a Markdown document to an HTML5 fragment: headings, fenced code,
thematic breaks, block quotes, nested and task lists, GFM pipe tables,
allow-listed raw HTML blocks, and inline emphasis, links, images, code
spans, strikethrough and autolinks.

Quick Start:
    >>> from parsley import parse
    >>> parse("# Hello, World!")
    '<h1>Hello, World!</h1>\\n'

    >>> # Process-wide options (merged, never reset between calls)
    >>> from parsley import set_options
    >>> set_options(breaks=True)

    >>> # Or a processor object with its own options
    >>> from parsley import Markdown
    >>> md = Markdown(breaks=True)
    >>> md("one\\ntwo")
    '<p>one<br>\\ntwo</p>\\n'

The converter assumes trusted input: allow-listed raw HTML is passed
through and nothing is sanitised.
"""

from collections.abc import Iterable

from parsley.config import (
    ParseOptions,
    get_options,
    options_context,
    reset_options,
    set_options,
)
from parsley.errors import OptionsError, ParsleyError, RenderError
from parsley.location import SourceLocation
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
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from parsley.parser import Parser
from parsley.renderers.html import HtmlRenderer
from parsley.utils.text import escape_html

__version__ = "0.1.0"

_RENDERER = HtmlRenderer()


def parse_ast(markdown: str, *, options: ParseOptions | None = None) -> Document:
    """Parse Markdown source into a typed AST.

    Args:
        markdown: Markdown source text
        options: Options for this call; defaults to the process-wide record

    Returns:
        Document AST root node

    Example:
        >>> doc = parse_ast("# Hello **World**")
        >>> doc.children[0].level
        1
    """
    parser = Parser(markdown, options=options)
    blocks = parser.parse()
    end = markdown.count("\n") + 1
    loc = SourceLocation(lineno=1, end_lineno=end if end > 1 else None)
    return Document(location=loc, children=blocks)


def render(doc: Document) -> str:
    """Render an AST Document to HTML.

    Example:
        >>> render(parse_ast("Hello *World*"))
        '<p>Hello <em>World</em></p>\\n'
    """
    return _RENDERER.render(doc)


def parse(markdown: str, *, options: ParseOptions | None = None) -> str:
    """Convert Markdown to an HTML fragment.

    Total over all text input: malformed constructs degrade to the next
    interpretation in line (a broken table becomes a paragraph, an
    unmatched ``*`` stays literal). Empty input gives empty output.

    Args:
        markdown: Markdown source text
        options: Options for this call; defaults to the process-wide record
            set with ``set_options``

    Returns:
        HTML string

    Example:
        >>> parse("**bold** and *em*")
        '<p><strong>bold</strong> and <em>em</em></p>\\n'
    """
    return render(parse_ast(markdown, options=options))


class Markdown:
    """Markdown processor with its own options record.

    Instances never read or write the process-wide options, so several
    processors with different settings can be used side by side.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>\\n'

        >>> # Access the AST
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

    """

    __slots__ = ("_options",)

    def __init__(self, *, gfm: bool = True, breaks: bool = False) -> None:
        self._options = ParseOptions().merge({"gfm": gfm, "breaks": breaks})

    @property
    def options(self) -> ParseOptions:
        return self._options

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str) -> Document:
        """Parse Markdown source into AST."""
        return parse_ast(source, options=self._options)

    def render(self, doc: Document) -> str:
        """Render AST to HTML."""
        return _RENDERER.render(doc)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Convert several Markdown sources with the same options.

        Example:
            >>> Markdown().convert_many(["# One", "# Two"])
            ['<h1>One</h1>\\n', '<h1>Two</h1>\\n']
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_ast",
    "render",
    # Options
    "ParseOptions",
    "get_options",
    "set_options",
    "reset_options",
    "options_context",
    # Errors
    "ParsleyError",
    "OptionsError",
    "RenderError",
    # Block nodes
    "Block",
    "BlockQuote",
    "Document",
    "FencedCode",
    "Heading",
    "HtmlBlock",
    "List",
    "ListItem",
    "Paragraph",
    "Table",
    "TableCell",
    "TableRow",
    "ThematicBreak",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "HtmlInline",
    "Image",
    "LineBreak",
    "Link",
    "Strikethrough",
    "Strong",
    "Text",
    # Components
    "Parser",
    "HtmlRenderer",
    "SourceLocation",
    "escape_html",
    # High-level
    "Markdown",
]
