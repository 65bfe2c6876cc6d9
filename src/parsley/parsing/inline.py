"""Inline parsing for Parsley.

A single left-to-right scan over the span. At each cursor position the
constructs are tried in a fixed order and the first one that matches is
consumed:

1. backslash escape
2. code span
3. image
4. link (text scanned recursively)
5. emphasis: triple, double, then single delimiter run of * or _
6. strikethrough
7. bare http(s) autolink
8. allow-listed raw inline HTML
9. otherwise the character is literal text

A delimiter without a matching closer never consumes anything; the scanner
falls through to the next rule at the same position.

Thread Safety:
All methods are stateless. Safe for concurrent use.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley.nodes import (
    CodeSpan,
    Emphasis,
    HtmlInline,
    Image,
    Inline,
    Link,
    Strikethrough,
    Strong,
    Text,
)
from parsley.parsing.patterns import (
    AUTOLINK,
    AUTOLINK_TRAILING,
    CODE_SPAN,
    HTML_INLINE,
    IMAGE,
    INLINE_SPECIAL,
    LINK,
)

if TYPE_CHECKING:
    from parsley.location import SourceLocation


class InlineParsingMixin:
    """Mixin for inline content (emphasis, links, code spans, ...).

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _parse_inline(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        """Parse a text span into inline nodes."""
        if not text:
            return ()

        nodes: list[Inline] = []
        pending: list[str] = []
        pos = 0
        text_len = len(text)

        def flush() -> None:
            if pending:
                nodes.append(Text(location=location, content="".join(pending)))
                pending.clear()

        while pos < text_len:
            char = text[pos]

            if char not in INLINE_SPECIAL:
                pending.append(char)
                pos += 1
                continue

            if char == "\\" and pos + 1 < text_len:
                pending.append(text[pos + 1])
                pos += 2
                continue

            result = self._try_inline_construct(text, pos, location)
            if result is not None:
                node, pos = result
                flush()
                nodes.append(node)
                continue

            pending.append(char)
            pos += 1

        flush()
        return tuple(nodes)

    def _try_inline_construct(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Inline, int] | None:
        """Try each construct at ``pos`` in precedence order.

        Returns (node, new_pos) for the first match, or None.
        """
        char = text[pos]

        if char == "`":
            match = CODE_SPAN.match(text, pos)
            if match:
                return CodeSpan(location=location, code=match.group(1)), match.end()

        if char == "!" and text.startswith("[", pos + 1):
            match = IMAGE.match(text, pos)
            if match:
                image = Image(location=location, url=match.group(2), alt=match.group(1))
                return image, match.end()

        if char == "[":
            match = LINK.match(text, pos)
            if match:
                children = self._parse_inline(match.group(1), location)
                link = Link(location=location, url=match.group(2), children=children)
                return link, match.end()

        if char == "*" or char == "_":
            result = self._try_parse_emphasis(text, pos, location)
            if result is not None:
                return result

        if char == "~" and text.startswith("~~", pos):
            end = text.find("~~", pos + 2)
            if end != -1:
                children = self._parse_inline(text[pos + 2 : end], location)
                return Strikethrough(location=location, children=children), end + 2

        if char == "h":
            result = self._try_parse_autolink(text, pos, location)
            if result is not None:
                return result

        if char == "<":
            match = HTML_INLINE.match(text, pos)
            if match:
                return HtmlInline(location=location, html=match.group(0)), match.end()

        return None

    def _try_parse_emphasis(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Inline, int] | None:
        """Match a delimiter run of the character at ``pos``.

        Longest run first. The closer is the next occurrence of the same run
        length; * and _ never close each other. Single-delimiter emphasis
        additionally requires non-whitespace just inside both delimiters. Empty
        content is allowed, so ``****`` is an empty Strong.
        This is literal matching, not CommonMark flanking resolution.
        """
        char = text[pos]

        triple = char * 3
        if text.startswith(triple, pos):
            end = text.find(triple, pos + 3)
            if end != -1:
                inner = self._parse_inline(text[pos + 3 : end], location)
                em = Emphasis(location=location, children=inner)
                return Strong(location=location, children=(em,)), end + 3

        double = char * 2
        if text.startswith(double, pos):
            end = text.find(double, pos + 2)
            if end != -1:
                inner = self._parse_inline(text[pos + 2 : end], location)
                return Strong(location=location, children=inner), end + 2

        after = text[pos + 1 : pos + 2]
        if after and not after.isspace():
            end = text.find(char, pos + 1)
            if end != -1 and not text[end - 1].isspace():
                inner = self._parse_inline(text[pos + 1 : end], location)
                return Emphasis(location=location, children=inner), end + 1

        return None

    def _try_parse_autolink(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Inline, int] | None:
        """Bare http:// or https:// URL, minus trailing punctuation."""
        match = AUTOLINK.match(text, pos)
        if not match:
            return None
        url = AUTOLINK_TRAILING.sub("", match.group(0))
        children = (Text(location=location, content=url),)
        return Link(location=location, url=url, children=children), pos + len(url)
