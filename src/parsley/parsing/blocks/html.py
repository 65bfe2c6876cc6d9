"""Raw HTML block parsing for Parsley.

A line opening with an allow-listed block tag (div, section, details, ...)
starts a region that runs until the open/close count of that tag returns
to zero. The region is emitted verbatim, except that the body of a
``<details>`` element (between ``</summary>`` and ``</details>``) is parsed
as Markdown.
"""

from __future__ import annotations

from parsley.nodes import HtmlBlock
from parsley.parsing.patterns import DETAILS_REGION, HTML_BLOCK_OPEN, tag_counters
from parsley.utils.logger import get_logger

logger = get_logger(__name__)


class HtmlBlockParsingMixin:
    """Mixin for allow-listed raw HTML blocks.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - _parse_nested(source, start) -> tuple[Block, ...]

    """

    _lines: list[str]

    def _parse_html_block(self, start: int) -> tuple[HtmlBlock, int]:
        lines = self._lines
        tag = HTML_BLOCK_OPEN.match(lines[start]).group(1).lower()  # type: ignore[union-attr]
        opener, closer = tag_counters(tag)

        # The opening line counts as at least one open tag, even when its
        # attributes continue on the next line.
        first = lines[start]
        depth = max(len(opener.findall(first)), 1) - len(closer.findall(first))
        pos = start + 1

        while pos < len(lines) and depth > 0:
            line = lines[pos]
            depth += len(opener.findall(line)) - len(closer.findall(line))
            pos += 1

        if depth > 0:
            logger.debug(
                "Unclosed <%s> at line %d runs to end of input",
                tag,
                self._location(start).lineno,
            )

        location = self._location(start, pos - 1)
        text = "\n".join(lines[start:pos])

        if tag == "details":
            match = DETAILS_REGION.fullmatch(text)
            if match:
                raw_body = match.group(2)
                body = raw_body.strip()
                body_start = match.start(2) + len(raw_body) - len(raw_body.lstrip())
                offset = text.count("\n", 0, body_start)
                block = HtmlBlock(
                    location=location,
                    tag=tag,
                    html=match.group(1),
                    body=self._parse_nested(body, start + offset),
                    closing=match.group(3),
                )
                return block, pos

        return HtmlBlock(location=location, tag=tag, html=text), pos
