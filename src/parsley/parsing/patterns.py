"""Compiled patterns shared by the block and inline parsers.

Patterns are applied with ``match`` against the remaining slice of a line
(or inline span), so ``^`` anchoring is implicit.
"""

from __future__ import annotations

import re

# =============================================================================
# Block starts
# =============================================================================

HEADING = re.compile(r"(#{1,6})\s+(.+)")
FENCE = re.compile(r"```")
THEMATIC_BREAK = re.compile(r"(?:-{3,}|\*{3,}|_{3,})")
LIST_MARKER = re.compile(r"(\s*)(-|\*|\+|\d+\.)\s+")
LIST_ITEM = re.compile(r"(\s*)(-|\*|\+|\d+\.)\s+(.*)")
ORDERED_MARKER = re.compile(r"\d+\.")
TASK_ITEM = re.compile(r"\[([ xX])\]\s*(.*)")
LEADING_SPACE = re.compile(r"\s*")
QUOTE_MARKER = re.compile(r">\s?")
TABLE_SEPARATOR = re.compile(r"\|?[\s\-:|]+\|?")

HTML_BLOCK_TAGS = (
    "details",
    "div",
    "section",
    "article",
    "aside",
    "header",
    "footer",
    "nav",
    "form",
    "fieldset",
    "figure",
    "figcaption",
    "main",
)
HTML_BLOCK_OPEN = re.compile(
    r"<(" + "|".join(HTML_BLOCK_TAGS) + r")(?=[\s/>]|$)",
    re.IGNORECASE,
)
DETAILS_REGION = re.compile(
    r"(<details[^>]*>[\s\S]*?</summary>)([\s\S]*?)(</details>)",
    re.IGNORECASE,
)

# =============================================================================
# Inline
# =============================================================================

CODE_SPAN = re.compile(r"`([^`]+)`")
IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
AUTOLINK = re.compile(r"https?://[^\s<]+")
AUTOLINK_TRAILING = re.compile(r"[.,;:!?)]+$")
HTML_INLINE = re.compile(
    r"<(/?)(kbd|sub|sup|br|details|summary)(\s[^>]*)?/?>",
    re.IGNORECASE,
)

# Characters that can start a construct other than plain text.
INLINE_SPECIAL = frozenset("\\`![*_~<h")


def tag_counters(tag: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Patterns counting opening and closing occurrences of ``tag``."""
    escaped = re.escape(tag)
    return (
        re.compile(r"<" + escaped + r"(?:\s|>)", re.IGNORECASE),
        re.compile(r"</" + escaped + r">", re.IGNORECASE),
    )
