"""List parsing for Parsley.

Handles bullet (-, *, +) and ordered (N.) lists, nested sublists, lazy
continuation lines and GFM task items.

Indentation is the count of leading whitespace characters before the
marker. A list is governed by the indentation of its first marker:

- a marker at that indentation starts a new item (same kind only);
- a marker indented deeper, while an item is open, starts a sublist;
- a deeper line without a marker continues the open item;
- a blank line is consumed and does not end the list by itself;
- a non-blank line indented less than the list, or a marker of the other
  kind, ends it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parsley.nodes import List, ListItem
from parsley.parsing.patterns import LEADING_SPACE, LIST_ITEM, ORDERED_MARKER, TASK_ITEM

if TYPE_CHECKING:
    from parsley.location import SourceLocation
    from parsley.nodes import Inline


@dataclass(slots=True)
class PendingItem:
    """Mutable list item while its lines are still being collected."""

    content: str
    start: int
    end: int
    checked: bool | None = None
    sublists: list[tuple[bool, list[PendingItem]]] = field(default_factory=list)

    def attach(self, items: list[PendingItem], ordered: bool) -> None:
        """Attach a nested region.

        A region of the same kind as the previous sublist extends it;
        otherwise it becomes a new sublist.
        """
        if self.sublists and self.sublists[-1][0] == ordered:
            self.sublists[-1][1].extend(items)
        else:
            self.sublists.append((ordered, items))
        self.end = max(self.end, items[-1].end)


class ListParsingMixin:
    """Mixin for list parsing.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    _lines: list[str]

    def _parse_list(self, start: int, indent: int, ordered: bool) -> tuple[List, int]:
        """Parse the list whose first marker is on line ``start``."""
        items, end, resolved = self._parse_list_items(start, indent, ordered)
        return self._build_list(items, bool(resolved)), end

    def _parse_list_items(
        self, start: int, indent: int, ordered: bool | None = None
    ) -> tuple[list[PendingItem], int, bool | None]:
        """Collect items governed by ``indent``.

        Args:
            start: Index of the first line to examine
            indent: Governing marker indentation
            ordered: Kind already fixed by the caller, or None to take it
                from the first marker found

        Returns:
            (items, first unconsumed index, resolved ordered flag)
        """
        lines = self._lines
        items: list[PendingItem] = []
        current: PendingItem | None = None
        pos = start

        while pos < len(lines):
            line = lines[pos]
            blank = not line.strip()
            line_indent = LEADING_SPACE.match(line).end()  # type: ignore[union-attr]

            if line_indent < indent and not blank:
                break

            match = LIST_ITEM.fullmatch(line)
            marker_indent = len(match.group(1)) if match else -1

            if match and marker_indent == indent:
                is_ordered = ORDERED_MARKER.fullmatch(match.group(2)) is not None
                if ordered is None:
                    ordered = is_ordered
                elif is_ordered != ordered:
                    break
                current = self._start_item(match.group(3), pos)
                items.append(current)
                pos += 1
            elif match and marker_indent > indent and current is not None:
                nested_ordered = ORDERED_MARKER.fullmatch(match.group(2)) is not None
                nested, pos, nested_ordered = self._parse_list_items(
                    pos, marker_indent, nested_ordered
                )
                current.attach(nested, bool(nested_ordered))
            elif line_indent > indent and current is not None and not blank:
                current.content += "\n" + line.strip()
                current.end = pos
                pos += 1
            elif blank:
                pos += 1
            else:
                break

        return items, pos, ordered

    def _start_item(self, content: str, pos: int) -> PendingItem:
        """Create an item, recognising a leading [ ] / [x] task box."""
        task = TASK_ITEM.fullmatch(content)
        if task:
            return PendingItem(
                content=task.group(2),
                start=pos,
                end=pos,
                checked=task.group(1).lower() == "x",
            )
        return PendingItem(content=content, start=pos, end=pos)

    def _build_list(self, items: list[PendingItem], ordered: bool) -> List:
        """Freeze collected items into List/ListItem nodes."""
        built: list[ListItem] = []
        for item in items:
            loc: SourceLocation = self._location(item.start, item.end)
            sublists = tuple(
                self._build_list(children, kind) for kind, children in item.sublists
            )
            inlines: tuple[Inline, ...] = self._parse_inline(item.content, loc)
            built.append(
                ListItem(location=loc, children=inlines, checked=item.checked, sublists=sublists)
            )
        loc = self._location(items[0].start, max(item.end for item in items))
        return List(location=loc, ordered=ordered, items=tuple(built))
