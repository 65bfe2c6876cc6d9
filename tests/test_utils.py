"""Tests for utility helpers."""

from parsley.location import SourceLocation
from parsley.parser import normalize_newlines
from parsley.stringbuilder import StringBuilder
from parsley.utils import escape_html, get_logger


class TestEscapeHtml:
    def test_four_characters(self) -> None:
        assert escape_html('&<>"') == "&amp;&lt;&gt;&quot;"

    def test_ampersand_first(self) -> None:
        assert escape_html("&lt;") == "&amp;lt;"

    def test_other_characters_untouched(self) -> None:
        assert escape_html("it's é ✓ \t\n") == "it's é ✓ \t\n"

    def test_empty(self) -> None:
        assert escape_html("") == ""


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "parsley.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("parsley.parser").name == "parsley.parser"
        assert get_logger("parsley").name == "parsley"


class TestSourceLocation:
    def test_single_line(self) -> None:
        loc = SourceLocation(lineno=3)
        assert str(loc) == "3"
        assert loc.line_count == 1

    def test_span(self) -> None:
        loc = SourceLocation(lineno=3, end_lineno=5)
        assert str(loc) == "3-5"
        assert loc.line_count == 3

    def test_span_to(self) -> None:
        start = SourceLocation(lineno=2)
        assert start.span_to(SourceLocation(lineno=7)) == SourceLocation(lineno=2, end_lineno=7)


class TestStringBuilder:
    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("").append("x").append("</p>")
        assert sb.build() == "<p>x</p>"

    def test_bool(self) -> None:
        sb = StringBuilder()
        assert not sb
        sb.append("a")
        assert sb


class TestNormalizeNewlines:
    def test_crlf(self) -> None:
        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_untouched(self) -> None:
        text = "a\nb"
        assert normalize_newlines(text) is text
