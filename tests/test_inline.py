"""Tests for inline parsing: precedence, nesting and literal fallbacks."""

import pytest

from parsley import parse, parse_ast
from parsley.nodes import (
    CodeSpan,
    Emphasis,
    HtmlInline,
    Image,
    Link,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
)


def inline_html(source: str) -> str:
    """Render ``source`` and strip the surrounding paragraph."""
    html = parse(source)
    assert html.startswith("<p>") and html.endswith("</p>\n"), html
    return html[3:-5]


def inlines(source: str) -> tuple:
    para = parse_ast(source).children[0]
    assert isinstance(para, Paragraph)
    return para.children


class TestEscapes:
    def test_backslash_escape_is_literal(self) -> None:
        assert inline_html(r"a \*b\*") == "a *b*"

    def test_escaped_char_is_html_escaped(self) -> None:
        assert inline_html(r"\<b>") == "&lt;b&gt;"

    def test_trailing_backslash_is_literal(self) -> None:
        assert inline_html("end\\") == "end\\"

    def test_escape_beats_code_span(self) -> None:
        assert inline_html(r"\`a`") == "`a`"

    def test_special_characters_escaped(self) -> None:
        assert inline_html('Tom & "Jerry" > cat') == "Tom &amp; &quot;Jerry&quot; &gt; cat"

    def test_single_quote_untouched(self) -> None:
        assert inline_html("it's") == "it's"


class TestCodeSpans:
    def test_code_span(self) -> None:
        assert inline_html("`a < b`") == "<code>a &lt; b</code>"

    def test_code_span_content_not_scanned(self) -> None:
        assert inline_html("`**x**`") == "<code>**x**</code>"

    def test_unmatched_backtick_is_literal(self) -> None:
        assert inline_html("a ` b") == "a ` b"

    def test_node_type(self) -> None:
        (node,) = inlines("`x`")
        assert node == CodeSpan(location=node.location, code="x")


class TestLinksAndImages:
    def test_link(self) -> None:
        assert inline_html("[site](http://x.com)") == '<a href="http://x.com">site</a>'

    def test_link_text_is_scanned(self) -> None:
        html = inline_html("[**go**](/next)")
        assert html == '<a href="/next"><strong>go</strong></a>'

    def test_link_url_is_escaped(self) -> None:
        html = inline_html("[a](/x?a=1&b=2)")
        assert html == '<a href="/x?a=1&amp;b=2">a</a>'

    def test_image(self) -> None:
        html = inline_html("![logo](img.png)")
        assert html == '<img src="img.png" alt="logo">'

    def test_image_alt_is_escaped_not_scanned(self) -> None:
        html = inline_html('![*a* "b"](i.png)')
        assert html == '<img src="i.png" alt="*a* &quot;b&quot;">'

    def test_image_with_empty_alt(self) -> None:
        assert inline_html("![](i.png)") == '<img src="i.png" alt="">'

    def test_unclosed_link_is_literal(self) -> None:
        assert inline_html("[text](no-close") == "[text](no-close"

    def test_image_node(self) -> None:
        (node,) = inlines("![a](b)")
        assert isinstance(node, Image)
        assert (node.url, node.alt) == ("b", "a")


class TestEmphasis:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("*em*", "<em>em</em>"),
            ("_em_", "<em>em</em>"),
            ("**strong**", "<strong>strong</strong>"),
            ("__strong__", "<strong>strong</strong>"),
            ("***both***", "<strong><em>both</em></strong>"),
            ("___both___", "<strong><em>both</em></strong>"),
        ],
    )
    def test_delimiter_runs(self, source: str, expected: str) -> None:
        assert inline_html(source) == expected

    def test_nested_emphasis(self) -> None:
        html = inline_html("**bold *em* bold**")
        assert html == "<strong>bold <em>em</em> bold</strong>"

    def test_delimiters_never_mix(self) -> None:
        assert inline_html("*a_") == "*a_"

    def test_space_after_opener(self) -> None:
        assert inline_html("a * b * c") == "a * b * c"

    def test_space_before_closer(self) -> None:
        assert inline_html("*a *") == "*a *"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("a****", "a<strong></strong>"),
            ("a______", "a<strong><em></em></strong>"),
            ("a ** b", "a <em></em> b"),
            ("a***", "a<em></em>*"),
        ],
    )
    def test_empty_content_runs(self, source: str, expected: str) -> None:
        assert inline_html(source) == expected

    def test_empty_strong_node(self) -> None:
        _, node = inlines("a****")
        assert isinstance(node, Strong)
        assert node.children == ()

    def test_emphasis_spans_paragraph_lines(self) -> None:
        assert parse("*one\ntwo*") == "<p><em>one\ntwo</em></p>\n"

    def test_emphasis_around_link(self) -> None:
        (em,) = inlines("*click [here](url) now*")
        assert isinstance(em, Emphasis)
        assert any(isinstance(child, Link) for child in em.children)

    def test_triple_run_nodes(self) -> None:
        (strong,) = inlines("***x***")
        assert isinstance(strong, Strong)
        (em,) = strong.children
        assert isinstance(em, Emphasis)
        assert em.children[0] == Text(location=em.location, content="x")


class TestStrikethrough:
    def test_strikethrough(self) -> None:
        assert inline_html("~~gone~~") == "<del>gone</del>"

    def test_content_is_scanned(self) -> None:
        assert inline_html("~~*x*~~") == "<del><em>x</em></del>"

    def test_unmatched_is_literal(self) -> None:
        assert inline_html("~~x") == "~~x"

    def test_empty_content(self) -> None:
        assert inline_html("a ~~~~ b") == "a <del></del> b"

    def test_single_tilde_is_literal(self) -> None:
        assert inline_html("~x~") == "~x~"

    def test_node_type(self) -> None:
        (node,) = inlines("~~x~~")
        assert isinstance(node, Strikethrough)


class TestAutolinks:
    def test_bare_url(self) -> None:
        html = inline_html("see https://example.com/a.")
        assert html == 'see <a href="https://example.com/a">https://example.com/a</a>.'

    def test_trailing_paren_trimmed(self) -> None:
        html = inline_html("(http://x.org)")
        assert html == '(<a href="http://x.org">http://x.org</a>)'

    def test_url_stops_at_angle_bracket(self) -> None:
        html = inline_html("https://a.b<br>")
        assert html == '<a href="https://a.b">https://a.b</a><br>'

    def test_non_url_h_is_text(self) -> None:
        assert inline_html("http:/nope") == "http:/nope"


class TestInlineHtml:
    @pytest.mark.parametrize(
        "tag",
        ["<kbd>", "</kbd>", "<sub>", "<sup>", "<br>", "<br/>", "<br />", "<summary>"],
    )
    def test_allow_listed_tags_pass_through(self, tag: str) -> None:
        assert inline_html(f"a{tag}b") == f"a{tag}b"

    def test_case_insensitive(self) -> None:
        assert inline_html("<KBD>x</KBD>") == "<KBD>x</KBD>"

    def test_attributes_allowed(self) -> None:
        assert inline_html('<sup class="n">1</sup>') == '<sup class="n">1</sup>'

    def test_other_tags_escaped(self) -> None:
        assert inline_html("<span>x</span>") == "&lt;span&gt;x&lt;/span&gt;"

    def test_tag_prefix_is_not_enough(self) -> None:
        assert inline_html("<kbdx>") == "&lt;kbdx&gt;"

    def test_node_type(self) -> None:
        first, *_ = inlines("<kbd>Ctrl</kbd>")
        assert isinstance(first, HtmlInline)
        assert first.html == "<kbd>"
