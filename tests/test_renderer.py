"""Tests for HtmlRenderer on hand-built and parsed ASTs."""

from parsley import (
    BlockQuote,
    Document,
    FencedCode,
    HtmlBlock,
    HtmlRenderer,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    SourceLocation,
    Text,
    parse_ast,
)

LOC = SourceLocation(lineno=1)


def render_blocks(*blocks) -> str:
    return HtmlRenderer().render(Document(location=LOC, children=blocks))


class TestBlockRendering:
    def test_text_is_escaped(self) -> None:
        para = Paragraph(location=LOC, children=(Text(location=LOC, content="<&>"),))
        assert render_blocks(para) == "<p>&lt;&amp;&gt;</p>\n"

    def test_fenced_code_language_is_escaped(self) -> None:
        code = FencedCode(location=LOC, code="x", info='a"b')
        assert render_blocks(code) == '<pre><code class="language-a&quot;b">x</code></pre>\n'

    def test_empty_blockquote(self) -> None:
        assert render_blocks(BlockQuote(location=LOC, children=())) == "<blockquote>\n</blockquote>\n"

    def test_nested_document(self) -> None:
        inner = Document(location=LOC, children=(Paragraph(location=LOC, children=()),))
        assert render_blocks(inner) == "<p></p>\n"

    def test_verbatim_html_block(self) -> None:
        block = HtmlBlock(location=LOC, tag="div", html="<div><b>x</b></div>")
        assert render_blocks(block) == "<div><b>x</b></div>\n"

    def test_list_item_with_two_sublists(self) -> None:
        bullets = List(location=LOC, ordered=False, items=(ListItem(location=LOC, children=()),))
        numbers = List(location=LOC, ordered=True, items=(ListItem(location=LOC, children=()),))
        item = ListItem(
            location=LOC,
            children=(Text(location=LOC, content="a"),),
            sublists=(bullets, numbers),
        )
        html = render_blocks(List(location=LOC, ordered=False, items=(item,)))
        assert html == (
            "<ul>\n<li>a\n<ul>\n<li></li>\n</ul>\n<ol>\n<li></li>\n</ol></li>\n</ul>\n"
        )


class TestInlineRendering:
    def test_link_href_escaped(self) -> None:
        link = Link(location=LOC, url='"x"', children=(Text(location=LOC, content="t"),))
        para = Paragraph(location=LOC, children=(link,))
        assert render_blocks(para) == '<p><a href="&quot;x&quot;">t</a></p>\n'

    def test_line_break(self) -> None:
        para = Paragraph(
            location=LOC,
            children=(
                Text(location=LOC, content="a"),
                LineBreak(location=LOC),
                Text(location=LOC, content="b"),
            ),
        )
        assert render_blocks(para) == "<p>a<br>\nb</p>\n"

    def test_renderer_is_reusable(self) -> None:
        renderer = HtmlRenderer()
        doc = parse_ast("# a")
        assert renderer.render(doc) == renderer.render(doc) == "<h1>a</h1>\n"
