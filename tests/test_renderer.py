"""Tests for the HTML renderer."""

import pytest

from pluma import parse, render
from pluma.errors import RenderError
from pluma.nodes import Document, Header, HeaderLevel, Paragraph, Regular
from pluma.renderers import ASTRenderer, HtmlRenderer


class TestBlocks:
    """One element per non-blank line."""

    def test_header(self) -> None:
        assert render(parse("# Hello **World**")) == "<h1>Hello <strong>World</strong></h1>\n"

    def test_header_levels(self) -> None:
        assert render(parse("### x")) == "<h3>x</h3>\n"

    def test_empty_header(self) -> None:
        assert render(Document((Header(HeaderLevel.H2, ()),))) == "<h2></h2>\n"

    def test_paragraph(self) -> None:
        assert render(parse("a *b*")) == "<p>a <em>b</em></p>\n"

    def test_blank_lines_render_nothing(self) -> None:
        assert render(parse("a\n\nb")) == "<p>a</p>\n<p>b</p>\n"

    def test_image(self) -> None:
        assert (
            render(parse("![a b](p.png)")) == '<p><img src="p.png" alt="a b" /></p>\n'
        )

    def test_image_alt_drops_markup(self) -> None:
        html = render(parse("![**big** cat](cat.png)"))
        assert 'alt="big cat"' in html

    def test_empty_document(self) -> None:
        assert render(Document()) == ""


class TestInline:
    """Inline tokens."""

    def test_inline_code(self) -> None:
        assert render(parse("`x<y`")) == "<p><code>x&lt;y</code></p>\n"

    def test_link(self) -> None:
        assert (
            render(parse("[a](https://a.com?x=1&y=2)"))
            == '<p><a href="https://a.com?x=1&amp;y=2">a</a></p>\n'
        )

    def test_nested(self) -> None:
        html = render(parse("***x***"))
        assert html == "<p><strong><em>x</em></strong></p>\n"

    def test_text_is_escaped(self) -> None:
        doc = Document((Paragraph((Regular('"q"'), Regular("<b>"))),))
        assert render(doc) == "<p>&quot;q&quot; &lt;b&gt;</p>\n"


class TestErrors:
    """Unknown nodes are rejected."""

    def test_unknown_line(self) -> None:
        with pytest.raises(RenderError, match="cannot render line"):
            render(Document((object(),)))  # type: ignore[arg-type]

    def test_unknown_token(self) -> None:
        with pytest.raises(RenderError, match="cannot render token"):
            render(Document((Paragraph((object(),)),)))  # type: ignore[arg-type]


class TestProtocol:
    def test_renderers_share_interface(self) -> None:
        from pluma.renderers import TextRenderer

        renderers: list[ASTRenderer] = [HtmlRenderer(), TextRenderer()]
        doc = parse("# T")
        assert [r.render(doc) for r in renderers] == ["<h1>T</h1>\n", "# T\n"]

    def test_renderer_is_reusable(self) -> None:
        renderer = HtmlRenderer()
        assert renderer.render(parse("a")) == renderer.render(parse("a"))
