"""HTML renderer using StringBuilder pattern.

Renders a Document to HTML, one block element per non-blank line.
Inline tokens are separated by single spaces, as they were words in the
source.

Thread Safety:
The renderer holds no per-render state. A single HtmlRenderer instance
can be shared across threads.
"""

from __future__ import annotations

from collections.abc import Sequence

from pluma.errors import RenderError
from pluma.nodes import (
    Blank,
    Bold,
    Document,
    Header,
    Image,
    InlineCode,
    Italic,
    Line,
    Link,
    Paragraph,
    Regular,
    Token,
)
from pluma.renderers.text import plain_text
from pluma.stringbuilder import StringBuilder
from pluma.utils.text import escape_html


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from pluma import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    """

    __slots__ = ()

    def render(self, doc: Document) -> str:
        """Render document to HTML string.

        Raises:
            RenderError: The document contains an unknown node type.
        """
        sb = StringBuilder()
        for line in doc.lines:
            self._render_line(line, sb)
        return sb.build()

    def _render_line(self, line: Line, sb: StringBuilder) -> None:
        match line:
            case Header(level=level, tokens=tokens):
                sb.append(f"<h{level.value}>")
                self._render_tokens(tokens, sb)
                sb.append_line(f"</h{level.value}>")
            case Paragraph(tokens=tokens):
                sb.append("<p>")
                self._render_tokens(tokens, sb)
                sb.append_line("</p>")
            case Image(label=label, url=url):
                alt = escape_html(plain_text(label))
                sb.append_line(f'<p><img src="{escape_html(url)}" alt="{alt}" /></p>')
            case Blank():
                pass
            case _:
                raise RenderError(f"cannot render line {line!r}")

    def _render_tokens(self, tokens: Sequence[Token], sb: StringBuilder) -> None:
        for i, token in enumerate(tokens):
            if i:
                sb.append(" ")
            self._render_token(token, sb)

    def _render_token(self, token: Token, sb: StringBuilder) -> None:
        match token:
            case Regular(text=text):
                sb.append(escape_html(text))
            case Bold(children=children):
                sb.append("<strong>")
                self._render_tokens(children, sb)
                sb.append("</strong>")
            case Italic(children=children):
                sb.append("<em>")
                self._render_tokens(children, sb)
                sb.append("</em>")
            case InlineCode(children=children):
                sb.append("<code>")
                self._render_tokens(children, sb)
                sb.append("</code>")
            case Link(label=label, url=url):
                sb.append(f'<a href="{escape_html(url)}">')
                self._render_tokens(label, sb)
                sb.append("</a>")
            case _:
                raise RenderError(f"cannot render token {token!r}")
