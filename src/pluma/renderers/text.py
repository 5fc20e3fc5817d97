"""Markup reconstruction renderer.

Writes a Document back out as markup text, one output line per Line.
For well-formed input, parsing the reconstruction yields an equal
Document:

    >>> from pluma import parse
    >>> doc = parse("# Title\\n\\nsome **bold** [link](https://a.com)")
    >>> parse(TextRenderer().render(doc)) == doc
    True

Delimiters are normalized: bold is always ``**``, italic always ``*``.
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


class TextRenderer:
    """Render a Document back to markup text."""

    __slots__ = ()

    def render(self, doc: Document) -> str:
        """Render document to markup, each line terminated by a newline."""
        return "".join(self.render_line(line) + "\n" for line in doc.lines)

    def render_line(self, line: Line) -> str:
        match line:
            case Header(level=level, tokens=tokens):
                marker = "#" * level.value
                return f"{marker} {self.render_tokens(tokens)}" if tokens else marker
            case Paragraph(tokens=tokens):
                return self.render_tokens(tokens)
            case Image(label=label, url=url):
                return f"![{self.render_tokens(label)}]({url})"
            case Blank():
                return ""
            case _:
                raise RenderError(f"cannot render line {line!r}")

    def render_tokens(self, tokens: Sequence[Token]) -> str:
        return " ".join(self.render_token(token) for token in tokens)

    def render_token(self, token: Token) -> str:
        match token:
            case Regular(text=text):
                return text
            case Bold(children=children):
                return f"**{self.render_tokens(children)}**"
            case Italic(children=children):
                return f"*{self.render_tokens(children)}*"
            case InlineCode(children=children):
                return f"`{self.render_tokens(children)}`"
            case Link(label=label, url=url):
                return f"[{self.render_tokens(label)}]({url})"
            case _:
                raise RenderError(f"cannot render token {token!r}")


def plain_text(tokens: Sequence[Token]) -> str:
    """Words of ``tokens`` without any markup, space separated.

    Example:
        >>> plain_text((Regular("a"), Bold((Regular("b"),))))
        'a b'
    """
    words: list[str] = []
    for token in tokens:
        match token:
            case Regular(text=text):
                words.append(text)
            case Bold(children=children) | Italic(children=children) | InlineCode(
                children=children
            ):
                words.append(plain_text(children))
            case Link(label=label):
                words.append(plain_text(label))
    return " ".join(w for w in words if w)
