"""Incremental document builder.

The Builder owns the document under construction and everything that is
currently open: the current line and a stack of in-progress spans. It is
driven only by the Parser, which has already checked that each call is
legal for the current line state.

Open spans are frames on a single stack. ``start_*`` pushes a frame and
``end_*`` pops the nearest frame of the same kind, finalizing it into
whatever is now on top (or into the line when the stack is empty). Frames
opened after the one being closed are finalized first, so crossed
delimiters such as ``**a *b** c*`` degrade to nesting instead of failing.

Anything inconsistent (a close with no opener, a url with no label, a
word with nowhere to go) is a logged no-op, never an exception.

Thread Safety:
All state is instance-local. Create one Builder per parse.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from pluma.nodes import (
    Blank,
    Bold,
    Document,
    Header,
    HeaderLevel,
    Image,
    InlineCode,
    Italic,
    Line,
    Link,
    Paragraph,
    Regular,
    Token,
)
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class SpanKind(Enum):
    """Kinds of frame that can be open on the span stack."""

    BOLD = auto()
    ITALIC = auto()
    INLINE_CODE = auto()
    LABEL = auto()


class LineKind(Enum):
    """Kinds of line that can be open."""

    HEADER = auto()
    PARAGRAPH = auto()
    IMAGE = auto()


_SPAN_NODES: dict[SpanKind, type[Bold] | type[Italic] | type[InlineCode]] = {
    SpanKind.BOLD: Bold,
    SpanKind.ITALIC: Italic,
    SpanKind.INLINE_CODE: InlineCode,
}


@dataclass(slots=True)
class _Frame:
    """An open span collecting its children."""

    kind: SpanKind
    children: list[Token] = field(default_factory=list)


@dataclass(slots=True)
class _OpenLine:
    """The line currently being assembled."""

    kind: LineKind
    level: HeaderLevel = HeaderLevel.H1
    tokens: list[Token] = field(default_factory=list)
    label: tuple[Token, ...] | None = None
    url: str = ""

    def accepts_tokens(self) -> bool:
        return self.kind is not LineKind.IMAGE

    def set_url(self, url: str) -> None:
        self.url = url

    def build(self) -> Line:
        match self.kind:
            case LineKind.HEADER:
                return Header(level=self.level, tokens=tuple(self.tokens))
            case LineKind.PARAGRAPH:
                return Paragraph(tokens=tuple(self.tokens))
            case LineKind.IMAGE:
                return Image(label=self.label or (), url=self.url)


class Builder:
    """Assembles Lines from parser calls.

    Usage:
        >>> builder = Builder()
        >>> builder.add_text()
        >>> builder.start_bold()
        >>> builder.add_word("hi")
        >>> builder.end_bold()
        >>> builder.end_line()
        >>> builder.get_document().lines
        (Paragraph(tokens=(Bold(children=(Regular(text='hi'),)),)),)

    """

    __slots__ = (
        "_lines",
        "_line",
        "_frames",
        "_pending_url",  # Finalizes the most recently closed label
    )

    def __init__(self) -> None:
        self._lines: list[Line] = []
        self._line: _OpenLine | None = None
        self._frames: list[_Frame] = []
        self._pending_url: Callable[[str], None] | None = None

    def get_document(self) -> Document:
        """Return a snapshot of every completed line.

        The returned Document shares nothing mutable with the builder.
        """
        return Document(lines=tuple(self._lines))

    # =========================================================================
    # Lines
    # =========================================================================

    def add_header(self) -> None:
        """Open a header line. The level follows via set_header_level()."""
        self._open_line(_OpenLine(LineKind.HEADER))

    def set_header_level(self, level: HeaderLevel) -> None:
        if self._line is None or self._line.kind is not LineKind.HEADER:
            logger.debug("header level %s without an open header", level.name)
            return
        self._line.level = level

    def add_text(self) -> None:
        """Open a paragraph line."""
        self._open_line(_OpenLine(LineKind.PARAGRAPH))

    def add_image(self) -> None:
        """Open an image line. Only its label and url are kept."""
        self._open_line(_OpenLine(LineKind.IMAGE))

    def blank_line(self) -> None:
        """Record a blank source line."""
        if self._line is not None:
            self.end_line()
        self._lines.append(Blank())

    def end_line(self) -> None:
        """Close every open span and append the current line."""
        while self._frames:
            self._finalize(self._frames.pop())
        self._pending_url = None

        line, self._line = self._line, None
        if line is None:
            logger.debug("end of line with no open line")
            return
        self._lines.append(line.build())

    def _open_line(self, line: _OpenLine) -> None:
        if self._line is not None:
            self.end_line()
        self._line = line

    # =========================================================================
    # Spans
    # =========================================================================

    def start_bold(self) -> None:
        self._push(SpanKind.BOLD)

    def end_bold(self) -> None:
        frame = self._close(SpanKind.BOLD)
        if frame is None:
            return

        # ***text*** closed as italic first leaves an empty bold right after
        # an Italic: wrap that Italic instead of emitting an empty Bold.
        if not frame.children:
            destination = self._destination()
            if destination and isinstance(destination[-1], Italic):
                destination[-1] = Bold(children=(destination[-1],))
                return

        self._finalize(frame)

    def start_italic(self) -> None:
        self._push(SpanKind.ITALIC)

    def end_italic(self) -> None:
        self._end(SpanKind.ITALIC)

    def start_inline_code(self) -> None:
        self._push(SpanKind.INLINE_CODE)

    def end_inline_code(self) -> None:
        self._end(SpanKind.INLINE_CODE)

    def start_label(self) -> None:
        self._push(SpanKind.LABEL)

    def end_label(self) -> None:
        self._end(SpanKind.LABEL)

    # =========================================================================
    # Content
    # =========================================================================

    def add_word(self, text: str) -> None:
        """Append a Regular token at the innermost open destination."""
        self._pending_url = None
        self._append(Regular(text=text))

    def add_url(self, url: str) -> None:
        """Attach url to the label closed immediately before."""
        attach, self._pending_url = self._pending_url, None
        if attach is None:
            logger.debug("url %r without a preceding label", url)
            return
        attach(url)

    # =========================================================================
    # Stack helpers
    # =========================================================================

    def _push(self, kind: SpanKind) -> None:
        self._pending_url = None
        self._frames.append(_Frame(kind))

    def _end(self, kind: SpanKind) -> None:
        frame = self._close(kind)
        if frame is not None:
            self._finalize(frame)

    def _close(self, kind: SpanKind) -> _Frame | None:
        """Pop the nearest frame of ``kind``, finalizing frames above it."""
        self._pending_url = None
        frames = self._frames
        for depth in range(len(frames) - 1, -1, -1):
            if frames[depth].kind is kind:
                break
        else:
            logger.debug("close of %s with no open %s", kind.name, kind.name)
            return None

        while len(frames) - 1 > depth:
            self._finalize(frames.pop())
        return frames.pop()

    def _finalize(self, frame: _Frame) -> None:
        """Turn a closed frame into a token at the current destination."""
        if frame.kind is SpanKind.LABEL:
            self._finalize_label(tuple(frame.children))
            return

        if not frame.children:
            logger.debug("dropping empty %s span", frame.kind.name)
            return
        node = _SPAN_NODES[frame.kind]
        self._append(node(children=tuple(frame.children)))

    def _finalize_label(self, label: tuple[Token, ...]) -> None:
        line = self._line
        if not self._frames and line is not None and line.kind is LineKind.IMAGE:
            if line.label is not None:
                logger.debug("image already has a label, dropping %r", label)
                return
            line.label = label
            self._pending_url = line.set_url
            return

        destination = self._destination()
        if destination is None:
            logger.debug("dropping label %r with no destination", label)
            return

        index = len(destination)
        destination.append(Link(label=label, url=""))

        def attach(url: str) -> None:
            destination[index] = Link(label=label, url=url)

        self._pending_url = attach

    def _destination(self) -> list[Token] | None:
        """Innermost open token list: top frame, else the open line."""
        if self._frames:
            return self._frames[-1].children
        if self._line is not None and self._line.accepts_tokens():
            return self._line.tokens
        return None

    def _append(self, token: Token) -> None:
        destination = self._destination()
        if destination is None:
            logger.debug("dropping %r with no destination", token)
            return
        destination.append(token)
