"""Event collector capability.

The Lexer reports every recognized construct to a TokenCollector. Two
implementations exist: the Parser (production) and RecordingCollector,
which only records event names for inspection in tests.

Events arrive strictly in scanning order (left to right, top to bottom).
Collectors may assume no concurrent or re-entrant delivery.
"""

from __future__ import annotations

from typing import Protocol


class TokenCollector(Protocol):
    """Sink for lexer events. All methods are fire-and-forget."""

    def h1(self) -> None: ...

    def h2(self) -> None: ...

    def h3(self) -> None: ...

    def h4(self) -> None: ...

    def h5(self) -> None: ...

    def h6(self) -> None: ...

    def begin_bold(self) -> None: ...

    def end_bold(self) -> None: ...

    def begin_italic(self) -> None: ...

    def end_italic(self) -> None: ...

    def begin_inline_code(self) -> None: ...

    def end_inline_code(self) -> None: ...

    def begin_label(self) -> None: ...

    def end_label(self) -> None: ...

    def url(self, url: str) -> None: ...

    def word(self, text: str) -> None: ...

    def image(self) -> None: ...

    def line_break(self) -> None: ...


class RecordingCollector:
    """Collector that records one string per event.

    Usage:
        >>> from pluma.lexer import Lexer
        >>> recorder = RecordingCollector()
        >>> Lexer(recorder).lex("# Hi")
        >>> recorder.events
        ['h1', 'word(Hi)', 'line_break']

    """

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[str] = []

    def h1(self) -> None:
        self.events.append("h1")

    def h2(self) -> None:
        self.events.append("h2")

    def h3(self) -> None:
        self.events.append("h3")

    def h4(self) -> None:
        self.events.append("h4")

    def h5(self) -> None:
        self.events.append("h5")

    def h6(self) -> None:
        self.events.append("h6")

    def begin_bold(self) -> None:
        self.events.append("begin_bold")

    def end_bold(self) -> None:
        self.events.append("end_bold")

    def begin_italic(self) -> None:
        self.events.append("begin_italic")

    def end_italic(self) -> None:
        self.events.append("end_italic")

    def begin_inline_code(self) -> None:
        self.events.append("begin_inline_code")

    def end_inline_code(self) -> None:
        self.events.append("end_inline_code")

    def begin_label(self) -> None:
        self.events.append("begin_label")

    def end_label(self) -> None:
        self.events.append("end_label")

    def url(self, url: str) -> None:
        self.events.append(f"url({url})")

    def word(self, text: str) -> None:
        self.events.append(f"word({text})")

    def image(self) -> None:
        self.events.append("img")

    def line_break(self) -> None:
        self.events.append("line_break")

    def clear(self) -> None:
        """Forget recorded events."""
        self.events.clear()


__all__ = ["RecordingCollector", "TokenCollector"]
