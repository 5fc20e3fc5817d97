"""Finite state machine parser.

The Parser is the production TokenCollector. It tracks where in a line the
event stream is (``START``, ``HEADER``, ``TEXT``), checks each structural
event against an explicit transition table, and runs the matching Builder
action. The table decides when a new Line opens and when content keeps
appending to the current one.

An event with no transition from the current state is a broken event
stream, not bad markup: TransitionError is raised and the parse aborts.
The Lexer never produces such a stream, but nothing stops other callers
from driving the Parser directly.

Thread Safety:
Parser instances are single-use and hold per-parse state only.
Configuration is read from ContextVar (context-local).

"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from pluma.builder import Builder
from pluma.config import get_parse_config
from pluma.errors import TransitionError
from pluma.lexer import Lexer
from pluma.nodes import Document, HeaderLevel


class State(Enum):
    """Line-level parser states."""

    START = auto()  # Beginning of a line, nothing opened yet
    HEADER = auto()  # Header introducer seen, awaiting content
    TEXT = auto()  # Inline content of a header or paragraph


class Event(Enum):
    """Structural events checked against the transition table."""

    HEADER = auto()
    IMAGE = auto()
    WORD = auto()
    START_BOLD = auto()
    END_BOLD = auto()
    START_ITALIC = auto()
    END_ITALIC = auto()
    START_INLINE_CODE = auto()
    END_INLINE_CODE = auto()
    START_LABEL = auto()
    END_LABEL = auto()
    END_LINE = auto()


Action: TypeAlias = Callable[[Builder], None]


def _then(*actions: Action) -> Action:
    """Compose builder actions run left to right."""

    def run(builder: Builder) -> None:
        for action in actions:
            action(builder)

    return run


@dataclass(frozen=True, slots=True)
class Transition:
    """One row of the transition table."""

    source: State
    event: Event
    target: State
    action: Action | None = None


# Rows are grouped by source state. Anything missing is fatal.
TRANSITIONS: tuple[Transition, ...] = (
    # start of line
    Transition(State.START, Event.HEADER, State.HEADER, Builder.add_header),
    Transition(State.START, Event.IMAGE, State.TEXT, Builder.add_image),
    Transition(State.START, Event.WORD, State.TEXT, Builder.add_text),
    Transition(
        State.START,
        Event.START_BOLD,
        State.TEXT,
        _then(Builder.add_text, Builder.start_bold),
    ),
    Transition(
        State.START,
        Event.END_BOLD,
        State.TEXT,
        _then(Builder.add_text, Builder.end_bold),
    ),
    Transition(
        State.START,
        Event.START_ITALIC,
        State.TEXT,
        _then(Builder.add_text, Builder.start_italic),
    ),
    Transition(
        State.START,
        Event.END_ITALIC,
        State.TEXT,
        _then(Builder.add_text, Builder.end_italic),
    ),
    Transition(
        State.START,
        Event.START_INLINE_CODE,
        State.TEXT,
        _then(Builder.add_text, Builder.start_inline_code),
    ),
    Transition(
        State.START,
        Event.END_INLINE_CODE,
        State.TEXT,
        _then(Builder.add_text, Builder.end_inline_code),
    ),
    Transition(
        State.START,
        Event.START_LABEL,
        State.TEXT,
        _then(Builder.add_text, Builder.start_label),
    ),
    Transition(
        State.START,
        Event.END_LABEL,
        State.TEXT,
        _then(Builder.add_text, Builder.end_label),
    ),
    Transition(State.START, Event.END_LINE, State.START, Builder.blank_line),
    # header introducer seen
    Transition(State.HEADER, Event.WORD, State.TEXT),
    Transition(State.HEADER, Event.START_BOLD, State.TEXT, Builder.start_bold),
    Transition(State.HEADER, Event.END_BOLD, State.TEXT, Builder.end_bold),
    Transition(State.HEADER, Event.START_ITALIC, State.TEXT, Builder.start_italic),
    Transition(State.HEADER, Event.END_ITALIC, State.TEXT, Builder.end_italic),
    Transition(
        State.HEADER, Event.START_INLINE_CODE, State.TEXT, Builder.start_inline_code
    ),
    Transition(State.HEADER, Event.END_INLINE_CODE, State.TEXT, Builder.end_inline_code),
    Transition(State.HEADER, Event.START_LABEL, State.TEXT, Builder.start_label),
    Transition(State.HEADER, Event.END_LABEL, State.TEXT, Builder.end_label),
    Transition(State.HEADER, Event.END_LINE, State.START, Builder.end_line),
    # inline content
    Transition(State.TEXT, Event.WORD, State.TEXT),
    Transition(State.TEXT, Event.START_BOLD, State.TEXT, Builder.start_bold),
    Transition(State.TEXT, Event.END_BOLD, State.TEXT, Builder.end_bold),
    Transition(State.TEXT, Event.START_ITALIC, State.TEXT, Builder.start_italic),
    Transition(State.TEXT, Event.END_ITALIC, State.TEXT, Builder.end_italic),
    Transition(
        State.TEXT, Event.START_INLINE_CODE, State.TEXT, Builder.start_inline_code
    ),
    Transition(State.TEXT, Event.END_INLINE_CODE, State.TEXT, Builder.end_inline_code),
    Transition(State.TEXT, Event.START_LABEL, State.TEXT, Builder.start_label),
    Transition(State.TEXT, Event.END_LABEL, State.TEXT, Builder.end_label),
    Transition(State.TEXT, Event.HEADER, State.HEADER, Builder.add_header),
    Transition(State.TEXT, Event.END_LINE, State.START, Builder.end_line),
)

_TABLE: dict[tuple[State, Event], Transition] = {
    (t.source, t.event): t for t in TRANSITIONS
}


def find_transition(state: State, event: Event) -> Transition | None:
    """Look up the transition for ``event`` in ``state``."""
    return _TABLE.get((state, event))


class Parser:
    """State machine collector driving a Builder.

    Usage:
        >>> parser = Parser()
        >>> doc = parser.parse("# Hello\\n**World**")
        >>> doc.lines[0]
        Header(level=<HeaderLevel.H1: 1>, tokens=(Regular(text='Hello'),))

    Or wire the pipeline by hand:
        >>> builder = Builder()
        >>> Lexer(Parser(builder)).lex("*hi*")
        >>> builder.get_document().lines
        (Paragraph(tokens=(Italic(children=(Regular(text='hi'),)),)),)

    """

    __slots__ = ("_builder", "_state", "_lineno")

    def __init__(self, builder: Builder | None = None) -> None:
        """Initialize parser.

        Args:
            builder: Builder receiving actions (a fresh one if None)
        """
        self._builder = builder if builder is not None else Builder()
        self._state = State.START
        self._lineno = 1

    @property
    def state(self) -> State:
        """Current line state."""
        return self._state

    @property
    def builder(self) -> Builder:
        return self._builder

    def parse(self, source: str) -> Document:
        """Lex ``source`` into this parser and return the document so far.

        Reads text_transformer from the active ParseConfig.
        """
        config = get_parse_config()
        Lexer(self, text_transformer=config.text_transformer).lex(source)
        return self._builder.get_document()

    def handle_event(self, event: Event) -> None:
        """Apply the transition for ``event``.

        Raises:
            TransitionError: No transition exists from the current state.
        """
        transition = find_transition(self._state, event)
        if transition is None:
            raise TransitionError(
                self._state,
                event,
                lineno=self._lineno,
                source_file=get_parse_config().source_file,
            )

        self._state = transition.target
        if transition.action is not None:
            transition.action(self._builder)

    # =========================================================================
    # TokenCollector
    # =========================================================================

    def h1(self) -> None:
        self._header(HeaderLevel.H1)

    def h2(self) -> None:
        self._header(HeaderLevel.H2)

    def h3(self) -> None:
        self._header(HeaderLevel.H3)

    def h4(self) -> None:
        self._header(HeaderLevel.H4)

    def h5(self) -> None:
        self._header(HeaderLevel.H5)

    def h6(self) -> None:
        self._header(HeaderLevel.H6)

    def begin_bold(self) -> None:
        self.handle_event(Event.START_BOLD)

    def end_bold(self) -> None:
        self.handle_event(Event.END_BOLD)

    def begin_italic(self) -> None:
        self.handle_event(Event.START_ITALIC)

    def end_italic(self) -> None:
        self.handle_event(Event.END_ITALIC)

    def begin_inline_code(self) -> None:
        self.handle_event(Event.START_INLINE_CODE)

    def end_inline_code(self) -> None:
        self.handle_event(Event.END_INLINE_CODE)

    def begin_label(self) -> None:
        self.handle_event(Event.START_LABEL)

    def end_label(self) -> None:
        self.handle_event(Event.END_LABEL)

    def url(self, url: str) -> None:
        # Payload only; never changes state.
        self._builder.add_url(url)

    def word(self, text: str) -> None:
        self.handle_event(Event.WORD)
        self._builder.add_word(text)

    def image(self) -> None:
        self.handle_event(Event.IMAGE)

    def line_break(self) -> None:
        self.handle_event(Event.END_LINE)
        self._lineno += 1

    def _header(self, level: HeaderLevel) -> None:
        self.handle_event(Event.HEADER)
        self._builder.set_header_level(level)
