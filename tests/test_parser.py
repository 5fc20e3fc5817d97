"""Tests for the parser state machine.

The Parser is driven directly here, without the Lexer, so transitions can
be checked in isolation, including event sequences the Lexer never emits.
"""

from __future__ import annotations

import pytest

from pluma.builder import Builder
from pluma.config import ParseConfig, parse_config_context
from pluma.errors import ParseError, TransitionError
from pluma.nodes import (
    Blank,
    Bold,
    Header,
    HeaderLevel,
    Image,
    Link,
    Paragraph,
    Regular,
)
from pluma.parser import TRANSITIONS, Event, Parser, State, find_transition


@pytest.fixture
def parser() -> Parser:
    return Parser()


class TestTransitionTable:
    """The table itself."""

    def test_rows_are_unique(self) -> None:
        keys = [(t.source, t.event) for t in TRANSITIONS]
        assert len(keys) == len(set(keys))

    def test_end_line_is_legal_everywhere(self) -> None:
        for state in State:
            transition = find_transition(state, Event.END_LINE)
            assert transition is not None
            assert transition.target is State.START

    def test_every_inline_event_is_legal_in_every_state(self) -> None:
        inline = set(Event) - {Event.HEADER, Event.IMAGE, Event.END_LINE}
        for state in State:
            for event in inline:
                transition = find_transition(state, event)
                assert transition is not None, (state, event)
                assert transition.target is State.TEXT

    @pytest.mark.parametrize(
        ("state", "event"),
        [
            (State.HEADER, Event.HEADER),
            (State.HEADER, Event.IMAGE),
            (State.TEXT, Event.IMAGE),
        ],
    )
    def test_missing_transitions(self, state: State, event: Event) -> None:
        assert find_transition(state, event) is None

    def test_word_in_header_has_no_action(self) -> None:
        transition = find_transition(State.HEADER, Event.WORD)
        assert transition is not None
        assert transition.action is None


class TestStateChanges:
    """State after individual events."""

    def test_starts_at_start(self, parser: Parser) -> None:
        assert parser.state is State.START

    def test_header_then_text(self, parser: Parser) -> None:
        parser.h2()
        assert parser.state is State.HEADER
        parser.word("Title")
        assert parser.state is State.TEXT
        parser.line_break()
        assert parser.state is State.START

    def test_word_opens_text(self, parser: Parser) -> None:
        parser.word("hello")
        assert parser.state is State.TEXT

    def test_url_never_changes_state(self, parser: Parser) -> None:
        parser.url("https://a.com")
        assert parser.state is State.START

    def test_image_opens_text(self, parser: Parser) -> None:
        parser.image()
        assert parser.state is State.TEXT


class TestBuilderActions:
    """Documents produced by driving the parser by hand."""

    def test_blank_line_from_start(self, parser: Parser) -> None:
        parser.line_break()
        assert parser.builder.get_document().lines == (Blank(),)

    def test_empty_header(self, parser: Parser) -> None:
        parser.h3()
        parser.line_break()
        assert parser.builder.get_document().lines == (Header(HeaderLevel.H3, ()),)

    def test_bold_at_start_opens_paragraph(self, parser: Parser) -> None:
        parser.begin_bold()
        parser.word("x")
        parser.end_bold()
        parser.line_break()
        assert parser.builder.get_document().lines == (
            Paragraph((Bold((Regular("x"),)),)),
        )

    def test_label_at_start_opens_paragraph(self, parser: Parser) -> None:
        parser.begin_label()
        parser.word("Link")
        parser.end_label()
        parser.url("https://a.com")
        parser.line_break()
        assert parser.builder.get_document().lines == (
            Paragraph((Link((Regular("Link"),), "https://a.com"),)),
        )

    def test_stray_close_at_start_is_absorbed(self, parser: Parser) -> None:
        parser.end_italic()
        parser.word("x")
        parser.line_break()
        assert parser.builder.get_document().lines == (Paragraph((Regular("x"),)),)

    def test_header_inside_text_starts_new_line(self, parser: Parser) -> None:
        parser.word("before")
        parser.h1()
        parser.word("after")
        parser.line_break()
        assert parser.builder.get_document().lines == (
            Paragraph((Regular("before"),)),
            Header(HeaderLevel.H1, (Regular("after"),)),
        )

    def test_image_line(self, parser: Parser) -> None:
        parser.image()
        parser.begin_label()
        parser.word("alt")
        parser.end_label()
        parser.url("pic.png")
        parser.line_break()
        assert parser.builder.get_document().lines == (
            Image((Regular("alt"),), "pic.png"),
        )

    def test_shared_builder(self) -> None:
        builder = Builder()
        parser = Parser(builder)
        parser.word("a")
        parser.line_break()
        assert parser.builder is builder
        assert builder.get_document().lines == (Paragraph((Regular("a"),)),)

    def test_parse_appends(self, parser: Parser) -> None:
        parser.parse("one")
        doc = parser.parse("two")
        assert doc.lines == (Paragraph((Regular("one"),)), Paragraph((Regular("two"),)))


class TestFatalTransitions:
    """Event sequences outside the lexer contract abort the parse."""

    def test_header_twice(self, parser: Parser) -> None:
        parser.h1()
        with pytest.raises(TransitionError) as exc_info:
            parser.h2()

        err = exc_info.value
        assert err.state is State.HEADER
        assert err.event is Event.HEADER
        assert "HEADER" in str(err)

    def test_image_inside_text(self, parser: Parser) -> None:
        parser.word("a")
        with pytest.raises(TransitionError):
            parser.image()

    def test_is_parse_error(self, parser: Parser) -> None:
        parser.image()
        with pytest.raises(ParseError):
            parser.image()

    def test_reports_line_number(self, parser: Parser) -> None:
        parser.line_break()
        parser.line_break()
        parser.h1()
        with pytest.raises(TransitionError) as exc_info:
            parser.image()
        assert exc_info.value.lineno == 3

    def test_reports_source_file(self, parser: Parser) -> None:
        with parse_config_context(ParseConfig(source_file="notes.md")):
            parser.h1()
            with pytest.raises(TransitionError) as exc_info:
                parser.h1()
        assert str(exc_info.value).startswith("notes.md:1 ")
