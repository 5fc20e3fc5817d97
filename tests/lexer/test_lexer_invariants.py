"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pluma.collector import RecordingCollector
from pluma.lexer import Lexer

MARKUP_ALPHABET = "#!*_`[]().ab \n"


def _events(source: str) -> list[str]:
    recorder = RecordingCollector()
    Lexer(recorder).lex(source)
    return recorder.events


class TestBasicInvariants:
    """Invariants over arbitrary text."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_one_line_break_per_source_line(self, source: str) -> None:
        """Every source line produces exactly one line_break."""
        events = _events(source)
        assert events.count("line_break") == len(source.splitlines())

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_never_emits_empty_words(self, source: str) -> None:
        assert "word()" not in _events(source)

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_events_end_with_line_break(self, source: str) -> None:
        events = _events(source)
        if events:
            assert events[-1] == "line_break"


class TestSpecialCharacterHandling:
    """Markup characters in any combination."""

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=150))
    @settings(max_examples=200)
    def test_no_exceptions_on_markup_chars(self, source: str) -> None:
        """Lexer should handle any combination of markup chars without crashing."""
        _events(source)

    @given(st.lists(st.text(alphabet="abcXYZ019", min_size=1, max_size=8), max_size=10))
    @settings(max_examples=100)
    def test_plain_words_pass_through(self, words: list[str]) -> None:
        """Words without markup characters are reported verbatim, in order."""
        events = _events(" ".join(words))
        expected = [f"word({w})" for w in words]
        assert events == ([*expected, "line_break"] if words else [])
