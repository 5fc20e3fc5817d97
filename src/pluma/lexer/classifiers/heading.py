"""Header line classifier mixin."""

from __future__ import annotations

from pluma.collector import TokenCollector
from pluma.nodes import HeaderLevel


class HeadingClassifierMixin:
    """Mixin providing header line classification."""

    _collector: TokenCollector

    def _lex_words(self, text: str) -> None:
        """Scan whitespace-separated words. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_header(self, line: str) -> bool:
        """Try to classify a stripped line as a header.

        The first word must be a run of 1-6 ``#`` characters. The remaining
        words are scanned as header content.

        Args:
            line: Line content with surrounding whitespace stripped

        Returns:
            True if a header event was emitted, False otherwise.
        """
        parts = line.split(maxsplit=1)
        level = HeaderLevel.from_marker(parts[0])
        if level is None:
            return False

        self._emit_header(level)
        if len(parts) > 1:
            self._lex_words(parts[1])
        return True

    def _emit_header(self, level: HeaderLevel) -> None:
        collector = self._collector
        match level:
            case HeaderLevel.H1:
                collector.h1()
            case HeaderLevel.H2:
                collector.h2()
            case HeaderLevel.H3:
                collector.h3()
            case HeaderLevel.H4:
                collector.h4()
            case HeaderLevel.H5:
                collector.h5()
            case HeaderLevel.H6:
                collector.h6()
