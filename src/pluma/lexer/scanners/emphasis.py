"""Bold and italic word scanner mixin.

Delimiters are recognized by prefix and suffix of the raw word, not by a
grammar. The interior left after stripping a delimiter is fed back to the
word scanner, so ``***x***`` resolves to bold, then italic, then ``x``.
"""

from __future__ import annotations

from collections.abc import Callable

from pluma.collector import TokenCollector

BOLD_DELIMITERS = ("**", "__")
ITALIC_DELIMITERS = ("*", "_")


class EmphasisScannerMixin:
    """Mixin providing bold and italic recognition."""

    _collector: TokenCollector

    def _lex_word(self, word: str) -> None:
        """Scan a single word. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_bold(self, word: str) -> bool:
        """Recognize ``**``/``__`` delimited words."""
        collector = self._collector
        return self._scan_delimited(
            word, BOLD_DELIMITERS, collector.begin_bold, collector.end_bold
        )

    def _scan_italic(self, word: str) -> bool:
        """Recognize ``*``/``_`` delimited words."""
        collector = self._collector
        return self._scan_delimited(
            word, ITALIC_DELIMITERS, collector.begin_italic, collector.end_italic
        )

    def _scan_delimited(
        self,
        word: str,
        delimiters: tuple[str, ...],
        begin: Callable[[], None],
        end: Callable[[], None],
    ) -> bool:
        """Shared prefix/suffix logic for one delimiter family.

        Three shapes are recognized, checked in order:
        - ``<d>text`` opens (and ``<d>text<d>`` opens and closes)
        - ``text<d>`` closes
        - ``text<d>.`` closes, keeping the period inside the span

        Args:
            word: Raw word, never empty
            delimiters: Equivalent delimiters of equal length
            begin: Collector callback for the opening event
            end: Collector callback for the closing event

        Returns:
            True if the word was consumed.
        """
        size = len(delimiters[0])

        if word.startswith(delimiters):
            begin()
            if len(word) >= 2 * size and word.endswith(delimiters):
                self._lex_word(word[size:-size])
                end()
            else:
                self._lex_word(word[size:])
            return True

        if word.endswith(delimiters):
            self._lex_word(word[:-size])
            end()
            return True

        if word.endswith(tuple(d + "." for d in delimiters)):
            self._lex_word(word[: -size - 1] + ".")
            end()
            return True

        return False
