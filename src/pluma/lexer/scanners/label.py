"""Link label and url scanner mixin.

A label opens on a word starting with ``[`` and closes on the first word
containing ``]``, so labels may span several words. The ``(url)`` part
must follow the closing bracket inside the same word.
"""

from __future__ import annotations

from pluma.collector import TokenCollector


class LabelScannerMixin:
    """Mixin providing ``[label](url)`` recognition."""

    _collector: TokenCollector

    def _lex_word(self, word: str) -> None:
        """Scan a single word. Implemented by Lexer."""
        raise NotImplementedError

    def _emit_word(self, text: str) -> None:
        """Emit a non-empty literal word. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_label(self, word: str) -> bool:
        """Recognize label openers and closers.

        Returns:
            True if the word was consumed.
        """
        collector = self._collector

        if word.startswith("["):
            collector.begin_label()
            label, sep, target = word[1:].partition("](")
            if sep:
                self._lex_word(label)
                collector.end_label()
                self._emit_target(target)
            else:
                self._lex_word(label)
            return True

        label, sep, tail = word.partition("]")
        if not sep:
            return False

        self._lex_word(label)
        collector.end_label()
        if tail.startswith("("):
            self._emit_target(tail[1:])
        else:
            self._lex_word(tail)
        return True

    def _emit_target(self, target: str) -> None:
        """Emit the url following ``](``.

        Anything after the closing parenthesis, such as the period in
        ``[a](b).``, follows as a literal word.
        """
        url, sep, tail = target.rpartition(")")
        if not sep:
            self._collector.url(target)
            return

        self._collector.url(url)
        self._emit_word(tail)
