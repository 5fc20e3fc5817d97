"""Inline code word scanner mixin.

Backtick spans are matched by prefix and suffix like emphasis, but their
content is never scanned for further markup: it reaches the collector as
literal words. Words between an unclosed opening backtick and the closing
one on the same line stay literal as well.
"""

from __future__ import annotations

from pluma.collector import TokenCollector

CODE_DELIMITER = "`"


class CodeScannerMixin:
    """Mixin providing inline code recognition."""

    _collector: TokenCollector
    _in_code: bool

    def _emit_word(self, text: str) -> None:
        """Emit a non-empty literal word. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_inline_code(self, word: str) -> bool:
        """Recognize backtick delimited words.

        Returns:
            True if the word was consumed.
        """
        if self._in_code and CODE_DELIMITER not in word:
            self._emit_word(word)
            return True

        if word.startswith(CODE_DELIMITER) and not self._in_code:
            self._collector.begin_inline_code()
            if not self._close_code(word[1:]):
                self._emit_word(word[1:])
                self._in_code = True
            return True

        return self._close_code(word)

    def _close_code(self, text: str) -> bool:
        """Emit ``text`` and close the span if it ends with a backtick.

        A single trailing period after the backtick is kept with the word.
        """
        if text.endswith(CODE_DELIMITER):
            self._emit_word(text[:-1])
        elif text.endswith(CODE_DELIMITER + "."):
            self._emit_word(text[:-2] + ".")
        else:
            return False

        self._collector.end_inline_code()
        self._in_code = False
        return True
