"""Image line classifier mixin."""

from __future__ import annotations

from pluma.collector import TokenCollector


class ImageClassifierMixin:
    """Mixin providing image line classification."""

    _collector: TokenCollector

    def _lex_words(self, text: str) -> None:
        """Scan whitespace-separated words. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_image(self, line: str) -> bool:
        """Try to classify a stripped line as an image.

        Image lines start with ``!``. The rest of the line, usually a
        ``[label](url)`` pair, is scanned as ordinary words.

        Returns:
            True if an image event was emitted, False otherwise.
        """
        if not line.startswith("!"):
            return False

        self._collector.image()
        self._lex_words(line[1:])
        return True
