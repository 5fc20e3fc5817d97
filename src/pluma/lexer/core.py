"""Word-boundary lexer for Pluma markup.

Scans the source line by line and word by word, and reports every
recognized construct to a TokenCollector. There is no grammar and no
lookahead across lines: lines are classified by their first character,
words by their prefix and suffix.

The lexer never validates delimiter balance. Unmatched openers and
closers are forwarded as-is; the parser state machine and the builder
decide what they mean.

Thread Safety:
Lexer instances are bound to one collector and hold only per-line state.
Create one per parse.

"""

from __future__ import annotations

from collections.abc import Callable

from pluma.collector import TokenCollector
from pluma.lexer.classifiers import HeadingClassifierMixin, ImageClassifierMixin
from pluma.lexer.scanners import (
    CodeScannerMixin,
    EmphasisScannerMixin,
    LabelScannerMixin,
)
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (line level)
    HeadingClassifierMixin,
    ImageClassifierMixin,
    # Scanners (word level)
    CodeScannerMixin,
    EmphasisScannerMixin,
    LabelScannerMixin,
):
    """Line and word scanner driving a TokenCollector.

    Usage:
        >>> from pluma.collector import RecordingCollector
        >>> recorder = RecordingCollector()
        >>> Lexer(recorder).lex("regular **bold** word")
        >>> recorder.events
        ['word(regular)', 'begin_bold', 'word(bold)', 'end_bold', 'word(word)', 'line_break']

    ``lex`` may be called several times; each call appends lines.

    """

    __slots__ = (
        "_collector",
        "_text_transformer",
        "_in_code",  # Inside an unclosed inline code span on this line
    )

    def __init__(
        self,
        collector: TokenCollector,
        *,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize lexer.

        Args:
            collector: Sink receiving events in scanning order
            text_transformer: Optional callback applied to plain paragraph
                lines before they are split into words
        """
        self._collector = collector
        self._text_transformer = text_transformer
        self._in_code = False

    def lex(self, source: str) -> None:
        """Scan source and report events to the collector.

        Every source line, empty or not, ends with a ``line_break`` event.

        Args:
            source: Newline-delimited markup text
        """
        lines = source.splitlines()
        for line in lines:
            self._lex_line(line.strip())
            self._collector.line_break()
        logger.debug("lexed %d lines", len(lines))

    def _lex_line(self, line: str) -> None:
        """Classify a stripped line by its first character and scan it."""
        self._in_code = False
        if not line:
            return

        match line[0]:
            case "#":
                if self._try_classify_header(line):
                    return
            case "!":
                self._try_classify_image(line)
                return

        if self._text_transformer is not None:
            line = self._text_transformer(line)
        self._lex_words(line)

    def _lex_words(self, text: str) -> None:
        for word in text.split():
            self._lex_word(word)

    def _lex_word(self, word: str) -> None:
        """Scan one word, or the residue of one after a delimiter was stripped.

        Recognizers run in priority order and the first match wins. An
        unrecognized word is reported verbatim.
        """
        if not word:
            return

        if (
            self._scan_inline_code(word)
            or self._scan_bold(word)
            or self._scan_italic(word)
            or self._scan_label(word)
        ):
            return

        self._collector.word(word)

    def _emit_word(self, text: str) -> None:
        if text:
            self._collector.word(text)
