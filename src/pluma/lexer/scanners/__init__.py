"""Word-level scanners for the Pluma lexer.

Each scanner is a mixin recognizing one kind of inline delimiter. The
Lexer tries them in fixed priority order: inline code, bold, italic,
label. The first one that consumes the word wins.
"""

from pluma.lexer.scanners.code import CodeScannerMixin
from pluma.lexer.scanners.emphasis import EmphasisScannerMixin
from pluma.lexer.scanners.label import LabelScannerMixin

__all__ = [
    "CodeScannerMixin",
    "EmphasisScannerMixin",
    "LabelScannerMixin",
]
