"""Word-boundary lexer for Pluma.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + line loop)
├── classifiers/         # Line-level classification mixins
│   ├── heading.py       # # .. ###### headers
│   └── image.py         # ! image lines
└── scanners/            # Word-level recognizers, in priority order
    ├── code.py          # `inline code`
    ├── emphasis.py      # **bold** and *italic*
    └── label.py         # [label](url)

Usage:
    >>> from pluma.collector import RecordingCollector
    >>> from pluma.lexer import Lexer
    >>> recorder = RecordingCollector()
    >>> Lexer(recorder).lex("# Hello\\n\\nWorld")
    >>> recorder.events
    ['h1', 'word(Hello)', 'line_break', 'line_break', 'word(World)', 'line_break']

"""

from pluma.lexer.core import Lexer

__all__ = ["Lexer"]
