"""
Pluma: a small markup parser without a grammar engine.

Converts a restricted markup format (headers, bold, italic, inline code,
links, images) into a typed document tree through three stages: a
word-boundary Lexer, a state-machine Parser receiving its events, and a
Builder assembling the Document. Zero runtime dependencies.

Quick Start:
    >>> from pluma import parse, render
    >>> doc = parse("# Hello **World**")
    >>> doc.lines[0]
    Header(level=<HeaderLevel.H1: 1>, tokens=(Regular(text='Hello'), Bold(children=(Regular(text='World'),))))
    >>> render(doc)
    '<h1>Hello <strong>World</strong></h1>\\n'

Wiring the stages by hand:
    >>> from pluma import Builder, Lexer, Parser
    >>> builder = Builder()
    >>> Lexer(Parser(builder)).lex("*hi*")
    >>> builder.get_document()
    Document(lines=(Paragraph(tokens=(Italic(children=(Regular(text='hi'),)),)),))

"""

from collections.abc import Callable

from pluma.builder import Builder
from pluma.collector import RecordingCollector, TokenCollector
from pluma.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pluma.errors import (
    ParseError,
    PlumaError,
    RenderError,
    SerializationError,
    TransitionError,
)
from pluma.lexer import Lexer
from pluma.nodes import (
    Blank,
    Bold,
    Document,
    Header,
    HeaderLevel,
    Image,
    InlineCode,
    Italic,
    Line,
    Link,
    Paragraph,
    Regular,
    Token,
)
from pluma.parser import Event, Parser, State, Transition
from pluma.renderers import ASTRenderer, HtmlRenderer, TextRenderer
from pluma.serialization import from_dict, from_json, to_dict, to_json
from pluma.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    text_transformer: Callable[[str], str] | None = None,
) -> Document:
    """Parse markup source into a Document.

    Args:
        source: Markup text; one Line is produced per source line
        source_file: Optional source file path for error messages
        text_transformer: Optional callback applied to plain paragraph
            lines before they are split into words

    Returns:
        Document with one Line per source line

    Raises:
        TransitionError: The event stream broke the parser state machine.

    Example:
        >>> parse("a\\n\\nb").lines
        (Paragraph(tokens=(Regular(text='a'),)), Blank(), Paragraph(tokens=(Regular(text='b'),)))
    """
    config = ParseConfig(text_transformer=text_transformer, source_file=source_file)
    set_parse_config(config)
    try:
        doc = Parser(Builder()).parse(source)
        logger.debug("parsed %d lines from %s", len(doc), source_file or "<string>")
        return doc
    finally:
        reset_parse_config()


def render(doc: Document) -> str:
    """Render a Document to HTML.

    Example:
        >>> render(parse("[Link](https://a.com)"))
        '<p><a href="https://a.com">Link</a></p>\\n'
    """
    return HtmlRenderer().render(doc)


def to_text(doc: Document) -> str:
    """Reconstruct markup text from a Document.

    Example:
        >>> to_text(parse("__bold__ and _italic_"))
        '**bold** and *italic*\\n'
    """
    return TextRenderer().render(doc)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "to_text",
    # Lines
    "Blank",
    "Document",
    "Header",
    "HeaderLevel",
    "Image",
    "Line",
    "Paragraph",
    # Tokens
    "Bold",
    "InlineCode",
    "Italic",
    "Link",
    "Regular",
    "Token",
    # Pipeline
    "Builder",
    "Lexer",
    "Parser",
    "RecordingCollector",
    "TokenCollector",
    "Event",
    "State",
    "Transition",
    # Renderers
    "ASTRenderer",
    "HtmlRenderer",
    "TextRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "PlumaError",
    "ParseError",
    "TransitionError",
    "RenderError",
    "SerializationError",
]
