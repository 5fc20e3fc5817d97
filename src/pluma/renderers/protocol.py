"""ASTRenderer protocol: the interface for document renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this
protocol. ``HtmlRenderer`` and ``TextRenderer`` are the built-in ones.

Example:
    from pluma.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from pluma.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, doc: Document) -> str:
        """Render a Document to a string."""
        ...
