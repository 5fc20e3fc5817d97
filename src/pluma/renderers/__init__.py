"""Renderers turning a Document into output text."""

from pluma.renderers.html import HtmlRenderer
from pluma.renderers.protocol import ASTRenderer
from pluma.renderers.text import TextRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "TextRenderer"]
