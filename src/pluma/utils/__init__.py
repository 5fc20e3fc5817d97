"""Utility modules for Pluma.

Provides:
- logger: get_logger for logging
- text: escape_html for renderers
"""

from pluma.utils.logger import get_logger
from pluma.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
