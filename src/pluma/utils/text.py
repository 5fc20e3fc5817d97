"""Text processing utilities for Pluma renderers."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in text and attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Examples:
        >>> escape_html("<b>'x'</b>")
        '&lt;b&gt;&#x27;x&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
