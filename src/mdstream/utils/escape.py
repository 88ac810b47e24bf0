#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/escape.py
"""HTML text escaping.

Every text-like payload the renderer writes (text, code, link and image
destinations, alt text, footnote names, language tags) goes through
``escape_html``. Raw HTML events are the single exception and are written
verbatim.

"""

from __future__ import annotations

# Single pass: entities written here are never escaped again.
_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_HTML_ESCAPE_TABLE = str.maketrans(_HTML_ESCAPES)


def escape_html(text: str) -> str:
    """Escape HTML special characters in text content and attribute values.

    Unlike ``html.escape``, the apostrophe becomes ``&#39;``. All other
    characters, including multi-byte ones, pass through unchanged.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for element content and double-quoted attributes

    Examples
    --------
        >>> escape_html('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;'

    """
    if not text:
        return text
    return text.translate(_HTML_ESCAPE_TABLE)
