"""mdstream - Markdown to HTML rendering over a flat event stream.

mdstream splits rendering into two stages. A parser turns markdown into a
flat stream of events (``Start``/``End`` pairs around container elements,
single events for leaves), and a renderer walks that stream once and writes
an HTML fragment. Either side can be swapped: any event source can feed the
renderer, and the event stream can be inspected or rewritten in between.

Key Features
------------
- CommonMark plus tables, footnotes, strikethrough, task lists and math
- Single forward pass over the event stream
- Text, attribute values and code are HTML-escaped; raw HTML passes through
- Image alt text is flattened to plain text

Requirements
------------
- Python 3.10+
- mistune 3 for markdown parsing

Examples
--------
Basic usage:

    >>> from mdstream import render
    >>> render("# Hello\\n\\nThis is **bold** text.")
    '<h1>Hello</h1>\\n<p>This is <strong>bold</strong> text.</p>\\n'

Rendering a hand-built event stream:

    >>> from mdstream import render_events
    >>> from mdstream.events import End, Link, Start, Text
    >>> render_events([Start(Link("a&b")), Text("click"), End(Link("a&b"))])
    '<a href="a&amp;b">click</a>'

See Also
--------
mdstream.events : Event and tag definitions
mdstream.renderers.html : The HTML renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdstream requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdstream import events
from mdstream.api import render, render_events
from mdstream.exceptions import (
    DependencyError,
    FileError,
    InvalidOptionsError,
    MdStreamError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from mdstream.options import HtmlRendererOptions
from mdstream.parsers.markdown import MarkdownEventParser, markdown_to_events
from mdstream.renderers.html import HtmlRenderer
from mdstream.utils.escape import escape_html

__all__ = [
    "__version__",
    "events",
    "render",
    "render_events",
    "escape_html",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "MarkdownEventParser",
    "markdown_to_events",
    "MdStreamError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
