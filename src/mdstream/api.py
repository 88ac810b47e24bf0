"""The exported API functions for rendering markdown to HTML."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdstream/api.py
import logging
from typing import Iterable, Optional

from mdstream.events import Event
from mdstream.options import HtmlRendererOptions
from mdstream.parsers.base import ParserInput
from mdstream.parsers.markdown import MarkdownEventParser
from mdstream.renderers.html import HtmlRenderer
from mdstream.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def render(markup_text: ParserInput, options: Optional[HtmlRendererOptions] = None) -> str:
    """Render markdown to an HTML fragment.

    Tables, footnotes, strikethrough, task lists and math are always
    enabled. Embedded HTML is passed through verbatim, so the output is only
    as safe as the input.

    Parameters
    ----------
    markup_text : str, Path, IO[bytes], IO[str], or bytes
        Markdown text. A str is always treated as markdown, never as a path.
    options : HtmlRendererOptions, optional
        Rendering options. None means HtmlRendererOptions().

    Returns
    -------
    str
        HTML fragment; block-level elements are newline-terminated

    Raises
    ------
    DependencyError
        If mistune is not installed
    InvalidOptionsError
        If options is not an HtmlRendererOptions instance

    Examples
    --------
        >>> render("# Hello\\n\\nThis is **bold** text.")
        '<h1>Hello</h1>\\n<p>This is <strong>bold</strong> text.</p>\\n'

    """
    renderer = HtmlRenderer(options)
    with debug_timer(logger, "Rendering (markdown -> html)"):
        events = MarkdownEventParser().parse(markup_text)
        return renderer.render_events(events)


def render_events(events: Iterable[Event], options: Optional[HtmlRendererOptions] = None) -> str:
    """Render an event stream from any event source to an HTML fragment.

    Parameters
    ----------
    events : Iterable[Event]
        Events in document order; consumed exactly once
    options : HtmlRendererOptions, optional
        Rendering options

    Returns
    -------
    str
        HTML fragment

    Examples
    --------
        >>> from mdstream.events import End, Image, Start, Text
        >>> render_events([Start(Image("x.png")), Text("a"), End(Image())])
        '<img src="x.png" alt="a" />'

    """
    return HtmlRenderer(options).render_events(events)
