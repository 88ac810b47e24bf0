#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/renderers/html.py
"""HTML rendering from an event stream.

This module provides the HtmlRenderer class, a single forward pass over the
event stream that writes an HTML fragment (no ``<html>``/``<head>``/``<body>``
wrapper). Block-level closing tags are newline-terminated, inline ones are
not. Text-like payloads are escaped; raw HTML events are written verbatim.

Two constructs are deferred:

- Links. ``<a href="`` is written when the link opens, and the content that
  follows is captured until the link closes. The escaped destination is then
  written as the attribute value, followed by the captured content and
  ``</a>``.
- Images. While an image is pending, every event is routed to the image
  handler instead of the normal dispatch: text and code contribute to the alt
  text, breaks contribute a space, everything else is dropped. The ``<img>``
  tag is written in one piece when the image closes.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from mdstream.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from mdstream.events import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Emphasis,
    End,
    Event,
    FootnoteDefinition,
    FootnoteRef,
    HardBreak,
    Heading,
    HorizontalRule,
    Image,
    Link,
    List,
    ListItem,
    MathSpan,
    Paragraph,
    RawHtml,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    TaskMarker,
    Text,
)
from mdstream.exceptions import RenderingError
from mdstream.options import HtmlRendererOptions
from mdstream.renderers.base import BaseRenderer
from mdstream.utils.escape import escape_html

logger = logging.getLogger(__name__)

# Tags that map to a single element with no attributes.
# Block elements get a newline after the closing tag.
_BLOCK_ELEMENTS: dict[type, str] = {
    Paragraph: "p",
    BlockQuote: "blockquote",
    ListItem: "li",
    Table: "table",
    TableRow: "tr",
}
_INLINE_ELEMENTS: dict[type, str] = {
    Emphasis: "em",
    Strong: "strong",
    Strikethrough: "del",
    TableHead: "thead",
    TableCell: "td",
}


@dataclass
class _PendingLink:
    dest_url: str
    outer_output: list[str]


@dataclass
class _PendingImage:
    dest_url: str
    alt: list[str] = field(default_factory=list)


class HtmlRenderer(BaseRenderer):
    """Render an event stream to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from mdstream.events import End, Paragraph, Start, Text
        >>> HtmlRenderer().render_events([Start(Paragraph()), Text("a < b"), End(Paragraph())])
        '<p>a &lt; b</p>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._reset()

    def _reset(self) -> None:
        self._output: list[str] = []
        self._in_code_block = False
        self._pending_link: Optional[_PendingLink] = None
        self._pending_image: Optional[_PendingImage] = None
        self._list_elements: list[str] = []

    def render_events(self, events: Iterable[Event]) -> str:
        """Render an event stream to HTML.

        Never fails for a stream the event source can produce. Malformed
        streams degrade to best-effort output: unmatched closers are ignored,
        and an image that is never closed swallows the rest of the stream.

        Parameters
        ----------
        events : Iterable[Event]
            Events in document order; consumed exactly once

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        RenderingError
            If an item of the stream is not an event

        """
        self._reset()
        event_count = 0

        for event in events:
            event_count += 1
            if self._pending_image is not None:
                self._handle_pending_image(event)
                continue
            self._dispatch(event)

        if self._pending_image is not None:
            logger.debug(f"Event stream ended inside an image ({self._pending_image.dest_url!r}); image dropped")
            self._pending_image = None
        if self._pending_link is not None:
            logger.debug(f"Event stream ended inside a link ({self._pending_link.dest_url!r}); closing it")
            self._close_link()
        if self._in_code_block:
            logger.debug("Event stream ended inside a code block")

        logger.debug(f"Rendered {event_count} events")
        return "".join(self._output)

    def _dispatch(self, event: Event) -> None:
        if isinstance(event, Start):
            self._start_tag(event.tag)
        elif isinstance(event, End):
            self._end_tag(event.tag)
        elif isinstance(event, Text):
            # Code block content shares this path
            self._output.append(escape_html(event.text))
        elif isinstance(event, CodeSpan):
            self._output.append(f"<code>{escape_html(event.text)}</code>")
        elif isinstance(event, RawHtml):
            self._output.append(event.html)
        elif isinstance(event, SoftBreak):
            self._output.append(" ")
        elif isinstance(event, HardBreak):
            self._output.append("<br>\n")
        elif isinstance(event, HorizontalRule):
            self._output.append("<hr>\n")
        elif isinstance(event, TaskMarker):
            checked = " checked" if event.done else ""
            self._output.append(f'<input type="checkbox"{checked} disabled> ')
        elif isinstance(event, FootnoteRef):
            name = escape_html(event.name)
            self._output.append(f'<a href="#fn-{name}">[^{name}]</a>')
        elif isinstance(event, MathSpan):
            delimiter = self.options.display_math_delimiter if event.kind == "display" else "$"
            self._output.append(f"{delimiter}{escape_html(event.text)}{delimiter}")
        else:
            raise RenderingError(f"Cannot render {event!r}: not an event", rendering_stage="dispatch")

    def _start_tag(self, tag: Tag) -> None:
        element = _BLOCK_ELEMENTS.get(type(tag)) or _INLINE_ELEMENTS.get(type(tag))
        if element is not None:
            self._output.append(f"<{element}>")
        elif isinstance(tag, Heading):
            self._output.append(f"<h{_heading_level(tag)}>")
        elif isinstance(tag, CodeBlock):
            self._in_code_block = True
            self._output.append(self._code_block_open(tag))
        elif isinstance(tag, List):
            self._output.append(self._list_open(tag))
        elif isinstance(tag, Link):
            self._open_link(tag)
        elif isinstance(tag, Image):
            self._pending_image = _PendingImage(dest_url=tag.dest_url)
        elif isinstance(tag, FootnoteDefinition):
            self._output.append(f'<div id="fn-{escape_html(tag.name)}">')
        else:
            raise RenderingError(f"Cannot render start of {tag!r}: not a tag", rendering_stage="start")

    def _end_tag(self, tag: Tag) -> None:
        if type(tag) in _BLOCK_ELEMENTS:
            self._output.append(f"</{_BLOCK_ELEMENTS[type(tag)]}>\n")
        elif type(tag) in _INLINE_ELEMENTS:
            self._output.append(f"</{_INLINE_ELEMENTS[type(tag)]}>")
        elif isinstance(tag, Heading):
            self._output.append(f"</h{_heading_level(tag)}>\n")
        elif isinstance(tag, CodeBlock):
            self._in_code_block = False
            self._output.append("</code></pre>\n")
        elif isinstance(tag, List):
            element = self._list_elements.pop() if self._list_elements else "ul"
            self._output.append(f"</{element}>\n")
        elif isinstance(tag, Link):
            if self._pending_link is None:
                logger.debug("Ignoring link end without an open link")
                return
            self._close_link()
        elif isinstance(tag, Image):
            # Image ends are consumed by _handle_pending_image
            logger.debug("Ignoring image end without an open image")
        elif isinstance(tag, FootnoteDefinition):
            self._output.append("</div>\n")
        else:
            raise RenderingError(f"Cannot render end of {tag!r}: not a tag", rendering_stage="end")

    def _code_block_open(self, tag: CodeBlock) -> str:
        language = tag.info.strip() if tag.kind == "fenced" else ""
        if not language:
            return "<pre><code>"
        return f'<pre><code class="language-{escape_html(language)}">'

    def _list_open(self, tag: List) -> str:
        if self.options.ordered_lists and tag.ordered:
            self._list_elements.append("ol")
            return "<ol>" if tag.start == 1 else f'<ol start="{tag.start}">'
        self._list_elements.append("ul")
        return "<ul>"

    def _open_link(self, tag: Link) -> None:
        if self._pending_link is not None:
            logger.debug("Link opened inside a link; closing the outer link first")
            self._close_link()
        self._output.append('<a href="')
        self._pending_link = _PendingLink(dest_url=tag.dest_url, outer_output=self._output)
        self._output = []

    def _close_link(self) -> None:
        """Write the destination and the captured content, then ``</a>``."""
        assert self._pending_link is not None
        link = self._pending_link
        self._pending_link = None
        content = "".join(self._output)
        self._output = link.outer_output
        self._output.append(f'{escape_html(link.dest_url)}">{content}</a>')

    def _handle_pending_image(self, event: Event) -> None:
        image = self._pending_image
        assert image is not None

        if isinstance(event, End) and isinstance(event.tag, Image):
            self._pending_image = None
            alt = "".join(image.alt)
            self._output.append(f'<img src="{escape_html(image.dest_url)}" alt="{escape_html(alt)}" />')
        elif isinstance(event, (Text, CodeSpan)):
            # Escaped once, when the tag is written
            image.alt.append(event.text)
        elif isinstance(event, (SoftBreak, HardBreak)):
            image.alt.append(" ")
        else:
            logger.debug(f"Dropping {type(event).__name__} inside image alt text")


def _heading_level(tag: Heading) -> int:
    return min(max(tag.level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)
