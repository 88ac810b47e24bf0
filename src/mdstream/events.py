#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/events.py
"""Event stream data model.

A markdown document reaches the renderer as a flat, ordered sequence of
events. Container constructs (paragraphs, lists, links, ...) appear as a
``Start`` event, the events for their content, and an ``End`` event carrying
the same tag. Leaf content (text, code spans, raw HTML, breaks, ...) appears
as a single event.

Both sets are closed: ``Tag`` and ``Event`` are unions of frozen dataclasses,
and consumers dispatch on the concrete class. Events compare by value, so a
stream can be written out literally in tests::

    >>> from mdstream.events import End, Paragraph, Start, Text
    >>> [Start(Paragraph()), Text("hi"), End(Paragraph())]
    [Start(tag=Paragraph()), Text(text='hi'), End(tag=Paragraph())]

Tags
----
Paragraph, Heading, BlockQuote, CodeBlock, List, ListItem, Emphasis, Strong,
Strikethrough, Link, Image, Table, TableHead, TableRow, TableCell,
FootnoteDefinition

Events
------
Start, End, Text, CodeSpan, RawHtml, SoftBreak, HardBreak, HorizontalRule,
TaskMarker, FootnoteRef, MathSpan

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, get_args

from mdstream.constants import CodeBlockKind, MathKind

# =============================================================================
# Tags
# =============================================================================


@dataclass(frozen=True)
class Paragraph:
    """Paragraph of inline content."""


@dataclass(frozen=True)
class Heading:
    """Section heading.

    Parameters
    ----------
    level : int, default = 1
        Heading level, 1 through 6

    """

    level: int = 1


@dataclass(frozen=True)
class BlockQuote:
    """Block quotation."""


@dataclass(frozen=True)
class CodeBlock:
    """Preformatted code block.

    Parameters
    ----------
    kind : {"fenced", "indented"}, default = "fenced"
        Syntactic form of the block in the source
    info : str, default = ""
        Fence info string, used whole as the language tag. Always empty
        for indented blocks.

    """

    kind: CodeBlockKind = "fenced"
    info: str = ""


@dataclass(frozen=True)
class List:
    """Bulleted or numbered list.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the source used numbered items
    start : int, default = 1
        First item number of an ordered list

    """

    ordered: bool = False
    start: int = 1


@dataclass(frozen=True)
class ListItem:
    """Single list item."""


@dataclass(frozen=True)
class Emphasis:
    """Emphasized inline content."""


@dataclass(frozen=True)
class Strong:
    """Strongly emphasized inline content."""


@dataclass(frozen=True)
class Strikethrough:
    """Struck-through inline content."""


@dataclass(frozen=True)
class Link:
    """Hyperlink around inline content.

    Parameters
    ----------
    dest_url : str, default = ""
        Raw, unescaped link destination
    title : str, default = ""
        Link title, if any

    """

    dest_url: str = ""
    title: str = ""


@dataclass(frozen=True)
class Image:
    """Image whose alt text is the enclosed inline content.

    Parameters
    ----------
    dest_url : str, default = ""
        Raw, unescaped image source
    title : str, default = ""
        Image title, if any

    """

    dest_url: str = ""
    title: str = ""


@dataclass(frozen=True)
class Table:
    """Table."""


@dataclass(frozen=True)
class TableHead:
    """Header row of a table; contains cells directly."""


@dataclass(frozen=True)
class TableRow:
    """Body row of a table."""


@dataclass(frozen=True)
class TableCell:
    """Table cell, in the head or in a body row."""


@dataclass(frozen=True)
class FootnoteDefinition:
    """Footnote body.

    Parameters
    ----------
    name : str, default = ""
        Footnote label, as used by FootnoteRef

    """

    name: str = ""


Tag = Union[
    Paragraph,
    Heading,
    BlockQuote,
    CodeBlock,
    List,
    ListItem,
    Emphasis,
    Strong,
    Strikethrough,
    Link,
    Image,
    Table,
    TableHead,
    TableRow,
    TableCell,
    FootnoteDefinition,
]

# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class Start:
    """Opening of a container construct."""

    tag: Tag


@dataclass(frozen=True)
class End:
    """Closing of the most recently opened container with a matching tag."""

    tag: Tag


@dataclass(frozen=True)
class Text:
    """Literal text. Also carries the content of code blocks."""

    text: str


@dataclass(frozen=True)
class CodeSpan:
    """Inline code."""

    text: str


@dataclass(frozen=True)
class RawHtml:
    """HTML embedded in the source, passed through verbatim.

    Parameters
    ----------
    html : str
        Raw markup
    inline : bool, default = False
        True for inline HTML, False for an HTML block

    """

    html: str
    inline: bool = False


@dataclass(frozen=True)
class SoftBreak:
    """Line ending inside a paragraph."""


@dataclass(frozen=True)
class HardBreak:
    """Explicit line break."""


@dataclass(frozen=True)
class HorizontalRule:
    """Thematic break."""


@dataclass(frozen=True)
class TaskMarker:
    """Checkbox at the start of a task list item."""

    done: bool = False


@dataclass(frozen=True)
class FootnoteRef:
    """Reference to a footnote definition."""

    name: str


@dataclass(frozen=True)
class MathSpan:
    """TeX math, inline or on its own line."""

    text: str
    kind: MathKind = "inline"


Event = Union[
    Start,
    End,
    Text,
    CodeSpan,
    RawHtml,
    SoftBreak,
    HardBreak,
    HorizontalRule,
    TaskMarker,
    FootnoteRef,
    MathSpan,
]

TAG_TYPES: tuple[type, ...] = get_args(Tag)
EVENT_TYPES: tuple[type, ...] = get_args(Event)

__all__ = [
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "EVENT_TYPES",
    "Emphasis",
    "End",
    "Event",
    "FootnoteDefinition",
    "FootnoteRef",
    "HardBreak",
    "Heading",
    "HorizontalRule",
    "Image",
    "Link",
    "List",
    "ListItem",
    "MathSpan",
    "Paragraph",
    "RawHtml",
    "SoftBreak",
    "Start",
    "Strikethrough",
    "Strong",
    "TAG_TYPES",
    "Table",
    "TableCell",
    "TableHead",
    "TableRow",
    "Tag",
    "TaskMarker",
    "Text",
]
