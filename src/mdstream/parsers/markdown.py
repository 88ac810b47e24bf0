#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/parsers/markdown.py
"""Markdown to event stream adapter.

Markdown is parsed by mistune with a fixed set of extensions (tables,
footnotes, strikethrough, task lists, math). mistune produces a token tree;
this module walks it depth-first and yields the flat event stream the
renderer consumes: a ``Start`` event, the events for the token's children,
then the matching ``End`` event for every container token, and a single
event for every leaf token.

"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Callable, Iterator

from mdstream.constants import DEPS_MARKDOWN, ENABLED_EXTENSIONS, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
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
from mdstream.parsers.base import BaseParser, ParserInput
from mdstream.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

Token = dict[str, Any]

# Tokens that carry no content
_SKIPPED_TOKENS = frozenset({"blank_line"})

# Tokens whose children are inline content
_INLINE_CONTAINERS = frozenset(
    {
        "heading",
        "paragraph",
        "block_text",
        "table_cell",
        "emphasis",
        "strong",
        "strikethrough",
        "link",
        "image",
    }
)

# Same label syntax mistune accepts for footnote references and definitions
_FOOTNOTE_LABEL = re.compile(r"\[\^((?:[^\\\[\]\s]|\\.){1,500})\]")


class MarkdownEventParser(BaseParser):
    r"""Convert Markdown to an event stream.

    Examples
    --------
        >>> parser = MarkdownEventParser()
        >>> list(parser.parse("# Hi"))
        [Start(tag=Heading(level=1)), Text(text='Hi'), End(tag=Heading(level=1))]

    """

    def __init__(self) -> None:
        """Initialize the parser and its token dispatch table."""
        self._handlers: dict[str, Callable[[Token], Iterator[Event]]] = {
            # Block-level tokens
            "heading": self._handle_heading,
            "paragraph": self._handle_paragraph,
            "block_text": self._handle_transparent,
            "block_code": self._handle_block_code,
            "block_quote": self._handle_block_quote,
            "list": self._handle_list,
            "list_item": self._handle_list_item,
            "task_list_item": self._handle_task_list_item,
            "table": self._handle_table,
            "table_head": self._handle_table_head,
            "table_body": self._handle_transparent,
            "table_row": self._handle_table_row,
            "table_cell": self._handle_table_cell,
            "thematic_break": self._handle_thematic_break,
            "block_html": self._handle_block_html,
            "block_math": self._handle_block_math,
            "footnotes": self._handle_transparent,
            "footnote_item": self._handle_footnote_item,
            # Inline tokens
            "text": self._handle_text,
            "codespan": self._handle_codespan,
            "emphasis": self._handle_emphasis,
            "strong": self._handle_strong,
            "strikethrough": self._handle_strikethrough,
            "link": self._handle_link,
            "image": self._handle_image,
            "softbreak": self._handle_softbreak,
            "linebreak": self._handle_linebreak,
            "inline_html": self._handle_inline_html,
            "inline_math": self._handle_inline_math,
            "footnote_ref": self._handle_footnote_ref,
        }
        # mistune also emits ``block_math`` for ``$$...$$`` inside a paragraph
        self._inline_handlers: dict[str, Callable[[Token], Iterator[Event]]] = {
            "block_math": self._handle_display_math,
        }

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Iterator[Event]:
        """Parse Markdown input into an event stream.

        mistune builds the whole token tree up front; the returned iterator
        walks it lazily and can be consumed once.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input to parse

        Returns
        -------
        Iterator[Event]
            Events in document order

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        markdown = mistune.create_markdown(plugins=list(ENABLED_EXTENSIONS), renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            logger.debug(f"mistune returned {type(tokens).__name__} instead of a token list")
            tokens = []

        _restore_footnote_labels(tokens, _footnote_labels(markdown_content, mistune.unikey))

        return self._iter_tokens(tokens)

    def _iter_tokens(self, tokens: list[Token], inline: bool = False) -> Iterator[Event]:
        for token in tokens:
            if isinstance(token, dict):
                yield from self._iter_token(token, inline)

    def _iter_children(self, token: Token) -> Iterator[Event]:
        return self._iter_tokens(_children(token), inline=token.get("type") in _INLINE_CONTAINERS)

    def _iter_token(self, token: Token, inline: bool = False) -> Iterator[Event]:
        token_type = token.get("type", "")

        handler = self._inline_handlers.get(token_type) if inline else None
        if handler is None:
            handler = self._handlers.get(token_type)
        if handler is not None:
            yield from handler(token)
            return

        if token_type in _SKIPPED_TOKENS:
            return

        # Keep any text nested under a token type we do not know
        logger.debug(f"Unhandled mistune token type: {token_type!r}")
        yield from self._iter_children(token)

    def _wrap(self, tag: Tag, token: Token) -> Iterator[Event]:
        yield Start(tag)
        yield from self._iter_children(token)
        yield End(tag)

    def _handle_transparent(self, token: Token) -> Iterator[Event]:
        """Emit only the children; used where the token has no tag of its own."""
        return self._iter_children(token)

    def _handle_heading(self, token: Token) -> Iterator[Event]:
        level = _attrs(token).get("level", MIN_HEADING_LEVEL)
        if not isinstance(level, int) or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
            logger.debug(f"Heading level {level!r} out of range, using {MIN_HEADING_LEVEL}")
            level = MIN_HEADING_LEVEL
        return self._wrap(Heading(level=level), token)

    def _handle_paragraph(self, token: Token) -> Iterator[Event]:
        return self._wrap(Paragraph(), token)

    def _handle_block_code(self, token: Token) -> Iterator[Event]:
        if token.get("style") == "indent":
            tag = CodeBlock(kind="indented")
        else:
            info = _attrs(token).get("info") or ""
            tag = CodeBlock(kind="fenced", info=str(info))

        yield Start(tag)
        code = token.get("raw", "")
        # mistune strips the final newline from indented code only
        if code and tag.kind == "indented" and not code.endswith("\n"):
            code += "\n"
        if code:
            yield Text(code)
        yield End(tag)

    def _handle_block_quote(self, token: Token) -> Iterator[Event]:
        return self._wrap(BlockQuote(), token)

    def _handle_list(self, token: Token) -> Iterator[Event]:
        attrs = _attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        if not isinstance(start, int):
            start = 1
        return self._wrap(List(ordered=ordered, start=start), token)

    def _handle_list_item(self, token: Token) -> Iterator[Event]:
        return self._wrap(ListItem(), token)

    def _handle_task_list_item(self, token: Token) -> Iterator[Event]:
        tag = ListItem()
        yield Start(tag)
        yield TaskMarker(done=bool(_attrs(token).get("checked", False)))
        yield from self._iter_children(token)
        yield End(tag)

    def _handle_table(self, token: Token) -> Iterator[Event]:
        return self._wrap(Table(), token)

    def _handle_table_head(self, token: Token) -> Iterator[Event]:
        return self._wrap(TableHead(), token)

    def _handle_table_row(self, token: Token) -> Iterator[Event]:
        return self._wrap(TableRow(), token)

    def _handle_table_cell(self, token: Token) -> Iterator[Event]:
        return self._wrap(TableCell(), token)

    def _handle_thematic_break(self, token: Token) -> Iterator[Event]:
        yield HorizontalRule()

    def _handle_block_html(self, token: Token) -> Iterator[Event]:
        yield RawHtml(token.get("raw", ""), inline=False)

    def _handle_block_math(self, token: Token) -> Iterator[Event]:
        """A display formula on lines of its own becomes a paragraph."""
        yield Start(Paragraph())
        yield from self._handle_display_math(token)
        yield End(Paragraph())

    def _handle_display_math(self, token: Token) -> Iterator[Event]:
        yield MathSpan(token.get("raw", ""), kind="display")

    def _handle_footnote_item(self, token: Token) -> Iterator[Event]:
        attrs = _attrs(token)
        name = attrs.get("key") or attrs.get("label") or ""
        return self._wrap(FootnoteDefinition(name=str(name)), token)

    def _handle_text(self, token: Token) -> Iterator[Event]:
        # mistune keeps character references as written; the renderer escapes once
        text = html.unescape(token.get("raw", ""))
        if text:
            yield Text(text)

    def _handle_codespan(self, token: Token) -> Iterator[Event]:
        yield CodeSpan(token.get("raw", ""))

    def _handle_emphasis(self, token: Token) -> Iterator[Event]:
        return self._wrap(Emphasis(), token)

    def _handle_strong(self, token: Token) -> Iterator[Event]:
        return self._wrap(Strong(), token)

    def _handle_strikethrough(self, token: Token) -> Iterator[Event]:
        return self._wrap(Strikethrough(), token)

    def _handle_link(self, token: Token) -> Iterator[Event]:
        attrs = _attrs(token)
        tag = Link(dest_url=str(attrs.get("url", "")), title=str(attrs.get("title") or ""))
        return self._wrap(tag, token)

    def _handle_image(self, token: Token) -> Iterator[Event]:
        attrs = _attrs(token)
        tag = Image(dest_url=str(attrs.get("url", "")), title=str(attrs.get("title") or ""))
        return self._wrap(tag, token)

    def _handle_softbreak(self, token: Token) -> Iterator[Event]:
        yield SoftBreak()

    def _handle_linebreak(self, token: Token) -> Iterator[Event]:
        yield HardBreak()

    def _handle_inline_html(self, token: Token) -> Iterator[Event]:
        yield RawHtml(token.get("raw", ""), inline=True)

    def _handle_inline_math(self, token: Token) -> Iterator[Event]:
        yield MathSpan(token.get("raw", ""), kind="inline")

    def _handle_footnote_ref(self, token: Token) -> Iterator[Event]:
        name = token.get("raw") or _attrs(token).get("label") or ""
        yield FootnoteRef(name=str(name))


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def _children(token: Token) -> list[Token]:
    children = token.get("children")
    return children if isinstance(children, list) else []


def _footnote_labels(markdown_content: str, unikey: Callable[[str], str]) -> dict[str, str]:
    """Map mistune's normalized footnote keys back to the labels as written.

    The first spelling of a label in the source wins.
    """
    labels: dict[str, str] = {}
    for match in _FOOTNOTE_LABEL.finditer(markdown_content):
        labels.setdefault(unikey(match.group(1)), match.group(1))
    return labels


def _restore_footnote_labels(tokens: list[Token], labels: dict[str, str]) -> None:
    """Replace upper-cased footnote keys in the token tree, in place."""
    if not labels:
        return
    for token in tokens:
        if not isinstance(token, dict):
            continue
        token_type = token.get("type")
        if token_type == "footnote_ref":
            raw = token.get("raw")
            if isinstance(raw, str):
                token["raw"] = labels.get(raw, raw)
        elif token_type == "footnote_item":
            attrs = _attrs(token)
            key = attrs.get("key")
            if isinstance(key, str):
                attrs["key"] = labels.get(key, key)
        _restore_footnote_labels(_children(token), labels)


def markdown_to_events(markdown_content: ParserInput) -> Iterator[Event]:
    r"""Convert Markdown to an event stream.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str, Path, IO[bytes], IO[str], or bytes
        Markdown to parse

    Returns
    -------
    Iterator[Event]
        Events in document order

    Examples
    --------
    >>> from mdstream.parsers.markdown import markdown_to_events
    >>> events = list(markdown_to_events("Hello\\n\\nWorld"))
    >>> len(events)
    6

    """
    return MarkdownEventParser().parse(markdown_content)
