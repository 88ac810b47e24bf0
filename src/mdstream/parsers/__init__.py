#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/parsers/__init__.py
"""Event sources: adapters from third-party markup parsers to the event stream."""

from mdstream.parsers.base import BaseParser
from mdstream.parsers.markdown import MarkdownEventParser, markdown_to_events

__all__ = ["BaseParser", "MarkdownEventParser", "markdown_to_events"]
