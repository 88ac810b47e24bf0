#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/__init__.py
"""Utility modules for the mdstream package.

This package contains HTML escaping, input decoding and dependency checking
helpers shared by the event source, the renderer and the CLI.
"""

from mdstream.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection
from mdstream.utils.escape import escape_html

__all__ = [
    "escape_html",
    "normalize_stream_to_text",
    "read_text_with_encoding_detection",
]
