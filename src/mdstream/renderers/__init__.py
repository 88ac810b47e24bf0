#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/renderers/__init__.py
"""Renderers that turn an event stream into output text."""

from mdstream.renderers.base import BaseRenderer
from mdstream.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer"]
