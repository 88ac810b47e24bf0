#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdstream library.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Markdown Parsing - The fixed markdown extension set
3. Renderer Defaults - Default values for HtmlRendererOptions
4. Dependencies - Package requirements checked at call time
5. Environment - Environment variable names read by the CLI
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

CodeBlockKind = Literal["fenced", "indented"]
MathKind = Literal["inline", "display"]
MathDelimiter = Literal["$", "$$"]

# =============================================================================
# Markdown Parsing
# =============================================================================

# mistune plugin names, enabled for every parse. Not runtime configurable.
ENABLE_STRIKETHROUGH = "strikethrough"
ENABLE_TABLES = "table"
ENABLE_FOOTNOTES = "footnotes"
ENABLE_TASKLISTS = "task_lists"
ENABLE_MATH = "math"

ENABLED_EXTENSIONS: tuple[str, ...] = (
    ENABLE_STRIKETHROUGH,
    ENABLE_TABLES,
    ENABLE_FOOTNOTES,
    ENABLE_TASKLISTS,
    ENABLE_MATH,
)

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_ORDERED_LISTS = False
DEFAULT_DISPLAY_MATH_DELIMITER: MathDelimiter = "$"
MATH_DELIMITERS: tuple[str, ...] = ("$", "$$")

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Environment
# =============================================================================

ENV_LOG_LEVEL = "MDSTREAM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
