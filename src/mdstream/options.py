#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy. Passing ``None`` to a renderer is the same as passing
``HtmlRendererOptions()``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdstream.constants import (
    DEFAULT_DISPLAY_MATH_DELIMITER,
    DEFAULT_ORDERED_LISTS,
    MATH_DELIMITERS,
    MathDelimiter,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class HtmlRendererOptions(CloneFrozenMixin):
    """Configuration options for rendering an event stream to HTML.

    Parameters
    ----------
    ordered_lists : bool, default False
        Render ordered lists as ``<ol>`` (with a ``start`` attribute when the
        first number is not 1). By default every list renders as ``<ul>``.
    display_math_delimiter : {"$", "$$"}, default "$"
        Delimiter wrapped around display math. Inline math always uses "$".

    Examples
    --------
        >>> options = HtmlRendererOptions(ordered_lists=True)
        >>> options.create_updated(display_math_delimiter="$$").display_math_delimiter
        '$$'

    """

    ordered_lists: bool = field(
        default=DEFAULT_ORDERED_LISTS,
        metadata={"help": "Render ordered lists as <ol> instead of <ul>", "importance": "core"},
    )
    display_math_delimiter: MathDelimiter = field(
        default=DEFAULT_DISPLAY_MATH_DELIMITER,
        metadata={
            "help": "Delimiter wrapped around display math ('$' or '$$')",
            "choices": list(MATH_DELIMITERS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.display_math_delimiter not in MATH_DELIMITERS:
            raise ValueError(
                f"display_math_delimiter must be one of {list(MATH_DELIMITERS)}, got {self.display_math_delimiter!r}"
            )
