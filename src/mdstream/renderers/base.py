#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/renderers/base.py
"""Base class for event stream renderers."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Iterable, Union, cast

from mdstream.events import Event
from mdstream.exceptions import InvalidOptionsError, OutputWriteError
from mdstream.options import CloneFrozenMixin


class BaseRenderer(ABC):
    """Abstract base class for renderers that consume an event stream.

    Parameters
    ----------
    options : CloneFrozenMixin or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: CloneFrozenMixin | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_events(self, events: Iterable[Event]) -> str:
        """Render an event stream to a string.

        Parameters
        ----------
        events : Iterable[Event]
            Events in document order; consumed exactly once

        Returns
        -------
        str
            Rendered output

        """

    def render(self, events: Iterable[Event], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render an event stream and write the result to output.

        Parameters
        ----------
        events : Iterable[Event]
            Events in document order
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_events(events), output)

    @staticmethod
    def _validate_options_type(options: object | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Binary streams receive UTF-8 encoded bytes; text streams and files
        receive the string.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If a file path cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hi</p>\\n", buffer)
            >>> buffer.getvalue()
            '<p>Hi</p>\\n'

        """
        if isinstance(output, (str, Path)):
            output_path = Path(output)
            try:
                output_path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(
                    f"Could not write output to {output_path}: {e}", output_path=str(output_path), original_error=e
                ) from e
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output)}")

        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(text.encode("utf-8"))
        else:
            cast(IO[str], output).write(text)
