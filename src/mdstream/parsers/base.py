#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/parsers/base.py
"""Base class for event sources.

An event source turns markup into the flat event stream consumed by the
renderer. Parsing itself is delegated to a third-party library; subclasses
only adapt its output to ``mdstream.events``.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterator, Union

from mdstream.events import Event
from mdstream.exceptions import FileNotFoundError
from mdstream.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for event sources.

    Notes
    -----
    ``parse`` accepts:
    - str: markup text (never interpreted as a file path)
    - Path: file to read
    - bytes: raw markup, decoded with encoding detection
    - IO[bytes] or IO[str]: stream read to the end

    """

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Iterator[Event]:
        """Parse the input into an event stream.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markup to parse

        Returns
        -------
        Iterator[Event]
            Lazy, single-use iterator over the document's events

        """

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markup text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Input data to load

        Returns
        -------
        str
            Markup text

        Raises
        ------
        FileNotFoundError
            If a Path is given that does not point to a file

        """
        if isinstance(input_data, str):
            return input_data
        elif isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            if not input_data.is_file():
                raise FileNotFoundError(str(input_data))
            logger.debug(f"Reading markup from {input_data}")
            return read_text_with_encoding_detection(input_data.read_bytes())
        return normalize_stream_to_text(input_data)
