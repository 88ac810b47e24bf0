#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/encoding.py
"""Decoding of markdown that arrives as bytes.

Order of attempts: a byte order mark, chardet detection, the fallback
encodings, and finally UTF-8 with replacement characters. Decoding never
fails.
"""

from __future__ import annotations

import codecs
import logging
from typing import IO, Iterator, Optional

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]

# Longest marks first: the UTF-32-LE mark starts with the UTF-16-LE one
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> Optional[str]:
    """Guess the encoding of data with chardet.

    Parameters
    ----------
    data : bytes
        Raw input
    sample_size : int, default 8192
        Only the first sample_size bytes are inspected
    confidence_threshold : float, default 0.7
        Guesses below this confidence are discarded

    Returns
    -------
    str or None
        Encoding name, or None when chardet has no confident guess

    """
    guess = chardet.detect(data[:sample_size]) or {}
    encoding = guess.get("encoding")
    confidence = guess.get("confidence") or 0.0

    if not encoding:
        logger.debug("chardet found no encoding")
        return None
    if confidence < confidence_threshold:
        logger.debug(f"Ignoring chardet guess {encoding} (confidence {confidence:.2f} < {confidence_threshold})")
        return None
    return encoding


def _bom_encoding(data: bytes) -> Optional[str]:
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    return None


def _candidate_encodings(data: bytes, fallback_encodings: list[str], use_chardet: bool) -> Iterator[str]:
    bom_encoding = _bom_encoding(data)
    if bom_encoding:
        yield bom_encoding
    if use_chardet:
        detected = detect_encoding(data)
        if detected:
            yield detected
    yield from fallback_encodings


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: Optional[list[str]] = None,
    use_chardet: bool = True,
) -> str:
    """Decode bytes to text, trying each candidate encoding in turn.

    Parameters
    ----------
    data : bytes
        Raw input
    fallback_encodings : list of str, optional
        Encodings tried after detection. Defaults to utf-8, utf-8-sig,
        latin-1.
    use_chardet : bool, default True
        Whether to ask chardet before the fallbacks

    Returns
    -------
    str
        Decoded text

    Examples
    --------
    >>> read_text_with_encoding_detection("caf\\u00e9".encode("utf-8"), use_chardet=False)
    'café'

    """
    if not data:
        return ""

    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    for encoding in _candidate_encodings(data, fallback_encodings, use_chardet):
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Decoding as {encoding} failed: {e}")
            continue
        logger.debug(f"Decoded input as {encoding}")
        return text

    logger.warning("Could not determine input encoding; decoding as utf-8 with replacement characters")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream to the end and return its text.

    Raises
    ------
    TypeError
        If ``stream.read()`` returns neither bytes nor str

    """
    content = stream.read()
    if isinstance(content, str):
        return content
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    raise TypeError(f"Stream read() returned {type(content).__name__}, expected bytes or str")
