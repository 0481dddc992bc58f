"""base1024: Binary-to-Emoji Transcoder

A Python library for base-1024 encoding: arbitrary bytes are carried as a
string of emoji, 10 bits per symbol, and restored exactly. Designed for
passing keys, hashes and short blobs through text-only channels.

Key Features:
- 5 bytes become 4 symbols; a trailing 1-4 byte group ends with one of
  four padding symbols tagged with its length
- Strict decoding with typed errors for every malformed input
- Streaming helpers for large inputs in bounded memory
- Command-line tool (``base1024``)

Quick Start:
    >>> from base1024 import decode, encode
    >>>
    >>> text = encode(b"input data")
    >>> len(text)
    8
    >>> decode(text)
    b'input data'
"""

from __future__ import annotations

from .codec import DEFAULT_ALPHABET, AlphabetTable, PaddingTag, decode, encode, iter_decode
from .config import TranscodeOptions
from .exceptions import (
    AlphabetError,
    Base1024Error,
    DecodeError,
    InvalidSymbolError,
    NonZeroPadBitsError,
    TrailingDataError,
    TruncatedInputError,
    UnexpectedPaddingError,
)
from .stream import decode_io, decode_stream, decode_text, encode_io, encode_stream, encode_text
from .utils import decoded_length, encoded_length

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "iter_decode",
    # Alphabet
    "AlphabetTable",
    "PaddingTag",
    "DEFAULT_ALPHABET",
    # Streaming and text
    "encode_stream",
    "decode_stream",
    "encode_io",
    "decode_io",
    "encode_text",
    "decode_text",
    "TranscodeOptions",
    # Exceptions
    "Base1024Error",
    "AlphabetError",
    "DecodeError",
    "InvalidSymbolError",
    "UnexpectedPaddingError",
    "TrailingDataError",
    "TruncatedInputError",
    "NonZeroPadBitsError",
    # Sizing
    "encoded_length",
    "decoded_length",
    # Version
    "__version__",
]
