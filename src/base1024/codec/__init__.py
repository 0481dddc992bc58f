"""Base-1024 codec for base1024.

This module provides the alphabet table and the encoding and decoding
functions that map bytes to symbols, 5 bytes to 4 symbols.
"""

from __future__ import annotations

from .alphabet import DEFAULT_ALPHABET, AlphabetTable, PaddingTag
from .decoder import decode, iter_decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "iter_decode",
    "AlphabetTable",
    "PaddingTag",
    "DEFAULT_ALPHABET",
]
