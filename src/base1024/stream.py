"""Streaming and text helpers.

This module wraps the pure codec for chunked sources and sinks so that large
inputs can be transcoded in bounded memory, and adds UTF-8 text helpers.

Encoding carries at most 4 leftover bytes between chunks; decoding feeds the
symbols one at a time through iter_decode(). As with the one-shot functions,
the first malformed symbol aborts decoding, but output produced before the
error may already have been written to the destination.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import BinaryIO, TextIO

from .codec.alphabet import DEFAULT_ALPHABET, AlphabetTable
from .codec.bitpack import QUANTUM_BYTES
from .codec.decoder import decode, iter_decode
from .codec.encoder import encode, encode_quanta
from .config import TranscodeOptions
from .exceptions import DecodeError

logger = logging.getLogger(__name__)

_LINE_BREAKS = frozenset("\r\n")
_BOM = "\ufeff"


def encode_stream(
    chunks: Iterable[bytes], alphabet: AlphabetTable | None = None
) -> Iterator[str]:
    """Encode an iterable of byte chunks, yielding encoded text as it is produced.

    Chunk boundaries do not affect the result: the concatenation of the yielded
    strings always equals encode(b"".join(chunks)).

    Args:
        chunks: Byte chunks of any size (empty chunks are allowed)
        alphabet: Alphabet to encode with (default: DEFAULT_ALPHABET)

    Yields:
        Encoded symbols; the padding symbol, if any, is in the last piece

    Example:
        >>> pieces = encode_stream([b"inp", b"ut da", b"ta"])
        >>> "".join(pieces) == encode(b"input data")
        True
    """
    table = alphabet if alphabet is not None else DEFAULT_ALPHABET
    carry = b""

    for chunk in chunks:
        data = carry + bytes(chunk)
        cut = len(data) - len(data) % QUANTUM_BYTES
        if cut:
            yield encode_quanta(data[:cut], table)
        carry = data[cut:]

    # Trailing partial group
    if carry:
        yield encode(carry, table)


def decode_stream(
    chunks: Iterable[str],
    alphabet: AlphabetTable | None = None,
    *,
    ignore_newlines: bool = False,
) -> Iterator[bytes]:
    """Decode an iterable of text chunks, yielding bytes as groups complete.

    Args:
        chunks: Text chunks of any size; symbols may span chunk boundaries
        alphabet: Alphabet to decode with (default: DEFAULT_ALPHABET)
        ignore_newlines: If True, drop "\\n" and "\\r" instead of rejecting them

    Yields:
        Decoded byte chunks

    Raises:
        DecodeError: Subclass describing the first violation found. Positions
            count symbols after line breaks have been removed.
    """
    symbols: Iterable[str] = chain.from_iterable(chunks)
    if ignore_newlines:
        symbols = (symbol for symbol in symbols if symbol not in _LINE_BREAKS)
    yield from iter_decode(symbols, alphabet)


def encode_io(
    source: BinaryIO,
    destination: TextIO,
    options: TranscodeOptions | None = None,
    alphabet: AlphabetTable | None = None,
) -> int:
    """Encode everything readable from source and write the text to destination.

    Args:
        source: Binary file-like object
        destination: Text file-like object
        options: Chunk size and line wrapping (default: TranscodeOptions())
        alphabet: Alphabet to encode with (default: DEFAULT_ALPHABET)

    Returns:
        Number of symbols written (line breaks not counted)
    """
    opts = options if options is not None else TranscodeOptions()
    chunks = iter(lambda: source.read(opts.chunk_size), b"")

    written = 0
    column = 0
    for text in encode_stream(chunks, alphabet):
        written += len(text)
        if opts.wrap:
            text, column = _wrap(text, opts.wrap, column)
        destination.write(text)

    # Terminate the last wrapped line
    if opts.wrap and column:
        destination.write("\n")

    logger.debug("Encoded %d symbols (chunk_size=%d, wrap=%d)", written, opts.chunk_size, opts.wrap)
    return written


def decode_io(
    source: TextIO,
    destination: BinaryIO,
    options: TranscodeOptions | None = None,
    alphabet: AlphabetTable | None = None,
) -> int:
    """Decode everything readable from source and write the bytes to destination.

    Args:
        source: Text file-like object (UTF-8 decoding is its responsibility); a
            leading byte order mark is skipped
        destination: Binary file-like object
        options: Chunk size and newline handling (default: TranscodeOptions())
        alphabet: Alphabet to decode with (default: DEFAULT_ALPHABET)

    Returns:
        Number of bytes written

    Raises:
        DecodeError: If the symbols are malformed or the source is not valid UTF-8
    """
    opts = options if options is not None else TranscodeOptions()
    chunks = _strip_bom(iter(lambda: source.read(opts.chunk_size), ""))

    written = 0
    buffer = bytearray()
    try:
        for piece in decode_stream(chunks, alphabet, ignore_newlines=opts.ignore_newlines):
            buffer += piece
            if len(buffer) >= opts.chunk_size:
                destination.write(bytes(buffer))
                written += len(buffer)
                buffer.clear()
    except UnicodeDecodeError as e:
        raise DecodeError(f"Input is not valid UTF-8: {e}") from e

    if buffer:
        destination.write(bytes(buffer))
        written += len(buffer)

    logger.debug("Decoded %d bytes (chunk_size=%d)", written, opts.chunk_size)
    return written


def encode_text(text: str, alphabet: AlphabetTable | None = None) -> str:
    """Encode a string as its UTF-8 bytes.

    Args:
        text: String to encode
        alphabet: Alphabet to encode with (default: DEFAULT_ALPHABET)

    Returns:
        Encoded symbols
    """
    return encode(text.encode("utf-8"), alphabet)


def decode_text(symbols: Iterable[str], alphabet: AlphabetTable | None = None) -> str:
    """Decode symbols and interpret the result as UTF-8 text.

    Args:
        symbols: Encoded symbols
        alphabet: Alphabet to decode with (default: DEFAULT_ALPHABET)

    Returns:
        Decoded string

    Raises:
        DecodeError: If the symbols are malformed or the decoded bytes are not valid UTF-8
    """
    data = decode(symbols, alphabet)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Decoded data is not valid UTF-8: {e}") from e


def _wrap(text: str, width: int, column: int) -> tuple[str, int]:
    """Insert line breaks every width symbols, continuing from column.

    Returns:
        Tuple of (wrapped text, column after the last symbol)
    """
    out: list[str] = []
    for symbol in text:
        out.append(symbol)
        column += 1
        if column == width:
            out.append("\n")
            column = 0
    return "".join(out), column


def _strip_bom(chunks: Iterator[str]) -> Iterator[str]:
    """Drop a byte order mark at the very start of a text source."""
    first = next(chunks, "")
    yield first[1:] if first.startswith(_BOM) else first
    yield from chunks
