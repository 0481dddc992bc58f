"""Base-1024 decoder.

This module provides the decode() function that converts a string of alphabet
symbols back to the original bytes. Decoding is strict: the first malformed
symbol aborts with a typed DecodeError and no partial result is returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..exceptions import (
    NonZeroPadBitsError,
    TrailingDataError,
    TruncatedInputError,
    UnexpectedPaddingError,
)
from .alphabet import DEFAULT_ALPHABET, AlphabetTable, PaddingTag
from .bitpack import QUANTUM_BYTES, QUANTUM_FIELDS, unpack_fields


def decode(symbols: Iterable[str], alphabet: AlphabetTable | None = None) -> bytes:
    """Decode alphabet symbols to bytes.

    Args:
        symbols: Encoded symbols; a str is treated as a sequence of symbols
        alphabet: Alphabet to decode with (default: DEFAULT_ALPHABET)

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: If a symbol is not part of the alphabet
        UnexpectedPaddingError: If a padding symbol appears mid-stream or its
            tag does not match the number of symbols before it
        TrailingDataError: If any symbol follows the padding symbol
        TruncatedInputError: If the stream ends with 1-3 unterminated symbols
        NonZeroPadBitsError: If the fill bits of the last symbol are not zero

    Examples:
        ```python
        from base1024 import decode, encode

        assert decode(encode(b"input data")) == b"input data"
        assert decode("") == b""
        ```
    """
    return b"".join(iter_decode(symbols, alphabet))


def iter_decode(symbols: Iterable[str], alphabet: AlphabetTable | None = None) -> Iterator[bytes]:
    """Lazily decode symbols, yielding bytes as each group completes.

    The input iterable is consumed exactly once, one symbol at a time, so this
    generator can sit behind a chunked reader without buffering the stream.
    Output yielded before an error is raised stays yielded; use decode() for
    all-or-nothing behaviour.

    A group of 4 data symbols is only emitted once the next symbol is known
    not to be padding, since a 4-byte partial group also carries 4 data
    symbols before its terminator.

    Args:
        symbols: Encoded symbols
        alphabet: Alphabet to decode with (default: DEFAULT_ALPHABET)

    Yields:
        Decoded byte chunks (5 bytes per quantum, 1-4 for the final group)

    Raises:
        DecodeError: Subclass describing the first violation found
    """
    table = alphabet if alphabet is not None else DEFAULT_ALPHABET
    code_for_symbol = table.code_for_symbol

    pending: list[int] = []  # codes of the current, not yet emitted group
    padding_position: int | None = None

    for position, symbol in enumerate(symbols):
        if padding_position is not None:
            raise TrailingDataError(
                f"Unexpected symbol {symbol!r} at position {position} after padding "
                f"symbol at position {padding_position}",
                position,
            )

        value = code_for_symbol(symbol, position)

        if isinstance(value, PaddingTag):
            yield _decode_partial(pending, value, position)
            pending = []
            padding_position = position
            continue

        if len(pending) == QUANTUM_FIELDS:
            yield unpack_fields(pending, QUANTUM_BYTES)
            pending = []
        pending.append(value)

    if padding_position is not None:
        return

    if len(pending) == QUANTUM_FIELDS:
        yield unpack_fields(pending, QUANTUM_BYTES)
    elif pending:
        raise TruncatedInputError(
            f"Unexpected end of data: {len(pending)} symbol"
            f"{'s' if len(pending) != 1 else ''} left over without a padding symbol"
        )


def _decode_partial(codes: list[int], padding: PaddingTag, position: int) -> bytes:
    """Decode the final partial group terminated by a padding symbol.

    Args:
        codes: Data codes preceding the padding symbol in the current group
        padding: Tag carried by the padding symbol
        position: Index of the padding symbol

    Returns:
        The padding.tag trailing bytes

    Raises:
        UnexpectedPaddingError: If the group size does not match the tag
        NonZeroPadBitsError: If the fill bits are not zero
    """
    if len(codes) != padding.tag:
        raise UnexpectedPaddingError(
            f"Padding symbol at position {position} expects {padding.tag} preceding "
            f"symbol{'s' if padding.tag != 1 else ''} in its group, found {len(codes)}",
            position,
        )

    try:
        return unpack_fields(codes, padding.tag)
    except ValueError as e:
        raise NonZeroPadBitsError(
            f"Symbol at position {position - 1} before padding: {e}", position - 1
        ) from e
