"""Base-1024 encoder.

This module provides the encode() function that converts arbitrary bytes to a
string of alphabet symbols, 4 symbols per 5-byte quantum.
"""

from __future__ import annotations

from .alphabet import DEFAULT_ALPHABET, AlphabetTable
from .bitpack import QUANTUM_BYTES, pack_fields


def encode(data: bytes, alphabet: AlphabetTable | None = None) -> str:
    """Encode bytes to a string of alphabet symbols.

    Full 5-byte quanta become 4 data symbols each. If 1-4 bytes are left over,
    they become that many data symbols (the last one left-justified with zero
    fill bits) followed by the padding symbol tagged with the leftover count.
    Encoding is total: every finite input, including empty input, succeeds.

    Args:
        data: Bytes-like object to encode
        alphabet: Alphabet to encode with (default: DEFAULT_ALPHABET)

    Returns:
        Encoded symbols as a string (one character per symbol)

    Examples:
        ```python
        from base1024 import encode

        encode(b"")                  # ""
        encode(b"\\x00")              # 1 data symbol + tag-1 padding
        encode(b"\\xff\\x00\\xff\\x00\\xff")  # exactly 4 data symbols
        ```
    """
    table = alphabet if alphabet is not None else DEFAULT_ALPHABET
    view = memoryview(data).cast("B")

    full_length = len(view) - len(view) % QUANTUM_BYTES
    symbols = [encode_quanta(view[:full_length], table)]

    # Trailing partial group
    remainder = view[full_length:]
    if remainder:
        symbols.append(_encode_partial(bytes(remainder), table))

    return "".join(symbols)


def encode_quanta(data: bytes | memoryview, alphabet: AlphabetTable) -> str:
    """Encode whole 5-byte quanta with no terminator.

    Args:
        data: Input whose length is a multiple of 5
        alphabet: Alphabet to encode with

    Returns:
        Encoded symbols (4 per quantum)

    Raises:
        ValueError: If the length is not a multiple of 5
    """
    if len(data) % QUANTUM_BYTES:
        raise ValueError(
            f"encode_quanta requires a multiple of {QUANTUM_BYTES} bytes, got {len(data)}"
        )

    symbol_for_code = alphabet.symbol_for_code
    out: list[str] = []
    for start in range(0, len(data), QUANTUM_BYTES):
        group = bytes(data[start : start + QUANTUM_BYTES])
        out.extend(symbol_for_code(code) for code in pack_fields(group))
    return "".join(out)


def _encode_partial(group: bytes, alphabet: AlphabetTable) -> str:
    """Encode the final 1-4 bytes followed by their padding symbol.

    Args:
        group: Leftover bytes (1-4)
        alphabet: Alphabet to encode with

    Returns:
        Data symbols plus exactly one padding symbol
    """
    symbols = [alphabet.symbol_for_code(code) for code in pack_fields(group)]
    symbols.append(alphabet.padding_symbol(len(group)))
    return "".join(symbols)
