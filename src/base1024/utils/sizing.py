"""Encoded size calculation utilities.

This module provides functions to calculate the size of encoded and decoded
data without actually encoding or decoding it.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..codec.alphabet import DEFAULT_ALPHABET, AlphabetTable, PaddingTag
from ..codec.bitpack import QUANTUM_BYTES, QUANTUM_FIELDS, fields_for_bytes


def encoded_length(num_bytes: int) -> int:
    """Calculate how many symbols encode() produces for num_bytes bytes.

    For num_bytes = 5q + r this is 4q + g(r), where g(0) = 0 and
    g(r) = r + 1 otherwise (r data symbols plus one padding symbol).

    Args:
        num_bytes: Input length in bytes

    Returns:
        Number of symbols (characters) in the encoded string

    Raises:
        ValueError: If num_bytes is negative

    Example:
        ```python
        encoded_length(5)   # 4
        encoded_length(1)   # 2
        encoded_length(14)  # 13: 2 quanta (8) + 4 data symbols + padding
        ```
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")

    quanta, remainder = divmod(num_bytes, QUANTUM_BYTES)
    length = quanta * QUANTUM_FIELDS
    if remainder:
        length += fields_for_bytes(remainder) + 1
    return length


def decoded_length(symbols: Iterable[str], alphabet: AlphabetTable | None = None) -> int:
    """Calculate how many bytes decode() produces for a well-formed encoding.

    Only the symbol count and the final padding symbol are inspected. A count
    that no encoding can have is rejected, but the symbols themselves are not
    validated. Use decode() to detect every kind of malformed input.

    Args:
        symbols: Encoded symbols
        alphabet: Alphabet the symbols belong to (default: DEFAULT_ALPHABET)

    Returns:
        Number of decoded bytes

    Raises:
        ValueError: If the symbol count does not fit the final padding tag,
            or is not a multiple of 4 when there is no padding

    Example:
        ```python
        from base1024 import encode

        decoded_length(encode(b"input data"))  # 10
        ```
    """
    table = alphabet if alphabet is not None else DEFAULT_ALPHABET

    count = 0
    last = None
    for symbol in symbols:
        count += 1
        last = symbol

    if last is None:
        return 0

    padding = table.code_for_symbol(last) if table.is_padding(last) else None
    if not isinstance(padding, PaddingTag):
        quanta, extra = divmod(count, QUANTUM_FIELDS)
        if extra:
            raise ValueError(f"{count} symbols without padding is not a whole number of quanta")
        return quanta * QUANTUM_BYTES

    # Full quanta, then the tagged group of tag symbols plus its terminator
    quanta, extra = divmod(count - 1 - padding.tag, QUANTUM_FIELDS)
    if quanta < 0 or extra:
        raise ValueError(
            f"{count} symbols cannot end with padding tag {padding.tag}: "
            f"expected 4q + {padding.tag + 1}"
        )
    return quanta * QUANTUM_BYTES + padding.tag
