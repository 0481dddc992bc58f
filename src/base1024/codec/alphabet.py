"""Alphabet lookup table.

This module provides the immutable bidirectional mapping between 10-bit codes
and symbols, plus the four padding symbols that terminate a partial group.
The table is built once from a literal code point list and is safe for
concurrent reads.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from ..exceptions import AlphabetError, InvalidSymbolError
from .glyphs import DATA_CODEPOINTS, PADDING_CODEPOINTS

#: Number of data symbols (one per 10-bit code)
DATA_SYMBOL_COUNT = 1024

#: Number of padding symbols (leftover-length tags 1-4)
PADDING_SYMBOL_COUNT = 4


@dataclass(frozen=True)
class PaddingTag:
    """Leftover byte count carried by a padding symbol.

    Attributes:
        tag: Number of trailing bytes in the final partial group (1-4)
    """

    tag: int


SymbolValue = Union[int, PaddingTag]


class AlphabetTable:
    """Immutable mapping between 10-bit codes and alphabet symbols.

    Example:
        >>> table = DEFAULT_ALPHABET
        >>> table.code_for_symbol(table.symbol_for_code(42))
        42
        >>> table.code_for_symbol(table.padding_symbol(3))
        PaddingTag(tag=3)
    """

    def __init__(self, data_symbols: Sequence[str], padding_symbols: Sequence[str]) -> None:
        """Build and validate the table.

        Args:
            data_symbols: Exactly 1024 single-character symbols; index is the code
            padding_symbols: Exactly 4 single-character symbols; index i carries tag i + 1

        Raises:
            AlphabetError: If sizes are wrong, an entry is not one character,
                or any two entries collide
        """
        data = tuple(data_symbols)
        padding = tuple(padding_symbols)

        if len(data) != DATA_SYMBOL_COUNT:
            raise AlphabetError(
                f"Alphabet requires {DATA_SYMBOL_COUNT} data symbols, got {len(data)}"
            )
        if len(padding) != PADDING_SYMBOL_COUNT:
            raise AlphabetError(
                f"Alphabet requires {PADDING_SYMBOL_COUNT} padding symbols, got {len(padding)}"
            )

        for symbol in data + padding:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise AlphabetError(f"Alphabet entries must be single characters, got {symbol!r}")

        reverse: dict[str, SymbolValue] = {}
        for code, symbol in enumerate(data):
            if symbol in reverse:
                raise AlphabetError(
                    f"Duplicate data symbol {symbol!r} for codes {reverse[symbol]} and {code}"
                )
            reverse[symbol] = code

        for index, symbol in enumerate(padding):
            if symbol in reverse:
                raise AlphabetError(f"Padding symbol {symbol!r} collides with another entry")
            reverse[symbol] = PaddingTag(index + 1)

        self._data = data
        self._padding = padding
        self._reverse = MappingProxyType(reverse)

    @classmethod
    def from_codepoints(
        cls, data_codepoints: Iterable[int], padding_codepoints: Iterable[int]
    ) -> AlphabetTable:
        """Build a table from integer Unicode code points.

        Args:
            data_codepoints: 1024 code points in code order
            padding_codepoints: 4 code points in tag order

        Returns:
            Validated alphabet table
        """
        return cls(
            [chr(cp) for cp in data_codepoints],
            [chr(cp) for cp in padding_codepoints],
        )

    @property
    def data_symbols(self) -> tuple[str, ...]:
        """Data symbols in code order."""
        return self._data

    @property
    def padding_symbols(self) -> tuple[str, ...]:
        """Padding symbols in tag order (tag 1 first)."""
        return self._padding

    def symbol_for_code(self, code: int) -> str:
        """Return the data symbol for a 10-bit code.

        Args:
            code: Code in range 0-1023

        Returns:
            Single-character symbol

        Raises:
            ValueError: If code is outside 0-1023
        """
        if not 0 <= code < DATA_SYMBOL_COUNT:
            raise ValueError(f"Code must be 0-{DATA_SYMBOL_COUNT - 1}, got {code}")
        return self._data[code]

    def code_for_symbol(self, symbol: str, position: int | None = None) -> SymbolValue:
        """Return the code (or padding tag) carried by a symbol.

        Args:
            symbol: Symbol to look up
            position: Index of the symbol in its stream, reported on failure

        Returns:
            Integer code for data symbols, PaddingTag for padding symbols

        Raises:
            InvalidSymbolError: If the symbol is not part of the alphabet
        """
        value = self._reverse.get(symbol)
        if value is None:
            raise InvalidSymbolError(symbol, position)
        return value

    def padding_symbol(self, tag: int) -> str:
        """Return the padding symbol for a leftover-length tag (1-4)."""
        if not 1 <= tag <= PADDING_SYMBOL_COUNT:
            raise ValueError(f"Padding tag must be 1-{PADDING_SYMBOL_COUNT}, got {tag}")
        return self._padding[tag - 1]

    def is_padding(self, symbol: str) -> bool:
        """Return True if the symbol is one of the padding symbols."""
        return isinstance(self._reverse.get(symbol), PaddingTag)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._reverse

    def __len__(self) -> int:
        return len(self._reverse)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={len(self._data)}, padding={len(self._padding)})"


# Canonical table, fully built before any encode/decode call
DEFAULT_ALPHABET = AlphabetTable.from_codepoints(DATA_CODEPOINTS, PADDING_CODEPOINTS)
