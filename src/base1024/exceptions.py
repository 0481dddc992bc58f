"""Exception hierarchy for base1024.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Base1024Error for easy catching of any base1024-specific error.
"""

from __future__ import annotations


class Base1024Error(Exception):
    """Base exception for all base1024 errors."""

    pass


class AlphabetError(Base1024Error):
    """Raised when an alphabet table violates its construction invariants.

    This signals a programming error in the alphabet literal, not a runtime
    condition to recover from.

    Examples:
        - Wrong number of data or padding symbols
        - An entry that is not exactly one character
        - Duplicate data symbols
        - A padding symbol that is also a data symbol
    """

    pass


class DecodeError(Base1024Error):
    """Raised when decoding a symbol stream fails.

    Attributes:
        position: Zero-based index of the offending symbol, if known
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidSymbolError(DecodeError):
    """Raised when a symbol is not part of the alphabet (data or padding)."""

    def __init__(self, symbol: str, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Input character {symbol!r}{where} is not a part of the alphabet",
            position,
        )
        self.symbol = symbol


class UnexpectedPaddingError(DecodeError):
    """Raised when a padding symbol appears mid-stream or after the wrong number of symbols.

    Examples:
        - Padding as the very first symbol
        - Padding directly after a complete 4-symbol quantum
        - Tag 3 padding preceded by only two data symbols
    """

    pass


class TrailingDataError(DecodeError):
    """Raised when any symbol follows the padding symbol."""

    pass


class TruncatedInputError(DecodeError):
    """Raised when the stream ends with 1-3 data symbols and no padding symbol."""

    pass


class NonZeroPadBitsError(DecodeError):
    """Raised when the zero-fill bits of the last partial symbol are not zero."""

    pass
