"""Configuration for the streaming and command-line layers.

The core codec takes no options. These settings only control how the stream
layer reads its input and lays out its output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TranscodeOptions(BaseModel):
    """Options for streaming encode/decode.

    Attributes:
        wrap: Symbols per output line when encoding (default 0, no wrapping).
            The encoded text is split into lines of this many symbols; the
            decoder side removes the line breaks again when ignore_newlines
            is set.

        chunk_size: Units read from the source per step (default 4095).
            Bytes when encoding, characters when decoding. Memory use is
            proportional to this value, not to the input size.

        ignore_newlines: Drop "\\n" and "\\r" before decoding (default True).
            When False, line breaks reach the decoder and are rejected as
            invalid symbols.

    Examples:
        ```python
        from base1024 import TranscodeOptions

        # Wrap encoded output at 76 symbols per line
        options = TranscodeOptions(wrap=76)

        # Read input in larger chunks
        options = TranscodeOptions(chunk_size=1 << 16)
        ```
    """

    model_config = ConfigDict(
        # Options are shared between calls and must not change under them
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    wrap: int = Field(default=0, ge=0, description="Symbols per output line (0 = no wrapping)")
    chunk_size: int = Field(default=4095, ge=5, description="Units read per step")
    ignore_newlines: bool = Field(default=True, description="Strip line breaks before decoding")
