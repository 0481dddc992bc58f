"""Bit-level packing and unpacking of 10-bit fields.

This module converts between groups of up to 5 bytes and the 10-bit fields
that carry them. All operations are deterministic and big-endian (most
significant bits first). A group that does not fill its last field exactly
is left-justified: the unused low-order bits of that field are zero.
"""

from __future__ import annotations

from collections.abc import Sequence

#: Bits carried by one field (one symbol)
FIELD_BITS = 10

#: Bytes in one full quantum
QUANTUM_BYTES = 5

#: Fields in one full quantum (5 bytes = 40 bits = 4 fields)
QUANTUM_FIELDS = 4

_FIELD_MASK = (1 << FIELD_BITS) - 1


def fields_for_bytes(num_bytes: int) -> int:
    """Return how many 10-bit fields are needed to carry num_bytes bytes.

    Args:
        num_bytes: Group length (1-5)

    Returns:
        ceil(8 * num_bytes / 10)
    """
    if not 1 <= num_bytes <= QUANTUM_BYTES:
        raise ValueError(f"Group length must be 1-{QUANTUM_BYTES} bytes, got {num_bytes}")
    return -(-8 * num_bytes // FIELD_BITS)


def pack_fields(group: bytes) -> list[int]:
    """Split a group of 1-5 bytes into 10-bit fields, MSB first.

    Args:
        group: Bytes to split (1-5 bytes)

    Returns:
        List of field values (each 0-1023); the last one is left-justified

    Raises:
        ValueError: If the group length is out of range

    Example:
        >>> pack_fields(b"\\xab\\xcd\\xef\\x01\\x23")
        [687, 222, 960, 291]
        >>> pack_fields(b"\\x01")
        [4]
    """
    num_fields = fields_for_bytes(len(group))
    fill_bits = num_fields * FIELD_BITS - 8 * len(group)

    # Left-justify: shift the zero fill into the low-order bits
    value = int.from_bytes(group, "big") << fill_bits

    return [
        (value >> (FIELD_BITS * (num_fields - 1 - i))) & _FIELD_MASK for i in range(num_fields)
    ]


def unpack_fields(fields: Sequence[int], num_bytes: int) -> bytes:
    """Join 10-bit fields back into num_bytes bytes.

    This is the exact inverse of pack_fields(): the fields are concatenated
    MSB first, the zero fill is checked and dropped, and the remaining bits
    are returned as big-endian bytes.

    Args:
        fields: Field values (each 0-1023)
        num_bytes: Number of bytes the fields carry (1-5)

    Returns:
        Reconstructed bytes

    Raises:
        ValueError: If the field count does not match num_bytes, a field is
            out of range, or the fill bits are not zero
    """
    num_fields = fields_for_bytes(num_bytes)
    if len(fields) != num_fields:
        raise ValueError(f"{num_bytes} bytes require {num_fields} fields, got {len(fields)}")

    value = 0
    for field in fields:
        if not 0 <= field <= _FIELD_MASK:
            raise ValueError(f"Field value must be 0-{_FIELD_MASK}, got {field}")
        value = (value << FIELD_BITS) | field

    fill_bits = num_fields * FIELD_BITS - 8 * num_bytes
    fill = value & ((1 << fill_bits) - 1)
    if fill:
        raise ValueError(f"Non-zero fill bits in last field: {fill:0{fill_bits}b}")

    return (value >> fill_bits).to_bytes(num_bytes, "big")
