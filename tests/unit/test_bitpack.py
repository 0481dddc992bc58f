"""Unit tests for 10-bit field packing."""

from __future__ import annotations

import pytest

from base1024.codec.bitpack import fields_for_bytes, pack_fields, unpack_fields


class TestFieldsForBytes:
    """Test field count calculation."""

    @pytest.mark.parametrize(
        ("num_bytes", "expected"), [(1, 1), (2, 2), (3, 3), (4, 4), (5, 4)]
    )
    def test_counts(self, num_bytes: int, expected: int) -> None:
        """Test ceil(8n / 10) for every group length."""
        assert fields_for_bytes(num_bytes) == expected

    @pytest.mark.parametrize("num_bytes", [0, 6, -1])
    def test_out_of_range(self, num_bytes: int) -> None:
        """Test group lengths outside 1-5 are rejected."""
        with pytest.raises(ValueError, match="1-5 bytes"):
            fields_for_bytes(num_bytes)


class TestPackFields:
    """Test packing bytes into fields."""

    def test_full_quantum(self) -> None:
        """Test 5 bytes split MSB first into 4 fields."""
        # 10101011 11|001101 1110|1111 000000|01 00100011
        assert pack_fields(b"\xab\xcd\xef\x01\x23") == [687, 222, 960, 291]

    def test_all_ones(self) -> None:
        """Test 40 set bits give 4 maximal fields."""
        assert pack_fields(b"\xff" * 5) == [1023] * 4

    def test_one_byte_left_justified(self) -> None:
        """Test a single byte is shifted into the top of one field."""
        assert pack_fields(b"\x01") == [0b0000000100]
        assert pack_fields(b"k") == [ord("k") << 2]

    def test_partial_groups(self) -> None:
        """Test partial groups match the quantum layout with zero fill."""
        assert pack_fields(b"\x00\x01") == [0, 16]
        assert pack_fields(b"\x00\x01\x02") == [0, 16, 128]
        assert pack_fields(b"\x00\x01\x02\x03") == [0, 16, 128, 768]

    def test_empty_group(self) -> None:
        """Test empty groups are rejected."""
        with pytest.raises(ValueError):
            pack_fields(b"")


class TestUnpackFields:
    """Test joining fields back into bytes."""

    def test_full_quantum(self) -> None:
        """Test 4 fields join into 5 bytes."""
        assert unpack_fields([687, 222, 960, 291], 5) == b"\xab\xcd\xef\x01\x23"

    def test_partial_groups(self) -> None:
        """Test partial groups drop the zero fill."""
        assert unpack_fields([4], 1) == b"\x01"
        assert unpack_fields([0, 16], 2) == b"\x00\x01"
        assert unpack_fields([0, 16, 128], 3) == b"\x00\x01\x02"
        assert unpack_fields([0, 16, 128, 768], 4) == b"\x00\x01\x02\x03"

    def test_non_zero_fill(self) -> None:
        """Test set fill bits are rejected."""
        with pytest.raises(ValueError, match="Non-zero fill bits"):
            unpack_fields([1], 1)

        with pytest.raises(ValueError, match="Non-zero fill bits"):
            unpack_fields([0, 16, 128, 769], 4)

    def test_wrong_field_count(self) -> None:
        """Test field count must match the byte count."""
        with pytest.raises(ValueError, match="require"):
            unpack_fields([0, 0], 3)

    def test_field_out_of_range(self) -> None:
        """Test field values above 1023 are rejected."""
        with pytest.raises(ValueError, match="0-1023"):
            unpack_fields([1024, 0, 0, 0], 5)
