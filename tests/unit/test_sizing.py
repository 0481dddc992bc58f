"""Unit tests for size calculation."""

from __future__ import annotations

import pytest

from base1024 import DEFAULT_ALPHABET, decoded_length, encode, encoded_length


class TestEncodedLength:
    """Test the symbol-count law."""

    @pytest.mark.parametrize(
        ("num_bytes", "expected"),
        [(0, 0), (1, 2), (2, 3), (3, 4), (4, 5), (5, 4), (10, 8), (14, 13), (1000, 800)],
    )
    def test_values(self, num_bytes: int, expected: int) -> None:
        """Test 4q + g(r) for representative lengths."""
        assert encoded_length(num_bytes) == expected

    def test_matches_encode(self) -> None:
        """Test the calculation agrees with actual encoding."""
        for num_bytes in range(30):
            assert encoded_length(num_bytes) == len(encode(bytes(num_bytes)))

    def test_negative(self) -> None:
        """Test negative lengths are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            encoded_length(-1)


class TestDecodedLength:
    """Test decoded size calculation."""

    def test_values(self) -> None:
        """Test decoded size for every remainder."""
        for num_bytes in range(30):
            assert decoded_length(encode(bytes(num_bytes))) == num_bytes

    def test_empty(self) -> None:
        """Test empty input."""
        assert decoded_length("") == 0

    def test_iterable(self) -> None:
        """Test any iterable of symbols is accepted."""
        assert decoded_length(iter(encode(b"input data"))) == 10

    def test_lone_padding(self) -> None:
        """Test a padding symbol with no data symbols before it is rejected."""
        for tag in range(1, 5):
            with pytest.raises(ValueError, match="cannot end with padding tag"):
                decoded_length(DEFAULT_ALPHABET.padding_symbol(tag))

    def test_padding_tag_mismatch(self) -> None:
        """Test a count that does not fit the padding tag is rejected."""
        with pytest.raises(ValueError, match="cannot end with padding tag 1"):
            decoded_length(encode(b"hello") + DEFAULT_ALPHABET.padding_symbol(1))

        # Tag 4 after a full quantum still has the shape of 4 data symbols + padding
        assert decoded_length(encode(b"hello") + DEFAULT_ALPHABET.padding_symbol(4)) == 4

    def test_truncated(self) -> None:
        """Test dangling data symbols without padding are rejected."""
        encoded = encode(b"0123456789")
        for cut in (1, 2, 3, 5):
            with pytest.raises(ValueError, match="whole number of quanta"):
                decoded_length(encoded[:cut])
