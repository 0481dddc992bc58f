"""Unit tests for the alphabet table."""

from __future__ import annotations

import pytest

from base1024 import AlphabetError, AlphabetTable, InvalidSymbolError, PaddingTag
from base1024.codec.glyphs import DATA_CODEPOINTS, PADDING_CODEPOINTS


class TestDefaultAlphabet:
    """Test the canonical alphabet."""

    def test_sizes(self, alphabet: AlphabetTable) -> None:
        """Test 1024 data symbols plus 4 padding symbols."""
        assert len(alphabet.data_symbols) == 1024
        assert len(alphabet.padding_symbols) == 4
        assert len(alphabet) == 1028

    def test_bijective(self, alphabet: AlphabetTable) -> None:
        """Test every code maps to a unique symbol and back."""
        symbols = [alphabet.symbol_for_code(code) for code in range(1024)]
        assert len(set(symbols)) == 1024

        for code, symbol in enumerate(symbols):
            assert alphabet.code_for_symbol(symbol) == code

    def test_padding_disjoint(self, alphabet: AlphabetTable) -> None:
        """Test padding symbols are distinct and not data symbols."""
        padding = set(alphabet.padding_symbols)
        assert len(padding) == 4
        assert padding.isdisjoint(alphabet.data_symbols)

    def test_padding_tags(self, alphabet: AlphabetTable) -> None:
        """Test each padding symbol carries its leftover-length tag."""
        for tag in range(1, 5):
            symbol = alphabet.padding_symbol(tag)
            assert alphabet.code_for_symbol(symbol) == PaddingTag(tag)
            assert alphabet.is_padding(symbol)

    def test_wire_format_pinned(self, alphabet: AlphabetTable) -> None:
        """Test the glyph assignment that defines the wire format."""
        assert alphabet.symbol_for_code(0) == "\U0001F300"
        assert alphabet.symbol_for_code(250) == "\U0001F3FA"
        assert alphabet.symbol_for_code(251) == "\U0001F400"
        assert alphabet.symbol_for_code(843) == "\U0001F680"
        assert alphabet.symbol_for_code(913) == "\U0001F910"
        assert alphabet.symbol_for_code(1023) == "\U0001F97E"
        assert alphabet.padding_symbols == ("☕", "⚜", "\U0001F6F8", "\U0001F6FC")

    def test_skin_tone_modifiers_excluded(self, alphabet: AlphabetTable) -> None:
        """Test emoji modifiers are not part of the alphabet."""
        for codepoint in range(0x1F3FB, 0x1F400):
            assert chr(codepoint) not in alphabet

    def test_glyph_literal_sizes(self) -> None:
        """Test the literal code point tables."""
        assert len(DATA_CODEPOINTS) == 1024
        assert len(PADDING_CODEPOINTS) == 4


class TestLookups:
    """Test lookup failures."""

    def test_unknown_symbol(self, alphabet: AlphabetTable) -> None:
        """Test unknown symbol raises InvalidSymbolError with position."""
        with pytest.raises(InvalidSymbolError, match="not a part of the alphabet") as exc_info:
            alphabet.code_for_symbol("A", position=7)

        assert exc_info.value.symbol == "A"
        assert exc_info.value.position == 7
        assert "A" not in alphabet
        assert not alphabet.is_padding("A")

    def test_code_out_of_range(self, alphabet: AlphabetTable) -> None:
        """Test codes outside 0-1023 are rejected."""
        with pytest.raises(ValueError, match="0-1023"):
            alphabet.symbol_for_code(1024)

        with pytest.raises(ValueError, match="0-1023"):
            alphabet.symbol_for_code(-1)

    def test_padding_tag_out_of_range(self, alphabet: AlphabetTable) -> None:
        """Test padding tags outside 1-4 are rejected."""
        with pytest.raises(ValueError, match="1-4"):
            alphabet.padding_symbol(0)

        with pytest.raises(ValueError, match="1-4"):
            alphabet.padding_symbol(5)


class TestConstruction:
    """Test alphabet construction invariants."""

    @staticmethod
    def _data() -> list[str]:
        return [chr(0x4E00 + i) for i in range(1024)]

    def test_custom_alphabet(self) -> None:
        """Test building a table from another set of glyphs."""
        table = AlphabetTable(self._data(), ["!", "?", "#", "$"])
        assert table.symbol_for_code(0) == "一"
        assert table.code_for_symbol("$") == PaddingTag(4)

    def test_wrong_data_count(self) -> None:
        """Test data symbol count is enforced."""
        with pytest.raises(AlphabetError, match="1024 data symbols"):
            AlphabetTable(self._data()[:-1], ["!", "?", "#", "$"])

    def test_wrong_padding_count(self) -> None:
        """Test padding symbol count is enforced."""
        with pytest.raises(AlphabetError, match="4 padding symbols"):
            AlphabetTable(self._data(), ["!", "?", "#"])

    def test_duplicate_data_symbol(self) -> None:
        """Test duplicate data symbols are rejected."""
        data = self._data()
        data[10] = data[3]
        with pytest.raises(AlphabetError, match="Duplicate"):
            AlphabetTable(data, ["!", "?", "#", "$"])

    def test_padding_collides_with_data(self) -> None:
        """Test padding symbols must be disjoint from data symbols."""
        data = self._data()
        with pytest.raises(AlphabetError, match="collides"):
            AlphabetTable(data, ["!", data[5], "#", "$"])

    def test_duplicate_padding_symbol(self) -> None:
        """Test padding symbols must be distinct."""
        with pytest.raises(AlphabetError, match="collides"):
            AlphabetTable(self._data(), ["!", "?", "!", "$"])

    def test_multi_character_entry(self) -> None:
        """Test entries must be single characters."""
        data = self._data()
        data[0] = "ab"
        with pytest.raises(AlphabetError, match="single characters"):
            AlphabetTable(data, ["!", "?", "#", "$"])

    def test_read_only(self, alphabet: AlphabetTable) -> None:
        """Test exposed symbol collections cannot be mutated."""
        assert isinstance(alphabet.data_symbols, tuple)
        assert isinstance(alphabet.padding_symbols, tuple)
