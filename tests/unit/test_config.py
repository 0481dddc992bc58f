"""Unit tests for transcoding options."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from base1024 import TranscodeOptions


class TestTranscodeOptions:
    """Test option defaults and validation."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = TranscodeOptions()
        assert options.wrap == 0
        assert options.chunk_size == 4095
        assert options.ignore_newlines is True

    def test_custom_values(self) -> None:
        """Test explicit values are kept."""
        options = TranscodeOptions(wrap=76, chunk_size=5, ignore_newlines=False)
        assert options.wrap == 76
        assert options.chunk_size == 5
        assert options.ignore_newlines is False

    def test_negative_wrap(self) -> None:
        """Test wrap must be non-negative."""
        with pytest.raises(ValidationError):
            TranscodeOptions(wrap=-1)

    def test_chunk_size_minimum(self) -> None:
        """Test chunk size must hold at least one quantum."""
        with pytest.raises(ValidationError):
            TranscodeOptions(chunk_size=4)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown options are rejected."""
        with pytest.raises(ValidationError):
            TranscodeOptions(width=10)

    def test_frozen(self) -> None:
        """Test options cannot be changed after construction."""
        options = TranscodeOptions()
        with pytest.raises(ValidationError):
            options.wrap = 10
