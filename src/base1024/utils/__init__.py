"""Utility functions for base1024.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import decoded_length, encoded_length

__all__ = [
    "encoded_length",
    "decoded_length",
]
