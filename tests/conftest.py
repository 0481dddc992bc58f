"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from base1024 import DEFAULT_ALPHABET, AlphabetTable

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing (not a multiple of 5 bytes)."""
    return b"Hello, emoji world!"


@pytest.fixture
def alphabet() -> AlphabetTable:
    """The canonical alphabet table."""
    return DEFAULT_ALPHABET


@pytest.fixture
def cli_env() -> dict[str, str]:
    """Environment for running the CLI in a subprocess against the source tree."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    return env
