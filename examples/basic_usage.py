#!/usr/bin/env python3
"""Basic usage example for base1024.

This example demonstrates:
1. Encoding a binary payload to emoji text
2. Decoding it back
3. Calculating encoded sizes
4. Handling malformed input
"""

from __future__ import annotations

import hashlib

from base1024 import DecodeError, decode, encode, encoded_length


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("base1024 Basic Usage Example")
    print("=" * 60)
    print()

    # Create a payload
    print("1. Hashing a message...")
    digest = hashlib.sha256(b"input data").digest()
    print(f"   SHA-256: {digest.hex()}")
    print(f"   Size: {len(digest)} bytes")
    print()

    # Size before encoding
    print("2. Calculating encoded size...")
    print(f"   {len(digest)} bytes -> {encoded_length(len(digest))} symbols")
    print(f"   (hex would need {len(digest) * 2} characters, base64 {(len(digest) + 2) // 3 * 4})")
    print()

    # Encode
    print("3. Encoding to emoji...")
    text = encode(digest)
    print(f"   {text}")
    print()

    # Decode
    print("4. Decoding back...")
    restored = decode(text)
    print(f"   Round trip OK: {restored == digest}")
    print()

    # Malformed input
    print("5. Decoding damaged text...")
    try:
        decode(text[:-3])
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
