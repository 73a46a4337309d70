"""A 16-byte XOR "cipher": each block byte is combined with a key byte."""

from __future__ import annotations

BLOCK_SIZE = 16


def xor_encrypt(block: bytes, key: bytes) -> bytes:
    """XOR a 16-byte block with a 16-byte key; the same call decrypts."""
    block = bytes(block)
    key = bytes(key)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"XOR block must be {BLOCK_SIZE} bytes, got {len(block)}")
    if len(key) != BLOCK_SIZE:
        raise ValueError(f"XOR key must be {BLOCK_SIZE} bytes, got {len(key)}")
    return bytes(b ^ k for b, k in zip(block, key))