"""The Tiny Encryption Algorithm (TEA), encryption direction only."""

from __future__ import annotations

import struct

BLOCK_SIZE = 8
KEY_SIZE = 16
CYCLES = 32
DELTA = 0x9E3779B9

_MASK = 0xFFFFFFFF


def tea_encrypt(block: bytes, key: bytes) -> bytes:
    """Encrypt an 8-byte block with a 16-byte key; words are big-endian."""
    block = bytes(block)
    key = bytes(key)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"TEA block must be {BLOCK_SIZE} bytes, got {len(block)}")
    if len(key) != KEY_SIZE:
        raise ValueError(f"TEA key must be {KEY_SIZE} bytes, got {len(key)}")

    v0, v1 = struct.unpack(">2I", block)
    k0, k1, k2, k3 = struct.unpack(">4I", key)

    total = 0
    for _ in range(CYCLES):
        total = (total + DELTA) & _MASK
        v0 = (v0 + ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & _MASK)) & _MASK
        v1 = (v1 + ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & _MASK)) & _MASK

    return struct.pack(">2I", v0, v1)