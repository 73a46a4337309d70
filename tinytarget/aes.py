"""Compact AES-128 block encryption with an on-the-fly key schedule."""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 10

_S_BOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_RCON = bytes((0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36))


def xtime(x: int) -> int:
    """Multiply ``x`` by 2 in GF(2^8) modulo the AES polynomial."""
    x &= 0xFF
    return ((x << 1) ^ (0x1B if x & 0x80 else 0)) & 0xFF


def _add_round_key(state: bytearray, round_key: bytearray) -> None:
    for i, k in enumerate(round_key):
        state[i] ^= k


def _sub_bytes(state: bytearray) -> None:
    state[:] = state.translate(_S_BOX)


def _shift_rows(state: bytearray) -> None:
    # State is column-major: byte index = 4 * column + row.
    for row in range(1, 4):
        values = state[row::4]
        state[row::4] = values[row:] + values[:row]


def _mix_columns(state: bytearray) -> None:
    for base in range(0, 16, 4):
        a0, a1, a2, a3 = state[base:base + 4]
        total = a0 ^ a1 ^ a2 ^ a3
        state[base] = a0 ^ total ^ xtime(a0 ^ a1)
        state[base + 1] = a1 ^ total ^ xtime(a1 ^ a2)
        state[base + 2] = a2 ^ total ^ xtime(a2 ^ a3)
        state[base + 3] = a3 ^ total ^ xtime(a3 ^ a0)


def _next_round_key(w: bytearray, round_number: int) -> None:
    """Advance the round key ``w`` in place to the given round."""
    temp = bytes(
        (
            _S_BOX[w[13]] ^ _RCON[round_number],
            _S_BOX[w[14]],
            _S_BOX[w[15]],
            _S_BOX[w[12]],
        )
    )
    for word in range(4):
        start = 4 * word
        for offset, value in enumerate(temp):
            w[start + offset] ^= value
        temp = bytes(w[start:start + 4])


def aes_encrypt(block: bytes, key: bytes) -> bytes:
    """Encrypt one 16-byte block with a 16-byte AES-128 key."""
    block = bytes(block)
    key = bytes(key)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"AES block must be {BLOCK_SIZE} bytes, got {len(block)}")
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES key must be {KEY_SIZE} bytes, got {len(key)}")

    state = bytearray(block)
    w = bytearray(key)

    _add_round_key(state, w)
    for round_number in range(1, ROUNDS):
        _sub_bytes(state)
        _shift_rows(state)
        _mix_columns(state)
        _next_round_key(w, round_number)
        _add_round_key(state, w)

    _sub_bytes(state)
    _shift_rows(state)
    _next_round_key(w, ROUNDS)
    _add_round_key(state, w)
    return bytes(state)