"""Line-oriented hex framing used to exchange blocks with the target."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

PLAINTEXT = "p"
KEY = "k"
ADDRESS = "a"
RESPONSE = "r"

#: Largest payload, in bytes, that fits in one frame.
MAX_PAYLOAD = 16

_LINE_ENDS = frozenset("\r\n")
_ANY_CASE_DIGITS = frozenset(string.hexdigits)
_UPPER_DIGITS = frozenset("0123456789ABCDEF")

Reader = Callable[[], Union[str, bytes]]
Writer = Callable[[str], object]


def encode(data: bytes) -> str:
    """Render ``data`` as a response line: ``r`` + upper-case hex + newline."""
    return RESPONSE + bytes(data).hex().upper() + "\n"


def decode(text: str) -> bytes:
    """Turn a string of hex digit pairs (either case) into bytes."""
    if len(text) % 2 or not set(text) <= _ANY_CASE_DIGITS:
        raise ValueError(f"not a sequence of hex digit pairs: {text!r}")
    return bytes.fromhex(text)


def _check_size(size: int) -> None:
    if not 0 <= size <= MAX_PAYLOAD:
        raise ValueError(f"payload size must be between 0 and {MAX_PAYLOAD}, got {size}")


@dataclass(frozen=True)
class Frame:
    """A decoded incoming line: its command character and payload."""

    command: str
    data: bytes

    @property
    def is_plaintext(self) -> bool:
        return self.command == PLAINTEXT

    @property
    def is_key(self) -> bool:
        return self.command == KEY


class SimpleSerial:
    """Reads command frames one character at a time and writes responses.

    ``reader`` returns one character per call (an empty value means the
    input is exhausted); ``writer`` receives the text to send.
    """

    def __init__(
        self,
        reader: Reader,
        writer: Writer,
        uppercase_only: bool = False,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._digits = _UPPER_DIGITS if uppercase_only else _ANY_CASE_DIGITS

    def _read_char(self) -> str:
        ch = self._reader()
        if not ch:
            raise EOFError("serial input exhausted")
        if isinstance(ch, bytes):
            ch = ch.decode("latin-1")
        return ch

    def _receive(self, sizes: Mapping[str, int]) -> Optional[Frame]:
        command = self._read_char()
        size = sizes.get(command)
        if size is None:
            return None
        digits = []
        for _ in range(2 * size):
            ch = self._read_char()
            if ch not in self._digits:
                return None
            digits.append(ch)
        if self._read_char() not in _LINE_ENDS:
            return None
        return Frame(command, decode("".join(digits)))

    def get(self, size_input: int, size_key: int) -> Optional[Frame]:
        """Read one plaintext (``p``) or key (``k``) frame.

        Returns the decoded frame, or None as soon as the line turns out to
        be malformed; the offending character has then been consumed.
        """
        _check_size(size_input)
        _check_size(size_key)
        return self._receive({PLAINTEXT: size_input, KEY: size_key})

    def get_address(self, size: int = 2) -> Optional[bytes]:
        """Read one address (``a``) frame and return its payload, or None."""
        _check_size(size)
        frame = self._receive({ADDRESS: size})
        return None if frame is None else frame.data

    def put(self, data: bytes) -> None:
        """Send ``data`` as a response line."""
        data = bytes(data)
        _check_size(len(data))
        self._writer(encode(data))