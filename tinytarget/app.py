"""Target programs selectable by mode, and the command that runs them."""

from __future__ import annotations

import argparse
import itertools
import sys
from enum import IntEnum
from typing import Callable, Optional, Sequence, Union

from tinytarget.aes import aes_encrypt
from tinytarget.board import Board, mode_from_port3
from tinytarget.glitchloop import glitch_loop
from tinytarget.passcheck import check_password
from tinytarget.simpleserial import SimpleSerial
from tinytarget.tea import tea_encrypt
from tinytarget.xor import xor_encrypt

Reader = Callable[[], Union[str, bytes]]
Writer = Callable[[str], object]
Cipher = Callable[[bytes, bytes], bytes]


class Mode(IntEnum):
    """Programs selected by the mode pins."""

    PRINT = 0
    PASSCHECK = 1
    GLITCHLOOP = 2
    XOR = 3
    AES = 4
    TEA = 5


_CIPHERS = {
    Mode.XOR: (xor_encrypt, 16, 16),
    Mode.AES: (aes_encrypt, 16, 16),
    Mode.TEA: (tea_encrypt, 8, 16),
}


def _counter(limit: Optional[int]):
    return itertools.count() if limit is None else range(limit)


def print_loop(writer: Writer, limit: Optional[int] = None) -> None:
    """Write ``"Testing <n>"`` lines with a 16-bit signed counter."""
    for x in _counter(limit):
        value = ((x + 0x8000) & 0xFFFF) - 0x8000
        writer(f"Testing {value}\n")


def serve_cipher(
    serial: SimpleSerial,
    board: Board,
    cipher: Cipher,
    block_size: int,
    key_size: int,
    limit: Optional[int] = None,
) -> int:
    """Answer plaintext frames with their encryption under the latest key.

    Key frames replace the key; malformed frames are ignored.  Stops after
    ``limit`` frames (if given) or when the input runs out, and returns
    the number of blocks encrypted.
    """
    key = bytes(key_size)
    served = 0
    for _ in _counter(limit):
        try:
            frame = serial.get(block_size, key_size)
        except EOFError:
            break
        if frame is None:
            continue
        if frame.is_key:
            key = frame.data
            continue
        with board.triggered():
            result = cipher(frame.data, key)
        serial.put(result)
        served += 1
    return served


def run(
    mode: int,
    reader: Reader,
    writer: Writer,
    board: Optional[Board] = None,
    limit: Optional[int] = None,
) -> None:
    """Run the program for ``mode``; unknown modes do nothing further."""
    if board is None:
        board = Board()
    board.trigger = False
    writer("\n")

    try:
        selected = Mode(mode)
    except ValueError:
        return

    if selected is Mode.PRINT:
        print_loop(writer, limit)
    elif selected is Mode.PASSCHECK:
        check_password(reader, writer, board)
    elif selected is Mode.GLITCHLOOP:
        glitch_loop(writer, board, limit)
    else:
        cipher, block_size, key_size = _CIPHERS[selected]
        serial = SimpleSerial(reader, writer)
        serve_cipher(serial, board, cipher, block_size, key_size, limit)


def _read_stdin() -> str:
    return sys.stdin.read(1)


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse_mode(parser: argparse.ArgumentParser, text: str) -> int:
    if text.isdigit():
        return int(text)
    try:
        return Mode[text.upper()]
    except KeyError:
        parser.error(f"unknown mode: {text!r}")
        raise


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: run a target program over stdin/stdout."""
    parser = argparse.ArgumentParser(
        prog="tinytarget",
        description="Run a target program on standard input and output.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        help="program name (" + ", ".join(m.name.lower() for m in Mode) + ") or number",
    )
    parser.add_argument(
        "--port3",
        type=int,
        help="select the mode from an 8-bit port 3 value instead",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="stop after this many iterations or frames",
    )
    args = parser.parse_args(argv)

    if args.port3 is not None:
        try:
            mode = mode_from_port3(args.port3)
        except ValueError as exc:
            parser.error(str(exc))
    elif args.mode is not None:
        mode = _parse_mode(parser, args.mode)
    else:
        mode = Mode.PRINT

    try:
        run(mode, _read_stdin, _write_stdout, Board(), args.limit)
    except EOFError as exc:
        print(f"tinytarget: {exc}", file=sys.stderr)
        return 1
    return 0