"""A login prompt whose password comparison leaks timing."""

from __future__ import annotations

from typing import Callable, Union

from tinytarget.board import Board

MAX_PASS_LENGTH = 32
STORED_PASSWORD = "password"

WELCOME = "Welcome to your 87C51 login, [username]\n"
PROMPT = "Please enter high-entropy password:\n"
SUCCESS_LINES = ("Password check OK\n", "Last login: [time]\n")
FAILURE_LINES = ("Password check FAILED\n", "Reporting incident to police...\n")

Reader = Callable[[], Union[str, bytes]]
Writer = Callable[[str], object]


def read_password(reader: Reader) -> str:
    """Read characters up to (not including) a carriage return."""
    chars = []
    while True:
        ch = reader()
        if not ch:
            raise EOFError("input ended before the password was terminated")
        if isinstance(ch, bytes):
            ch = ch.decode("latin-1")
        if ch == "\r":
            return "".join(chars)
        chars.append(ch)


def password_matches(typed: str, stored: str) -> bool:
    """Compare character by character, stopping at the first mismatch.

    Only the first ``MAX_PASS_LENGTH`` characters of ``stored`` are checked,
    and anything typed past the end of ``stored`` is ignored.
    """
    for position, expected in enumerate(stored[:MAX_PASS_LENGTH]):
        if position >= len(typed) or typed[position] != expected:
            return False
    return True


def check_password(
    reader: Reader,
    writer: Writer,
    board: Board,
    stored: str = STORED_PASSWORD,
) -> bool:
    """Prompt for a password, check it under the trigger and report.

    The green LED (``led1``) lights on success, the red one (``led2``) on
    failure.  Returns whether the password was accepted.
    """
    board.trigger = False
    writer(WELCOME)
    writer(PROMPT)

    typed = read_password(reader)

    with board.triggered():
        success = password_matches(typed, stored)

    for line in SUCCESS_LINES if success else FAILURE_LINES:
        writer(line)
    board.led1 = success
    board.led2 = not success
    return success