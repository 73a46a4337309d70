"""A counting loop whose result reveals whether a glitch struck it."""

from __future__ import annotations

import itertools
from typing import Callable, Optional, Tuple

from tinytarget.board import Board

LOOP_LIMIT = 200

Writer = Callable[[str], object]


def count_loop() -> Tuple[int, int, int]:
    """Run the nested counting loop; return final outer, inner and count."""
    count = 0
    for _ in range(LOOP_LIMIT):
        for _ in range(LOOP_LIMIT):
            count += 1
    return LOOP_LIMIT, LOOP_LIMIT, count & 0xFFFF


def glitch_loop(writer: Writer, board: Board, iterations: Optional[int] = None) -> None:
    """Repeat the counting loop under the trigger and report each result.

    Each line reads ``"<n>: <i> <j> <count>"`` where ``n`` is an 8-bit
    iteration number.  Runs forever when ``iterations`` is None.
    """
    rounds = itertools.count() if iterations is None else range(iterations)
    number = 0
    for _ in rounds:
        with board.triggered():
            i, j, count = count_loop()
        number = (number + 1) & 0xFF
        writer(f"{number}: {i} {j} {count}\n")