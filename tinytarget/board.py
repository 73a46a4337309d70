"""Trigger, LED and mode-select pins of the target board."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

#: Bit of port 3 where the three mode-select bits start.
MODE_SHIFT = 3
MODE_MASK = 0x07


def mode_from_port3(value: int) -> int:
    """Extract the mode number (0-7) from an 8-bit port 3 reading."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"port 3 value must be between 0 and 255, got {value}")
    return (value >> MODE_SHIFT) & MODE_MASK


@dataclass
class Board:
    """State of the output pins a program drives.

    ``led1`` is the green light, ``led2`` the red one.  ``trigger_count``
    counts how often the trigger line has been raised.
    """

    trigger: bool = False
    led1: bool = False
    led2: bool = False
    trigger_count: int = 0

    @contextmanager
    def triggered(self) -> Iterator["Board"]:
        """Hold the trigger line high for the duration of the block."""
        self.trigger = True
        self.trigger_count += 1
        try:
            yield self
        finally:
            self.trigger = False