"""Enumerations for the noughts-and-crosses domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Content of a single board cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def opposite(self) -> Mark:
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        """Display glyph; empty string for an empty cell."""
        return "" if self == Mark.EMPTY else self.name

    def __str__(self) -> str:
        return self.name
