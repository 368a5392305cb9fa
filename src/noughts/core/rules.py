"""Game rules: occupancy, three-in-a-row and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from noughts.core.board import BOARD_CELLS
from noughts.core.enums import Mark

if TYPE_CHECKING:
    from noughts.core.board import Board

Line = tuple[int, int, int]

# Rows, columns, diagonals. Only valid while the board stays 3x3.
LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_occupied(board: Board, index: int) -> bool:
        return board.get_cell(index) != Mark.EMPTY

    @staticmethod
    def winning_line(board: Board) -> Line | None:
        """First line holding three identical non-empty marks, if any."""
        cells = board.snapshot()
        for a, b, c in LINES:
            if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
                return (a, b, c)
        return None

    @staticmethod
    def winner(board: Board) -> Mark | None:
        line = Rules.winning_line(board)
        if line is None:
            return None
        return board.get_cell(line[0])

    @staticmethod
    def check_winner(board: Board) -> bool:
        return Rules.winning_line(board) is not None

    @staticmethod
    def is_draw(board: Board, move_count: int) -> bool:
        """Board full by move count with no completed line.

        *move_count* is the session's turn counter, not a scan of the board.
        """
        return move_count == BOARD_CELLS and not Rules.check_winner(board)
