"""Core domain layer - pure game logic with zero external dependencies.

Quick start::

    from noughts.core import Board, Mark, Rules

    board = Board.from_marks("xxx ... oo.")
    assert Rules.check_winner(board)
"""

from noughts.core.board import (
    BOARD_CELLS,
    BOARD_SIDE,
    Board,
    OutOfRangeError,
    check_index,
    col_of,
    make_index,
    row_of,
)
from noughts.core.enums import Mark
from noughts.core.rules import LINES, Line, Rules

__all__ = [
    # Enums
    "Mark",
    # Board
    "BOARD_CELLS",
    "BOARD_SIDE",
    "Board",
    "OutOfRangeError",
    "check_index",
    "col_of",
    "make_index",
    "row_of",
    # Rules
    "LINES",
    "Line",
    "Rules",
]
