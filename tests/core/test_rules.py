"""Tests for Rules: occupancy, winner and draw detection."""

import pytest

from noughts.core.board import Board
from noughts.core.enums import Mark
from noughts.core.rules import LINES, Rules


class TestLines:
    def test_eight_lines(self) -> None:
        assert len(LINES) == 8
        assert len(set(LINES)) == 8

    def test_lines_cover_rows_columns_diagonals(self) -> None:
        assert set(LINES) == {
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        }


class TestIsOccupied:
    def test_empty_cell(self) -> None:
        assert not Rules.is_occupied(Board(), 4)

    def test_marked_cell(self) -> None:
        board = Board()
        board.set_cell(4, Mark.O)
        assert Rules.is_occupied(board, 4)


class TestCheckWinner:
    @pytest.mark.parametrize("line", LINES)
    @pytest.mark.parametrize("mark", [Mark.X, Mark.O])
    def test_every_line_wins(self, line: tuple[int, int, int], mark: Mark) -> None:
        board = Board()
        for index in line:
            board.set_cell(index, mark)
        assert Rules.check_winner(board)
        assert Rules.winning_line(board) == line
        assert Rules.winner(board) == mark

    def test_empty_board(self) -> None:
        board = Board()
        assert not Rules.check_winner(board)
        assert Rules.winning_line(board) is None
        assert Rules.winner(board) is None

    def test_mixed_line_is_not_a_win(self) -> None:
        board = Board.from_marks("xxo ... ...")
        assert not Rules.check_winner(board)

    def test_two_in_a_row_is_not_a_win(self) -> None:
        board = Board.from_marks("xx. oo. ...")
        assert not Rules.check_winner(board)

    def test_full_board_without_line(self) -> None:
        board = Board.from_marks("oxx xxo oox")
        assert not Rules.check_winner(board)

    def test_result_is_existence_not_owner(self) -> None:
        board = Board.from_marks("ooo ... ...")
        assert Rules.check_winner(board)
        assert Rules.winner(board) == Mark.O


class TestIsDraw:
    def test_full_board_no_line(self) -> None:
        board = Board.from_marks("oxx xxo oox")
        assert Rules.is_draw(board, 9)

    def test_win_on_last_move_is_not_draw(self) -> None:
        board = Board.from_marks("xox oxo xox")
        assert Rules.check_winner(board)
        assert not Rules.is_draw(board, 9)

    def test_uses_move_count_not_board_scan(self) -> None:
        board = Board.from_marks("oxx xxo oox")
        assert not Rules.is_draw(board, 8)

    def test_partial_board(self) -> None:
        board = Board.from_marks("x.. .o. ...")
        assert not Rules.is_draw(board, 2)
