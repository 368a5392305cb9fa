"""Tests for GameSession: the turn-taking state machine."""

import logging

import pytest

from noughts.core.board import OutOfRangeError
from noughts.core.enums import Mark
from noughts.game.interfaces import GamePhase, MoveOutcome
from noughts.game.player import Player
from noughts.game.session import GameSession

# A 4, B 0, A 8, B 2, A 1, B 7, A 3, B 5, A 6: fills the board, no line.
DRAW_SEQUENCE = (4, 0, 8, 2, 1, 7, 3, 5, 6)
# A 0, B 3, A 1, B 4, A 2: top row for X on the fifth move.
TOP_ROW_WIN = (0, 3, 1, 4, 2)

EMPTY_BOARD = (Mark.EMPTY,) * 9


class TestNewSession:
    def test_initial_state(self) -> None:
        session = GameSession()
        assert session.turn == 1
        assert session.phase == GamePhase.IN_PROGRESS
        assert session.winner is None
        assert not session.is_game_over
        assert session.board.snapshot() == EMPTY_BOARD

    def test_player_a_moves_first(self) -> None:
        session = GameSession()
        assert session.current_mark == Mark.X
        assert session.current_player.mark == Mark.X

    def test_default_players(self) -> None:
        session = GameSession()
        assert session.current_player == Player(Mark.X, "Player X")
        session.play_move(0)
        assert session.current_player == Player(Mark.O, "Player O")

    def test_player_b_defaults_to_other_mark(self) -> None:
        session = GameSession(Player(Mark.O, "Ann"))
        assert session.current_mark == Mark.O
        session.play_move(0)
        assert session.current_player == Player(Mark.X, "Player X")

    def test_custom_players(self) -> None:
        session = GameSession(Player(Mark.X, "Ann"), Player(Mark.O, "Bob"))
        session.play_move(0)
        assert session.current_player.name == "Bob"

    def test_players_need_distinct_marks(self) -> None:
        with pytest.raises(ValueError):
            GameSession(Player(Mark.X), Player(Mark.X))

    def test_sessions_are_independent(self) -> None:
        first = GameSession()
        second = GameSession()
        first.play_move(4)
        assert second.board.get_cell(4) == Mark.EMPTY
        assert second.turn == 1


class TestPlayMove:
    def test_turn_alternates(self, session, port) -> None:
        assert session.play_move(0) == MoveOutcome.CONTINUE
        assert session.board.get_cell(0) == Mark.X
        assert session.turn == 2
        assert session.current_mark == Mark.O

        assert session.play_move(1) == MoveOutcome.CONTINUE
        assert session.board.get_cell(1) == Mark.O
        assert session.turn == 3
        assert port.events == [("next_turn", Mark.O), ("next_turn", Mark.X)]

    def test_occupied_cell_is_noop(self, session, port) -> None:
        session.play_move(4)
        before = session.board.snapshot()

        assert session.play_move(4) == MoveOutcome.REJECTED_OCCUPIED
        assert session.board.snapshot() == before
        assert session.turn == 2
        assert session.current_mark == Mark.O
        assert port.events == [("next_turn", Mark.O)]

    def test_rejections_are_not_accepted(self) -> None:
        assert not MoveOutcome.REJECTED_OCCUPIED.accepted
        assert not MoveOutcome.REJECTED_GAME_OVER.accepted
        assert MoveOutcome.CONTINUE.accepted
        assert MoveOutcome.WIN.accepted
        assert MoveOutcome.DRAW.accepted

    @pytest.mark.parametrize("index", [-1, 9, 42])
    def test_out_of_range_fails_fast(self, session, port, index: int) -> None:
        with pytest.raises(OutOfRangeError):
            session.play_move(index)
        assert session.turn == 1
        assert session.board.snapshot() == EMPTY_BOARD
        assert port.events == []

    def test_out_of_range_checked_even_after_game_over(self, session, play) -> None:
        play(session, TOP_ROW_WIN)
        with pytest.raises(OutOfRangeError):
            session.play_move(9)


class TestWin:
    def test_top_row_win(self, session, port, play) -> None:
        outcomes = play(session, TOP_ROW_WIN)

        assert outcomes[-1] == MoveOutcome.WIN
        assert outcomes[:-1] == [MoveOutcome.CONTINUE] * 4
        assert session.phase == GamePhase.WON
        assert session.winner is not None and session.winner.mark == Mark.X
        assert session.is_game_over
        assert port.events[-1] == ("win", Mark.X)

    def test_turn_not_incremented_on_win(self, session, play) -> None:
        play(session, TOP_ROW_WIN)
        assert session.turn == 5

    def test_winning_line_exposed(self, session, play) -> None:
        play(session, TOP_ROW_WIN)
        assert session.winning_line == (0, 1, 2)

    def test_no_winning_line_while_in_progress(self, session, play) -> None:
        play(session, (0, 3))
        assert session.winning_line is None

    def test_player_b_can_win(self, session, port, play) -> None:
        # X: 0, 1, 8; O: 3, 4, 5 (middle row)
        outcomes = play(session, (0, 3, 1, 4, 8, 5))
        assert outcomes[-1] == MoveOutcome.WIN
        assert session.winner is not None and session.winner.mark == Mark.O
        assert session.turn == 6
        assert port.events[-1] == ("win", Mark.O)

    def test_win_on_ninth_move_is_not_draw(self, session, port, play) -> None:
        # Final board xox/oxo/oxx: the ninth placement completes 0-4-8.
        outcomes = play(session, (0, 1, 2, 3, 4, 5, 7, 6, 8))
        assert outcomes[-1] == MoveOutcome.WIN
        assert session.phase == GamePhase.WON
        assert "draw" not in port.kinds
        assert port.events[-1] == ("win", Mark.X)

    def test_moves_after_win_are_noops(self, session, port, play) -> None:
        play(session, TOP_ROW_WIN)
        before = session.board.snapshot()
        events_before = list(port.events)

        assert session.play_move(8) == MoveOutcome.REJECTED_GAME_OVER
        assert session.board.snapshot() == before
        assert session.phase == GamePhase.WON
        assert session.turn == 5
        assert port.events == events_before


class TestDraw:
    def test_draw_sequence(self, session, port, play) -> None:
        outcomes = play(session, DRAW_SEQUENCE)

        assert outcomes[-1] == MoveOutcome.DRAW
        assert MoveOutcome.WIN not in outcomes
        assert session.phase == GamePhase.DRAW
        assert session.winner is None
        assert Mark.EMPTY not in session.board.snapshot()
        assert port.events[-1] == ("draw", None)

    def test_turn_stays_at_nine(self, session, play) -> None:
        play(session, DRAW_SEQUENCE)
        assert session.turn == 9

    def test_notifications_per_move(self, session, port, play) -> None:
        play(session, DRAW_SEQUENCE)
        assert port.kinds == ["next_turn"] * 8 + ["draw"]
        marks = [mark for _kind, mark in port.events[:8]]
        assert marks == [Mark.O, Mark.X] * 4

    def test_moves_after_draw_are_noops(self, session, port, play) -> None:
        play(session, DRAW_SEQUENCE)
        before = session.board.snapshot()
        assert session.play_move(0) == MoveOutcome.REJECTED_GAME_OVER
        assert session.board.snapshot() == before
        assert session.phase == GamePhase.DRAW
        assert len(port.events) == 9


class TestReset:
    @pytest.mark.parametrize("moves", [(), (4, 0), TOP_ROW_WIN, DRAW_SEQUENCE])
    def test_reset_restores_initial_state(self, session, port, play, moves) -> None:
        play(session, moves)

        session.reset()

        assert session.turn == 1
        assert session.phase == GamePhase.IN_PROGRESS
        assert session.winner is None
        assert session.current_mark == Mark.X
        assert session.board.snapshot() == EMPTY_BOARD
        assert port.events[-1] == ("cleared", None)

    def test_play_after_reset(self, session, play) -> None:
        play(session, TOP_ROW_WIN)
        session.reset()
        assert session.play_move(0) == MoveOutcome.CONTINUE
        assert session.board.get_cell(0) == Mark.X


class TestEvents:
    def test_plain_callbacks(self, play) -> None:
        session = GameSession()
        wins: list[Mark] = []
        draws: list[bool] = []
        session.events.on_win.append(wins.append)
        session.events.on_draw.append(lambda: draws.append(True))
        play(session, TOP_ROW_WIN)
        assert wins == [Mark.X]
        assert draws == []

    def test_attach_is_idempotent(self, session, port) -> None:
        session.attach(port)
        session.play_move(0)
        assert port.events == [("next_turn", Mark.O)]

    def test_detach_stops_notifications(self, session, port) -> None:
        session.detach(port)
        session.play_move(0)
        session.reset()
        assert port.events == []

    def test_multiple_ports(self, session, port) -> None:
        second = type(port)()
        session.attach(second)
        session.reset()
        assert port.events == second.events == [("cleared", None)]

    def test_handler_removing_itself_does_not_skip_the_rest(self, session, port) -> None:
        def leave() -> None:
            session.events.on_cleared[:] = [
                cb for cb in session.events.on_cleared if cb is not leave
            ]

        session.events.on_cleared.append(leave)
        session.attach(port)  # now runs after ``leave``
        session.reset()

        assert port.events == [("cleared", None)]
        assert leave not in session.events.on_cleared

    def test_port_detached_by_another_handler_still_sees_current_emit(
        self, session, port
    ) -> None:
        session.events.on_win.insert(0, lambda _mark: session.detach(port))
        for index in TOP_ROW_WIN:
            session.play_move(index)
        assert port.events[-1] == ("win", Mark.X)
        session.reset()
        assert port.events[-1] == ("win", Mark.X)


class TestLogging:
    def test_outcome_logged_at_info(self, play, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession()
        with caplog.at_level(logging.INFO, logger="noughts.game.session"):
            play(session, TOP_ROW_WIN)
        assert "Player X wins on turn 5" in caplog.text

    def test_draw_logged_at_info(self, play, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession()
        with caplog.at_level(logging.INFO, logger="noughts.game.session"):
            play(session, DRAW_SEQUENCE)
        assert "Game drawn on turn 9" in caplog.text

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession()
        session.play_move(4)
        with caplog.at_level(logging.DEBUG, logger="noughts.game.session"):
            session.play_move(4)
        assert "cell is occupied" in caplog.text
