"""GameSession: the turn-taking state machine for one game.

Coordinates: Board, Rules, the two Players.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from noughts.core.board import Board, check_index
from noughts.core.enums import Mark
from noughts.core.rules import Line, Rules
from noughts.game.interfaces import GamePhase, IGameSession, IPresentationPort, MoveOutcome
from noughts.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MarkCallback = Callable[[Mark], None]
NotifyCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_next_turn: list[MarkCallback] = field(default_factory=list)
    on_win: list[MarkCallback] = field(default_factory=list)
    on_draw: list[NotifyCallback] = field(default_factory=list)
    on_cleared: list[NotifyCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Runs one game: validates moves, alternates turns, notifies listeners.

    The turn counter starts at 1; odd turns belong to player A (``X`` by
    default), even turns to player B, who gets the other mark unless given
    one. A winning move does not advance the counter, so after a win on the
    fifth placement ``turn`` is still 5.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_board", "_players", "_turn", "_phase", "_winner", "events")

    def __init__(
        self,
        player_a: Player | None = None,
        player_b: Player | None = None,
    ) -> None:
        a = player_a or Player(Mark.X)
        b = player_b or Player(a.mark.opposite)
        if a.mark == b.mark:
            raise ValueError("Players must use different marks")
        self._players: tuple[Player, Player] = (a, b)
        self._board = Board()
        self._turn = 1
        self._phase = GamePhase.IN_PROGRESS
        self._winner: Player | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._phase != GamePhase.IN_PROGRESS

    @property
    def current_player(self) -> Player:
        return self._players[0] if self._turn % 2 == 1 else self._players[1]

    @property
    def current_mark(self) -> Mark:
        return self.current_player.mark

    @property
    def winning_line(self) -> Line | None:
        if self._phase != GamePhase.WON:
            return None
        return Rules.winning_line(self._board)

    # ── IGameSession impl ────────────────────────────────────────────────

    def play_move(self, index: int) -> MoveOutcome:
        check_index(index)

        if self.is_game_over:
            _LOGGER.debug("Ignoring move at %d: game is over", index)
            return MoveOutcome.REJECTED_GAME_OVER
        if Rules.is_occupied(self._board, index):
            _LOGGER.debug("Ignoring move at %d: cell is occupied", index)
            return MoveOutcome.REJECTED_OCCUPIED

        mover = self.current_player
        self._board.set_cell(index, mover.mark)
        _LOGGER.debug("Turn %d: %s placed at %d", self._turn, mover.mark, index)

        # Win before draw: a line completed on the ninth placement is a win.
        if Rules.check_winner(self._board):
            self._phase = GamePhase.WON
            self._winner = mover
            _LOGGER.info("%s wins on turn %d", mover.name, self._turn)
            self._emit_win(mover.mark)
            return MoveOutcome.WIN

        if Rules.is_draw(self._board, self._turn):
            self._phase = GamePhase.DRAW
            _LOGGER.info("Game drawn on turn %d", self._turn)
            self._emit_draw()
            return MoveOutcome.DRAW

        self._turn += 1
        self._emit_next_turn(self.current_mark)
        return MoveOutcome.CONTINUE

    def reset(self) -> None:
        self._board.reset()
        self._turn = 1
        self._phase = GamePhase.IN_PROGRESS
        self._winner = None
        _LOGGER.debug("Board cleared")
        self._emit_cleared()

    # ── Presentation port wiring ─────────────────────────────────────────

    def attach(self, port: IPresentationPort) -> None:
        """Subscribe all four handlers of *port* (idempotent)."""
        self.detach(port)
        self.events.on_next_turn.append(port.next_turn)
        self.events.on_win.append(port.win)
        self.events.on_draw.append(port.draw)
        self.events.on_cleared.append(port.cleared)

    def detach(self, port: IPresentationPort) -> None:
        events = self.events
        events.on_next_turn[:] = [cb for cb in events.on_next_turn if cb != port.next_turn]
        events.on_win[:] = [cb for cb in events.on_win if cb != port.win]
        events.on_draw[:] = [cb for cb in events.on_draw if cb != port.draw]
        events.on_cleared[:] = [cb for cb in events.on_cleared if cb != port.cleared]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_next_turn(self, mark: Mark) -> None:
        for cb in tuple(self.events.on_next_turn):
            cb(mark)

    def _emit_win(self, mark: Mark) -> None:
        for cb in tuple(self.events.on_win):
            cb(mark)

    def _emit_draw(self) -> None:
        for cb in tuple(self.events.on_draw):
            cb()

    def _emit_cleared(self) -> None:
        for cb in tuple(self.events.on_cleared):
            cb()
