"""Abstract interfaces for the game layer.

The session depends on :class:`IPresentationPort` rather than on any
widget, so the rules run the same under Qt, in tests, or headless.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from noughts.core.enums import Mark


# ── Session FSM states ───────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a single game."""

    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class MoveOutcome(IntEnum):
    """What ``play_move`` did with a move request."""

    REJECTED_GAME_OVER = auto()
    REJECTED_OCCUPIED = auto()
    CONTINUE = auto()
    WIN = auto()
    DRAW = auto()

    @property
    def accepted(self) -> bool:
        return self not in (MoveOutcome.REJECTED_GAME_OVER, MoveOutcome.REJECTED_OCCUPIED)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPresentationPort(ABC):
    """Receiver of session notifications (one per accepted move or reset)."""

    @abstractmethod
    def next_turn(self, mark: Mark) -> None:
        """The game continues and *mark* is now to move."""

    @abstractmethod
    def win(self, mark: Mark) -> None:
        """*mark* completed a line; the game is over."""

    @abstractmethod
    def draw(self) -> None:
        """The board is full with no completed line; the game is over."""

    @abstractmethod
    def cleared(self) -> None:
        """The board has been reset to empty."""


class IGameSession(ABC):
    """Interface for the session controller."""

    @abstractmethod
    def play_move(self, index: int) -> MoveOutcome:
        """Place the current player's mark at *index* (0..8)."""

    @abstractmethod
    def reset(self) -> None:
        """Start over with an empty board and player A to move."""
