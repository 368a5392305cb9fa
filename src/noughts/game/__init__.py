"""Game management layer - session controller, players, presentation port.

Quick start::

    from noughts.game import GameSession

    session = GameSession()
    session.events.on_win.append(lambda mark: print(f"{mark} won"))
    for index in (0, 3, 1, 4, 2):
        session.play_move(index)
"""

from noughts.game.interfaces import (
    GamePhase,
    IGameSession,
    IPresentationPort,
    MoveOutcome,
)
from noughts.game.player import Player
from noughts.game.session import GameEvents, GameSession

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameSession",
    "IPresentationPort",
    "MoveOutcome",
    # Concrete
    "GameEvents",
    "GameSession",
    "Player",
]
