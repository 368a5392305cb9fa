"""Player identities."""

from __future__ import annotations

from dataclasses import dataclass

from noughts.core.enums import Mark


@dataclass(frozen=True)
class Player:
    """A participant, distinguished by the mark it places.

    Args:
        mark: ``Mark.X`` or ``Mark.O``.
        name: Display name; defaults to ``"Player X"`` / ``"Player O"``.
    """

    mark: Mark
    name: str = ""

    def __post_init__(self) -> None:
        if self.mark == Mark.EMPTY:
            raise ValueError("A player needs a non-empty mark")
        if not self.name:
            object.__setattr__(self, "name", f"Player {self.mark.symbol}")
