"""Shared pytest fixtures: headless Qt, locale reset and game sessions."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from noughts.core.enums import Mark
from noughts.game.interfaces import IPresentationPort, MoveOutcome
from noughts.game.session import GameSession

# Headless Linux has no display server; let Qt render offscreen there.
if sys.platform.startswith("linux") and not any(
    name in os.environ for name in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class RecordingPort(IPresentationPort):
    """Presentation port that records every notification as ``(kind, mark)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Mark | None]] = []

    def next_turn(self, mark: Mark) -> None:
        self.events.append(("next_turn", mark))

    def win(self, mark: Mark) -> None:
        self.events.append(("win", mark))

    def draw(self) -> None:
        self.events.append(("draw", None))

    def cleared(self) -> None:
        self.events.append(("cleared", None))

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _mark in self.events]


@pytest.fixture
def port() -> RecordingPort:
    return RecordingPort()


@pytest.fixture
def session(port: RecordingPort) -> GameSession:
    """A fresh session with ``port`` already attached."""
    game = GameSession()
    game.attach(port)
    return game


@pytest.fixture
def play() -> Callable[[GameSession, tuple[int, ...]], list[MoveOutcome]]:
    """Play a sequence of cell indices and return each outcome."""

    def _play(game: GameSession, moves: tuple[int, ...]) -> list[MoveOutcome]:
        return [game.play_move(index) for index in moves]

    return _play


def _in_ui_package(request: pytest.FixtureRequest) -> bool:
    return "ui" in request.node.path.parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The one QApplication shared by every UI test."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_locale() -> Iterator[None]:
    from noughts.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close top-level widgets left by a UI test and flush queued timers."""
    if not _in_ui_package(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    # Pending game-over timers see a hidden window and return.
    app.processEvents()
