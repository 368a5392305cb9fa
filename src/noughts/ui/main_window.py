"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from noughts.core.enums import Mark
from noughts.core.rules import Rules
from noughts.game.session import GameSession
from noughts.ui.board.board_view import BoardView
from noughts.ui.dialogs.endgame_dialog import EndgameDialog
from noughts.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from noughts.ui.i18n import set_language, t
from noughts.ui.panels.control_panel import ControlPanel
from noughts.ui.styles.theme import BOARD_THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Noughts."""

    def __init__(
        self,
        session: GameSession | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(360, 440)
        self.resize(480, 560)

        self._session = session or GameSession()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()
        self._sync_board()
        self._show_turn(self._session.current_mark)

    @property
    def session(self) -> GameSession:
        return self._session

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_restart = QAction(self)
        self._act_restart.setShortcut("Ctrl+R")
        self._act_restart.triggered.connect(self._on_restart)
        self._menu_game.addAction(self._act_restart)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu("")
        assert self._menu_settings is not None

        self._act_settings = QAction(self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_restart.setText(s.menu_restart)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._control_panel.retranslate_ui()
        self._refresh_message()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        self._control_panel.restart_clicked.connect(self._on_restart)

    def _connect_game_events(self) -> None:
        """Subscribe to GameSession callbacks (idempotent)."""
        events = self._session.events
        self._replace_callback(events.on_next_turn, self._on_next_turn)
        self._replace_callback(events.on_win, self._on_win)
        self._replace_callback(events.on_draw, self._on_draw)
        self._replace_callback(events.on_cleared, self._on_cleared)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameSession callbacks."""
        events = self._session.events
        self._remove_callback(events.on_next_turn, self._on_next_turn)
        self._remove_callback(events.on_win, self._on_win)
        self._remove_callback(events.on_draw, self._on_draw)
        self._remove_callback(events.on_cleared, self._on_cleared)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── User actions ─────────────────────────────────────────────────────

    def _on_cell_clicked(self, index: int) -> None:
        self._session.play_move(index)

    def _on_restart(self) -> None:
        self._session.reset()

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    # ── Session notifications ────────────────────────────────────────────

    def _on_next_turn(self, mark: Mark) -> None:
        self._sync_board()
        self._show_turn(mark)

    def _on_win(self, mark: Mark) -> None:
        self._sync_board()
        self._board_view.set_interactive(False)
        text = t().msg_win.format(mark=mark.symbol)
        self._control_panel.set_message(text)
        self._queue_endgame(text)

    def _on_draw(self) -> None:
        self._sync_board()
        self._board_view.set_interactive(False)
        text = t().msg_draw
        self._control_panel.set_message(text)
        self._queue_endgame(text)

    def _on_cleared(self) -> None:
        self._sync_board()
        self._board_view.set_interactive(True)
        self._show_turn(self._session.current_mark)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_board(self) -> None:
        scene = self._board_view.board_scene
        scene.set_cells(self._session.board.snapshot())
        line = self._session.winning_line if self._settings.highlight_winning_line else None
        scene.highlight_line(line)

    def _show_turn(self, mark: Mark) -> None:
        self._control_panel.set_message(t().msg_turn.format(mark=mark.symbol))

    def _refresh_message(self) -> None:
        session = self._session
        winner = Rules.winner(session.board)
        if winner is not None:
            self._control_panel.set_message(t().msg_win.format(mark=winner.symbol))
        elif session.is_game_over:
            self._control_panel.set_message(t().msg_draw)
        else:
            self._show_turn(session.current_mark)

    def _queue_endgame(self, text: str) -> None:
        """Show the game-over dialog once the current move has finished."""
        if not self._settings.show_endgame_dialog:
            return
        QTimer.singleShot(0, lambda: self._show_endgame(text))

    def _show_endgame(self, text: str) -> None:
        # The game may already have been restarted, or the window closed.
        if not self._session.is_game_over or not self.isVisible():
            return
        if EndgameDialog.ask(text, self):
            self._session.reset()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        theme = BOARD_THEMES.get(s.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            theme = BoardTheme.default()
        self._board_view.board_scene.set_theme(theme)
        self._sync_board()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        super().closeEvent(event)
