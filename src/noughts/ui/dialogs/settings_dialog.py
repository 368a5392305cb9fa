"""SettingsDialog: application-wide settings."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from noughts.ui.i18n import LANGUAGES, t
from noughts.ui.styles.theme import BOARD_THEMES

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings (kept in memory for one run)."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    highlight_winning_line: bool = True

    # Game over
    show_endgame_dialog: bool = True


# ── Dialog ───────────────────────────────────────────────────────────────────


class SettingsDialog(QDialog):
    """Edits an :class:`AppSettings` in place when accepted."""

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self.setModal(True)
        self.setMinimumWidth(360)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(12)
        form.setContentsMargins(16, 16, 16, 16)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        self._lang_combo.setCurrentIndex(max(0, self._lang_combo.findText(self._settings.language)))
        form.addRow(self._lang_label, self._lang_combo)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(BOARD_THEMES))
        self._theme_combo.setCurrentIndex(
            max(0, self._theme_combo.findText(self._settings.board_theme))
        )
        form.addRow(self._theme_label, self._theme_combo)

        self._highlight_check = QCheckBox()
        self._highlight_check.setChecked(self._settings.highlight_winning_line)
        form.addRow(self._highlight_check)

        self._endgame_check = QCheckBox()
        self._endgame_check.setChecked(self._settings.show_endgame_dialog)
        form.addRow(self._endgame_check)

        main.addLayout(form)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        self._lang_label.setText(s.settings_language)
        self._theme_label.setText(s.settings_board_theme)
        self._highlight_check.setText(s.settings_highlight_line)
        self._endgame_check.setText(s.settings_show_endgame)

    def _on_accept(self) -> None:
        s = self._settings
        s.language = self._lang_combo.currentText()
        s.board_theme = self._theme_combo.currentText()
        s.highlight_winning_line = self._highlight_check.isChecked()
        s.show_endgame_dialog = self._endgame_check.isChecked()
        self.accept()
