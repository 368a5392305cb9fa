"""EndgameDialog: modal announcing the result, with a restart action."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from noughts.ui.i18n import t


class EndgameDialog(QDialog):
    """Shows "X Won!" / "It's a Draw!".

    Accepting the dialog (the Restart button) means the user wants a new
    game; closing it leaves the finished board on screen.
    """

    def __init__(self, message: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(280)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._setup_ui(message)
        self.retranslate_ui()

    def _setup_ui(self, message: str) -> None:
        main = QVBoxLayout(self)
        main.setContentsMargins(20, 20, 20, 16)
        main.setSpacing(16)

        self._message = QLabel(message)
        self._message.setFont(QFont("Helvetica Neue", 18, QFont.Weight.Bold))
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main.addWidget(self._message)

        self._buttons = QDialogButtonBox()
        self._btn_restart = QPushButton()
        self._btn_restart.setDefault(True)
        self._buttons.addButton(self._btn_restart, QDialogButtonBox.ButtonRole.AcceptRole)
        self._btn_close = self._buttons.addButton(QDialogButtonBox.StandardButton.Close)
        self._buttons.accepted.connect(self.accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.endgame_title)
        self._btn_restart.setText(s.endgame_restart)
        if self._btn_close is not None:
            self._btn_close.setText(s.endgame_close)

    def message(self) -> str:
        return self._message.text()

    @staticmethod
    def ask(message: str, parent: QWidget | None = None) -> bool:
        """Show the dialog; True when the user chose to restart."""
        dlg = EndgameDialog(message, parent)
        return dlg.exec() == QDialog.DialogCode.Accepted
