"""ControlPanel: status message and the restart button."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSizePolicy, QWidget

from noughts.ui.i18n import t


class ControlPanel(QWidget):
    """Message line under the board plus a restart button."""

    restart_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._message = QLabel()
        self._message.setFont(QFont("Helvetica Neue", 12))
        self._message.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self._message.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        layout.addWidget(self._message)

        self._btn_restart = QPushButton()
        self._btn_restart.setMinimumHeight(36)
        self._btn_restart.clicked.connect(self.restart_clicked)
        layout.addWidget(self._btn_restart)

    def retranslate_ui(self) -> None:
        self._btn_restart.setText(t().btn_restart)

    def set_message(self, text: str) -> None:
        self._message.setText(text)

    def message(self) -> str:
        return self._message.text()
