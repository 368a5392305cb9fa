"""Visual theme constants and QSS styles for Noughts."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the game board."""

    background: QColor
    cell: QColor
    grid: QColor
    mark_x: QColor
    mark_o: QColor
    winning_line: QColor  # overlay on the three winning cells

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(43, 43, 43),
            cell=QColor(60, 60, 60),
            grid=QColor(85, 85, 85),
            mark_x=QColor(138, 202, 255),  # light blue
            mark_o=QColor(255, 138, 138),  # light red
            winning_line=QColor(155, 199, 0, 105),  # green
        )

    @classmethod
    def midnight(cls) -> BoardTheme:
        return cls(
            background=QColor(18, 22, 38),
            cell=QColor(30, 36, 60),
            grid=QColor(70, 80, 120),
            mark_x=QColor(120, 220, 232),
            mark_o=QColor(250, 200, 90),
            winning_line=QColor(255, 255, 255, 60),
        )

    @classmethod
    def paper(cls) -> BoardTheme:
        return cls(
            background=QColor(236, 232, 220),
            cell=QColor(250, 248, 240),
            grid=QColor(120, 110, 95),
            mark_x=QColor(40, 70, 140),
            mark_o=QColor(170, 40, 40),
            winning_line=QColor(255, 220, 0, 110),
        )


BOARD_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Midnight": BoardTheme.midnight(),
    "Paper": BoardTheme.paper(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QDialog {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QCheckBox {
    color: #e0e0e0;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
