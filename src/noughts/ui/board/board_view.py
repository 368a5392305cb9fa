"""BoardView: the widget showing the 3x3 board."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from noughts.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Keeps the board square and scaled to the widget.

    The pointer turns into a hand over a board that accepts moves and back
    into an arrow once the game is over.

    Signals:
        cell_clicked(int): Index of the clicked cell, from BoardScene.
    """

    cell_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(240, 240)

        self._scene.cell_clicked.connect(self.cell_clicked.emit)
        self.set_interactive(self._scene.is_interactive())

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def set_interactive(self, interactive: bool) -> None:
        """Accept or ignore cell clicks, updating the pointer to match."""
        self._scene.set_interactive(interactive)
        viewport = self.viewport()
        if viewport is None:
            return
        cursor = Qt.CursorShape.PointingHandCursor if interactive else Qt.CursorShape.ArrowCursor
        viewport.setCursor(cursor)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
