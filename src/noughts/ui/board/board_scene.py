"""BoardScene: QGraphicsScene that draws the 3x3 grid and the marks."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QLineF, QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from noughts.core.board import BOARD_CELLS, BOARD_SIDE, col_of, make_index, row_of
from noughts.core.enums import Mark
from noughts.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the grid, the marks and the winning-line highlight.

    Signals:
        cell_clicked(int): Index (0..8) of the cell the user clicked.
    """

    cell_clicked = pyqtSignal(int)

    TILE = 120  # px per cell
    GAP = 4  # grid line width between cells
    MARK_MARGIN = 0.22  # fraction of the tile left blank around a mark

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._cells: tuple[Mark, ...] = (Mark.EMPTY,) * BOARD_CELLS
        self._interactive = True

        # Visual layers
        self._grid_item: QGraphicsRectItem | None = None
        self._cell_items: dict[int, QGraphicsRectItem] = {}
        self._mark_items: dict[int, list[QGraphicsItem]] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._highlighted_line: tuple[int, ...] | None = None

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_cells(self, cells: Sequence[Mark]) -> None:
        """Update the displayed marks (full redraw of marks)."""
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"Expected {BOARD_CELLS} cells, got {len(cells)}")
        self._cells = tuple(cells)
        self._sync_marks()

    def mark_at(self, index: int) -> Mark:
        return self._cells[index]

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable cell clicks."""
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_marks()
        self.highlight_line(self._highlighted_line)

    def highlight_line(self, line: Sequence[int] | None) -> None:
        """Overlay the given cells, or clear the overlay with ``None``."""
        self._clear_items(self._highlight_items)
        self._highlighted_line = tuple(line) if line is not None else None
        if line is None:
            return
        for index in line:
            self._highlight_items.append(self._make_highlight(index, self._theme.winning_line))

    @property
    def highlighted_line(self) -> tuple[int, ...] | None:
        return self._highlighted_line

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the background, the grid and the nine cells."""
        for item in self._cell_items.values():
            self.removeItem(item)
        self._cell_items.clear()
        if self._grid_item is not None:
            self.removeItem(self._grid_item)

        t = self.TILE
        side = BOARD_SIDE * t
        self.setBackgroundBrush(QBrush(self._theme.background))

        # Grid lines are the gaps between cells showing this rect through.
        self._grid_item = QGraphicsRectItem(QRectF(0, 0, side, side))
        self._grid_item.setBrush(QBrush(self._theme.grid))
        self._grid_item.setPen(QPen(Qt.PenStyle.NoPen))
        self._grid_item.setZValue(-1)
        self.addItem(self._grid_item)

        for index in range(BOARD_CELLS):
            rect = QGraphicsRectItem(self._cell_rect(index))
            rect.setBrush(QBrush(self._theme.cell))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._cell_items[index] = rect

        self.setSceneRect(0, 0, side, side)

    # ── Mark synchronisation ─────────────────────────────────────────────

    def _sync_marks(self) -> None:
        """Re-create all mark items from the current cells."""
        for items in self._mark_items.values():
            for item in items:
                self.removeItem(item)
        self._mark_items.clear()

        for index, mark in enumerate(self._cells):
            if mark == Mark.EMPTY:
                continue
            items = self._make_mark(index, mark)
            for item in items:
                item.setZValue(1)
                self.addItem(item)
            self._mark_items[index] = items

    def _make_mark(self, index: int, mark: Mark) -> list[QGraphicsItem]:
        rect = self._cell_rect(index)
        inset = self.TILE * self.MARK_MARGIN
        inner = rect.adjusted(inset, inset, -inset, -inset)
        stroke = max(4.0, self.TILE / 14)

        if mark == Mark.X:
            pen = QPen(self._theme.mark_x, stroke)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            first = QGraphicsLineItem(QLineF(inner.topLeft(), inner.bottomRight()))
            second = QGraphicsLineItem(QLineF(inner.topRight(), inner.bottomLeft()))
            first.setPen(pen)
            second.setPen(pen)
            return [first, second]

        ellipse = QGraphicsEllipseItem(inner)
        ellipse.setPen(QPen(self._theme.mark_o, stroke))
        ellipse.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        return [ellipse]

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        index = self._pos_to_index(event.scenePos())
        if index is None:
            return super().mousePressEvent(event)

        self.cell_clicked.emit(index)
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _cell_rect(self, index: int) -> QRectF:
        t = self.TILE
        half_gap = self.GAP / 2
        return QRectF(
            col_of(index) * t + half_gap,
            row_of(index) * t + half_gap,
            t - self.GAP,
            t - self.GAP,
        )

    def _pos_to_index(self, pos: QPointF) -> int | None:
        """Scene position -> cell index."""
        t = self.TILE
        if pos.x() < 0 or pos.y() < 0:
            return None
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIDE and 0 <= row < BOARD_SIDE):
            return None
        return make_index(row, col)

    def _make_highlight(self, index: int, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a cell."""
        rect = QGraphicsRectItem(self._cell_rect(index))
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
