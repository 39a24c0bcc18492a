"""GridScene — QGraphicsScene that draws the sudoku grid."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from emodoku.core.render import CellStyle, GridRender
from emodoku.core.types import ALL_CELLS, BOX_SIZE, GRID_SIZE, Cell
from emodoku.ui.i18n import t
from emodoku.ui.styles.theme import GridTheme


class GridScene(QGraphicsScene):
    """Renders cells, box borders, the selection and the waiting overlay.

    Signals:
        cell_activated(int, int): The user clicked the cell (row, col).
        dismissed(): The user clicked outside the grid.
    """

    cell_activated = pyqtSignal(int, int)
    dismissed = pyqtSignal()

    TILE = 60  # px per cell

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = GridTheme.paper()
        self._render: GridRender | None = None
        self._selected: Cell | None = None

        # Visual layers
        self._cell_items: dict[Cell, QGraphicsRectItem] = {}
        self._text_items: dict[Cell, QGraphicsSimpleTextItem] = {}
        self._line_items: list[QGraphicsLineItem] = []
        self._selection_item: QGraphicsRectItem | None = None
        self._waiting_item: QGraphicsSimpleTextItem | None = None

        self._draw_grid()

    # ── Public API ───────────────────────────────────────────────────────

    def set_render(self, render: GridRender) -> None:
        """Show a freshly computed grid (full pass over all 81 cells)."""
        self._render = render
        self._sync_cells()

    def set_selected(self, cell: Cell | None) -> None:
        """Highlight *cell*, or remove the highlight."""
        self._selected = cell
        if self._selection_item is not None:
            self.removeItem(self._selection_item)
            self._selection_item = None
        if cell is None:
            return
        t_ = self.TILE
        rect = QGraphicsRectItem((cell.col - 1) * t_, (cell.row - 1) * t_, t_, t_)
        rect.setBrush(QBrush(self._theme.selected_fill))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        self._selection_item = rect

    def set_theme(self, theme: GridTheme) -> None:
        self._theme = theme
        self._draw_grid()
        self._sync_cells()
        self.set_selected(self._selected)

    def cell_text(self, row: int, col: int) -> str:
        """Text currently shown in a cell."""
        return self._text_items[Cell(row, col)].text()

    def is_waiting(self) -> bool:
        return self._waiting_item is not None and self._waiting_item.isVisible()

    # ── Grid drawing ─────────────────────────────────────────────────────

    def _draw_grid(self) -> None:
        """Draw or redraw the 81 cells and the grid lines."""
        for item in list(self._cell_items.values()) + list(self._text_items.values()):
            self.removeItem(item)
        self._cell_items.clear()
        self._text_items.clear()
        for line in self._line_items:
            self.removeItem(line)
        self._line_items.clear()
        if self._waiting_item is not None:
            self.removeItem(self._waiting_item)
            self._waiting_item = None

        t_ = self.TILE
        font = QFont("Adwaita Sans", t_ // 2)

        for cell in ALL_CELLS:
            rect = QGraphicsRectItem((cell.col - 1) * t_, (cell.row - 1) * t_, t_, t_)
            rect.setBrush(QBrush(self._theme.background))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._cell_items[cell] = rect

            txt = QGraphicsSimpleTextItem("")
            txt.setFont(font)
            txt.setZValue(1)
            self.addItem(txt)
            self._text_items[cell] = txt

        size = GRID_SIZE * t_
        for i in range(GRID_SIZE + 1):
            is_box = i % BOX_SIZE == 0
            pen = QPen(self._theme.box_line if is_box else self._theme.thin_line)
            pen.setWidth(3 if is_box else 1)
            for x1, y1, x2, y2 in ((0, i * t_, size, i * t_), (i * t_, 0, i * t_, size)):
                line = self.addLine(x1, y1, x2, y2, pen)
                assert line is not None
                line.setZValue(2)
                self._line_items.append(line)

        waiting = QGraphicsSimpleTextItem(t().waiting_for_solver)
        waiting.setFont(QFont("Adwaita Sans", max(10, t_ // 4)))
        waiting.setBrush(QBrush(self._theme.waiting_text))
        bounds = waiting.boundingRect()
        waiting.setPos((size - bounds.width()) / 2, (size - bounds.height()) / 2)
        waiting.setZValue(3)
        self.addItem(waiting)
        self._waiting_item = waiting

        self.setSceneRect(QRectF(0, 0, size, size))

    # ── Cell synchronisation ─────────────────────────────────────────────

    def _sync_cells(self) -> None:
        render = self._render
        ready = render is not None and render.ready
        if self._waiting_item is not None:
            self._waiting_item.setVisible(not ready)
        if render is None:
            return

        t_ = self.TILE
        for shown in render.cells:
            cell = shown.cell
            txt = self._text_items[cell]
            txt.setText(shown.text)
            is_given = shown.style == CellStyle.GIVEN
            txt.setBrush(
                QBrush(self._theme.given_text if is_given else self._theme.derived_text)
            )
            font = txt.font()
            font.setBold(is_given)
            txt.setFont(font)
            bounds = txt.boundingRect()
            txt.setPos(
                (cell.col - 1) * t_ + (t_ - bounds.width()) / 2,
                (cell.row - 1) * t_ + (t_ - bounds.height()) / 2,
            )
            fill = self._theme.given_fill if is_given else self._theme.background
            self._cell_items[cell].setBrush(QBrush(fill))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        cell = self._pos_to_cell(event.scenePos())
        if cell is None:
            self.dismissed.emit()
        else:
            self.cell_activated.emit(cell.row, cell.col)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_cell(self, pos: QPointF) -> Cell | None:
        """Scene position -> grid cell."""
        t_ = self.TILE
        col = int(pos.x() // t_)
        row = int(pos.y() // t_)
        if not (0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE):
            return None
        return Cell(row + 1, col + 1)
