"""GridView — QGraphicsView wrapper for the grid scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy

from emodoku.ui.board.grid_scene import GridScene


class GridView(QGraphicsView):
    """Displays the grid scene, scaled to fit the widget.

    Signals:
        cell_activated(int, int): Bubbled up from GridScene.
        dismissed(): Bubbled up from GridScene.
    """

    cell_activated = pyqtSignal(int, int)
    dismissed = pyqtSignal()

    def __init__(self, parent=None) -> None:
        self._scene = GridScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(360, 360)

        # Bubble scene signals
        self._scene.cell_activated.connect(self.cell_activated.emit)
        self._scene.dismissed.connect(self.dismissed.emit)

    @property
    def grid_scene(self) -> GridScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
