"""Visual theme constants and QSS styles for Emodoku."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class GridTheme:
    """Colour scheme for the sudoku grid."""

    background: QColor
    thin_line: QColor  # between cells
    box_line: QColor  # 3x3 box borders
    given_text: QColor
    derived_text: QColor
    given_fill: QColor  # behind confirmed givens
    selected_fill: QColor
    waiting_text: QColor

    @classmethod
    def paper(cls) -> GridTheme:
        return cls(
            background=QColor(250, 248, 240),
            thin_line=QColor(170, 170, 170),
            box_line=QColor(40, 40, 40),
            given_text=QColor(20, 20, 20),
            derived_text=QColor(40, 90, 170),
            given_fill=QColor(230, 226, 210),
            selected_fill=QColor(255, 230, 120, 160),
            waiting_text=QColor(120, 120, 120),
        )

    @classmethod
    def night(cls) -> GridTheme:
        return cls(
            background=QColor(36, 38, 44),
            thin_line=QColor(80, 84, 92),
            box_line=QColor(200, 200, 200),
            given_text=QColor(235, 235, 235),
            derived_text=QColor(120, 170, 240),
            given_fill=QColor(58, 62, 72),
            selected_fill=QColor(38, 79, 120, 180),
            waiting_text=QColor(150, 150, 150),
        )

    @classmethod
    def by_name(cls, name: str) -> GridTheme:
        """Look up a theme; unknown names fall back to paper."""
        if name == "Night":
            return cls.night()
        return cls.paper()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    font-size: 18px;
    qproperty-alignment: AlignCenter;
}
QLineEdit[conflict="true"] {
    border: 2px solid #c04040;
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
