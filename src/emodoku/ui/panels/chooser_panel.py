"""ChooserPanel — value picker / clear prompt for the selected cell."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from emodoku.core.glyphs import GlyphMap
from emodoku.editor.interfaces import ChooserMode
from emodoku.editor.selection import SelectionState
from emodoku.ui.i18n import t


class ChooserPanel(QWidget):
    """Shows the choices for the selected cell.

    Value buttons are bound to the value itself, so a button keeps picking
    the right value even if glyphs change while the chooser is open.
    """

    value_picked = pyqtSignal(int)
    clear_picked = pyqtSignal()
    dismissed = pyqtSignal()

    _COLUMNS = 3

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state = SelectionState()
        self._option_buttons: list[QPushButton] = []
        self._setup_ui()
        self.show_state(self._state, GlyphMap())

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._header = QLabel(t().chooser_header)
        self._header.setStyleSheet("font-size: 15px; font-weight: bold;")
        layout.addWidget(self._header)

        self._prompt = QLabel()
        self._prompt.setWordWrap(True)
        layout.addWidget(self._prompt)

        self._options_grid = QGridLayout()
        self._options_grid.setSpacing(4)
        layout.addLayout(self._options_grid)

        actions = QHBoxLayout()
        self._btn_clear = QPushButton(t().btn_clear)
        self._btn_clear.setMinimumHeight(36)
        self._btn_clear.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_clear.clicked.connect(self.clear_picked)
        actions.addWidget(self._btn_clear)

        self._btn_cancel = QPushButton(t().btn_cancel)
        self._btn_cancel.setMinimumHeight(36)
        self._btn_cancel.clicked.connect(self.dismissed)
        actions.addWidget(self._btn_cancel)
        layout.addLayout(actions)
        layout.addStretch()

    # ── Public API ───────────────────────────────────────────────────────

    def show_state(self, state: SelectionState, glyphs: GlyphMap) -> None:
        """Rebuild the panel for *state*, labelling values through *glyphs*."""
        self._state = state
        self._clear_options()
        s = t()

        if not state.is_choosing:
            self._prompt.setText(s.chooser_idle)
            self._btn_clear.setVisible(False)
            self._btn_cancel.setVisible(False)
            return

        self._btn_cancel.setVisible(True)
        if state.mode == ChooserMode.CLEAR:
            self._prompt.setText(s.chooser_clear_prompt)
            self._btn_clear.setVisible(True)
            return

        self._btn_clear.setVisible(False)
        if not state.options:
            self._prompt.setText(s.chooser_no_candidates)
            return
        self._prompt.setText(s.chooser_pick_value)
        font = QFont("Adwaita Sans", 16)
        for i, value in enumerate(state.options):
            btn = QPushButton(glyphs.glyph_for(value))
            btn.setFont(font)
            btn.setMinimumSize(48, 48)
            btn.clicked.connect(lambda _checked=False, v=value: self.value_picked.emit(v))
            self._options_grid.addWidget(btn, i // self._COLUMNS, i % self._COLUMNS)
            self._option_buttons.append(btn)

    def option_buttons(self) -> list[QPushButton]:
        return list(self._option_buttons)

    @property
    def clear_button(self) -> QPushButton:
        return self._btn_clear

    @property
    def prompt_text(self) -> str:
        return self._prompt.text()

    # ── Internals ────────────────────────────────────────────────────────

    def _clear_options(self) -> None:
        for btn in self._option_buttons:
            self._options_grid.removeWidget(btn)
            btn.deleteLater()
        self._option_buttons.clear()
