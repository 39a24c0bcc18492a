"""GlyphPanel — nine single-character inputs for the display symbols."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from emodoku.core.types import VALUES


class GlyphPanel(QWidget):
    """One input per value; edits are reported, not applied, by the panel.

    A rejected edit shows the glyph still in use and keeps the conflict
    marker on that input until an accepted edit clears it.

    Signals:
        glyph_edited(int, str): The user typed into the input for a value.
    """

    glyph_edited = pyqtSignal(int, str)

    def __init__(self, title: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._edits: dict[int, QLineEdit] = {}
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        header = QLabel(title)
        header.setStyleSheet("font-size: 15px; font-weight: bold;")
        layout.addWidget(header)

        grid = QGridLayout()
        grid.setSpacing(4)
        for value in VALUES:
            label = QLabel(str(value))
            edit = QLineEdit(str(value))
            edit.setMaxLength(1)
            edit.setFixedWidth(40)
            edit.textEdited.connect(lambda text, v=value: self.glyph_edited.emit(v, text))
            col = (value - 1) % 3 * 2
            grid.addWidget(label, (value - 1) // 3, col)
            grid.addWidget(edit, (value - 1) // 3, col + 1)
            self._edits[value] = edit
        layout.addLayout(grid)

    def set_glyphs(self, glyphs: tuple[str, ...]) -> None:
        """Show *glyphs* and clear every conflict marker."""
        for value, glyph in zip(VALUES, glyphs):
            edit = self._edits[value]
            if edit.text() != glyph:
                edit.setText(glyph)
            self.set_conflict(value, False)

    def set_conflict(self, value: int, conflict: bool) -> None:
        """Mark the input for *value* as rejected."""
        edit = self._edits[value]
        edit.setProperty("conflict", "true" if conflict else "false")
        style = edit.style()
        if style is not None:
            style.unpolish(edit)
            style.polish(edit)

    def reject_edit(self, value: int, glyph: str) -> None:
        """Put back the accepted *glyph* and flag the input until the next valid edit."""
        self._edits[value].setText(glyph)
        self.set_conflict(value, True)

    def has_conflict(self, value: int) -> bool:
        return self._edits[value].property("conflict") == "true"

    def edit_for(self, value: int) -> QLineEdit:
        return self._edits[value]
