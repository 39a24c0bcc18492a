"""Export the displayed grid as an HTML table."""

from __future__ import annotations

from html import escape

from emodoku.core.render import CellStyle, GridRender
from emodoku.core.types import BOX_SIZE, GRID_SIZE

_ROW_CLASSES = ("top", "vmiddle", "bottom")
_COL_CLASSES = ("left", "hmiddle", "right")


def border_class(row: int, col: int) -> str:
    """CSS classes drawing the 3x3 box borders for a 1-based cell."""
    return (
        f"{_ROW_CLASSES[(row - 1) % BOX_SIZE]} {_COL_CLASSES[(col - 1) % BOX_SIZE]}"
    )


def grid_to_html_table(render: GridRender) -> str:
    """Return a ``<table class="sudoku">`` with one ``<td>`` per cell.

    Solved cells show their glyph; givens additionally carry the ``given``
    class. Undetermined cells are empty.
    """
    lines = ['<table class="sudoku">']
    for row in range(1, GRID_SIZE + 1):
        lines.append("  <tr>")
        for col in range(1, GRID_SIZE + 1):
            shown = render.at(row, col)
            classes = border_class(row, col)
            if shown.style == CellStyle.GIVEN:
                classes += " given"
            lines.append(f'    <td class="{classes}">{escape(shown.text)}</td>')
        lines.append("  </tr>")
    lines.append("</table>")
    return "\n".join(lines) + "\n"
