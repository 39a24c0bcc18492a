"""Pure projection of the editor state onto 81 display cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from emodoku.core.givens import GivenGrid
from emodoku.core.glyphs import GlyphMap
from emodoku.core.possibilities import PossibilityGrid
from emodoku.core.types import ALL_CELLS, Cell


class CellStyle(IntEnum):
    BLANK = auto()  # undetermined
    GIVEN = auto()  # user given, confirmed by the solver
    DERIVED = auto()  # deduced by propagation


@dataclass(frozen=True)
class RenderedCell:
    cell: Cell
    text: str
    style: CellStyle


@dataclass(frozen=True)
class GridRender:
    """Display state for the whole grid.

    ``ready`` is False until the solver has answered once; every cell is
    then blank.
    """

    ready: bool
    cells: tuple[RenderedCell, ...]

    def at(self, row: int, col: int) -> RenderedCell:
        return self.cells[Cell(row, col).index]


def render_grid(
    givens: GivenGrid,
    possibilities: PossibilityGrid,
    glyphs: GlyphMap,
) -> GridRender:
    """Compute the text and style of every cell, row-major."""
    if not possibilities.is_ready:
        blank = tuple(RenderedCell(cell, "", CellStyle.BLANK) for cell in ALL_CELLS)
        return GridRender(ready=False, cells=blank)

    cells: list[RenderedCell] = []
    for cell in ALL_CELLS:
        value = possibilities.definite_value(*cell)
        if value is None:
            cells.append(RenderedCell(cell, "", CellStyle.BLANK))
            continue
        style = CellStyle.DERIVED if givens.get(*cell) is None else CellStyle.GIVEN
        cells.append(RenderedCell(cell, glyphs.glyph_for(value), style))
    return GridRender(ready=True, cells=tuple(cells))
