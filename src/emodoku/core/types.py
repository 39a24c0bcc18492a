"""Cell coordinates and grid-wide constants.

Coordinates are 1-based at every boundary: ``Cell(1, 1)`` is the top-left
cell and ``Cell(9, 9)`` the bottom-right one.
"""

from __future__ import annotations

from typing import NamedTuple

GRID_SIZE = 9
BOX_SIZE = 3
VALUES: tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))
EMPTY_CHAR = "-"


class Cell(NamedTuple):
    """A (row, col) position in the grid."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"r{self.row}c{self.col}"

    @property
    def index(self) -> int:
        """Row-major 0-based index (0..80)."""
        return (self.row - 1) * GRID_SIZE + (self.col - 1)


def make_cell(row: int, col: int) -> Cell:
    """Return a validated :class:`Cell`."""
    if not (1 <= row <= GRID_SIZE and 1 <= col <= GRID_SIZE):
        raise ValueError(f"Cell out of range: row={row}, col={col}")
    return Cell(row, col)


def is_value(value: object) -> bool:
    """Return True for an int in 1..9 (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value in VALUES


def check_value(value: int) -> int:
    if not is_value(value):
        raise ValueError(f"Cell value must be 1..{GRID_SIZE}, got {value!r}")
    return value


ALL_CELLS: tuple[Cell, ...] = tuple(
    Cell(row, col)
    for row in range(1, GRID_SIZE + 1)
    for col in range(1, GRID_SIZE + 1)
)
