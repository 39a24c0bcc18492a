"""Lenient puzzle text reader used to preset the given grid.

Format: digits ``1``..``9`` are givens and ``-`` is an empty cell. Spaces
and tabs are ignored, ``#`` starts a comment running to the end of the line,
and lines without any cell characters do not count as rows::

    # Sample
    2-- --- 459
    --- 7-- ---
    ...
"""

from __future__ import annotations

from emodoku.core.errors import PuzzleTextError
from emodoku.core.givens import GivenGrid
from emodoku.core.types import EMPTY_CHAR, GRID_SIZE


def parse_puzzle_text(text: str) -> GivenGrid:
    """Parse *text* into a :class:`GivenGrid`.

    Short or missing rows leave the remaining cells empty.

    Raises:
        PuzzleTextError: an unexpected character, or more than nine rows
            or columns.
    """
    grid = GivenGrid()
    row = 1
    for line_no, line in enumerate(text.splitlines(), start=1):
        column = 1
        for char_no, ch in enumerate(line, start=1):
            if ch == "#":
                break
            if ch in " \t\r":
                continue
            if ch != EMPTY_CHAR and ch not in "123456789":
                raise PuzzleTextError(
                    f"Invalid input character {ch!r}", line_no, char_no
                )
            if row > GRID_SIZE or column > GRID_SIZE:
                raise PuzzleTextError(
                    f"Row or column index overflow: row {row}, column {column}",
                    line_no,
                    char_no,
                )
            if ch != EMPTY_CHAR:
                grid.set(row, column, int(ch))
            column += 1
        if column > 1:
            row += 1
    return grid


def format_puzzle_text(givens: GivenGrid) -> str:
    """Render *givens* in the same text format (nine plain rows)."""
    return "\n".join(givens.rows()) + "\n"
