"""PossibilityGrid — per-cell candidate sets deduced by the solver."""

from __future__ import annotations

from collections.abc import Sequence, Set

from emodoku.core.errors import NotReadyError, ProtocolError
from emodoku.core.types import GRID_SIZE, is_value, make_cell

Matrix = tuple[tuple[frozenset[int], ...], ...]


def build_matrix(raw: object) -> Matrix:
    """Validate a nested 9x9 sequence of candidate lists.

    Raises:
        ProtocolError: wrong shape, empty candidate list or a value outside 1..9.
    """
    if not _is_sequence(raw) or len(raw) != GRID_SIZE:
        raise ProtocolError(f"Possibilities must have {GRID_SIZE} rows")
    rows: list[tuple[frozenset[int], ...]] = []
    for r, raw_row in enumerate(raw, start=1):
        if not _is_sequence(raw_row) or len(raw_row) != GRID_SIZE:
            raise ProtocolError(f"Possibilities row {r} must have {GRID_SIZE} cells")
        row: list[frozenset[int]] = []
        for c, raw_cell in enumerate(raw_row, start=1):
            is_collection = _is_sequence(raw_cell) or isinstance(raw_cell, Set)
            if not is_collection or not raw_cell:
                raise ProtocolError(f"Cell r{r}c{c} has no candidates")
            if not all(is_value(v) for v in raw_cell):
                raise ProtocolError(f"Cell r{r}c{c} has invalid candidates: {raw_cell!r}")
            row.append(frozenset(raw_cell))
        rows.append(tuple(row))
    return tuple(rows)


def _is_sequence(obj: object) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


class PossibilityGrid:
    """Read-only view of the latest solver deduction.

    The grid starts *not ready*; :meth:`replace_all` swaps in a complete
    matrix. There is no per-cell update path.
    """

    __slots__ = ("_matrix",)

    def __init__(self) -> None:
        self._matrix: Matrix | None = None

    @property
    def is_ready(self) -> bool:
        return self._matrix is not None

    def candidates_for(self, row: int, col: int) -> frozenset[int]:
        """Return the candidate set for a cell.

        Raises:
            NotReadyError: no solver response has been applied yet.
        """
        cell = make_cell(row, col)
        if self._matrix is None:
            raise NotReadyError("No solver response yet")
        return self._matrix[cell.row - 1][cell.col - 1]

    def definite_value(self, row: int, col: int) -> int | None:
        """The single remaining candidate, or ``None`` if undetermined."""
        candidates = self.candidates_for(row, col)
        if len(candidates) == 1:
            return next(iter(candidates))
        return None

    def replace_all(self, matrix: Matrix | Sequence[Sequence[Sequence[int]]]) -> None:
        """Atomically replace the whole grid (validated first)."""
        self._matrix = build_matrix(matrix)

    def reset(self) -> None:
        """Return to the not-ready state."""
        self._matrix = None

    def snapshot(self) -> Matrix | None:
        return self._matrix
