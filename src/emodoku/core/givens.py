"""GivenGrid — the values the user assigned, the only client-owned state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from emodoku.core.types import (
    ALL_CELLS,
    EMPTY_CHAR,
    GRID_SIZE,
    Cell,
    check_value,
    make_cell,
)


class GivenGrid:
    """9x9 matrix of user givens; ``None`` marks an empty cell."""

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: list[list[int | None]] = [
            [None] * GRID_SIZE for _ in range(GRID_SIZE)
        ]

    # ── Access ───────────────────────────────────────────────────────────

    def get(self, row: int, col: int) -> int | None:
        cell = make_cell(row, col)
        return self._slots[cell.row - 1][cell.col - 1]

    def set(self, row: int, col: int, value: int) -> None:
        cell = make_cell(row, col)
        self._slots[cell.row - 1][cell.col - 1] = check_value(value)

    def clear(self, row: int, col: int) -> None:
        cell = make_cell(row, col)
        self._slots[cell.row - 1][cell.col - 1] = None

    def clear_all(self) -> None:
        for row in self._slots:
            row[:] = [None] * GRID_SIZE

    def is_empty(self) -> bool:
        return self.given_count() == 0

    def given_count(self) -> int:
        return sum(1 for row in self._slots for value in row if value is not None)

    def items(self) -> Iterator[tuple[Cell, int | None]]:
        """Yield ``(cell, given)`` pairs in row-major order."""
        for cell in ALL_CELLS:
            yield cell, self._slots[cell.row - 1][cell.col - 1]

    def copy(self) -> GivenGrid:
        other = GivenGrid()
        other._slots = [list(row) for row in self._slots]
        return other

    # ── Protocol encoding ────────────────────────────────────────────────

    def rows(self) -> list[str]:
        """Encode as nine 9-character strings of ``-`` and ``1``..``9``."""
        return [
            "".join(EMPTY_CHAR if v is None else str(v) for v in row)
            for row in self._slots
        ]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GivenGrid:
        """Parse the strict row encoding produced by :meth:`rows`."""
        lines = list(rows)
        if len(lines) != GRID_SIZE:
            raise ValueError(f"Expected {GRID_SIZE} rows, got {len(lines)}")
        grid = cls()
        for r, line in enumerate(lines, start=1):
            if len(line) != GRID_SIZE:
                raise ValueError(f"Row {r} must have {GRID_SIZE} characters: {line!r}")
            for c, ch in enumerate(line, start=1):
                if ch == EMPTY_CHAR:
                    continue
                if ch not in "123456789":
                    raise ValueError(f"Invalid character {ch!r} in row {r}: {line!r}")
                grid.set(r, c, int(ch))
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GivenGrid):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return f"GivenGrid({'/'.join(self.rows())!r})"
