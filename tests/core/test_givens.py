"""Tests for GivenGrid."""

import pytest

from emodoku.core.givens import GivenGrid
from emodoku.core.types import ALL_CELLS, Cell


class TestAccess:
    def test_starts_empty(self) -> None:
        grid = GivenGrid()
        assert grid.is_empty()
        assert all(grid.get(*cell) is None for cell in ALL_CELLS)

    def test_set_then_get_every_cell(self) -> None:
        grid = GivenGrid()
        for cell in ALL_CELLS:
            value = (cell.row + cell.col) % 9 + 1
            grid.set(cell.row, cell.col, value)
            assert grid.get(cell.row, cell.col) == value
            grid.clear(cell.row, cell.col)
            assert grid.get(cell.row, cell.col) is None

    def test_set_overwrites(self) -> None:
        grid = GivenGrid()
        grid.set(4, 5, 1)
        grid.set(4, 5, 8)
        assert grid.get(4, 5) == 8
        assert grid.given_count() == 1

    @pytest.mark.parametrize("value", [0, 10, -1])
    def test_invalid_value(self, value: int) -> None:
        with pytest.raises(ValueError):
            GivenGrid().set(1, 1, value)

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 10), (10, 10)])
    def test_invalid_coordinate(self, row: int, col: int) -> None:
        with pytest.raises(ValueError):
            GivenGrid().get(row, col)

    def test_clear_all(self) -> None:
        grid = GivenGrid()
        grid.set(1, 1, 1)
        grid.set(9, 9, 9)
        grid.clear_all()
        assert grid.is_empty()

    def test_items_row_major(self) -> None:
        grid = GivenGrid()
        grid.set(2, 3, 6)
        items = list(grid.items())
        assert len(items) == 81
        assert items[0] == (Cell(1, 1), None)
        assert items[Cell(2, 3).index] == (Cell(2, 3), 6)

    def test_copy_is_independent(self) -> None:
        grid = GivenGrid()
        grid.set(1, 1, 5)
        other = grid.copy()
        other.set(1, 1, 6)
        assert grid.get(1, 1) == 5
        assert other != grid


class TestRows:
    def test_empty_rows(self) -> None:
        assert GivenGrid().rows() == ["---------"] * 9

    def test_sample_row(self) -> None:
        grid = GivenGrid.from_rows(["2-----459"] + ["---------"] * 8)
        assert grid.get(1, 1) == 2
        assert grid.get(1, 2) is None
        assert grid.get(1, 9) == 9
        assert grid.rows()[0] == "2-----459"

    def test_round_trip(self) -> None:
        rows = [
            "2-----459",
            "-7-1-----",
            "---------",
            "----5----",
            "8-------1",
            "---------",
            "--3--6---",
            "---------",
            "9--------",
        ]
        grid = GivenGrid.from_rows(rows)
        assert GivenGrid.from_rows(grid.rows()) == grid
        assert grid.rows() == rows

    def test_rows_use_digits_not_glyphs(self) -> None:
        grid = GivenGrid()
        grid.set(1, 1, 3)
        assert grid.rows()[0] == "3--------"

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            GivenGrid.from_rows(["---------"] * 8)

    def test_wrong_row_width(self) -> None:
        with pytest.raises(ValueError):
            GivenGrid.from_rows(["--------"] + ["---------"] * 8)

    def test_bad_character(self) -> None:
        with pytest.raises(ValueError):
            GivenGrid.from_rows(["0--------"] + ["---------"] * 8)
