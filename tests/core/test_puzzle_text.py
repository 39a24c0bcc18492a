"""Tests for the lenient puzzle text reader."""

import pytest

from emodoku.core.errors import PuzzleTextError
from emodoku.core.puzzle_text import format_puzzle_text, parse_puzzle_text

SAMPLE = """\
# A sample puzzle
2-- --- 459
--- 7-- ---

--1 --- ---   # trailing comment
"""


class TestParse:
    def test_sample(self) -> None:
        grid = parse_puzzle_text(SAMPLE)
        assert grid.get(1, 1) == 2
        assert grid.get(1, 2) is None
        assert grid.get(1, 9) == 9
        assert grid.get(2, 4) == 7
        assert grid.get(3, 3) == 1

    def test_missing_rows_are_empty(self) -> None:
        grid = parse_puzzle_text("5")
        assert grid.get(1, 1) == 5
        assert grid.given_count() == 1

    def test_empty_text(self) -> None:
        assert parse_puzzle_text("").is_empty()

    def test_tabs_and_crlf(self) -> None:
        grid = parse_puzzle_text("1\t2\r\n3")
        assert grid.get(1, 2) == 2
        assert grid.get(2, 1) == 3

    def test_invalid_character_position(self) -> None:
        with pytest.raises(PuzzleTextError) as info:
            parse_puzzle_text("---\n--x")
        assert info.value.line == 2
        assert info.value.column == 3

    def test_zero_is_invalid(self) -> None:
        with pytest.raises(PuzzleTextError):
            parse_puzzle_text("0")

    def test_column_overflow(self) -> None:
        with pytest.raises(PuzzleTextError):
            parse_puzzle_text("1234567891")

    def test_row_overflow(self) -> None:
        with pytest.raises(PuzzleTextError):
            parse_puzzle_text("-\n" * 10)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_puzzle_text("?")


def test_format_is_readable_back() -> None:
    grid = parse_puzzle_text(SAMPLE)
    text = format_puzzle_text(grid)
    assert text.splitlines()[0] == "2-----459"
    assert parse_puzzle_text(text) == grid
