"""Tests for the pure grid projection."""

from emodoku.core.givens import GivenGrid
from emodoku.core.glyphs import GlyphMap
from emodoku.core.possibilities import PossibilityGrid
from emodoku.core.render import CellStyle, render_grid


def _possibilities(matrix) -> PossibilityGrid:
    grid = PossibilityGrid()
    grid.replace_all(matrix)
    return grid


class TestRenderGrid:
    def test_not_ready_renders_blank(self) -> None:
        render = render_grid(GivenGrid(), PossibilityGrid(), GlyphMap())
        assert not render.ready
        assert len(render.cells) == 81
        assert all(c.text == "" and c.style == CellStyle.BLANK for c in render.cells)

    def test_row_major_order(self, make_matrix) -> None:
        render = render_grid(GivenGrid(), _possibilities(make_matrix()), GlyphMap())
        assert [(c.cell.row, c.cell.col) for c in render.cells[:2]] == [(1, 1), (1, 2)]
        assert render.cells[-1].cell == (9, 9)

    def test_given_singleton(self, make_matrix) -> None:
        givens = GivenGrid()
        givens.set(1, 1, 5)
        render = render_grid(
            givens, _possibilities(make_matrix({(1, 1): [5]})), GlyphMap()
        )
        assert render.at(1, 1).text == "5"
        assert render.at(1, 1).style == CellStyle.GIVEN

    def test_derived_singleton(self, make_matrix) -> None:
        render = render_grid(
            GivenGrid(), _possibilities(make_matrix({(2, 3): [4]})), GlyphMap()
        )
        assert render.at(2, 3).text == "4"
        assert render.at(2, 3).style == CellStyle.DERIVED

    def test_undetermined_is_blank_even_when_given(self, make_matrix) -> None:
        givens = GivenGrid()
        givens.set(1, 1, 5)
        render = render_grid(
            givens, _possibilities(make_matrix({(1, 1): [5, 6]})), GlyphMap()
        )
        assert render.at(1, 1).text == ""
        assert render.at(1, 1).style == CellStyle.BLANK

    def test_uses_glyphs(self, make_matrix) -> None:
        glyphs = GlyphMap("abcdefghi")
        render = render_grid(
            GivenGrid(), _possibilities(make_matrix({(9, 9): [3]})), glyphs
        )
        assert render.at(9, 9).text == "c"

    def test_idempotent(self, make_matrix) -> None:
        givens = GivenGrid()
        givens.set(1, 1, 1)
        poss = _possibilities(make_matrix({(1, 1): [1], (5, 5): [2]}))
        glyphs = GlyphMap()
        assert render_grid(givens, poss, glyphs) == render_grid(givens, poss, glyphs)
