"""Core editor model — grids, glyphs, wire codec; no Qt dependency.

Quick start::

    from emodoku.core import GivenGrid, encode_request

    givens = GivenGrid()
    givens.set(1, 1, 2)
    print(encode_request(givens, seq=1))
"""

from emodoku.core.errors import (
    EmodokuError,
    GlyphConflictError,
    NotReadyError,
    ProtocolError,
    PuzzleTextError,
)
from emodoku.core.export import grid_to_html_table
from emodoku.core.givens import GivenGrid
from emodoku.core.glyphs import DEFAULT_GLYPHS, GlyphMap
from emodoku.core.possibilities import PossibilityGrid
from emodoku.core.protocol import (
    SolverResponse,
    decode_request,
    decode_response,
    encode_request,
    encode_response,
)
from emodoku.core.puzzle_text import format_puzzle_text, parse_puzzle_text
from emodoku.core.render import CellStyle, GridRender, RenderedCell, render_grid
from emodoku.core.types import ALL_CELLS, GRID_SIZE, VALUES, Cell, make_cell

__all__ = [
    # Errors
    "EmodokuError",
    "GlyphConflictError",
    "NotReadyError",
    "ProtocolError",
    "PuzzleTextError",
    # Types
    "ALL_CELLS",
    "GRID_SIZE",
    "VALUES",
    "Cell",
    "make_cell",
    # Model
    "DEFAULT_GLYPHS",
    "GivenGrid",
    "GlyphMap",
    "PossibilityGrid",
    # Protocol / text
    "SolverResponse",
    "decode_request",
    "decode_response",
    "encode_request",
    "encode_response",
    "format_puzzle_text",
    "parse_puzzle_text",
    # Rendering
    "CellStyle",
    "GridRender",
    "RenderedCell",
    "grid_to_html_table",
    "render_grid",
]
