"""Puzzle import and clipboard export helpers used by the main window."""

from __future__ import annotations

from pathlib import Path

from emodoku.core.errors import PuzzleTextError
from emodoku.core.export import grid_to_html_table
from emodoku.core.givens import GivenGrid
from emodoku.core.puzzle_text import format_puzzle_text, parse_puzzle_text
from emodoku.editor.session import EditorSession


def load_puzzle_file(file_path: Path) -> GivenGrid:
    """Read and parse a puzzle text file.

    Raises:
        OSError: the file cannot be read.
        PuzzleTextError: the file is not UTF-8 text or not a valid puzzle.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleTextError(f"Not a UTF-8 text file ({exc.reason})") from exc
    return parse_puzzle_text(text)


def puzzle_as_text(session: EditorSession) -> str:
    """The givens in the solver's text format."""
    return format_puzzle_text(session.givens)


def puzzle_as_html(session: EditorSession) -> str:
    """The displayed grid as an HTML table, through the current glyphs."""
    return grid_to_html_table(session.render())
