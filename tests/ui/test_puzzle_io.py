"""Tests for puzzle file loading and clipboard export helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from emodoku.core.errors import PuzzleTextError
from emodoku.core.givens import GivenGrid
from emodoku.core.glyphs import GlyphMap
from emodoku.editor.session import EditorSession
from emodoku.ui.puzzle_io import load_puzzle_file, puzzle_as_html, puzzle_as_text


def test_load_puzzle_file(tmp_path: Path) -> None:
    path = tmp_path / "p.txt"
    path.write_text("2-- --- 459  # first row\n\n--- 7-- ---\n", encoding="utf-8")

    givens = load_puzzle_file(path)

    assert givens.get(1, 1) == 2
    assert givens.get(1, 9) == 9
    assert givens.get(2, 4) == 7
    assert givens.given_count() == 5


def test_load_puzzle_file_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_puzzle_file(tmp_path / "missing.txt")

    bad = tmp_path / "bad.txt"
    bad.write_text("12?\n", encoding="utf-8")
    with pytest.raises(PuzzleTextError):
        load_puzzle_file(bad)


def test_puzzle_as_text_uses_digits() -> None:
    givens = GivenGrid()
    givens.set(1, 2, 8)
    session = EditorSession(givens=givens, glyphs=GlyphMap("abcdefghi"))

    text = puzzle_as_text(session)

    assert text.splitlines()[0] == "-8-------"
    assert len(text.splitlines()) == 9


def test_puzzle_as_html_uses_glyphs(make_matrix) -> None:
    givens = GivenGrid()
    givens.set(1, 1, 8)
    session = EditorSession(givens=givens, glyphs=GlyphMap("abcdefghi"))
    session.replace_possibilities(make_matrix({(1, 1): [8], (1, 2): [2]}))

    html = puzzle_as_html(session)

    assert '<td class="top left given">h</td>' in html
    assert '<td class="top hmiddle">b</td>' in html


def test_load_non_utf8_file_is_puzzle_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe2-----459\n")

    with pytest.raises(PuzzleTextError, match="UTF-8"):
        load_puzzle_file(path)
