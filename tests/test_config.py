"""Tests for command-line and environment settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from emodoku.config import DEFAULT_SOLVER_URL, SOLVER_URL_ENV, AppSettings, settings_from_args
from emodoku.core.glyphs import DEFAULT_GLYPHS


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SOLVER_URL_ENV, raising=False)
    settings = settings_from_args([])
    assert settings == AppSettings()
    assert settings.solver_url == DEFAULT_SOLVER_URL
    assert settings.glyphs == DEFAULT_GLYPHS


def test_env_overrides_default_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SOLVER_URL_ENV, "ws://solver.example:9000/ws")
    assert settings_from_args([]).solver_url == "ws://solver.example:9000/ws"


def test_flag_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SOLVER_URL_ENV, "ws://env/ws")
    settings = settings_from_args(["--solver-url", "ws://flag/ws"])
    assert settings.solver_url == "ws://flag/ws"


def test_options() -> None:
    settings = settings_from_args(
        [
            "--puzzle",
            "puzzles/easy.txt",
            "--glyphs",
            "ABCDEFGHI",
            "--theme",
            "Night",
            "--log-level",
            "DEBUG",
            "--reconnect-max-ms",
            "4000",
        ]
    )
    assert settings.puzzle_path == Path("puzzles/easy.txt")
    assert settings.glyphs == tuple("ABCDEFGHI")
    assert settings.theme == "Night"
    assert settings.log_level == "DEBUG"
    assert settings.reconnect_max_ms == 4000


def test_reconnect_cap_never_below_initial_delay() -> None:
    settings = settings_from_args(["--reconnect-max-ms", "10"])
    assert settings.reconnect_max_ms == settings.reconnect_initial_ms


@pytest.mark.parametrize("glyphs", ["AABCDEFGH", "ABC", "ABCD FGHI"])
def test_invalid_glyphs_exit(glyphs: str) -> None:
    with pytest.raises(SystemExit):
        settings_from_args(["--glyphs", glyphs])
