"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from emodoku.core.glyphs import DEFAULT_GLYPHS, GlyphMap

SOLVER_URL_ENV = "EMODOKU_SOLVER_URL"
DEFAULT_SOLVER_URL = "ws://localhost:8000/solver"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Solver connection
    solver_url: str = DEFAULT_SOLVER_URL
    reconnect_initial_ms: int = 500
    reconnect_max_ms: int = 30_000

    # Display
    glyphs: tuple[str, ...] = DEFAULT_GLYPHS
    theme: str = "Paper"

    # Startup
    puzzle_path: Path | None = None
    log_level: str = "WARNING"


THEMES = ("Paper", "Night")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emodoku",
        description="Design sudoku puzzles with custom symbols, checked live by a solver.",
    )
    parser.add_argument(
        "--solver-url",
        default=None,
        help=f"WebSocket URL of the solver (default: ${SOLVER_URL_ENV} or "
        f"{DEFAULT_SOLVER_URL}).",
    )
    parser.add_argument(
        "--puzzle",
        type=Path,
        default=None,
        help="Puzzle text file used to preset the givens.",
    )
    parser.add_argument(
        "--glyphs",
        default=None,
        help="Nine distinct characters used to display the values 1-9.",
    )
    parser.add_argument("--theme", choices=THEMES, default="Paper")
    parser.add_argument(
        "--reconnect-max-ms",
        type=int,
        default=30_000,
        help="Upper bound for the reconnect backoff.",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return parser


def settings_from_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from *argv* and the environment."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = AppSettings(
        solver_url=args.solver_url or os.environ.get(SOLVER_URL_ENV) or DEFAULT_SOLVER_URL,
        theme=args.theme,
        puzzle_path=args.puzzle,
        log_level=args.log_level,
        reconnect_max_ms=max(args.reconnect_max_ms, AppSettings.reconnect_initial_ms),
    )
    if args.glyphs is not None:
        try:
            settings.glyphs = GlyphMap(args.glyphs).glyphs()
        except ValueError as exc:
            parser.error(f"--glyphs: {exc}")
    return settings
