"""User-visible strings for the editor UI.

Usage::

    from emodoku.ui.i18n import t

    print(t().chooser_pick_value)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_puzzle: str
    menu_open_puzzle: str
    menu_paste_puzzle: str
    menu_copy_text: str
    menu_copy_html: str
    menu_clear_puzzle: str
    menu_quit: str
    menu_connection: str
    menu_reconnect: str

    status_connecting: str  # "Connecting to {url}..."
    status_connected: str
    status_disconnected: str  # "... retrying in {seconds:.1f}s"
    status_bad_response: str  # "Ignored malformed solver response: {msg}"
    status_glyph_rejected: str  # "{msg}"
    status_loaded_puzzle: str  # "Loaded puzzle: {name}"
    status_copied: str
    conn_online: str
    conn_connecting: str
    conn_offline: str

    waiting_for_solver: str

    open_puzzle_title: str
    open_puzzle_failed: str  # "Could not load puzzle:\n{exc}"
    paste_puzzle_title: str
    paste_puzzle_label: str
    puzzle_filter: str
    puzzle_all_files: str

    # ── Panels ───────────────────────────────────────────────────────────
    glyphs_header: str
    chooser_header: str
    chooser_idle: str
    chooser_pick_value: str
    chooser_no_candidates: str
    chooser_clear_prompt: str
    btn_clear: str
    btn_cancel: str


_EN = Strings(
    window_title="Emodoku",
    menu_puzzle="&Puzzle",
    menu_open_puzzle="&Open Puzzle...",
    menu_paste_puzzle="&Paste Puzzle...",
    menu_copy_text="Copy as &Text",
    menu_copy_html="Copy as &HTML",
    menu_clear_puzzle="C&lear Puzzle",
    menu_quit="&Quit",
    menu_connection="&Connection",
    menu_reconnect="&Reconnect Now",
    status_connecting="Connecting to {url}...",
    status_connected="Connected to solver",
    status_disconnected="Solver disconnected, retrying in {seconds:.1f}s",
    status_bad_response="Ignored malformed solver response: {msg}",
    status_glyph_rejected="{msg}",
    status_loaded_puzzle="Loaded puzzle: {name}",
    status_copied="Copied to clipboard",
    conn_online="● online",
    conn_connecting="○ connecting",
    conn_offline="○ offline",
    waiting_for_solver="Waiting for solver...",
    open_puzzle_title="Open Puzzle",
    open_puzzle_failed="Could not load puzzle:\n{exc}",
    paste_puzzle_title="Paste Puzzle",
    paste_puzzle_label="Nine rows of digits and '-' ('#' starts a comment):",
    puzzle_filter="Puzzle text (*.txt *.sudoku)",
    puzzle_all_files="All files (*)",
    glyphs_header="Symbols",
    chooser_header="Selected cell",
    chooser_idle="Click a cell to edit it.",
    chooser_pick_value="Pick one of these values for the selected cell:",
    chooser_no_candidates="No candidates yet. Waiting for the solver.",
    chooser_clear_prompt="Do you want to clear the selected cell?",
    btn_clear="Clear",
    btn_cancel="Cancel",
)

_current: Strings = _EN


def t() -> Strings:
    """Return the active UI strings."""
    return _current
