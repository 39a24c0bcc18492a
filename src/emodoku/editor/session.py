"""EditorSession — owns the editor state for one window.

Holds the given grid, the solver's possibility grid, the glyph table and
the selection, and notifies listeners via simple callbacks so the UI, the
solver channel and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from emodoku.core.givens import GivenGrid
from emodoku.core.glyphs import GlyphMap
from emodoku.core.possibilities import Matrix, PossibilityGrid
from emodoku.core.render import GridRender, render_grid
from emodoku.core.types import make_cell
from emodoku.editor.selection import (
    IDLE,
    Activate,
    ClearGiven,
    Dismiss,
    Effect,
    Event,
    PickClear,
    PickValue,
    SelectionState,
    SetGiven,
    transition,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionState], None]
GivensCallback = Callable[[GivenGrid], None]
RefreshCallback = Callable[[], None]


@dataclass
class EditorEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_givens_changed: list[GivensCallback] = field(default_factory=list)
    on_possibilities_changed: list[RefreshCallback] = field(default_factory=list)
    on_glyphs_changed: list[RefreshCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class EditorSession:
    """Single owner of the editor state.

    Every given edit emits ``on_givens_changed`` exactly once; the solver
    channel listens to it and sends one sync request per edit. Glyph edits
    only emit ``on_glyphs_changed``.
    """

    __slots__ = (
        "_givens",
        "_possibilities",
        "_glyphs",
        "_selection",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        givens: GivenGrid | None = None,
        glyphs: GlyphMap | None = None,
    ) -> None:
        self._givens = givens if givens is not None else GivenGrid()
        self._possibilities = PossibilityGrid()
        self._glyphs = glyphs if glyphs is not None else GlyphMap()
        self._selection = IDLE
        self.events = EditorEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def givens(self) -> GivenGrid:
        return self._givens

    @property
    def possibilities(self) -> PossibilityGrid:
        return self._possibilities

    @property
    def glyphs(self) -> GlyphMap:
        return self._glyphs

    @property
    def selection(self) -> SelectionState:
        return self._selection

    # ── User actions ─────────────────────────────────────────────────────

    def activate(self, row: int, col: int) -> SelectionState:
        """Open the chooser for a cell."""
        cell = make_cell(row, col)
        if self._possibilities.is_ready:
            candidates = self._possibilities.candidates_for(row, col)
        else:
            candidates = frozenset()
        self.dispatch(Activate(cell, self._givens.get(row, col), candidates))
        return self._selection

    def pick_value(self, value: int) -> None:
        self.dispatch(PickValue(value))

    def pick_clear(self) -> None:
        self.dispatch(PickClear())

    def dismiss(self) -> None:
        self.dispatch(Dismiss())

    def dispatch(self, event: Event) -> tuple[Effect, ...]:
        """Run *event* through the selection machine and apply its effects."""
        previous = self._selection
        self._selection, effects = transition(previous, event)
        if self._selection != previous:
            self._emit_selection()
        for effect in effects:
            self._apply(effect)
        return effects

    def load_givens(self, givens: GivenGrid) -> None:
        """Replace the whole puzzle (preset or pasted text)."""
        self._givens = givens.copy()
        self._collapse_selection()
        _LOGGER.info("Loaded puzzle with %d givens", givens.given_count())
        self._emit_givens()

    def clear_puzzle(self) -> None:
        """Remove every given."""
        self._givens.clear_all()
        self._collapse_selection()
        self._emit_givens()

    def set_glyph(self, value: int, glyph: str) -> None:
        """Change a display glyph; raises ``GlyphConflictError`` on collision."""
        self._glyphs.set_glyph(value, glyph)
        self._emit_glyphs()

    # ── Solver side ──────────────────────────────────────────────────────

    def replace_possibilities(self, matrix: Matrix) -> None:
        """Swap in a new solver deduction and notify listeners."""
        self._possibilities.replace_all(matrix)
        for cb in self.events.on_possibilities_changed:
            cb()

    def render(self) -> GridRender:
        return render_grid(self._givens, self._possibilities, self._glyphs)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, SetGiven):
            self._givens.set(effect.cell.row, effect.cell.col, effect.value)
            _LOGGER.debug("Given %s = %d", effect.cell, effect.value)
        elif isinstance(effect, ClearGiven):
            self._givens.clear(effect.cell.row, effect.cell.col)
            _LOGGER.debug("Given %s cleared", effect.cell)
        else:
            raise TypeError(f"Unknown selection effect: {effect!r}")
        self._emit_givens()

    def _collapse_selection(self) -> None:
        if self._selection != IDLE:
            self._selection = IDLE
            self._emit_selection()

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection)

    def _emit_givens(self) -> None:
        for cb in self.events.on_givens_changed:
            cb(self._givens)

    def _emit_glyphs(self) -> None:
        for cb in self.events.on_glyphs_changed:
            cb()
