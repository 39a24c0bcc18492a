"""Selection state machine as a pure transition function.

``transition(state, event)`` returns the next state plus the effects the
caller must apply. Nothing here touches the grids or any widget, so the
machine can be tested without a rendering surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from emodoku.core.types import Cell
from emodoku.editor.interfaces import ChooserMode, SelectionPhase

# ── State ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SelectionState:
    phase: SelectionPhase = SelectionPhase.IDLE
    cell: Cell | None = None
    mode: ChooserMode = ChooserMode.NONE
    options: tuple[int, ...] = ()

    @property
    def is_choosing(self) -> bool:
        return self.phase == SelectionPhase.CHOOSING


IDLE = SelectionState()

# ── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Activate:
    """The user clicked a cell.

    ``given`` is the cell's current given and ``candidates`` the solver's
    candidate set for it (empty before the first response).
    """

    cell: Cell
    given: int | None
    candidates: frozenset[int]


@dataclass(frozen=True)
class PickValue:
    value: int


@dataclass(frozen=True)
class PickClear:
    pass


@dataclass(frozen=True)
class Dismiss:
    pass


Event = Union[Activate, PickValue, PickClear, Dismiss]

# ── Effects ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SetGiven:
    cell: Cell
    value: int


@dataclass(frozen=True)
class ClearGiven:
    cell: Cell


Effect = Union[SetGiven, ClearGiven]

# ── Transition ───────────────────────────────────────────────────────────────


def transition(
    state: SelectionState, event: Event
) -> tuple[SelectionState, tuple[Effect, ...]]:
    """Advance the selection machine by one event."""
    if isinstance(event, Activate):
        # A new activation collapses any open chooser without mutating.
        return _open_chooser(event), ()

    if not state.is_choosing or state.cell is None:
        return state, ()

    if isinstance(event, PickValue):
        if state.mode != ChooserMode.VALUES or event.value not in state.options:
            return state, ()
        return IDLE, (SetGiven(state.cell, event.value),)

    if isinstance(event, PickClear):
        if state.mode != ChooserMode.CLEAR:
            return state, ()
        return IDLE, (ClearGiven(state.cell),)

    if isinstance(event, Dismiss):
        return IDLE, ()

    raise TypeError(f"Unknown selection event: {event!r}")


def _open_chooser(event: Activate) -> SelectionState:
    if event.given is None:
        return SelectionState(
            phase=SelectionPhase.CHOOSING,
            cell=event.cell,
            mode=ChooserMode.VALUES,
            options=tuple(sorted(event.candidates)),
        )
    return SelectionState(
        phase=SelectionPhase.CHOOSING,
        cell=event.cell,
        mode=ChooserMode.CLEAR,
    )
