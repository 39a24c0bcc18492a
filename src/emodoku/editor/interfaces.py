"""Enumerations shared by the editor and UI layers."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states for cell editing."""

    IDLE = auto()
    CHOOSING = auto()


class ChooserMode(IntEnum):
    """What the chooser offers for the selected cell."""

    NONE = 0
    VALUES = auto()  # empty cell: pick one of the candidates
    CLEAR = auto()  # cell holds a given: offer to clear it


# ── Solver connection ────────────────────────────────────────────────────────


class ConnectionState(IntEnum):
    """Visible state of the solver connection."""

    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()
