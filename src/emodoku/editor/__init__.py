"""Editor layer — session state and the selection state machine.

Quick start::

    from emodoku.editor import EditorSession

    session = EditorSession()
    session.events.on_givens_changed.append(lambda grid: print(grid.rows()))
    session.activate(1, 1)
"""

from emodoku.editor.interfaces import ChooserMode, ConnectionState, SelectionPhase
from emodoku.editor.selection import (
    IDLE,
    Activate,
    ClearGiven,
    Dismiss,
    PickClear,
    PickValue,
    SelectionState,
    SetGiven,
    transition,
)
from emodoku.editor.session import EditorEvents, EditorSession

__all__ = [
    # Enums
    "ChooserMode",
    "ConnectionState",
    "SelectionPhase",
    # State machine
    "IDLE",
    "Activate",
    "ClearGiven",
    "Dismiss",
    "PickClear",
    "PickValue",
    "SelectionState",
    "SetGiven",
    "transition",
    # Session
    "EditorEvents",
    "EditorSession",
]
