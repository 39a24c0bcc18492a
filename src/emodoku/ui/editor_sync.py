"""UI/editor state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from emodoku.core.givens import GivenGrid
from emodoku.editor.interfaces import ConnectionState
from emodoku.editor.selection import SelectionState
from emodoku.editor.session import EditorSession
from emodoku.ui.board.grid_scene import GridScene
from emodoku.ui.i18n import t
from emodoku.ui.panels.chooser_panel import ChooserPanel
from emodoku.ui.panels.glyph_panel import GlyphPanel


class EditorSync:
    """Applies editor-session changes to UI widgets."""

    __slots__ = (
        "_session",
        "_grid_scene",
        "_chooser_panel",
        "_glyph_panel",
        "_set_connection_text",
        "__weakref__",
    )

    def __init__(
        self,
        *,
        session: EditorSession,
        grid_scene: GridScene,
        chooser_panel: ChooserPanel,
        glyph_panel: GlyphPanel,
        set_connection_text: Callable[[str], None],
    ) -> None:
        self._session = session
        self._grid_scene = grid_scene
        self._chooser_panel = chooser_panel
        self._glyph_panel = glyph_panel
        self._set_connection_text = set_connection_text

    def connect_events(self) -> None:
        """Subscribe to session callbacks (idempotent)."""
        events = self._session.events
        _replace(events.on_selection_changed, self.on_selection_changed)
        _replace(events.on_givens_changed, self.on_givens_changed)
        _replace(events.on_possibilities_changed, self.refresh_grid)
        _replace(events.on_glyphs_changed, self.on_glyphs_changed)

    def disconnect_events(self) -> None:
        events = self._session.events
        _remove(events.on_selection_changed, self.on_selection_changed)
        _remove(events.on_givens_changed, self.on_givens_changed)
        _remove(events.on_possibilities_changed, self.refresh_grid)
        _remove(events.on_glyphs_changed, self.on_glyphs_changed)

    def refresh_all(self) -> None:
        """Full resync of every widget from the session."""
        self._glyph_panel.set_glyphs(self._session.glyphs.glyphs())
        self.on_selection_changed(self._session.selection)
        self.refresh_grid()

    def refresh_grid(self) -> None:
        self._grid_scene.set_render(self._session.render())

    def on_selection_changed(self, state: SelectionState) -> None:
        self._grid_scene.set_selected(state.cell if state.is_choosing else None)
        self._chooser_panel.show_state(state, self._session.glyphs)

    def on_givens_changed(self, _givens: GivenGrid) -> None:
        # Display follows the solver's next reply; only the emphasis of the
        # edited cell may change before that.
        self.refresh_grid()

    def on_glyphs_changed(self) -> None:
        self.refresh_grid()
        self._chooser_panel.show_state(self._session.selection, self._session.glyphs)

    def on_connection_state(self, state: ConnectionState) -> None:
        s = t()
        names = {
            ConnectionState.CONNECTED: s.conn_online,
            ConnectionState.CONNECTING: s.conn_connecting,
            ConnectionState.DISCONNECTED: s.conn_offline,
        }
        self._set_connection_text(names.get(state, "?"))


def _replace(callbacks: list, callback: Callable) -> None:
    callbacks[:] = [cb for cb in callbacks if cb != callback]
    callbacks.append(callback)


def _remove(callbacks: list, callback: Callable) -> None:
    callbacks[:] = [cb for cb in callbacks if cb != callback]
