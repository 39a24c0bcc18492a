"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QMimeData
from PyQt6.QtGui import QAction, QCloseEvent, QGuiApplication
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from emodoku.config import AppSettings
from emodoku.core.errors import GlyphConflictError, PuzzleTextError
from emodoku.core.glyphs import GlyphMap
from emodoku.core.puzzle_text import parse_puzzle_text
from emodoku.editor.session import EditorSession
from emodoku.ui.board.grid_view import GridView
from emodoku.ui.editor_sync import EditorSync
from emodoku.ui.i18n import t
from emodoku.ui.panels.chooser_panel import ChooserPanel
from emodoku.ui.panels.glyph_panel import GlyphPanel
from emodoku.ui.puzzle_io import load_puzzle_file, puzzle_as_html, puzzle_as_text
from emodoku.ui.styles.theme import GridTheme
from emodoku.ui.sync_channel import SolverChannel, SolverSocket

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Emodoku."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        socket: SolverSocket | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(760, 520)
        self.resize(900, 620)

        self._settings = settings if settings is not None else AppSettings()
        self._session = EditorSession(glyphs=GlyphMap(self._settings.glyphs))

        self._setup_ui()
        self._setup_menu()

        self._sync = EditorSync(
            session=self._session,
            grid_scene=self._grid_view.grid_scene,
            chooser_panel=self._chooser_panel,
            glyph_panel=self._glyph_panel,
            set_connection_text=self._connection_label.setText,
        )
        self._channel = SolverChannel(
            session=self._session,
            url=self._settings.solver_url,
            socket=socket,
            reconnect_initial_ms=self._settings.reconnect_initial_ms,
            reconnect_max_ms=self._settings.reconnect_max_ms,
            parent=self,
        )

        self._connect_signals()
        self._sync.connect_events()
        self._grid_view.grid_scene.set_theme(GridTheme.by_name(self._settings.theme))
        self._sync.refresh_all()
        self._channel.start()
        self._load_startup_puzzle()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Grid (left)
        self._grid_view = GridView()
        root.addWidget(self._grid_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._glyph_panel = GlyphPanel(t().glyphs_header)
        right.addWidget(self._glyph_panel)

        self._chooser_panel = ChooserPanel()
        right.addWidget(self._chooser_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("")
        self._status.addWidget(self._status_label, stretch=1)
        self._connection_label = QLabel("")
        self._status.addPermanentWidget(self._connection_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Puzzle menu
        self._menu_puzzle = menu_bar.addMenu(s.menu_puzzle)
        assert self._menu_puzzle is not None

        self._act_open = QAction(s.menu_open_puzzle, self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_puzzle)
        self._menu_puzzle.addAction(self._act_open)

        self._act_paste = QAction(s.menu_paste_puzzle, self)
        self._act_paste.setShortcut("Ctrl+Shift+V")
        self._act_paste.triggered.connect(self._on_paste_puzzle)
        self._menu_puzzle.addAction(self._act_paste)

        self._menu_puzzle.addSeparator()

        self._act_copy_text = QAction(s.menu_copy_text, self)
        self._act_copy_text.triggered.connect(self._on_copy_text)
        self._menu_puzzle.addAction(self._act_copy_text)

        self._act_copy_html = QAction(s.menu_copy_html, self)
        self._act_copy_html.triggered.connect(self._on_copy_html)
        self._menu_puzzle.addAction(self._act_copy_html)

        self._menu_puzzle.addSeparator()

        self._act_clear = QAction(s.menu_clear_puzzle, self)
        self._act_clear.triggered.connect(self._session.clear_puzzle)
        self._menu_puzzle.addAction(self._act_clear)

        self._menu_puzzle.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_puzzle.addAction(self._act_quit)

        # Connection menu
        self._menu_connection = menu_bar.addMenu(s.menu_connection)
        assert self._menu_connection is not None

        self._act_reconnect = QAction(s.menu_reconnect, self)
        self._act_reconnect.setShortcut("Ctrl+R")
        self._act_reconnect.triggered.connect(self._on_reconnect)
        self._menu_connection.addAction(self._act_reconnect)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._grid_view.cell_activated.connect(self._session.activate)
        self._grid_view.dismissed.connect(self._session.dismiss)
        self._chooser_panel.value_picked.connect(self._session.pick_value)
        self._chooser_panel.clear_picked.connect(self._session.pick_clear)
        self._chooser_panel.dismissed.connect(self._session.dismiss)
        self._glyph_panel.glyph_edited.connect(self._on_glyph_edited)
        self._channel.state_changed.connect(self._sync.on_connection_state)
        self._channel.status_message.connect(self._set_status)

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_glyph_edited(self, value: int, glyph: str) -> None:
        try:
            self._session.set_glyph(value, glyph)
        except GlyphConflictError as exc:
            self._glyph_panel.reject_edit(value, self._session.glyphs.glyph_for(value))
            self._set_status(t().status_glyph_rejected.format(msg=exc))
            return
        self._glyph_panel.set_conflict(value, False)

    def _on_open_puzzle(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t().open_puzzle_title,
            "",
            f"{t().puzzle_filter};;{t().puzzle_all_files}",
        )
        if not file_path:
            return
        self._open_puzzle_path(Path(file_path))

    def _open_puzzle_path(self, path: Path) -> bool:
        try:
            givens = load_puzzle_file(path)
        except (OSError, PuzzleTextError) as exc:
            _LOGGER.warning("Could not load puzzle %s: %s", path, exc)
            QMessageBox.warning(
                self, t().open_puzzle_title, t().open_puzzle_failed.format(exc=exc)
            )
            return False
        self._session.load_givens(givens)
        self._set_status(t().status_loaded_puzzle.format(name=path.name))
        return True

    def _on_paste_puzzle(self) -> None:
        text, ok = QInputDialog.getMultiLineText(
            self, t().paste_puzzle_title, t().paste_puzzle_label
        )
        if not ok or not text.strip():
            return
        try:
            givens = parse_puzzle_text(text)
        except PuzzleTextError as exc:
            QMessageBox.warning(
                self, t().paste_puzzle_title, t().open_puzzle_failed.format(exc=exc)
            )
            return
        self._session.load_givens(givens)

    def _on_copy_text(self) -> None:
        self._copy_to_clipboard(puzzle_as_text(self._session))

    def _on_copy_html(self) -> None:
        html = puzzle_as_html(self._session)
        self._copy_to_clipboard(html, html=html)

    def _copy_to_clipboard(self, text: str, *, html: str | None = None) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            return
        mime = QMimeData()
        mime.setText(text)
        if html is not None:
            mime.setHtml(html)
        clipboard.setMimeData(mime)
        self._set_status(t().status_copied)

    def _on_reconnect(self) -> None:
        self._channel.reconnect_now()

    def _load_startup_puzzle(self) -> None:
        path = self._settings.puzzle_path
        if path is None:
            return
        try:
            givens = load_puzzle_file(path)
        except (OSError, PuzzleTextError) as exc:
            _LOGGER.error("Could not load startup puzzle %s: %s", path, exc)
            self._set_status(t().open_puzzle_failed.format(exc=exc).replace("\n", " "))
            return
        self._session.load_givens(givens)
        self._set_status(t().status_loaded_puzzle.format(name=path.name))

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def session(self) -> EditorSession:
        return self._session

    @property
    def channel(self) -> SolverChannel:
        return self._channel

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._channel.shutdown()
        self._sync.disconnect_events()
        super().closeEvent(event)
