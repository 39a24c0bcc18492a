"""Solver connection: keeps the remote solver in step with the given grid."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from PyQt6.QtCore import QObject, QTimer, QUrl, pyqtSignal
from PyQt6.QtWebSockets import QWebSocket

from emodoku.core.errors import ProtocolError
from emodoku.core.givens import GivenGrid
from emodoku.core.protocol import decode_response, encode_request
from emodoku.editor.interfaces import ConnectionState
from emodoku.editor.session import EditorSession
from emodoku.ui.i18n import t

_LOGGER = logging.getLogger(__name__)


class _Signal(Protocol):
    def connect(self, slot: Callable[..., object]) -> object: ...


class SolverSocket(Protocol):
    """Minimal socket interface used by :class:`SolverChannel`."""

    connected: _Signal
    disconnected: _Signal
    textMessageReceived: _Signal
    errorOccurred: _Signal

    def open(self, url: QUrl) -> None: ...

    def close(self) -> None: ...

    def sendTextMessage(self, message: str) -> int: ...

    def errorString(self) -> str: ...


class SolverChannel(QObject):
    """Owns the WebSocket to the solver and the request sequence numbers.

    Every given edit sends the full grid tagged with a fresh sequence
    number. Replies carrying a sequence number not newer than the last
    applied one are dropped, so a slow reply can never overwrite a newer
    deduction. Lost connections are retried with exponential backoff; the
    first message after (re)connecting is always the current grid.

    Signals:
        state_changed(ConnectionState): Connection state transitions.
        status_message(str): Human-readable status for the status bar.
    """

    state_changed = pyqtSignal(object)
    status_message = pyqtSignal(str)

    def __init__(
        self,
        *,
        session: EditorSession,
        url: str,
        socket: SolverSocket | None = None,
        reconnect_initial_ms: int = 500,
        reconnect_max_ms: int = 30_000,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._url = url
        self._socket: SolverSocket = socket if socket is not None else QWebSocket()
        self._reconnect_initial_ms = reconnect_initial_ms
        self._reconnect_max_ms = max(reconnect_max_ms, reconnect_initial_ms)
        self._backoff_ms = reconnect_initial_ms

        self._reconnect_timer = QTimer(self)
        self._reconnect_timer.setSingleShot(True)
        self._reconnect_timer.timeout.connect(self._open)

        self._state = ConnectionState.DISCONNECTED
        self._next_seq = 0
        self._applied_seq = 0
        self._is_started = False
        self._is_shutting_down = False

        self._socket.connected.connect(self._on_connected)
        self._socket.disconnected.connect(self._on_disconnected)
        self._socket.textMessageReceived.connect(self._on_text_message)
        self._socket.errorOccurred.connect(self._on_error)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def last_sent_seq(self) -> int:
        return self._next_seq

    @property
    def last_applied_seq(self) -> int:
        return self._applied_seq

    @property
    def backoff_ms(self) -> int:
        """Delay that the next reconnect attempt will wait."""
        return self._backoff_ms

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Subscribe to grid edits and open the connection."""
        if self._is_started:
            return
        self._is_started = True
        self._is_shutting_down = False
        self._session.events.on_givens_changed.append(self._on_givens_changed)
        self._open()

    def shutdown(self) -> None:
        """Stop reconnecting and close the socket."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._reconnect_timer.stop()
        callbacks = self._session.events.on_givens_changed
        callbacks[:] = [cb for cb in callbacks if cb != self._on_givens_changed]
        self._socket.close()
        self._set_state(ConnectionState.DISCONNECTED)
        self._is_started = False

    def reconnect_now(self) -> None:
        """Skip the backoff delay and try again immediately."""
        if not self._is_started or self._state == ConnectionState.CONNECTED:
            return
        self._reconnect_timer.stop()
        self._backoff_ms = self._reconnect_initial_ms
        self._open()

    # ── Requests ─────────────────────────────────────────────────────────

    def request_sync(self) -> int | None:
        """Send the current grid; returns its sequence number if sent.

        While disconnected nothing is sent: the grid is re-sent as a whole
        once the connection is back.
        """
        if self._state != ConnectionState.CONNECTED:
            _LOGGER.debug("Sync deferred until the solver is connected")
            return None
        self._next_seq += 1
        seq = self._next_seq
        self._socket.sendTextMessage(encode_request(self._session.givens, seq))
        _LOGGER.debug("Sent grid seq=%d", seq)
        return seq

    def _on_givens_changed(self, _givens: GivenGrid) -> None:
        self.request_sync()

    # ── Socket callbacks ─────────────────────────────────────────────────

    def _open(self) -> None:
        if self._is_shutting_down:
            return
        self._set_state(ConnectionState.CONNECTING)
        self.status_message.emit(t().status_connecting.format(url=self._url))
        _LOGGER.info("Connecting to solver at %s", self._url)
        self._socket.open(QUrl(self._url))

    def _on_connected(self) -> None:
        if self._is_shutting_down:
            return
        _LOGGER.info("Solver connected")
        self._reconnect_timer.stop()
        self._backoff_ms = self._reconnect_initial_ms
        self._set_state(ConnectionState.CONNECTED)
        self.status_message.emit(t().status_connected)
        self.request_sync()

    def _on_disconnected(self) -> None:
        if self._is_shutting_down:
            return
        _LOGGER.warning("Solver disconnected")
        self._schedule_reconnect()

    def _on_error(self, _error: object) -> None:
        if self._is_shutting_down:
            return
        _LOGGER.warning("Solver socket error: %s", self._socket.errorString())
        if self._state != ConnectionState.CONNECTED:
            self._schedule_reconnect()

    def _on_text_message(self, payload: str) -> None:
        if self._is_shutting_down:
            return
        try:
            response = decode_response(payload)
        except ProtocolError as exc:
            _LOGGER.warning("Malformed solver response: %s", exc)
            self.status_message.emit(t().status_bad_response.format(msg=exc))
            return

        if response.seq is not None:
            if response.seq > self._next_seq:
                msg = f"Seq {response.seq} was never sent (last sent {self._next_seq})"
                _LOGGER.warning("Malformed solver response: %s", msg)
                self.status_message.emit(t().status_bad_response.format(msg=msg))
                return
            if response.seq <= self._applied_seq:
                _LOGGER.debug(
                    "Dropped stale response seq=%d (applied=%d)",
                    response.seq,
                    self._applied_seq,
                )
                return
            self._applied_seq = response.seq
        else:
            _LOGGER.debug("Response without Seq applied in arrival order")

        self._session.replace_possibilities(response.possibilities)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _schedule_reconnect(self) -> None:
        self._set_state(ConnectionState.DISCONNECTED)
        if self._reconnect_timer.isActive():
            return
        delay = self._backoff_ms
        self._backoff_ms = min(self._backoff_ms * 2, self._reconnect_max_ms)
        self.status_message.emit(t().status_disconnected.format(seconds=delay / 1000))
        self._reconnect_timer.start(delay)

    def _set_state(self, state: ConnectionState) -> None:
        if state == self._state:
            return
        self._state = state
        self.state_changed.emit(state)
