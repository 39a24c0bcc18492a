"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

MatrixFactory = Callable[..., list[list[list[int]]]]


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def make_matrix() -> MatrixFactory:
    """Build a fresh 9x9 candidate matrix; unlisted cells allow 1..9."""

    def _build(
        overrides: Mapping[tuple[int, int], Sequence[int]] | None = None,
    ) -> list[list[list[int]]]:
        overrides = overrides or {}
        return [
            [
                list(overrides.get((r, c), range(1, 10)))
                for c in range(1, 10)
            ]
            for r in range(1, 10)
        ]

    return _build


@pytest.fixture
def stub_socket(qapp):
    """In-memory stand-in for QWebSocket that records traffic."""
    from PyQt6.QtCore import QObject, QUrl, pyqtSignal

    class _StubSocket(QObject):
        connected = pyqtSignal()
        disconnected = pyqtSignal()
        textMessageReceived = pyqtSignal(str)
        errorOccurred = pyqtSignal(object)

        def __init__(self) -> None:
            super().__init__()
            self.opened: list[str] = []
            self.sent: list[str] = []
            self.close_calls = 0

        def open(self, url: QUrl) -> None:
            self.opened.append(url.toString())

        def close(self) -> None:
            self.close_calls += 1

        def sendTextMessage(self, message: str) -> int:
            self.sent.append(message)
            return len(message)

        def errorString(self) -> str:
            return "Connection refused"

    return _StubSocket()
