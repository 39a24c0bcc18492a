"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from emodoku.config import AppSettings, settings_from_args

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level*."""
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from emodoku.ui.styles.theme import APP_STYLE

    app.setApplicationName("Emodoku")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Parse *argv*, create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from emodoku.ui.main_window import MainWindow

    args = sys.argv if argv is None else argv
    settings: AppSettings = settings_from_args(args[1:])
    configure_logging(settings.log_level)
    _LOGGER.info("Starting with solver %s", settings.solver_url)

    app = QApplication(args[:1])
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
