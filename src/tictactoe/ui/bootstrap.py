"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from tictactoe.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    """Set up root logging. Unknown level names fall back to WARNING."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", level_name)
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from tictactoe.ui.styles.theme import APP_STYLE

    app.setApplicationName("Tic-Tac-Toe")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tictactoe.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
