"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "NOUGHTS_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_LOG_LEVEL = logging.WARNING


def _resolve_log_level(level: str | int | None) -> tuple[int, str | None]:
    """Return ``(level, rejected)``; *rejected* is the unparseable input."""
    if level is None:
        level = os.environ.get(_LOG_LEVEL_ENV)
    if level is None or level == "":
        return _DEFAULT_LOG_LEVEL, None
    if isinstance(level, int):
        return level, None
    if level.strip().isdigit():
        return int(level), None
    resolved = logging.getLevelName(level.strip().upper())
    if isinstance(resolved, int):
        return resolved, None
    return _DEFAULT_LOG_LEVEL, level


def configure_logging(level: str | int | None = None) -> int:
    """Set up root logging from *level* or ``$NOUGHTS_LOG_LEVEL``.

    Returns the effective level.
    """
    resolved, rejected = _resolve_log_level(level)
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    if rejected is not None:
        _LOGGER.warning("Unknown log level %r, falling back to WARNING", rejected)
    return resolved


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from noughts.ui.styles.theme import APP_STYLE

    app.setApplicationName("Noughts")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from noughts.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
