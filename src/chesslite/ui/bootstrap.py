"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chesslite.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def has_piece_font() -> bool:
    """Is the glyph font family used for pieces installed?

    Qt substitutes another family when it is missing, which may lack the
    chess symbols and draw empty boxes instead.
    """
    from PyQt6.QtGui import QFontDatabase

    from chesslite.ui.styles.theme import PIECE_FONT

    return PIECE_FONT in QFontDatabase.families()


def _configure_application(app: QApplication) -> None:
    """Apply app-wide style and check the piece glyph font."""
    from chesslite.ui.styles.theme import APP_STYLE, PIECE_FONT

    app.setApplicationName("chesslite")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)
    if not has_piece_font():
        _LOGGER.warning(
            "Piece font %r not installed; glyphs may not render", PIECE_FONT
        )


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create the application, show one board window and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from chesslite.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Board window shown")

    return app.exec()
