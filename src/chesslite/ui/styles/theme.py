"""Visual theme constants and QSS styles for chesslite."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays shared by every preset.
_SELECTED = QColor(255, 255, 0, 100)
_TARGET_DOT = QColor(0, 0, 0, 40)
_IN_CHECK = QColor(255, 0, 0, 120)

# Pieces are drawn as unicode chess glyphs in this family.
PIECE_FONT = "DejaVu Sans"


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and piece glyphs."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    piece_white: QColor
    piece_black: QColor
    coord_light: QColor  # label drawn on dark squares
    coord_dark: QColor  # label drawn on light squares

    @classmethod
    def from_squares(cls, light: QColor, dark: QColor) -> BoardTheme:
        """Build a theme from its two square colours.

        Coordinates use the opposite square colour so they stay readable.
        """
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_from=_SELECTED,
            highlight_to=_TARGET_DOT,
            highlight_check=_IN_CHECK,
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=dark,
            coord_dark=light,
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_squares(QColor(240, 217, 181), QColor(181, 136, 99))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls.from_squares(QColor(222, 227, 230), QColor(140, 162, 173))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls.from_squares(QColor(236, 238, 220), QColor(112, 149, 120))

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Preset by display name; unknown names fall back to Classic."""
        return THEMES.get(name, cls.default)()


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QStatusBar {
    background: #1f1f1f;
}

QStatusBar QLabel {
    color: #e0e0e0;
    padding: 2px 8px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
"""
