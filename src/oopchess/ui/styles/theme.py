"""Visual theme constants for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_check: QColor  # king in check
    glyph: QColor  # piece glyph text
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            glyph=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def contrast(cls) -> BoardTheme:
        """White and dark grey squares."""
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(64, 64, 64),
            highlight_from=QColor(255, 255, 0, 160),
            highlight_check=QColor(255, 0, 0, 120),
            glyph=QColor(128, 128, 128),
            coord_light=QColor(64, 64, 64),
            coord_dark=QColor(255, 255, 255),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_check=QColor(255, 0, 0, 120),
            glyph=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_check=QColor(255, 0, 0, 120),
            glyph=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Resolve a settings theme name; unknown names fall back to Classic."""
        theme_map = {
            "Classic": cls.default,
            "Contrast": cls.contrast,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return theme_map.get(name, cls.default)()


APP_STYLE = """
QMainWindow {
    background-color: #2b2b2b;
}
QToolBar {
    background-color: #333333;
    border: none;
    spacing: 6px;
}
QToolButton {
    color: #e0e0e0;
    padding: 4px 10px;
}
QToolButton:hover {
    background-color: #454545;
}
QStatusBar {
    color: #e0e0e0;
}
QLabel#turnLabel {
    color: #e0e0e0;
    font-size: 14px;
    font-weight: bold;
}
"""
