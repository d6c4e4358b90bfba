"""Board palettes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from plainchess.core.types import Square


@dataclass(frozen=True)
class BoardTheme:
    """Everything the board scene paints, by role.

    A square is light when ``row + col`` is odd, so a1 (row 0, col 0) is
    dark.
    """

    name: str
    light: QColor
    dark: QColor
    selected: QColor  # square of the picked-up piece
    move_indicator: QColor  # dot on an empty reachable square
    capture_indicator: QColor  # ring around a reachable enemy piece
    in_check: QColor  # king under attack

    @staticmethod
    def is_light(square: Square) -> bool:
        return (square[0] + square[1]) % 2 == 1

    def square_color(self, square: Square) -> QColor:
        return self.light if self.is_light(square) else self.dark

    def coordinate_color(self, square: Square) -> QColor:
        """Label colour readable on *square*: the opposite square shade."""
        return self.dark if self.is_light(square) else self.light

    def indicator_color(self, capture: bool) -> QColor:
        return self.capture_indicator if capture else self.move_indicator


CLASSIC = BoardTheme(
    name="Classic",
    light=QColor("#eeeed2"),
    dark=QColor("#769656"),
    selected=QColor(246, 246, 105, 150),
    move_indicator=QColor(20, 85, 30, 90),
    capture_indicator=QColor(200, 40, 40, 140),
    in_check=QColor(230, 60, 60, 170),
)

HIGH_CONTRAST = BoardTheme(
    name="High Contrast",
    light=QColor("#ffffff"),
    dark=QColor("#5a5a5a"),
    selected=QColor(0, 160, 255, 160),
    move_indicator=QColor(0, 0, 0, 150),
    capture_indicator=QColor(255, 140, 0, 220),
    in_check=QColor(255, 0, 0, 200),
)

THEMES: dict[str, BoardTheme] = {theme.name: theme for theme in (CLASSIC, HIGH_CONTRAST)}


def theme_named(name: str) -> BoardTheme:
    """Palette registered under *name*; unknown names give :data:`CLASSIC`."""
    return THEMES.get(name, CLASSIC)


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #262421;
    color: #e8e6e3;
}
QPushButton {
    background-color: #3a3733;
    border: 1px solid #57534e;
    border-radius: 3px;
    padding: 5px 12px;
}
QPushButton:hover {
    background-color: #4a4641;
}
QPushButton:disabled {
    color: #7a756f;
}
QListWidget {
    background-color: #1d1b19;
    border: 1px solid #3a3733;
}
"""
