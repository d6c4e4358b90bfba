"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plainchess.ui.theme import theme_named


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"  # a key of theme.THEMES
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"


def apply_settings(host: Any, settings: AppSettings) -> None:
    """Push *settings* into the board scene of *host* (the main window)."""
    scene = host.board_view.board_scene
    scene.set_theme(theme_named(settings.board_theme))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
