"""ControlPanel — new game and history navigation buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtBoundSignal, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: new game and stepping through history."""

    new_game_clicked = pyqtSignal()
    start_clicked = pyqtSignal()
    back_clicked = pyqtSignal()
    forward_clicked = pyqtSignal()
    end_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        nav = QHBoxLayout()
        self._btn_start = self._make_button("⏮", self.start_clicked)
        self._btn_back = self._make_button("◀", self.back_clicked)
        self._btn_forward = self._make_button("▶", self.forward_clicked)
        self._btn_end = self._make_button("⏭", self.end_clicked)
        for btn in (self._btn_start, self._btn_back, self._btn_forward, self._btn_end):
            nav.addWidget(btn)
        layout.addLayout(nav)

        self._btn_new = self._make_button("New Game", self.new_game_clicked)
        layout.addWidget(self._btn_new)

    @staticmethod
    def _make_button(text: str, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton(text)
        btn.setMinimumHeight(36)
        btn.clicked.connect(signal)
        return btn

    def set_navigation_enabled(self, can_go_back: bool, can_go_forward: bool) -> None:
        """Enable/disable navigation buttons based on history position."""
        self._btn_start.setEnabled(can_go_back)
        self._btn_back.setEnabled(can_go_back)
        self._btn_forward.setEnabled(can_go_forward)
        self._btn_end.setEnabled(can_go_forward)
