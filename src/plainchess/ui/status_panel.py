"""StatusPanel — whose turn it is and what each side has captured."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from plainchess.core.enums import Color
from plainchess.core.notation import captured_symbols
from plainchess.core.position import CapturedPieces


class StatusPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Sans Serif", 12, QFont.Weight.Bold))
        layout.addWidget(self._turn_label)

        self._captured_white = QLabel()
        self._captured_black = QLabel()
        for label in (self._captured_white, self._captured_black):
            label.setFont(QFont("Sans Serif", 16))
            layout.addWidget(label)

    def update_status(self, turn_text: str, captured: CapturedPieces) -> None:
        self._turn_label.setText(turn_text)
        self._captured_white.setText(captured_symbols(captured.by(Color.WHITE)))
        self._captured_black.setText(captured_symbols(captured.by(Color.BLACK)))

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    def captured_text(self, color: Color) -> str:
        label = self._captured_white if color == Color.WHITE else self._captured_black
        return label.text()
