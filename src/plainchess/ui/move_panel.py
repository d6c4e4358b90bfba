"""MovePanel — scrollable, clickable list of played moves."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from plainchess.core.move import MoveRecord
from plainchess.core.notation import describe_move, move_list_rows

_BUTTON_STYLE = """
QToolButton {
    background: transparent;
    color: #d4d4d4;
    border: 1px solid transparent;
    border-radius: 4px;
    padding: 2px 8px;
    text-align: left;
    font-family: monospace;
    font-size: 13px;
}
QToolButton:hover {
    background: #3c3c3c;
    border-color: #555;
}
QToolButton[activeMove="true"] {
    background: #264f78;
    border-color: #3b79b7;
    color: #f0f6ff;
}
"""


class MovePanel(QWidget):
    """Displays the move history; clicking a move jumps to it.

    Signals:
        move_clicked(int): 0-based ply index of the clicked move.
    """

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._records: list[MoveRecord] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._active_ply: int | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Sans Serif", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    # ── Public API ───────────────────────────────────────────────────────

    def set_history(self, records: Sequence[MoveRecord], active_ply: int | None) -> None:
        """Rebuild the list; *active_ply* marks the move shown on the board."""
        self._records = list(records)
        self._active_ply = active_ply
        self._rebuild_list()

    def clear(self) -> None:
        self.set_history([], None)

    def button_text(self, ply: int) -> str:
        return self._move_buttons[ply].text()

    @property
    def active_ply(self) -> int | None:
        return self._active_ply

    # ── Internal ─────────────────────────────────────────────────────────

    def _create_move_button(self, text: str, ply: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setToolTip(describe_move(ply, self._records[ply]))
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", ply == self._active_ply)
        btn.setStyleSheet(_BUTTON_STYLE)
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self._on_move_clicked(move_ply)
        )
        return btn

    def _on_move_clicked(self, ply: int) -> None:
        self.move_clicked.emit(ply)

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for number, white_text, black_text in move_list_rows(self._records):
            white_ply = (number - 1) * 2

            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{number}.")
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            white_btn = self._create_move_button(white_text, white_ply)
            row_layout.addWidget(white_btn, 1)
            self._move_buttons[white_ply] = white_btn

            if black_text is not None:
                black_btn = self._create_move_button(black_text, white_ply + 1)
                row_layout.addWidget(black_btn, 1)
                self._move_buttons[white_ply + 1] = black_btn
            else:
                spacer = QWidget()
                spacer.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                )
                row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self._list.scrollToBottom()
