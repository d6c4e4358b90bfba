"""Tests for MovePanel rows and click-to-jump."""

from __future__ import annotations

from plainchess.core.enums import Color, PieceType
from plainchess.core.move import MoveRecord
from plainchess.core.piece import Piece
from plainchess.ui.move_panel import MovePanel

_RECORDS = [
    MoveRecord(Piece(Color.WHITE, PieceType.PAWN), (1, 4), (3, 4)),
    MoveRecord(Piece(Color.BLACK, PieceType.KNIGHT), (7, 1), (5, 2)),
    MoveRecord(Piece(Color.WHITE, PieceType.KNIGHT), (0, 6), (2, 5)),
]


def test_set_history_builds_one_button_per_ply() -> None:
    panel = MovePanel()
    panel.set_history(_RECORDS, 2)

    assert panel._list.count() == 2
    assert sorted(panel._move_buttons) == [0, 1, 2]
    assert panel.button_text(0) == "e7-e5"
    assert panel.button_text(1) == "Nb1-c3"
    assert panel.active_ply == 2


def test_active_move_property_marks_only_current_ply() -> None:
    panel = MovePanel()
    panel.set_history(_RECORDS, 1)

    assert panel._move_buttons[1].property("activeMove") is True
    assert panel._move_buttons[0].property("activeMove") is False
    assert panel._move_buttons[2].property("activeMove") is False


def test_clicking_move_emits_ply() -> None:
    panel = MovePanel()
    panel.set_history(_RECORDS, None)
    received: list[int] = []
    panel.move_clicked.connect(received.append)

    panel._move_buttons[1].click()

    assert received == [1]


def test_clear_removes_rows() -> None:
    panel = MovePanel()
    panel.set_history(_RECORDS, 0)
    panel.clear()
    assert panel._list.count() == 0
    assert panel._move_buttons == {}
    assert panel.active_ply is None


def test_move_buttons_carry_full_description_tooltip() -> None:
    panel = MovePanel()
    panel.set_history(_RECORDS, None)

    assert panel._move_buttons[0].toolTip() == "1. white P e7 → e5"
    assert panel._move_buttons[1].toolTip() == "2. black N b1 → c3"
