"""Tests for Position trial moves, committed moves and copies."""

import pytest

from plainchess.core.board import Board
from plainchess.core.enums import Color, PieceType
from plainchess.core.notation import position_from_fen
from plainchess.core.piece import Piece
from plainchess.core.position import CapturedPieces, Position

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


class TestTrialMove:
    def test_board_changes_inside_block(self) -> None:
        pos = Position()
        with pos.trial_move((1, 4), (3, 4)) as captured:
            assert captured is None
            assert pos.board[(3, 4)] == WHITE_PAWN
            assert pos.board.is_empty((1, 4))
        assert pos.board == Board.initial()

    def test_captured_occupant_restored(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        before = pos.board.copy()
        with pos.trial_move((3, 4), (4, 3)) as captured:
            assert captured == BLACK_PAWN
            assert pos.board[(4, 3)] == WHITE_PAWN
        assert pos.board == before

    def test_restored_when_block_raises(self) -> None:
        pos = Position()
        with pytest.raises(RuntimeError):
            with pos.trial_move((0, 1), (2, 2)):
                raise RuntimeError("boom")
        assert pos.board == Board.initial()

    def test_side_to_move_untouched(self) -> None:
        pos = Position()
        with pos.trial_move((1, 0), (2, 0)):
            assert pos.side_to_move == Color.WHITE
        assert pos.side_to_move == Color.WHITE

    def test_null_move_keeps_piece_in_place(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        king = pos.board[(0, 4)]
        with pos.trial_move((0, 4), (0, 4)) as occupant:
            assert occupant == king
            assert pos.board[(0, 4)] == king
        assert pos.board[(0, 4)] == king
        assert pos.board.find_king(Color.WHITE) == (0, 4)


class TestActingAs:
    def test_side_switched_then_restored(self) -> None:
        pos = Position()
        with pos.acting_as(Color.BLACK) as same:
            assert same is pos
            assert pos.side_to_move == Color.BLACK
        assert pos.side_to_move == Color.WHITE

    def test_restored_when_block_raises(self) -> None:
        pos = Position()
        with pytest.raises(KeyError):
            with pos.acting_as(Color.BLACK):
                raise KeyError("x")
        assert pos.side_to_move == Color.WHITE


class TestMakeMove:
    def test_quiet_move(self) -> None:
        pos = Position()
        record = pos.make_move((1, 4), (3, 4))
        assert record.piece == WHITE_PAWN
        assert record.captured is None
        assert not record.is_capture
        assert pos.board[(3, 4)] == WHITE_PAWN
        assert pos.side_to_move == Color.BLACK

    def test_capture_credited_to_mover(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        record = pos.make_move((3, 4), (4, 3))
        assert record.captured == BLACK_PAWN
        assert pos.captured.by(Color.WHITE) == [BLACK_PAWN]
        assert pos.captured.by(Color.BLACK) == []

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError):
            Position().make_move((4, 4), (5, 4))


class TestCopy:
    def test_copy_shares_nothing_mutable(self) -> None:
        pos = Position()
        pos.captured.add(Color.WHITE, BLACK_PAWN)
        clone = pos.copy()
        assert clone == pos

        clone.board[(1, 0)] = None
        clone.captured.add(Color.BLACK, WHITE_PAWN)
        clone.side_to_move = Color.BLACK

        assert pos.board[(1, 0)] == WHITE_PAWN
        assert pos.captured == CapturedPieces(white=[BLACK_PAWN])
        assert pos.side_to_move == Color.WHITE
        assert clone != pos
