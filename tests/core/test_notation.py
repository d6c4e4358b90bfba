"""Tests for square names, FEN placement and move-list notation."""

import pytest

from plainchess.core.board import Board
from plainchess.core.enums import Color, PieceType
from plainchess.core.move import MoveRecord
from plainchess.core.notation import (
    STARTING_FEN,
    captured_symbols,
    describe_move,
    move_list_rows,
    move_to_notation,
    position_from_fen,
    position_to_fen,
)
from plainchess.core.piece import Piece
from plainchess.core.position import Position
from plainchess.core.types import square_name

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)
WHITE_KNIGHT = Piece(Color.WHITE, PieceType.KNIGHT)


class TestSquareNames:
    @pytest.mark.parametrize(
        ("sq", "name"),
        [((0, 0), "a8"), ((7, 7), "h1"), ((1, 4), "e7"), ((3, 4), "e5"), ((6, 3), "d2")],
    )
    def test_name_uses_eight_minus_row(self, sq: tuple[int, int], name: str) -> None:
        assert square_name(sq) == name

    def test_off_board_square_has_no_name(self) -> None:
        with pytest.raises(ValueError):
            square_name((8, 0))


class TestFen:
    def test_starting_fen_is_initial_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board == Board.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos == Position()

    def test_round_trip(self) -> None:
        fen = "4r2k/8/8/8/8/8/4B3/4K3 b - - 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_placement_and_side_only(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/4K2k b")
        assert pos.side_to_move == Color.BLACK
        assert pos.board[(0, 4)] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[(0, 7)] == Piece(Color.BLACK, PieceType.KING)

    def test_extra_fields_ignored(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w KQkq e3 5 9")
        assert position_to_fen(pos) == "4k3/8/8/8/8/8/8/4K3 w - - 0 1"

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/8/8/8/8 w",
            "8/8/8/8/8/8/8/9 w",
            "8/8/8/8/8/8/8/7 w",
            "8/8/8/8/8/8/8/ppppppppp w",
            "8/8/8/8/8/8/8/8 x",
            "8/8/8/8/8/8/8/7X w",
            "8/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid_fen(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestMoveText:
    def test_pawn_has_no_letter(self) -> None:
        record = MoveRecord(WHITE_PAWN, (1, 4), (3, 4))
        assert move_to_notation(record) == "e7-e5"

    def test_piece_letter(self) -> None:
        record = MoveRecord(WHITE_KNIGHT, (0, 6), (2, 5))
        assert move_to_notation(record) == "Ng8-f6"

    def test_describe_quiet_move(self) -> None:
        record = MoveRecord(WHITE_KNIGHT, (0, 6), (2, 5))
        assert describe_move(0, record) == "1. white N g8 → f6"

    def test_describe_capture(self) -> None:
        record = MoveRecord(BLACK_PAWN, (4, 3), (3, 4), captured=WHITE_PAWN)
        assert describe_move(3, record) == "4. black P d4 → e5 (captured P)"

    def test_rows_pair_white_and_black(self) -> None:
        records = [
            MoveRecord(WHITE_PAWN, (1, 4), (3, 4)),
            MoveRecord(BLACK_PAWN, (6, 4), (4, 4)),
            MoveRecord(WHITE_KNIGHT, (0, 6), (2, 5)),
        ]
        assert move_list_rows(records) == [
            (1, "e7-e5", "e2-e4"),
            (2, "Ng8-f6", None),
        ]

    def test_rows_empty(self) -> None:
        assert move_list_rows([]) == []

    def test_captured_symbols(self) -> None:
        pieces = [BLACK_PAWN, Piece(Color.BLACK, PieceType.QUEEN)]
        assert captured_symbols(pieces) == "♟ ♛"
        assert captured_symbols([]) == ""
