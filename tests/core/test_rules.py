"""Tests for Rules: check, checkmate and game result."""

from plainchess.core.enums import Color, GameResult
from plainchess.core.move_generator import MoveGenerator
from plainchess.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from plainchess.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert not Rules.is_in_check(pos)
        assert not Rules.is_in_check(pos, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_in_check(pos)
        assert Rules.is_in_check(pos, Color.WHITE)
        assert not Rules.is_in_check(pos, Color.BLACK)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.BLACK_WINS

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.WHITE_WINS

    def test_not_checkmate_when_can_escape(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)

    def test_not_checkmate_when_checker_can_be_captured(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/3q4/3QK3 w - - 0 1")
        fen_before = position_to_fen(pos)
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)
        assert position_to_fen(pos) == fen_before

    def test_not_checkmate_when_check_can_be_blocked(self) -> None:
        # Rook on a1 checks along the first rank; the knight can block on c1
        pos = position_from_fen("7k/8/8/8/8/3N4/3PPP2/r3K3 w - - 0 1")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)

    def test_queries_do_not_mutate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        fen_before = position_to_fen(pos)
        for _ in range(3):
            assert Rules.is_checkmate(pos)
            assert Rules.is_in_check(pos)
        assert position_to_fen(pos) == fen_before
        assert pos.side_to_move == Color.WHITE


class TestStalemateNotRecognised:
    def test_trapped_king_is_still_in_progress(self) -> None:
        # Black king on h8, white K on f6, white Q on g6: no legal moves
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not MoveGenerator(pos).has_escape_move()
        assert not Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS


class TestGameResult:
    def test_in_progress_at_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS
