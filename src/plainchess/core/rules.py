"""High-level chess rules: check, checkmate and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plainchess.core.enums import Color, GameResult
from plainchess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from plainchess.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Stalemate is not recognised: a side with no legal moves that is not in
    check is simply not checkmated.
    """

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        """Is *color* (default: side to move) in check?"""
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move if color is None else color)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return not gen.has_escape_move()

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if not Rules.is_checkmate(position):
            return GameResult.IN_PROGRESS
        return (
            GameResult.BLACK_WINS
            if position.side_to_move == Color.WHITE
            else GameResult.WHITE_WINS
        )
