"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from plainchess.core import MoveGenerator, Position, Rules

    pos = Position()
    gen = MoveGenerator(pos)
    print(gen.legal_destinations((1, 4)))
    print(Rules.is_checkmate(pos))
"""

from plainchess.core.board import Board
from plainchess.core.enums import Color, GameResult, PieceType
from plainchess.core.move import MoveRecord
from plainchess.core.move_generator import MOVE_PATTERNS, MoveGenerator
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
from plainchess.core.position import CapturedPieces, Position
from plainchess.core.rules import Rules
from plainchess.core.types import (
    ALL_SQUARES,
    Square,
    is_valid_square,
    square_name,
    validate_square,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_square",
    "square_name",
    "validate_square",
    # Domain objects
    "Board",
    "CapturedPieces",
    "MOVE_PATTERNS",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "captured_symbols",
    "describe_move",
    "move_list_rows",
    "move_to_notation",
    "position_from_fen",
    "position_to_fen",
]
