"""Move legality: piece geometry, check detection and legal destinations."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from plainchess.core.enums import Color, PieceType
from plainchess.core.types import ALL_SQUARES, Square, validate_square

if TYPE_CHECKING:
    from plainchess.core.board import Board
    from plainchess.core.piece import Piece
    from plainchess.core.position import Position


KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(2, 1), (1, 2)})

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# -- Per-kind movement patterns ----------------------------------------------
#
# Each predicate sees a board on which the origin holds *piece* and the
# destination is empty or holds an opposing piece.


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between two aligned squares is empty."""
    dr = _sign(to_sq[0] - from_sq[0])
    dc = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + dr, from_sq[1] + dc
    while (row, col) != to_sq:
        if board[(row, col)] is not None:
            return False
        row += dr
        col += dc
    return True


def _pawn_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    target = board[to_sq]

    if d_col == 0 and d_row == direction:
        return target is None

    if d_col == 0 and d_row == 2 * direction:
        return (
            from_sq[0] == _PAWN_START_ROW[piece.color]
            and target is None
            and board[(from_sq[0] + direction, from_sq[1])] is None
        )

    if abs(d_col) == 1 and d_row == direction:
        return target is not None and target.color != piece.color

    return False


def _knight_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    delta = (abs(to_sq[0] - from_sq[0]), abs(to_sq[1] - from_sq[1]))
    return delta in KNIGHT_DELTAS


def _bishop_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq[0] - from_sq[0])
    d_col = abs(to_sq[1] - from_sq[1])
    if d_row != d_col or d_row == 0:
        return False
    return _path_clear(board, from_sq, to_sq)


def _rook_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    same_row = from_sq[0] == to_sq[0]
    same_col = from_sq[1] == to_sq[1]
    if same_row == same_col:  # diagonal/other, or no movement at all
        return False
    return _path_clear(board, from_sq, to_sq)


def _queen_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return _rook_move(board, piece, from_sq, to_sq) or _bishop_move(
        board, piece, from_sq, to_sq
    )


def _king_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


MovePattern = Callable[["Board", "Piece", Square, Square], bool]

MOVE_PATTERNS: dict[PieceType, MovePattern] = {
    PieceType.PAWN: _pawn_move,
    PieceType.KNIGHT: _knight_move,
    PieceType.BISHOP: _bishop_move,
    PieceType.ROOK: _rook_move,
    PieceType.QUEEN: _queen_move,
    PieceType.KING: _king_move,
}


class MoveGenerator:
    """Answers legality questions about a :class:`Position`.

    Check detection and legal-move filtering use the position's scoped
    :meth:`~plainchess.core.position.Position.trial_move` and
    :meth:`~plainchess.core.position.Position.acting_as`, so the position is
    always restored before a method returns.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Geometry ------------------------------------------------------------

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Movement-pattern legality for the side to move.

        Ignores whether the mover's own king ends up in check.
        """
        validate_square(from_sq)
        validate_square(to_sq)
        board = self._pos.board

        piece = board[from_sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return False

        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        return MOVE_PATTERNS[piece.piece_type](board, piece, from_sq, to_sq)

    # -- Check detection -----------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Can any opposing piece move onto *color*'s king?

        A board without a king of *color* is never in check.
        """
        board = self._pos.board
        king_sq = board.find_king(color)
        if king_sq is None:
            return False

        opponent = color.opposite
        with self._pos.acting_as(opponent):
            for sq, _piece in board.occupied(opponent):
                if self.is_valid_move(sq, king_sq):
                    return True
        return False

    def leaves_king_in_check(self, from_sq: Square, to_sq: Square) -> bool:
        """Would the mover's king be in check after playing this move?"""
        piece = self._pos.board[from_sq]
        if piece is None:
            return False
        with self._pos.trial_move(from_sq, to_sq):
            return self.is_in_check(piece.color)

    # -- Enumeration ---------------------------------------------------------

    def legal_destinations(self, from_sq: Square) -> set[Square]:
        """Squares the piece on *from_sq* can reach without exposing its king.

        Evaluated for the piece's own color, whoever is to move, so the board
        can preview either side; the click protocol itself only selects pieces
        of the side to move.
        """
        validate_square(from_sq)
        piece = self._pos.board[from_sq]
        if piece is None:
            return set()

        destinations: set[Square] = set()
        with self._pos.acting_as(piece.color):
            for to_sq in ALL_SQUARES:
                if to_sq == from_sq:
                    continue
                if not self.is_valid_move(from_sq, to_sq):
                    continue
                if not self.leaves_king_in_check(from_sq, to_sq):
                    destinations.add(to_sq)
        return destinations

    def has_escape_move(self) -> bool:
        """Whether any move of the side to move leaves its king out of check."""
        return any(True for _ in self._iter_legal_moves())

    def _iter_legal_moves(self) -> Iterator[tuple[Square, Square]]:
        for from_sq, _piece in self._pos.board.occupied(self._pos.side_to_move):
            for to_sq in ALL_SQUARES:
                if not self.is_valid_move(from_sq, to_sq):
                    continue
                if not self.leaves_king_in_check(from_sq, to_sq):
                    yield (from_sq, to_sq)
