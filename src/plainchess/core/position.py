"""Position — board + side to move + captured pieces, with trial moves."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from plainchess.core.board import Board
from plainchess.core.enums import Color
from plainchess.core.move import MoveRecord
from plainchess.core.piece import Piece
from plainchess.core.types import Square


@dataclass
class CapturedPieces:
    """Pieces taken by each side, in capture order."""

    white: list[Piece] = field(default_factory=list)
    black: list[Piece] = field(default_factory=list)

    def by(self, color: Color) -> list[Piece]:
        """Pieces captured *by* *color*."""
        return self.white if color == Color.WHITE else self.black

    def add(self, color: Color, piece: Piece) -> None:
        self.by(color).append(piece)

    def copy(self) -> CapturedPieces:
        return CapturedPieces(white=self.white.copy(), black=self.black.copy())


class Position:
    """Full game position: board + side to move + captures.

    Speculative moves go through :meth:`trial_move`, which always puts the
    board back the way it was, and :meth:`acting_as`, which always restores
    the side to move.
    """

    __slots__ = ("board", "side_to_move", "captured")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        captured: CapturedPieces | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.captured = captured if captured is not None else CapturedPieces()

    # ── Scoped mutations ─────────────────────────────────────────────────

    @contextmanager
    def trial_move(self, from_sq: Square, to_sq: Square) -> Iterator[Piece | None]:
        """Move the piece on *from_sq* to *to_sq* for the duration of the block.

        Yields the previous occupant of *to_sq*. On exit both squares get
        their exact previous occupants back, even if the block raises.
        Side to move and captures are left alone. A null move (both squares
        equal) yields the occupant and changes nothing.
        """
        board = self.board
        if from_sq == to_sq:
            yield board[to_sq]
            return
        moving = board[from_sq]
        target = board[to_sq]
        board[to_sq] = moving
        board[from_sq] = None
        try:
            yield target
        finally:
            board[from_sq] = moving
            board[to_sq] = target

    @contextmanager
    def acting_as(self, color: Color) -> Iterator[Position]:
        """Treat *color* as the side to move for the duration of the block."""
        original = self.side_to_move
        self.side_to_move = color
        try:
            yield self
        finally:
            self.side_to_move = original

    # ── Committed moves ──────────────────────────────────────────────────

    def make_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Play a move for good: capture, record it for the mover, flip sides.

        Caller is responsible for legality check.
        """
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq!r}")
        captured = self.board[to_sq]

        self.board[to_sq] = piece
        self.board[from_sq] = None
        if captured is not None:
            self.captured.add(self.side_to_move, captured)
        self.side_to_move = self.side_to_move.opposite

        return MoveRecord(piece=piece, from_sq=from_sq, to_sq=to_sq, captured=captured)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy sharing no mutable state with this position."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            captured=self.captured.copy(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.captured == other.captured
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Position(side_to_move={self.side_to_move}, board=\n{self.board!r})"
