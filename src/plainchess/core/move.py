"""Move record value object."""

from __future__ import annotations

from dataclasses import dataclass

from plainchess.core.piece import Piece
from plainchess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable record of one accepted move."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        prefix = "" if self.piece.letter == "P" else self.piece.letter
        return f"{prefix}{square_name(self.from_sq)}-{square_name(self.to_sq)}"
