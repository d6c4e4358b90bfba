"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from plainchess.core.enums import Color, PieceType

# piece type -> (letter, white figurine, black figurine)
_GLYPHS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("P", "♙", "♟"),
    PieceType.KNIGHT: ("N", "♘", "♞"),
    PieceType.BISHOP: ("B", "♗", "♝"),
    PieceType.ROOK: ("R", "♖", "♜"),
    PieceType.QUEEN: ("Q", "♕", "♛"),
    PieceType.KING: ("K", "♔", "♚"),
}

_TYPE_BY_LETTER: dict[str, PieceType] = {
    letter: ptype for ptype, (letter, _, _) in _GLYPHS.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured chess piece; equal pieces are interchangeable."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character: uppercase for white, lowercase for black."""
        return self.letter if self.color == Color.WHITE else self.letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` gives a white knight, ``'n'`` a black one."""
        ptype = _TYPE_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def letter(self) -> str:
        """Colour-independent letter used in move text, e.g. ``'N'``."""
        return _GLYPHS[self.piece_type][0]

    @property
    def symbol(self) -> str:
        """Unicode figurine, e.g. ``'♞'`` for a black knight."""
        return _GLYPHS[self.piece_type][1 + int(self.color)]
