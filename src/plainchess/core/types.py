"""Square type alias and coordinate helpers.

Squares are ``(row, col)`` pairs. Row 0 is white's home rank, row 7 is
black's; col 0 is the a-file.

Square names follow the board's display convention: the column letter
followed by ``8 - row``, so white's king starts on ``"e8"`` and black's
on ``"e1"``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

_FILES = "abcdefgh"


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a ``(row, col)`` pair inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    return (
        isinstance(row, int)
        and isinstance(col, int)
        and 0 <= row < 8
        and 0 <= col < 8
    )


def validate_square(sq: object) -> Square:
    """Return *sq* unchanged, or raise ``ValueError`` if it is off the board."""
    if not is_valid_square(sq):
        raise ValueError(f"Square out of range: {sq!r}")
    return sq  # type: ignore[return-value]


def square_name(sq: Square) -> str:
    """Display name, e.g. ``(1, 4)`` → ``'e7'``."""
    row, col = validate_square(sq)
    return _FILES[col] + str(8 - row)


ALL_SQUARES: tuple[Square, ...] = tuple(
    (row, col) for row in range(8) for col in range(8)
)
