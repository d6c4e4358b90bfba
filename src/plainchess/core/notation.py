"""Text forms of positions and moves: FEN placement and move-list notation."""

from __future__ import annotations

from collections.abc import Sequence

from plainchess.core.board import Board
from plainchess.core.enums import Color
from plainchess.core.move import MoveRecord
from plainchess.core.piece import Piece
from plainchess.core.position import Position
from plainchess.core.types import square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"


# ── FEN ─────────────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Only piece placement and side to move are used; the castling, en
    passant and clock fields may be present but are ignored.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Piece placement; the first rank listed is row 7.
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN (no castling or en passant)."""
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str} - - 0 1"


# ── Move lists ──────────────────────────────────────────────────────────────


def move_to_notation(record: MoveRecord) -> str:
    """Piece letter (none for pawns) and ``from-to``, e.g. ``'Nb1-c3'``."""
    return str(record)


def describe_move(index: int, record: MoveRecord) -> str:
    """One-line description, e.g. ``'3. white N b8 → c6 (captured P)'``.

    *index* is the 0-based position of *record* in the move history.
    """
    text = (
        f"{index + 1}. {record.piece.color} {record.piece.letter} "
        f"{square_name(record.from_sq)} → {square_name(record.to_sq)}"
    )
    if record.captured is not None:
        text += f" (captured {record.captured.letter})"
    return text


def move_list_rows(
    records: Sequence[MoveRecord],
) -> list[tuple[int, str, str | None]]:
    """Pair plies into numbered rows: ``(number, white_text, black_text)``."""
    rows: list[tuple[int, str, str | None]] = []
    for idx in range(0, len(records), 2):
        white = move_to_notation(records[idx])
        black = move_to_notation(records[idx + 1]) if idx + 1 < len(records) else None
        rows.append((idx // 2 + 1, white, black))
    return rows


def captured_symbols(pieces: Sequence[Piece]) -> str:
    """Unicode figurines separated by spaces, e.g. ``'♟ ♞'``."""
    return " ".join(piece.symbol for piece in pieces)
