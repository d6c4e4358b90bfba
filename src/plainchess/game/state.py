"""Game state — live position, move history and position snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from plainchess.core.board import Board
from plainchess.core.enums import Color, GameResult
from plainchess.core.move import MoveRecord
from plainchess.core.move_generator import MoveGenerator
from plainchess.core.notation import position_from_fen
from plainchess.core.piece import Piece
from plainchess.core.position import CapturedPieces, Position
from plainchess.core.rules import Rules
from plainchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Owns one game: the live position plus its full history.

    ``position_history[0]`` is the starting position and
    ``position_history[k]`` the position after move ``k``.
    ``current_move_index`` points at the snapshot the live position was
    last synchronised with; after :meth:`go_to_move` it may be behind the
    end of ``move_history``, and the next accepted move discards that
    future.

    This is a pure data/logic class — no threading, no UI.
    """

    position: Position = field(default_factory=Position)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    position_history: list[Position] = field(default_factory=list, init=False)
    current_move_index: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.position_history.append(self.position.copy())

    # ── Initialisation ───────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Reset to the standard setup, or to the position in *fen*."""
        self.position = position_from_fen(fen) if fen else Position()
        self.move_history.clear()
        self.position_history.clear()
        self.position_history.append(self.position.copy())
        self.current_move_index = 0

    # ── Move application ─────────────────────────────────────────────────

    def try_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a move if it is legal; return whether it was accepted.

        A rejected move leaves the position and both histories untouched.
        """
        gen = MoveGenerator(self.position)
        if not gen.is_valid_move(from_sq, to_sq):
            _LOGGER.debug("Rejected %s -> %s: not a valid move", from_sq, to_sq)
            return False
        if gen.leaves_king_in_check(from_sq, to_sq):
            _LOGGER.debug("Rejected %s -> %s: king left in check", from_sq, to_sq)
            return False

        self._truncate_future()
        record = self.position.make_move(from_sq, to_sq)
        self.move_history.append(record)
        self.current_move_index += 1
        self.position_history.append(self.position.copy())
        _LOGGER.debug("Move %d: %s", self.current_move_index, record)
        return True

    def _truncate_future(self) -> None:
        if self.current_move_index >= len(self.move_history):
            return
        _LOGGER.debug(
            "Discarding %d move(s) after move %d",
            len(self.move_history) - self.current_move_index,
            self.current_move_index,
        )
        del self.move_history[self.current_move_index :]
        del self.position_history[self.current_move_index + 1 :]

    # ── History navigation ───────────────────────────────────────────────

    def go_to_move(self, index: int) -> bool:
        """Restore the snapshot taken after move *index* (0 = start)."""
        if not 0 <= index < len(self.position_history):
            return False
        self.position = self.position_history[index].copy()
        self.current_move_index = index
        _LOGGER.debug("Jumped to move %d", index)
        return True

    def go_back(self) -> bool:
        return self.go_to_move(self.current_move_index - 1)

    def go_forward(self) -> bool:
        return self.go_to_move(self.current_move_index + 1)

    def go_to_start(self) -> bool:
        return self.go_to_move(0)

    def go_to_end(self) -> bool:
        return self.go_to_move(len(self.position_history) - 1)

    @property
    def can_go_back(self) -> bool:
        return self.current_move_index > 0

    @property
    def can_go_forward(self) -> bool:
        return self.current_move_index < len(self.position_history) - 1

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def captured(self) -> CapturedPieces:
        return self.position.captured

    def captured_by(self, color: Color) -> list[Piece]:
        return self.position.captured.by(color)

    @property
    def position_history_length(self) -> int:
        return len(self.position_history)

    def is_in_check(self, color: Color | None = None) -> bool:
        """Is *color* (default: side to move) in check?"""
        return Rules.is_in_check(self.position, color)

    def is_checkmate(self) -> bool:
        return Rules.is_checkmate(self.position)

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self.position)

    def legal_destinations(self, square: Square) -> set[Square]:
        """Where the piece on *square* may move without exposing its king."""
        return MoveGenerator(self.position).legal_destinations(square)
