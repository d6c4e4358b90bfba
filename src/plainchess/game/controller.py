"""GameController — click-driven play on top of :class:`GameState`.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from plainchess.core.enums import Color, GameResult
from plainchess.core.move import MoveRecord
from plainchess.core.types import Square, validate_square
from plainchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

CHECK_MESSAGE = "Check!"

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CheckCallback = Callable[[Color], None]  # color in check
GameOverCallback = Callable[[GameResult, str], None]  # result, message
HistoryCallback = Callable[[int], None]  # current move index
SelectionCallback = Callable[[Square | None, set[Square]], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_history_changed: list[HistoryCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


def checkmate_message(result: GameResult) -> str:
    """Announcement for a finished game, e.g. ``'Checkmate! White wins!'``."""
    winner = "White" if result == GameResult.WHITE_WINS else "Black"
    return f"Checkmate! {winner} wins!"


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turns board clicks into moves and notifies listeners.

    The first click on a piece of the side to move selects it; the next
    click tries to move it there. Either way the selection is cleared
    after the second click.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_selected", "_destinations", "events", "__weakref__")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self._selected: Square | None = None
        self._destinations: set[Square] = set()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def destinations(self) -> set[Square]:
        """Legal destinations of the selected piece."""
        return set(self._destinations)

    def status_text(self) -> str:
        side = str(self._state.side_to_move).capitalize()
        return f"Current Turn: {side}"

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._state.new_game(fen)
        self._clear_selection()
        self._emit_history_changed()

    def click_square(self, square: Square) -> bool:
        """Handle a click on *square*; return whether a move was played."""
        validate_square(square)
        if self._selected is None:
            piece = self._state.board[square]
            if piece is not None and piece.color == self._state.side_to_move:
                self._select(square)
            return False

        from_sq = self._selected
        self._clear_selection()
        return self.submit_move(from_sq, square)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Try a move directly, then announce check or checkmate."""
        if not self._state.try_move(from_sq, to_sq):
            return False

        record = self._state.move_history[-1]
        self._emit_move(record)

        result = self._state.result
        if result != GameResult.IN_PROGRESS:
            message = checkmate_message(result)
            _LOGGER.info(message)
            self._emit_game_over(result, message)
        elif self._state.is_in_check():
            _LOGGER.debug("%s is in check", self._state.side_to_move)
            self._emit_check(self._state.side_to_move)
        return True

    def go_to_move(self, index: int) -> bool:
        if not self._state.go_to_move(index):
            return False
        self._clear_selection()
        self._emit_history_changed()
        return True

    def go_back(self) -> bool:
        return self.go_to_move(self._state.current_move_index - 1)

    def go_forward(self) -> bool:
        return self.go_to_move(self._state.current_move_index + 1)

    def go_to_start(self) -> bool:
        return self.go_to_move(0)

    def go_to_end(self) -> bool:
        return self.go_to_move(self._state.position_history_length - 1)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, square: Square) -> None:
        self._selected = square
        self._destinations = self._state.legal_destinations(square)
        _LOGGER.debug(
            "Selected %s with %d destination(s)", square, len(self._destinations)
        )
        self._emit_selection()

    def _clear_selection(self) -> None:
        if self._selected is None and not self._destinations:
            return
        self._selected = None
        self._destinations = set()
        self._emit_selection()

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self, result: GameResult, message: str) -> None:
        for cb in self.events.on_game_over:
            cb(result, message)

    def _emit_history_changed(self) -> None:
        for cb in self.events.on_history_changed:
            cb(self._state.current_move_index)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selected, set(self._destinations))
