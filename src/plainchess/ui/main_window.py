"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from plainchess.core.enums import Color, GameResult
from plainchess.core.move import MoveRecord
from plainchess.core.notation import describe_move
from plainchess.core.types import Square
from plainchess.game.controller import CHECK_MESSAGE, GameController
from plainchess.game.state import GameState
from plainchess.ui.board_view import BoardView
from plainchess.ui.control_panel import ControlPanel
from plainchess.ui.move_panel import MovePanel
from plainchess.ui.settings import AppSettings, apply_settings
from plainchess.ui.status_panel import StatusPanel


class MainWindow(QMainWindow):
    """Main application window.

    Every change to the game is followed by a full refresh from the
    controller's state; the widgets keep no game logic of their own.
    """

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Plain Chess")
        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_signals()
        apply_settings(self, self._settings)
        self.refresh()

    # ── Layout ───────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        layout = QHBoxLayout(central)

        self.board_view = BoardView()
        layout.addWidget(self.board_view, 3)

        side = QVBoxLayout()
        self.status_panel = StatusPanel()
        side.addWidget(self.status_panel)
        self.move_panel = MovePanel()
        side.addWidget(self.move_panel, 1)
        self.control_panel = ControlPanel()
        side.addWidget(self.control_panel)
        layout.addLayout(side, 1)

        self.setCentralWidget(central)
        self.statusBar()

    def _connect_signals(self) -> None:
        ctrl = self._controller
        self.board_view.board_scene.square_clicked.connect(self._on_square_clicked)
        self.move_panel.move_clicked.connect(lambda ply: ctrl.go_to_move(ply + 1))

        self.control_panel.new_game_clicked.connect(ctrl.new_game)
        self.control_panel.start_clicked.connect(ctrl.go_to_start)
        self.control_panel.back_clicked.connect(ctrl.go_back)
        self.control_panel.forward_clicked.connect(ctrl.go_forward)
        self.control_panel.end_clicked.connect(ctrl.go_to_end)

        ctrl.events.on_move.append(self._on_move)
        ctrl.events.on_check.append(self._on_check)
        ctrl.events.on_game_over.append(self._on_game_over)
        ctrl.events.on_history_changed.append(lambda _index: self.refresh())
        ctrl.events.on_selection_changed.append(self._on_selection_changed)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── Refresh ──────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Redraw every widget from the current game state."""
        state = self._controller.state
        scene = self.board_view.board_scene
        scene.set_position(state.position)
        scene.set_selection(
            self._controller.selected_square, self._controller.destinations
        )
        scene.set_check_squares(self._checked_kings(state))

        active = state.current_move_index - 1
        self.move_panel.set_history(state.move_history, active if active >= 0 else None)
        self.status_panel.update_status(self._controller.status_text(), state.captured)
        self.control_panel.set_navigation_enabled(
            state.can_go_back, state.can_go_forward
        )

    @staticmethod
    def _checked_kings(state: GameState) -> list[Square]:
        squares: list[Square] = []
        for color in (Color.WHITE, Color.BLACK):
            king_sq = state.board.find_king(color)
            if king_sq is not None and state.is_in_check(color):
                squares.append(king_sq)
        return squares

    # ── Slots / event handlers ───────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.click_square((row, col))

    def _on_selection_changed(self, square: Square | None, destinations: set[Square]) -> None:
        self.board_view.board_scene.set_selection(square, destinations)

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self.refresh()
        self.statusBar().showMessage(
            describe_move(state.current_move_index - 1, record), 2000
        )

    def _on_check(self, color: Color) -> None:
        self.statusBar().showMessage(CHECK_MESSAGE, 2000)

    def _on_game_over(self, result: GameResult, message: str) -> None:
        self.statusBar().showMessage(message)
        self._show_game_over(message)

    def _show_game_over(self, message: str) -> None:
        box = QMessageBox(self)
        box.setWindowTitle("Game Over")
        box.setText(message)
        play_again = box.addButton("Play Again", QMessageBox.ButtonRole.AcceptRole)
        box.addButton(QMessageBox.StandardButton.Close)
        box.exec()
        if box.clickedButton() is play_again:
            self._controller.new_game()
