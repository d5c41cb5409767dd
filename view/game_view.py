"""
Framework independent view of a TicTacToe game.

GameView owns a GameEngine and turns its state into plain data
(ViewModel) that any host (Tkinter, OpenCV window, console) can draw.
Hosts register a listener and redraw whenever it fires.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from engine.board import Board
from engine.game_engine import GameEngine
from engine.status import Won, is_terminal


@dataclass(frozen=True)
class MoveListEntry:
    """One "go to move" control."""
    step: int
    label: str
    is_current: bool


@dataclass(frozen=True)
class ViewModel:
    """Everything a host needs to draw one frame."""
    board: Board                                   # Viewed board, cells are None/Symbol
    status: str
    moves: Tuple[MoveListEntry, ...]
    current_step: int
    winning_line: Optional[Tuple[int, int, int]] = None
    is_game_over: bool = False


class GameView:
    """
    Presentation layer around a GameEngine.

    Clicks and jumps are forwarded to the engine; the engine notifies
    this view, which rebuilds the view model and notifies the host.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self._listeners: List[Callable[[ViewModel], None]] = []
        self.model = self._build_model()
        self.engine.subscribe(self._on_engine_change)

    def add_listener(self, listener: Callable[[ViewModel], None]):
        """Register a redraw callback and call it once with the current model."""
        self._listeners.append(listener)
        listener(self.model)

    # ==================== INPUT ====================

    def click(self, cell: Optional[int]) -> bool:
        """Handle a click on a cell (None = click outside the board)."""
        if cell is None:
            return False
        return self.engine.apply_move(cell)

    def jump(self, step: int) -> bool:
        return self.engine.jump_to(step)

    def step_back(self) -> bool:
        """Go one move back in history."""
        if self.engine.current_step == 0:
            return False
        return self.engine.jump_to(self.engine.current_step - 1)

    def step_forward(self) -> bool:
        """Go one move forward in history."""
        if self.engine.current_step >= self.engine.history_length - 1:
            return False
        return self.engine.jump_to(self.engine.current_step + 1)

    def reset(self):
        self.engine.reset()

    def close(self):
        """Detach from the engine."""
        self.engine.unsubscribe(self._on_engine_change)
        self._listeners.clear()

    # ==================== MODEL ====================

    def _on_engine_change(self, engine: GameEngine):
        self.model = self._build_model()
        for listener in list(self._listeners):
            listener(self.model)

    def _build_model(self) -> ViewModel:
        engine = self.engine
        status = engine.query_status()

        moves = tuple(
            MoveListEntry(step=step, label=label, is_current=(step == engine.current_step))
            for step, label in enumerate(engine.move_descriptions())
        )

        return ViewModel(
            board=engine.current_board,
            status=engine.status_text(status),
            moves=moves,
            current_step=engine.current_step,
            winning_line=status.line if isinstance(status, Won) else None,
            is_game_over=is_terminal(status),
        )
