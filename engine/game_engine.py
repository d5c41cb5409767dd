"""
Game engine for TicTacToe with move history and time-travel.

The engine keeps every board that was played, a pointer to the board
currently viewed, and derives whose turn it is from that pointer.
Illegal moves are ignored instead of raising.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .board import Board, Symbol, empty_board, place
from .config import GameConfig
from .move_validator import MoveValidator
from .status import GameStatus, InProgress, Won, Draw, status_text
from .win_checker import DrawRule, WinChecker


@dataclass(frozen=True)
class HistoryEntry:
    """
    One recorded board.

    cell and symbol describe the move that produced the board;
    both are None for the starting entry.
    """
    board: Board
    cell: Optional[int] = None
    symbol: Optional[Symbol] = None


Listener = Callable[["GameEngine"], None]


class GameEngine:
    """
    TicTacToe game state with history.

    Tracks:
    - History of boards (index 0 is the empty board)
    - The step currently viewed
    - Whose turn is next (X on even steps, O on odd steps)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        draw_rule: Optional[DrawRule] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Game configuration (default: GameConfig()).
            draw_rule: Overrides config.DRAW_RULE.
            verbose: Overrides config.VERBOSE.
        """
        self.config = config or GameConfig()
        self.draw_rule = draw_rule if draw_rule is not None else self.config.DRAW_RULE
        self.verbose = verbose if verbose is not None else self.config.VERBOSE

        self.win_checker = WinChecker()
        self.validator = MoveValidator()

        self._history: List[HistoryEntry] = [HistoryEntry(board=empty_board())]
        self._current_step = 0
        self._listeners: List[Listener] = []

    # ==================== READ ACCESS ====================

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def current_board(self) -> Board:
        return self._history[self._current_step].board

    @property
    def x_is_next(self) -> bool:
        return self._current_step % 2 == 0

    @property
    def next_symbol(self) -> Symbol:
        return Symbol.X if self.x_is_next else Symbol.O

    # ==================== OPERATIONS ====================

    def apply_move(self, cell: int) -> bool:
        """
        Play the next symbol at a cell of the viewed board.

        Any future boards after the viewed step are discarded first.
        The move is ignored if the viewed board is won or drawn, or
        if the cell is occupied or out of range.

        Args:
            cell: Cell index (0-8).

        Returns:
            True if the move was played, False if it was ignored.
        """
        board = self.current_board
        result = self.validator.validate_move(board, cell, self.query_status())
        if not result.is_valid:
            self._log(f"Move ignored: {result.error_message}")
            return False

        symbol = self.next_symbol
        # Drop the boards we jumped back from
        del self._history[self._current_step + 1:]
        self._history.append(
            HistoryEntry(board=place(board, cell, symbol), cell=cell, symbol=symbol)
        )
        self._current_step = len(self._history) - 1

        self._notify()
        return True

    def jump_to(self, step: int) -> bool:
        """
        View a previous (or later) board without changing history.

        Args:
            step: History index, 0 is the game start.

        Returns:
            True if the step changed, False for an out-of-range step.
        """
        if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < len(self._history):
            self._log(f"Jump ignored: step {step!r} not in 0-{len(self._history) - 1}")
            return False

        self._current_step = step
        self._notify()
        return True

    def query_status(self) -> GameStatus:
        """
        Get the status of the viewed board.

        Returns:
            Won(symbol, line), Draw() or InProgress(next_symbol).
        """
        board = self.current_board

        line = self.win_checker.get_winning_line(board)
        if line is not None:
            return Won(symbol=board[line[0]], line=line)

        if self.win_checker.check_draw(board, self.draw_rule):
            return Draw()

        return InProgress(next_symbol=self.next_symbol)

    def reset(self):
        """Start a new game."""
        self._history = [HistoryEntry(board=empty_board())]
        self._current_step = 0
        self._notify()

    # ==================== RENDERING HELPERS ====================

    def move_descriptions(self) -> List[str]:
        """Labels for the move list, one per history entry."""
        return [
            f"Go to move #{step}" if step else "Go to Game Start"
            for step in range(len(self._history))
        ]

    def status_text(self, status: Optional[GameStatus] = None) -> str:
        """Status line for the viewed board (or the given status)."""
        return status_text(status if status is not None else self.query_status())

    # ==================== OBSERVERS ====================

    def subscribe(self, listener: Listener):
        """Call listener(engine) after every move, jump and reset."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def _log(self, msg: str):
        if self.verbose:
            print(msg)


# Quick test
if __name__ == "__main__":
    from .board import print_board

    print("Testing GameEngine...")

    engine = GameEngine()

    for cell in [0, 4, 1, 3, 2]:
        print(f"\n{engine.next_symbol.value} moves to {cell}")
        engine.apply_move(cell)
        print_board(engine.current_board)

    print(f"\n{engine.status_text()}")

    engine.jump_to(2)
    print(f"\nJumped to step 2: {engine.status_text()}")

    print("\nGameEngine test done!")
