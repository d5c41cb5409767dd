"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, CELL_COUNT, get_empty_cells
from .status import GameStatus, Won, Draw, is_terminal


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Can only place on empty cells
    3. Game must not be won or drawn
    """

    def validate_move(
        self,
        board: Board,
        cell: int,
        status: GameStatus
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Board the move is played on.
            cell: Cell index to place the symbol (0-8).
            status: Status of that board.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if isinstance(status, Won):
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {status.symbol.value}!"
            )
        if isinstance(status, Draw):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already a draw!"
            )

        # bool is an int subclass but never a cell
        if not isinstance(cell, int) or isinstance(cell, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell!r}. Must be an integer."
            )

        if not 0 <= cell < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-{CELL_COUNT - 1}."
            )

        if board[cell] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board[cell].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, status: GameStatus) -> List[int]:
        """
        Get all valid moves for the player to move.

        Args:
            board: Current board.
            status: Status of that board.

        Returns:
            List of valid cell indices.
        """
        if is_terminal(status):
            return []
        return get_empty_cells(board)
