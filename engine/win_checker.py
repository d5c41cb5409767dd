"""
Win checker for TicTacToe.
Checks if a symbol has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Symbol


class DrawRule(Enum):
    """How a draw is detected."""
    # Every one of the 8 lines has all three cells occupied
    ALL_LINES_OCCUPIED = "all_lines_occupied"
    # All 9 cells occupied
    BOARD_FULL = "board_full"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal symbols in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as cell indices.
    # The order is fixed: the first complete line decides the winner.
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def is_board_full(self, board: Board) -> bool:
        """Check if every cell is occupied."""
        return all(value is not None for value in board)

    def check_draw(
        self,
        board: Board,
        rule: DrawRule = DrawRule.ALL_LINES_OCCUPIED
    ) -> bool:
        """
        Check if the game is a draw.

        With ALL_LINES_OCCUPIED a draw needs every winning line to have
        all three cells filled (not necessarily equal). With BOARD_FULL
        it needs all 9 cells filled. A board with a winner is never a draw.

        Args:
            board: The board to check.
            rule: Which draw rule to apply.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False

        if rule == DrawRule.BOARD_FULL:
            return self.is_board_full(board)

        for a, b, c in self.WINNING_LINES:
            if board[a] is None or board[b] is None or board[c] is None:
                return False
        return True
