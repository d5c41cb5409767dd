"""
Board representation for TicTacToe.

A board is an immutable tuple of 9 cells in row-major order
(index = row * 3 + col). Each cell is None (empty) or a Symbol.
"""

from enum import Enum
from typing import Optional, Tuple, List


class Symbol(Enum):
    """The two symbols that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Cell = Optional[Symbol]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Return the empty starting board."""
    return (None,) * CELL_COUNT


def place(board: Board, cell: int, symbol: Symbol) -> Board:
    """
    Return a copy of the board with one cell set.

    The original board is left untouched.

    Args:
        board: Board to copy.
        cell: Cell index (0-8).
        symbol: Symbol to put in the cell.

    Returns:
        The new board.
    """
    squares = list(board)
    squares[cell] = symbol
    return tuple(squares)


def cell_to_row_col(cell: int) -> Tuple[int, int]:
    """Convert a flat cell index to (row, col)."""
    return divmod(cell, BOARD_SIZE)


def row_col_to_cell(row: int, col: int) -> int:
    """Convert (row, col) to a flat cell index."""
    return row * BOARD_SIZE + col


def get_empty_cells(board: Board) -> List[int]:
    """Return the indices of all empty cells."""
    return [i for i, value in enumerate(board) if value is None]


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9 character string.

    'X' and 'O' are symbols, anything else ('.', '-', ' ') is empty.
    Handy for tests and the console mode.
    """
    text = text.replace("\n", "").replace("|", "")
    if len(text) != CELL_COUNT:
        raise ValueError(f"Board string must have {CELL_COUNT} cells, got {len(text)}")

    cells = []
    for ch in text.upper():
        if ch == "X":
            cells.append(Symbol.X)
        elif ch == "O":
            cells.append(Symbol.O)
        else:
            cells.append(None)
    return tuple(cells)


def format_board(board: Board) -> str:
    """Format the board as a small text grid."""
    lines = ["\n  0   1   2"]
    lines.append("┌───┬───┬───┐")

    for row in range(BOARD_SIZE):
        row_str = "│"
        for col in range(BOARD_SIZE):
            value = board[row_col_to_cell(row, col)]
            row_str += f" {value.value if value else ' '} │"
        lines.append(f"{row} {row_str}")

        if row < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)


def print_board(board: Board):
    """Print the board to console."""
    print(format_board(board))
