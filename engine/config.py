"""
Game configuration for TicTacToe.
"""

from .board import BOARD_SIZE, CELL_COUNT
from .win_checker import DrawRule


class GameConfig:
    """
    Configuration class for game rules.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE   # 3x3
    CELL_COUNT = CELL_COUNT   # 9 cells

    # ==================== RULES ====================
    # ALL_LINES_OCCUPIED keeps the classic line-by-line draw check.
    # Switch to BOARD_FULL for "all 9 cells occupied and no winner".
    DRAW_RULE = DrawRule.ALL_LINES_OCCUPIED

    # ==================== DEBUG SETTINGS ====================
    # Print rejected moves and jumps to the console
    VERBOSE = True
