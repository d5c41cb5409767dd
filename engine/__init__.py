"""
Engine module for TicTacToe.
Handles boards, rules, and the move history.
"""

from .board import Symbol, Board, empty_board, place, board_from_string
from .status import GameStatus, InProgress, Won, Draw
from .win_checker import WinChecker, DrawRule
from .move_validator import MoveValidator, ValidationResult
from .config import GameConfig
from .game_engine import GameEngine, HistoryEntry

__version__ = "1.0.0"
