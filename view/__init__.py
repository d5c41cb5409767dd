"""
View module for TicTacToe.
Handles board rendering and the host-independent game view.
"""

from .config import ViewConfig
from .board_renderer import BoardRenderer
from .game_view import GameView, ViewModel, MoveListEntry
