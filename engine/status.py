"""
Game status values returned by the engine.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .board import Symbol


@dataclass(frozen=True)
class InProgress:
    """Game is still running; next_symbol plays next."""
    next_symbol: Symbol


@dataclass(frozen=True)
class Won:
    """A symbol completed a line."""
    symbol: Symbol
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    """Nobody won and the board is filled."""


GameStatus = Union[InProgress, Won, Draw]


def is_terminal(status: GameStatus) -> bool:
    """Won and Draw are terminal, InProgress is not."""
    return not isinstance(status, InProgress)


def status_text(status: GameStatus) -> str:
    """
    Human readable status line.

    Examples:
        "Winner is: X !", "Game is a draw!", "Next player is: O"
    """
    if isinstance(status, Won):
        return f"Winner is: {status.symbol.value} !"
    if isinstance(status, Draw):
        return "Game is a draw!"
    return f"Next player is: {status.next_symbol.value}"
