"""
Win checker for tic-tac-toe.
Checks if a contestant has completed a line or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .board import Board
from .config import GameConfig


# All possible winning lines as flat cell indices (row * 3 + col)
WINNING_LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],  # top-left -> bottom-right
    [2, 4, 6],  # top-right -> bottom-left
], dtype=np.intp)

_LINE_TUPLES = [tuple(line) for line in WINNING_LINES.tolist()]


class GameState(Enum):
    """Where a game stands after a move."""
    WON = "won"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class GameStatus:
    """
    Result of a status check.

    winner is only set when state is WON.
    """
    state: GameState
    winner: Optional[int] = None

    @classmethod
    def won(cls, contestant: int) -> "GameStatus":
        return cls(GameState.WON, contestant)

    @property
    def is_over(self) -> bool:
        return self.state != GameState.IN_PROGRESS


DRAW = GameStatus(GameState.DRAW)
IN_PROGRESS = GameStatus(GameState.IN_PROGRESS)


def _line_sums(board: Board, contestant: int) -> np.ndarray:
    # One sum per winning line: how many of its 3 cells the contestant owns
    return board.owned_by(contestant)[WINNING_LINES].sum(axis=1)


def has_won(board: Board, contestant: int) -> bool:
    """
    Check if a contestant owns all three cells of any winning line.

    Args:
        board: The board to check.
        contestant: Contestant id.

    Returns:
        True if at least one row, column or diagonal is complete.
    """
    # Plain tuples here: this runs at every search node
    cells = board.cells
    for a, b, c in _LINE_TUPLES:
        if cells[a] == contestant and cells[b] == contestant and cells[c] == contestant:
            return True
    return False


def winning_line(board: Board, contestant: int) -> Optional[Tuple[int, int, int]]:
    """
    Get the first line completed by a contestant.

    Returns:
        The line as a tuple of cell indices, or None.
    """
    complete = np.flatnonzero(_line_sums(board, contestant) == GameConfig.BOARD_SIZE)
    if len(complete) == 0:
        return None
    return tuple(int(i) for i in WINNING_LINES[complete[0]])


def status(board: Board, contestant: int) -> GameStatus:
    """
    Get the game status after a contestant's move.

    Only the named contestant's win is checked: call this for the
    contestant who just moved, since nobody else can have just won.
    """
    if has_won(board, contestant):
        return GameStatus.won(contestant)
    if board.is_full():
        return DRAW
    return IN_PROGRESS
