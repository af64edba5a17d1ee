"""
Contestants for tic-tac-toe.
A contestant is an id plus a kind that decides where its moves come from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .ai_player import best_move
from .board import Board, opponent_of
from .config import GameConfig


# Front-end hook that asks a human for a cell index: (board, contestant_id) -> index
MoveReader = Callable[[Board, int], int]


class ContestantKind(Enum):
    """Who picks the moves."""
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class Contestant:
    """
    One of the two participants.
    """
    id: int                 # 1 or 2
    kind: ContestantKind

    def __post_init__(self):
        assert self.id in GameConfig.CONTESTANTS, f"Invalid contestant id {self.id}"

    @property
    def is_computer(self) -> bool:
        return self.kind == ContestantKind.COMPUTER

    def opponent(self) -> int:
        """Get the opposing contestant id."""
        return opponent_of(self.id)

    def choose_move(self, board: Board, read_move: Optional[MoveReader] = None) -> int:
        """
        Pick the cell to play next.

        Args:
            board: Current board.
            read_move: Input hook used for human contestants.

        Returns:
            Cell index (0-8).
        """
        if self.kind == ContestantKind.COMPUTER:
            return best_move(board, self.id)

        assert read_move is not None, "Human contestant needs a move reader"
        return read_move(board, self.id)
