"""
Reading a human move from the console.

Accepted forms:
    5       single cell number, 1-9 in reading order
    2, 3    row and column, each 1-3
"""

from typing import Callable, Optional

from game_logic.board import Board
from game_logic.config import GameConfig

from .config import ConsoleConfig


def _in_range(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def parse_move(text: str) -> Optional[int]:
    """
    Parse a typed move.

    Args:
        text: Raw input line.

    Returns:
        Cell index (0-8), or None if the text is not a valid move.
    """
    parts = [part.strip() for part in text.split(",")]

    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        return None

    size = GameConfig.BOARD_SIZE
    if len(numbers) == 1:
        cell = numbers[0]
        if _in_range(cell, 1, GameConfig.CELL_COUNT):
            return cell - 1
    elif len(numbers) == 2:
        row, col = numbers
        if _in_range(row, 1, size) and _in_range(col, 1, size):
            return (row - 1) * size + (col - 1)

    return None


def read_human_move(
    board: Board,
    contestant: int,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print
) -> int:
    """
    Ask a human for a move until they name an empty cell.

    Args:
        board: Current board.
        contestant: Id of the contestant to move.
        input_fn: Returns one line of input.
        output_fn: Shows a line of text.

    Returns:
        Index of an empty cell.
    """
    while True:
        output_fn(ConsoleConfig.PROMPT.format(player=contestant))
        index = parse_move(input_fn())
        if index is None:
            continue

        if index in board.empty_cells():
            return index

        output_fn(f"Cell {index + 1} is already taken by player {board.occupant(index)}.")
