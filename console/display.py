"""
Text rendering of the tic-tac-toe board.
"""

from typing import Callable, Sequence

from game_logic.board import Board
from game_logic.config import GameConfig

from .config import ConsoleConfig


def symbol_for(value: int, symbols: Sequence[str] = ConsoleConfig.SYMBOLS) -> str:
    """
    Get the character shown for a cell value.

    Args:
        value: 0 for empty, otherwise a contestant id.
        symbols: Symbols for contestant 1 and contestant 2.

    Raises:
        ValueError: If value is not 0, 1 or 2.
    """
    if value == GameConfig.EMPTY:
        return ConsoleConfig.EMPTY_SYMBOL
    if value == GameConfig.PLAYER_ONE:
        return symbols[0]
    if value == GameConfig.PLAYER_TWO:
        return symbols[1]
    raise ValueError(f"Got invalid player number {value}: should be 0, 1, or 2")


def render_board(board: Board, symbols: Sequence[str] = ConsoleConfig.SYMBOLS) -> str:
    """Draw the board as a block of text."""
    size = GameConfig.BOARD_SIZE
    lines = []

    for row in range(size):
        if row != 0:
            lines.append(ConsoleConfig.ROW_SEPARATOR)

        lines.append(ConsoleConfig.ROW_SPACER)
        cells = [f" {symbol_for(board[row, col], symbols)} " for col in range(size)]
        lines.append(ConsoleConfig.CELL_SEPARATOR.join(cells))
        lines.append(ConsoleConfig.ROW_SPACER)

    return "\n".join(lines)


def print_board(
    board: Board,
    symbols: Sequence[str] = ConsoleConfig.SYMBOLS,
    output_fn: Callable[[str], None] = print
):
    """Print the board to console."""
    output_fn(render_board(board, symbols))
