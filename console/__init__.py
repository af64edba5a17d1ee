"""
Console front end for tic-tac-toe.
Draws the board and reads moves typed by a human.
"""

from .config import ConsoleConfig
from .display import print_board, render_board, symbol_for
from .human_input import parse_move, read_human_move
