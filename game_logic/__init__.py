"""
Logic module for tic-tac-toe.
Handles the board, win detection, and the minimax opponent.
"""

from .config import GameConfig
from .board import Board, OccupiedCell, opponent_of
from .win_checker import GameState, GameStatus, has_won, status, winning_line
from .ai_player import SearchResult, best_move, evaluate_move, search_best
from .contestants import Contestant, ContestantKind

__version__ = "1.0.0"
