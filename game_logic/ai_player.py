"""
Search engine for the computer contestant.
Full-depth minimax over every remaining continuation, no pruning.

Every explored move gets a (value, depth) pair: value is +100 / 0 / -100
from the point of view of the contestant who plays it, depth is the ply
at which that outcome is reached. Among equally valued moves the engine
prefers the one that resolves soonest.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, OccupiedCell, opponent_of
from .config import GameConfig
from .win_checker import has_won

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Best value reachable by a contestant and every move that reaches it.

    candidates holds (index, depth) pairs in ascending index order.
    """
    value: int
    candidates: List[Tuple[int, int]] = field(default_factory=list)


@dataclass
class SearchStats:
    """Counters filled in while searching (for debugging)."""
    positions: int = 0


def evaluate_move(
    board: Board,
    contestant: int,
    index: int,
    ply: int,
    stats: Optional[SearchStats] = None
) -> Tuple[int, int]:
    """
    Score one move by playing it on a copy of the board.

    Args:
        board: Position before the move. Not modified.
        contestant: Contestant making the move.
        index: Empty cell to play.
        ply: Ply number of this move, counted from the search root.
        stats: Optional counters to update.

    Returns:
        (value, depth) from the point of view of contestant.
    """
    if stats is not None:
        stats.positions += 1

    child = board.copy()
    try:
        child.play(contestant, index)
    except OccupiedCell as e:
        # Only ever called with indices taken from empty_cells()
        raise AssertionError(f"search engine tried to play an occupied cell: {e}") from e

    if has_won(child, contestant):
        return GameConfig.WIN_SCORE, ply
    if child.is_full():
        return GameConfig.DRAW_SCORE, ply

    reply = search_best(child, opponent_of(contestant), ply, stats)
    # Fastest resolution among the opponent's best replies
    depth = min(d for _, d in reply.candidates)
    return -reply.value, depth


def search_best(
    board: Board,
    contestant: int,
    ply: int = 0,
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Find the best value a contestant can force and all moves achieving it.

    Args:
        board: Position to search. Must have at least one empty cell.
        contestant: Contestant to move.
        ply: Ply already played since the search root.
        stats: Optional counters to update.

    Returns:
        SearchResult with the best value and its (index, depth) candidates.
    """
    best_value = GameConfig.WORST_SCORE
    candidates: List[Tuple[int, int]] = []

    for index in board.empty_cells():
        value, depth = evaluate_move(board, contestant, index, ply + 1, stats)

        if value > best_value:
            best_value = value
            candidates = [(index, depth)]
        elif value == best_value:
            candidates.append((index, depth))

    assert candidates, "search_best called on a board with no empty cell"
    return SearchResult(best_value, candidates)


def choose_from(result: SearchResult) -> Tuple[int, int]:
    """
    Pick the quickest-resolving candidate.

    Ties on depth go to the lowest cell index.

    Returns:
        (index, depth) of the chosen move.
    """
    # min() keeps the first of equal keys, and candidates are in index order
    return min(result.candidates, key=lambda candidate: candidate[1])


def best_move(board: Board, contestant: int) -> int:
    """
    Get the optimal move for a contestant.

    Args:
        board: Current position (not terminal).
        contestant: Contestant to move.

    Returns:
        Cell index to play.
    """
    stats = SearchStats()
    result = search_best(board, contestant, 0, stats)
    index, depth = choose_from(result)

    logger.debug(
        "Player %d evaluated %d positions. Best move: %d (value: %d, depth: %d)",
        contestant, stats.positions, index, result.value, depth
    )
    return index
