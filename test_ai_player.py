"""
Tests for the minimax search engine.
"""

import time
from functools import lru_cache

import pytest

from game_logic.ai_player import SearchStats, best_move, choose_from, evaluate_move, search_best
from game_logic.board import Board
from game_logic.contestants import Contestant, ContestantKind
from game_logic.win_checker import WINNING_LINES, has_won, status

LINES = [tuple(line) for line in WINNING_LINES.tolist()]


# ==================== REFERENCE SOLVER ====================
# Independent negamax over plain tuples that scores wins by how early
# they happen: a win at ply p is worth 10 - p.

def _ref_won(cells, player):
    return any(all(cells[i] == player for i in line) for line in LINES)


@lru_cache(maxsize=None)
def reference_score(cells, player, ply=0):
    best = None
    for i, v in enumerate(cells):
        if v != 0:
            continue
        child = cells[:i] + (player,) + cells[i + 1:]
        if _ref_won(child, player):
            score = 10 - (ply + 1)
        elif 0 not in child:
            score = 0
        else:
            score = -reference_score(child, 3 - player, ply + 1)
        if best is None or score > best:
            best = score
    return best


def _sign(score):
    return (score > 0) - (score < 0)


def _legal_positions(max_empty):
    """Every non-terminal position reachable by alternating play (1 first) with at most max_empty empty cells."""
    seen = set()
    found = []

    def walk(cells, mover):
        if cells in seen:
            return
        seen.add(cells)
        empties = cells.count(0)
        if empties <= max_empty:
            found.append((cells, mover))
        for i, v in enumerate(cells):
            if v != 0:
                continue
            child = cells[:i] + (mover,) + cells[i + 1:]
            if _ref_won(child, mover) or 0 not in child:
                continue
            walk(child, 3 - mover)

    walk((0,) * 9, 1)
    return found


@pytest.fixture(scope="module")
def opening_search():
    return search_best(Board.new(), 1, 0)


# ==================== SEARCH RESULTS ====================

def test_last_option_is_returned():
    result = search_best(Board([1, 2, 1, 2, 0, 2, 1, 2, 1]), 1, 0)
    assert result.value == 100
    assert result.candidates == [(4, 1)]


def test_all_immediate_wins_are_candidates():
    # The board does not have to be a legal game position
    result = search_best(Board([1, 1, 0, 1, 1, 0, 0, 1, 0]), 1, 0)
    assert result.value == 100
    assert [index for index, _ in result.candidates] == [2, 5, 6, 8]
    assert all(depth == 1 for _, depth in result.candidates)


def test_victory_in_two_moves():
    result = search_best(Board([1, 0, 0, 2, 1, 0, 0, 0, 2]), 1, 0)
    assert result.value == 100
    assert [index for index, _ in result.candidates] == [1, 2]


def test_empty_board_is_a_draw(opening_search):
    assert opening_search.value == 0
    assert len(opening_search.candidates) > 1
    # Every opening draws under perfect play
    assert [index for index, _ in opening_search.candidates] == list(range(9))
    index, _ = choose_from(opening_search)
    assert index in range(9)


def test_candidates_are_in_index_order():
    result = search_best(Board([0, 0, 0, 0, 1, 0, 0, 0, 0]), 2, 0)
    indices = [index for index, _ in result.candidates]
    assert indices == sorted(indices)


def test_search_does_not_modify_board():
    board = Board([1, 0, 0, 0, 2, 0, 0, 0, 0])
    search_best(board, 1, 0)
    assert board == Board([1, 0, 0, 0, 2, 0, 0, 0, 0])


def test_search_on_full_board_is_rejected():
    with pytest.raises(AssertionError):
        search_best(Board([1, 2, 1, 1, 2, 2, 2, 1, 1]), 1, 0)


def test_evaluate_occupied_cell_is_fatal():
    with pytest.raises(AssertionError):
        evaluate_move(Board([1, 0, 0, 0, 0, 0, 0, 0, 0]), 2, 0, 1)


def test_evaluate_move_terminal_values():
    # Immediate win
    assert evaluate_move(Board([1, 1, 0, 2, 2, 0, 0, 0, 0]), 1, 2, 1) == (100, 1)
    # Last cell, no line
    assert evaluate_move(Board([1, 2, 1, 1, 2, 2, 2, 1, 0]), 1, 8, 3) == (0, 3)


def test_evaluate_move_negates_opponent_value():
    # 2 leaves the top row open, 1 completes it next ply
    value, depth = evaluate_move(Board([1, 1, 0, 2, 0, 0, 0, 0, 0]), 2, 4, 1)
    assert value == -100
    assert depth == 2


def test_stats_count_evaluated_positions():
    stats = SearchStats()
    search_best(Board([1, 2, 1, 2, 0, 2, 1, 2, 0]), 1, 0, stats)
    # Two root moves, and one reply to the move that does not win
    assert stats.positions == 3


# ==================== MOVE SELECTION ====================

@pytest.mark.parametrize("cells, contestant, expected", [
    ([1, 2, 2, 2, 1, 0, 1, 1, 0], 2, 8),
    ([1, 0, 0, 0, 0, 2, 0, 0, 2], 1, 2),
    ([1, 2, 0, 1, 0, 2, 0, 0, 0], 2, 6),
])
def test_ai_should_never_lose(cells, contestant, expected):
    assert best_move(Board(cells), contestant) == expected


@pytest.mark.parametrize("cells", [
    [1, 1, 0, 2, 0, 0, 2, 0, 0],
    [1, 1, 0, 2, 1, 0, 2, 0, 0],
    [0, 0, 0, 2, 0, 1, 2, 0, 1],
])
def test_ai_should_win_immediately_given_the_opportunity(cells):
    board = Board(cells)
    board.play(1, Contestant(1, ContestantKind.COMPUTER).choose_move(board))
    assert has_won(board, 1)


def test_completes_top_row():
    board = Board([1, 1, 0, 2, 0, 0, 2, 0, 0])
    result = search_best(board, 1, 0)
    assert result.value == 100
    assert choose_from(result) == (2, 1)
    assert best_move(board, 1) == 2


def test_forced_loss_still_returns_legal_move():
    # Player 1 threatens 2, 7 and 8 at once
    board = Board([1, 1, 0, 2, 1, 0, 0, 0, 0])
    result = search_best(board, 2, 0)
    assert result.value == -100

    index = best_move(board, 2)
    assert index in board.empty_cells()


def test_quicker_win_beats_slower_win():
    # Playing 4 also wins (double threat), but 2 wins right away
    board = Board([1, 1, 0, 2, 0, 0, 2, 0, 0])
    result = search_best(board, 1, 0)
    depths = dict(result.candidates)
    assert 4 in depths and depths[4] > 1
    assert best_move(board, 1) == 2


# ==================== EXHAUSTIVE CHECKS ====================

def test_values_match_reference_solver():
    positions = _legal_positions(max_empty=5)
    assert positions

    for cells, mover in positions:
        board = Board(cells)
        result = search_best(board, mover, 0)
        expected = reference_score(cells, mover)
        assert result.value == 100 * _sign(expected), cells

        index, depth = choose_from(result)
        assert (index, depth) in result.candidates

        # The chosen move keeps the optimal outcome
        child = cells[:index] + (mover,) + cells[index + 1:]
        if _ref_won(child, mover):
            child_score = 10
        elif 0 not in child:
            child_score = 0
        else:
            child_score = -reference_score(child, 3 - mover, 1)
        assert _sign(child_score) == _sign(expected), cells

        # A win available now is always taken now
        if any(_ref_won(cells[:i] + (mover,) + cells[i + 1:], mover)
               for i in board.empty_cells()):
            assert depth == 1
            assert has_won(Board(child), mover)


def _never_loses_as_second(human_opening):
    """Computer (2) against every reply sequence from player 1 after a fixed opening."""
    responses = {}

    def computer_reply(board):
        key = board.cells
        if key not in responses:
            responses[key] = best_move(board, 2)
        return responses[key]

    def play_out(board):
        index = computer_reply(board)
        board = board.copy()
        board.play(2, index)
        if status(board, 2).is_over:
            return
        for reply in list(board.empty_cells()):
            after = board.copy()
            after.play(1, reply)
            assert not has_won(after, 1), after
            if not status(after, 1).is_over:
                play_out(after)

    start = Board.new()
    start.play(1, human_opening)
    play_out(start)


@pytest.mark.parametrize("opening", [0, 4])
def test_computer_never_loses(opening):
    _never_loses_as_second(opening)


def test_search_after_one_move_is_quick():
    board = Board([0, 0, 0, 0, 1, 0, 0, 0, 0])

    started = time.perf_counter()
    result = search_best(board, 2, 0)
    elapsed = time.perf_counter() - started

    assert result.value == 0
    assert elapsed < 5.0, f"search took {elapsed:.2f}s"
