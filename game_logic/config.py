"""
Core configuration for the tic-tac-toe engine.
Board geometry, cell markers and terminal scores.
"""


class GameConfig:
    """
    Constants shared by the board, the win checker and the search.
    """

    # ==================== BOARD ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # Cell value for an empty square. Never a valid contestant id.
    EMPTY = 0

    # ==================== CONTESTANTS ====================
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    CONTESTANTS = (PLAYER_ONE, PLAYER_TWO)

    # ==================== SEARCH SCORES ====================
    WIN_SCORE = 100
    DRAW_SCORE = 0
    LOSS_SCORE = -100

    # Starting point for the running best; below any reachable value
    WORST_SCORE = LOSS_SCORE - 1
