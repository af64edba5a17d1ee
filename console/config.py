"""
Console configuration for tic-tac-toe.
Symbols and text used when playing in a terminal.
"""


class ConsoleConfig:
    """
    Configuration class for the console front end.
    """

    # ==================== SYMBOLS ====================
    # Symbol for contestant 1 and contestant 2
    SYMBOLS = ("O", "X")
    EMPTY_SYMBOL = " "

    # ==================== GRID ====================
    ROW_SPACER = "   |   |   "
    ROW_SEPARATOR = "---+---+---"
    CELL_SEPARATOR = "|"

    # ==================== INPUT ====================
    PROMPT = (
        "Please choose a move for player {player} "
        "(single digit from 1 to 9 or two comma-separated digits from 1 to 3):"
    )
