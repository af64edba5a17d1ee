"""
Main script for console tic-tac-toe.

This script ties together:
- Logic (board, win checking, minimax opponent)
- Console (board rendering, human move input)

Run this script to play tic-tac-toe against the computer!
"""

import argparse
import logging
from typing import Callable, Dict, Optional, Sequence

# Logic imports
from game_logic.board import Board, OccupiedCell, opponent_of
from game_logic.config import GameConfig
from game_logic.contestants import Contestant, ContestantKind
from game_logic.win_checker import GameState, GameStatus, status

# Console imports
from console.config import ConsoleConfig
from console.display import print_board
from console.human_input import read_human_move

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Turn loop for one game.

    Game flow:
    1. Contestant 1 moves first
    2. After every move the board is shown and the mover's win is checked
    3. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        contestants: Sequence[Contestant],
        symbols: Sequence[str] = ConsoleConfig.SYMBOLS,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        """
        Initialize a game.

        Args:
            contestants: Both contestants, one per id.
            symbols: Symbols for contestant 1 and contestant 2.
            input_fn: Source of human input lines.
            output_fn: Where text is shown.
        """
        self.contestants: Dict[int, Contestant] = {c.id: c for c in contestants}
        assert sorted(self.contestants) == list(GameConfig.CONTESTANTS), "Need one contestant per id"

        self.symbols = symbols
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.board = Board.new()

    def _read_move(self, board: Board, contestant: int) -> int:
        return read_human_move(board, contestant, self.input_fn, self.output_fn)

    def show_board(self):
        print_board(self.board, self.symbols, self.output_fn)

    def process_turn(self, contestant: Contestant):
        """
        Let a contestant move, asking again until the move lands on an empty cell.
        """
        while True:
            index = contestant.choose_move(self.board, self._read_move)
            try:
                self.board.play(contestant.id, index)
            except OccupiedCell as e:
                self.output_fn(f"Error: {e}")
                continue

            if contestant.is_computer:
                self.output_fn(f">>> Player {contestant.id} plays {index + 1}")
            logger.debug("Player %d played cell %d", contestant.id, index)
            return

    def run(self) -> GameStatus:
        """
        Play until the game is over.

        Returns:
            The final status (won or draw).
        """
        # Start as if contestant 2 just moved so contestant 1 opens
        current = GameConfig.PLAYER_TWO

        while True:
            result = status(self.board, current)
            if result.is_over:
                return result

            current = opponent_of(current)
            self.process_turn(self.contestants[current])
            self.show_board()

    def show_result(self, result: GameStatus):
        """Show the final game result."""
        if result.state == GameState.WON:
            self.output_fn(f"Player {result.winner} won!")
        else:
            self.output_fn("It's a draw!")


def build_contestants(mode: str, computer_first: bool = False) -> Sequence[Contestant]:
    """
    Create both contestants for a game mode.

    Args:
        mode: "pvc" (human vs computer), "pvp" (two humans) or "cvc" (two computers).
        computer_first: In pvc mode, let the computer be contestant 1.
    """
    human, computer = ContestantKind.HUMAN, ContestantKind.COMPUTER

    if mode == "pvp":
        kinds = (human, human)
    elif mode == "cvc":
        kinds = (computer, computer)
    elif computer_first:
        kinds = (computer, human)
    else:
        kinds = (human, computer)

    return [Contestant(cid, kind) for cid, kind in zip(GameConfig.CONTESTANTS, kinds)]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-tac-toe against a minimax opponent")
    parser.add_argument(
        "--mode",
        choices=["pvc", "pvp", "cvc"],
        default="pvc",
        help="pvc: human vs computer, pvp: two humans, cvc: computer vs computer"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as player 1) in pvc mode"
    )
    parser.add_argument(
        "--symbols",
        default="".join(ConsoleConfig.SYMBOLS),
        help="Two characters for player 1 and player 2 (default: OX)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show search diagnostics"
    )

    args = parser.parse_args(argv)
    if len(args.symbols) != 2 or args.symbols[0] == args.symbols[1]:
        parser.error("--symbols needs two different characters")
    return args


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print
) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s"
    )

    game = TicTacToeGame(
        build_contestants(args.mode, args.computer_first),
        symbols=tuple(args.symbols),
        input_fn=input_fn,
        output_fn=output_fn
    )

    game.show_board()
    try:
        result = game.run()
    except (KeyboardInterrupt, EOFError):
        output_fn("\nGame interrupted by user.")
        return 1

    game.show_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
