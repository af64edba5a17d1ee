"""
Board model for tic-tac-toe.
Nine cells in row-major order, each empty or owned by one contestant.
"""

from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from .config import GameConfig


def opponent_of(contestant: int) -> int:
    """Get the other contestant id (1 <-> 2)."""
    return GameConfig.PLAYER_ONE + GameConfig.PLAYER_TWO - contestant


def _is_contestant(value: int) -> bool:
    return value in GameConfig.CONTESTANTS


# Explicit raises so the checks survive python -O; numpy would
# otherwise accept negative indices
def _require_index(index: int):
    if not 0 <= index < GameConfig.CELL_COUNT:
        raise AssertionError(f"Cell index {index} out of range")


def _require_contestant(contestant: int):
    if not _is_contestant(contestant):
        raise AssertionError(f"Invalid contestant id {contestant}")


class OccupiedCell(Exception):
    """
    Raised when a contestant tries to play on a cell that is already taken.

    The board is left untouched; the caller is expected to pick another cell.
    """

    def __init__(self, index: int, occupant: int):
        self.index = index
        self.occupant = occupant
        super().__init__(f"Position already occupied by player {occupant}")


class Board:
    """
    The 3x3 tic-tac-toe board.

    Cells are indexed 0-8 (index = row * 3 + col). A cell holds
    GameConfig.EMPTY or the id of the contestant that played there.
    """

    def __init__(self, cells: Optional[Sequence[int]] = None):
        """
        Create a board.

        Args:
            cells: Optional 9 cell values to start from. Empty board if omitted.
        """
        if cells is None:
            self._cells = np.full(GameConfig.CELL_COUNT, GameConfig.EMPTY, dtype=np.int8)
            return

        values = np.array(cells, dtype=np.int8)
        if values.shape != (GameConfig.CELL_COUNT,):
            raise AssertionError(f"Board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}")
        if not all(v == GameConfig.EMPTY or _is_contestant(v) for v in values.tolist()):
            raise AssertionError(f"Invalid cell values: {list(cells)}")
        self._cells = values

    @classmethod
    def new(cls) -> "Board":
        """Create an empty board."""
        return cls()

    def __len__(self) -> int:
        return GameConfig.CELL_COUNT

    def __getitem__(self, position: Union[int, Tuple[int, int]]) -> int:
        if isinstance(position, tuple):
            row, col = position
            if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
                raise AssertionError(f"Cell ({row}, {col}) out of range")
            return self.occupant(row * GameConfig.BOARD_SIZE + col)
        return self.occupant(position)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Board({self._cells.tolist()})"

    @property
    def cells(self) -> Tuple[int, ...]:
        """The nine cell values as a tuple."""
        return tuple(self._cells.tolist())

    def occupant(self, index: int) -> int:
        """
        Get the value of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            GameConfig.EMPTY or the owning contestant id.
        """
        _require_index(index)
        return int(self._cells[index])

    def play(self, contestant: int, index: int) -> None:
        """
        Place a contestant's mark on a cell.

        Args:
            contestant: Contestant id (1 or 2).
            index: Cell index (0-8).

        Raises:
            OccupiedCell: If the cell is not empty. The board is not changed.
        """
        _require_index(index)
        _require_contestant(contestant)

        current = int(self._cells[index])
        if current != GameConfig.EMPTY:
            raise OccupiedCell(index, current)

        self._cells[index] = contestant

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return GameConfig.EMPTY not in self._cells.tolist()

    def empty_cells(self) -> Iterator[int]:
        """
        Iterate over the empty cell indices in ascending order.

        Each call returns a new iterator, so the sequence can be walked again.
        """
        for index, value in enumerate(self._cells.tolist()):
            if value == GameConfig.EMPTY:
                yield index

    def occupied_count(self) -> int:
        """Number of cells that have been played."""
        return int(np.count_nonzero(self._cells != GameConfig.EMPTY))

    def owned_by(self, contestant: int) -> np.ndarray:
        """0/1 indicator array of the cells owned by a contestant."""
        return (self._cells == contestant).astype(np.int8)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        clone = Board.__new__(Board)
        clone._cells = self._cells.copy()
        return clone

    def __copy__(self) -> "Board":
        return self.copy()

    def __deepcopy__(self, memo) -> "Board":
        return self.copy()
