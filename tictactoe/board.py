"""
Board representation for TicTacToe.
A 3x3 grid of marks stored in a read-only numpy array.
"""

from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .game_state import Mark, Move, Player

BOARD_SIZE = 3

CellValue = Union[Mark, Player, str, None]

# Strings accepted by Board.from_rows() for an empty cell
_EMPTY_STRINGS = ("", " ", ".", "-", "_")


def _to_mark(value: CellValue) -> Mark:
    """Convert a loosely typed cell value into a Mark."""
    if isinstance(value, Mark):
        return value
    if isinstance(value, Player):
        return value.mark
    if value is None or value in _EMPTY_STRINGS:
        return Mark.EMPTY
    if isinstance(value, str) and value.upper() in ("X", "O"):
        return Mark[value.upper()]
    raise ValueError(f"Not a valid cell value: {value!r}")


class Board:
    """
    A 3x3 TicTacToe board.

    Boards are values: the backing array is flagged read-only and
    every change goes through with_mark(), which returns a new Board.
    Two boards are equal when their bytes are equal.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[np.ndarray] = None):
        """
        Create a board.

        Args:
            cells: Optional 3x3 array of Mark values. Copied, never shared.
        """
        if cells is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            grid = np.array(cells, dtype=np.int8, copy=True)
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board must be 3x3, got shape {grid.shape}")
            if not np.isin(grid, (Mark.EMPTY, Mark.X, Mark.O)).all():
                raise ValueError("Board cells must be EMPTY, X or O")
        grid.flags.writeable = False
        self._cells = grid

    @classmethod
    def empty(cls) -> "Board":
        """A board with every cell empty."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[CellValue]]) -> "Board":
        """
        Build a board from nested rows.

        Cells may be Mark, Player, "X"/"O", or None/""/" "/"." for empty.
        """
        return cls([[int(_to_mark(value)) for value in row] for row in rows])

    @property
    def cells(self) -> np.ndarray:
        """The read-only 3x3 int8 array."""
        return self._cells

    def __getitem__(self, position: Tuple[int, int]) -> Mark:
        row, col = position
        return Mark(int(self._cells[row, col]))

    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        """The board as nested tuples of Mark, row-major."""
        return tuple(tuple(Mark(int(v)) for v in row) for row in self._cells)

    def to_list(self) -> List[int]:
        """Flat row-major list of cell values (a fresh, writable copy)."""
        return self._cells.ravel().tolist()

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            List of Move, row 0 to 2 and column 0 to 2 within each row.
        """
        rows, cols = np.nonzero(self._cells == Mark.EMPTY)
        return [Move(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return bool(np.all(self._cells != Mark.EMPTY))

    def count(self, mark: Mark) -> int:
        return int(np.count_nonzero(self._cells == mark))

    def with_mark(self, row: int, col: int, mark: Mark) -> "Board":
        """Return a new board with one cell set. No validation."""
        grid = self._cells.copy()
        grid[row, col] = mark
        return Board(grid)

    def tobytes(self) -> bytes:
        return self._cells.tobytes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tobytes() == other.tobytes()

    def __hash__(self) -> int:
        return hash(self.tobytes())

    def __repr__(self) -> str:
        text = "/".join("".join(m.symbol if m else "." for m in row) for row in self.rows())
        return f"Board({text!r})"
