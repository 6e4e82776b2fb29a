from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .errors import ColumnFullError, OutOfRangeError, UnderflowError

COLUMNS = 7
ROWS = 6
TO_WIN = 4

EMPTY = 0


class Board:
    """7x6 Connect Four grid stored as one bounded stack per column.

    Row 0 is the bottom of a column. Cells hold 0 (empty), 1 (red) or 2 (yellow).
    """

    def __init__(self) -> None:
        self._cells: list[list[int]] = [[EMPTY] * ROWS for _ in range(COLUMNS)]
        self._heights: list[int] = [0] * COLUMNS

    def push(self, column: int, owner: int) -> None:
        """Drop a token for `owner` on top of `column`."""
        self._check_column(column)
        height = self._heights[column]
        if height >= ROWS:
            raise ColumnFullError(f"Column {column} is full")
        self._cells[column][height] = int(owner)
        self._heights[column] = height + 1

    def pop(self, column: int) -> int:
        """Remove the top token of `column` and return its owner."""
        self._check_column(column)
        height = self._heights[column]
        if height == 0:
            raise UnderflowError(f"Column {column} is empty")
        owner = self._cells[column][height - 1]
        self._cells[column][height - 1] = EMPTY
        self._heights[column] = height - 1
        return owner

    @contextmanager
    def explore(self, column: int, owner: int) -> Iterator[None]:
        """Push a token for the duration of the block, then take it back."""
        self.push(column, owner)
        try:
            yield
        finally:
            self.pop(column)

    def get(self, column: int, row: int) -> int:
        self._check_column(column)
        if not isinstance(row, int) or not 0 <= row < ROWS:
            raise OutOfRangeError(f"Row {row} is off the grid")
        return self._cells[column][row]

    def height(self, column: int) -> int:
        self._check_column(column)
        return self._heights[column]

    def legal_moves(self) -> list[int]:
        return [c for c in range(COLUMNS) if self._heights[c] < ROWS]

    def is_full(self) -> bool:
        return all(h == ROWS for h in self._heights)

    @property
    def token_count(self) -> int:
        return sum(self._heights)

    def columns(self) -> tuple[tuple[int, ...], ...]:
        """Read-only snapshot of every column, bottom cell first."""
        return tuple(tuple(col) for col in self._cells)

    def key(self) -> tuple[tuple[int, ...], ...]:
        """Immutable snapshot of the cell contents, usable as a dict key."""
        return self.columns()

    def copy(self) -> Board:
        other = Board()
        other._cells = [list(col) for col in self._cells]
        other._heights = list(self._heights)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"Board(heights={self._heights})"

    @staticmethod
    def _check_column(column: int) -> None:
        if not isinstance(column, int):
            raise OutOfRangeError(f"Column must be an integer, got {column!r}")
        if not 0 <= column < COLUMNS:
            raise OutOfRangeError(f"Column {column} is off the grid")
