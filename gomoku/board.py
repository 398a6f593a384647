"""Board storage: a fixed-size square grid of cell states."""

from __future__ import annotations

from enum import Enum

BOARD_SIZE = 15


class Cell(str, Enum):
    EMPTY = "empty"
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> Cell:
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        raise ValueError("An empty cell has no opponent")


class OutOfBoundsError(IndexError):
    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"({x}, {y}) is outside a {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class BoardGrid:
    """Square grid of cells addressed by (x, y), both in [0, size).

    Holds no knowledge of turns or outcomes; writes are unconditional.
    """

    def __init__(self, size: int = BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._cells: list[list[Cell]] = []
        self.reset()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, value: Cell) -> None:
        self._check(x, y)
        self._cells[y][x] = value

    def reset(self) -> None:
        self._cells = [[Cell.EMPTY] * self.size for _ in range(self.size)]

    def rows(self) -> list[list[Cell]]:
        """Return a copy of the grid as rows, indexed ``[y][x]``."""
        return [list(row) for row in self._cells]

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
