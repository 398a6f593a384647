"""Game logic: turn state machine, move validation, and win detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from gomoku.board import BOARD_SIZE, BoardGrid, Cell

logger = logging.getLogger(__name__)

WIN_LENGTH = 5

# Four axes as (dx, dy): horizontal, vertical, diagonal ↘, anti-diagonal ↗
DIRECTIONS = [
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
]


class MoveError(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    GAME_OVER = "game_over"
    CELL_OCCUPIED = "cell_occupied"


@dataclass(frozen=True)
class Outcome:
    """``winner`` is None while the game is in progress."""

    winner: Cell | None = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @classmethod
    def won(cls, color: Cell) -> Outcome:
        return cls(winner=color)


IN_PROGRESS = Outcome()


@dataclass(frozen=True)
class MoveResult:
    outcome: Outcome
    error: MoveError | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


class GameEngine:
    def __init__(self, size: int = BOARD_SIZE):
        self._board = BoardGrid(size)
        self._turn: Cell = Cell.BLACK
        self._outcome: Outcome = IN_PROGRESS
        self._move_count: int = 0
        self._last_move: tuple[int, int] | None = None

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def turn(self) -> Cell:
        return self._turn

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def last_move(self) -> tuple[int, int] | None:
        return self._last_move

    def cell(self, x: int, y: int) -> Cell:
        return self._board.get(x, y)

    def snapshot(self) -> list[list[Cell]]:
        return self._board.rows()

    def reset(self) -> None:
        self._board.reset()
        self._turn = Cell.BLACK
        self._outcome = IN_PROGRESS
        self._move_count = 0
        self._last_move = None
        logger.info("Game reset")

    def validate_move(self, x: int, y: int) -> MoveError | None:
        """Return the reason the move would be rejected, or None if valid."""
        if not self._board.in_bounds(x, y):
            return MoveError.OUT_OF_BOUNDS
        if self._outcome.is_over:
            return MoveError.GAME_OVER
        if self._board.get(x, y) is not Cell.EMPTY:
            return MoveError.CELL_OCCUPIED
        return None

    def apply_move(self, x: int, y: int) -> MoveResult:
        """Place the current player's stone at (x, y).

        Rejected moves leave the board, turn and outcome untouched and report
        the reason in the result instead of raising.
        """
        error = self.validate_move(x, y)
        if error is not None:
            logger.debug("Rejected move at (%d, %d): %s", x, y, error.value)
            return MoveResult(outcome=self._outcome, error=error)

        color = self._turn
        self._board.set(x, y, color)
        self._move_count += 1
        self._last_move = (x, y)
        logger.debug("%s placed at (%d, %d)", color.value, x, y)

        if self.check_win(x, y):
            self._outcome = Outcome.won(color)
            logger.info("%s wins after %d moves", color.value, self._move_count)
        else:
            self._turn = color.opponent
        return MoveResult(outcome=self._outcome)

    def check_win(self, x: int, y: int) -> bool:
        """Check if the stone at (x, y) is part of five or more in a row.

        Each axis is walked up to four steps in the negative direction, then
        up to four steps in the positive one, stopping at the edge or at the
        first stone of another colour. Counts never carry across axes.
        """
        color = self._board.get(x, y)
        if color is Cell.EMPTY:
            return False

        for dx, dy in DIRECTIONS:
            count = 1

            # Extend in negative direction
            for i in range(1, WIN_LENGTH):
                cx, cy = x - dx * i, y - dy * i
                if not self._board.in_bounds(cx, cy):
                    break
                if self._board.get(cx, cy) is not color:
                    break
                count += 1

            # Extend in positive direction
            for i in range(1, WIN_LENGTH):
                cx, cy = x + dx * i, y + dy * i
                if not self._board.in_bounds(cx, cy):
                    break
                if self._board.get(cx, cy) is not color:
                    break
                count += 1

            if count >= WIN_LENGTH:
                return True

        return False
