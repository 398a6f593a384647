"""Pixel <-> grid transform used by the rendering host."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gomoku.board import BOARD_SIZE

BOARD_ORIGIN = 15.0  # px from the canvas corner to the (0, 0) intersection
CELL_PITCH = 30.0  # px between grid lines


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class BoardGeometry:
    size: int = BOARD_SIZE
    origin: float = BOARD_ORIGIN
    pitch: float = CELL_PITCH

    def __post_init__(self):
        if not self.pitch > 0:
            raise ValueError(f"Cell pitch must be positive, got {self.pitch}")

    @property
    def extent(self) -> float:
        """Pixel length of one grid line."""
        return (self.size - 1) * self.pitch

    def to_cell(self, px: float, py: float) -> tuple[int, int]:
        """Snap a pixel position to the nearest intersection.

        The result is not clamped; off-board clicks yield coordinates the
        engine rejects as out of bounds.
        """
        x = _round_half_away((px - self.origin) / self.pitch)
        y = _round_half_away((py - self.origin) / self.pitch)
        return x, y

    def to_pixel(self, x: int, y: int) -> tuple[float, float]:
        return self.origin + x * self.pitch, self.origin + y * self.pitch
