"""Runtime settings read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from gomoku.board import BOARD_SIZE
from gomoku.geometry import BOARD_ORIGIN, CELL_PITCH

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174"


@dataclass(frozen=True)
class Settings:
    board_size: int = BOARD_SIZE
    board_origin: float = BOARD_ORIGIN
    cell_pitch: float = CELL_PITCH
    cors_origins: tuple[str, ...] = ()
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()

    board_size = int(os.getenv("GOMOKU_BOARD_SIZE", str(BOARD_SIZE)))
    if board_size < 1:
        raise ValueError(f"GOMOKU_BOARD_SIZE must be positive, got {board_size}")

    board_origin = float(os.getenv("GOMOKU_BOARD_ORIGIN", str(BOARD_ORIGIN)))
    if not math.isfinite(board_origin):
        raise ValueError(f"GOMOKU_BOARD_ORIGIN must be finite, got {board_origin}")

    cell_pitch = float(os.getenv("GOMOKU_CELL_PITCH", str(CELL_PITCH)))
    if not math.isfinite(cell_pitch) or cell_pitch <= 0:
        raise ValueError(f"GOMOKU_CELL_PITCH must be a positive number, got {cell_pitch}")

    cors_origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        board_size=board_size,
        board_origin=board_origin,
        cell_pitch=cell_pitch,
        cors_origins=tuple(o.strip() for o in cors_origins.split(",") if o.strip()),
        log_level=os.getenv("GOMOKU_LOG_LEVEL", "INFO").upper(),
    )
