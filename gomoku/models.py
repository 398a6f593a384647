"""Pydantic models for the host WebSocket protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from gomoku.board import Cell


# ---------------------------------------------------------------------------
# Client → Server
# ---------------------------------------------------------------------------

class PlaceStoneMsg(BaseModel):
    type: Literal["place_stone"] = "place_stone"
    x: int
    y: int


class ClickMsg(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    type: Literal["click"] = "click"
    px: float
    py: float


class ResetMsg(BaseModel):
    type: Literal["reset"] = "reset"


class GetStateMsg(BaseModel):
    type: Literal["get_state"] = "get_state"


ClientMessage = PlaceStoneMsg | ClickMsg | ResetMsg | GetStateMsg


# ---------------------------------------------------------------------------
# Server → Client
# ---------------------------------------------------------------------------

class StateSyncMsg(BaseModel):
    type: Literal["state_sync"] = "state_sync"
    board: list[list[Cell]]
    size: int
    turn: Cell
    winner: Cell | None
    move_count: int
    last_move: tuple[int, int] | None


class StonePlacedMsg(BaseModel):
    type: Literal["stone_placed"] = "stone_placed"
    x: int
    y: int
    color: Cell
    next_turn: Cell | None


class GameOverMsg(BaseModel):
    type: Literal["game_over"] = "game_over"
    winner: Cell
    reason: Literal["five_in_row"] = "five_in_row"


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    message: str


def parse_client_message(data: dict) -> ClientMessage | None:
    """Parse a raw dict into a typed client message, or None if invalid."""
    if not isinstance(data, dict):
        return None
    msg_type = data.get("type")
    mapping: dict[str, type[BaseModel]] = {
        "place_stone": PlaceStoneMsg,
        "click": ClickMsg,
        "reset": ResetMsg,
        "get_state": GetStateMsg,
    }
    model = mapping.get(msg_type)  # type: ignore[arg-type]
    if model is None:
        return None
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError:
        return None
