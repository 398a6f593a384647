"""Host session: one engine per connection, driven by client messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fastapi import WebSocket
from pydantic import BaseModel

from gomoku.game import GameEngine
from gomoku.geometry import BoardGeometry
from gomoku.models import GameOverMsg, StateSyncMsg, StonePlacedMsg

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    ws: WebSocket
    engine: GameEngine = field(default_factory=GameEngine)
    geometry: BoardGeometry = field(default_factory=BoardGeometry)

    async def send(self, msg: BaseModel):
        await self.ws.send_json(msg.model_dump(mode="json"))

    def state(self) -> StateSyncMsg:
        return StateSyncMsg(
            board=self.engine.snapshot(),
            size=self.engine.size,
            turn=self.engine.turn,
            winner=self.engine.outcome.winner,
            move_count=self.engine.move_count,
            last_move=self.engine.last_move,
        )

    async def sync(self):
        await self.send(self.state())

    async def place_stone(self, x: int, y: int):
        color = self.engine.turn
        result = self.engine.apply_move(x, y)
        if not result.accepted:
            # Rejected moves are inert: nothing changes, nothing to redraw.
            return

        if result.outcome.is_over:
            next_turn = None
        else:
            next_turn = self.engine.turn

        await self.send(StonePlacedMsg(x=x, y=y, color=color, next_turn=next_turn))

        if result.outcome.is_over:
            await self.send(GameOverMsg(winner=result.outcome.winner))

    async def click(self, px: float, py: float):
        x, y = self.geometry.to_cell(px, py)
        await self.place_stone(x, y)

    async def reset(self):
        self.engine.reset()
        await self.sync()
