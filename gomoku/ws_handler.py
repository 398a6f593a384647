"""WebSocket endpoint and message routing."""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from gomoku.config import Settings
from gomoku.game import GameEngine
from gomoku.geometry import BoardGeometry
from gomoku.models import (
    ClickMsg,
    ErrorMsg,
    GetStateMsg,
    PlaceStoneMsg,
    ResetMsg,
    parse_client_message,
)
from gomoku.session import GameSession

logger = logging.getLogger(__name__)

router = APIRouter()


def create_session(ws: WebSocket, settings: Settings) -> GameSession:
    return GameSession(
        ws=ws,
        engine=GameEngine(settings.board_size),
        geometry=BoardGeometry(
            size=settings.board_size,
            origin=settings.board_origin,
            pitch=settings.cell_pitch,
        ),
    )


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    session = create_session(ws, ws.app.state.settings)
    logger.info("Session opened")
    try:
        await session.sync()
        while True:
            data = await ws.receive_json()
            msg = parse_client_message(data)
            if msg is None:
                logger.warning("Invalid client message: %r", data)
                await session.send(ErrorMsg(message="Unknown or invalid message"))
                continue

            if isinstance(msg, PlaceStoneMsg):
                await session.place_stone(msg.x, msg.y)

            elif isinstance(msg, ClickMsg):
                await session.click(msg.px, msg.py)

            elif isinstance(msg, ResetMsg):
                await session.reset()

            elif isinstance(msg, GetStateMsg):
                await session.sync()
    except WebSocketDisconnect:
        logger.info("Session closed after %d moves", session.engine.move_count)
