"""Tests for the per-connection host session."""

import pytest
from unittest.mock import AsyncMock

from gomoku.board import Cell
from gomoku.game import GameEngine
from gomoku.session import GameSession


def make_mock_ws():
    """Create a mock WebSocket that tracks sent messages."""
    ws = AsyncMock()
    ws.send_json = AsyncMock()
    return ws


def sent(ws):
    return [call[0][0] for call in ws.send_json.call_args_list]


class TestSync:
    @pytest.mark.asyncio
    async def test_initial_state(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.sync()

        ws.send_json.assert_called_once()
        msg = ws.send_json.call_args[0][0]
        assert msg["type"] == "state_sync"
        assert msg["turn"] == "black"
        assert msg["winner"] is None
        assert msg["move_count"] == 0
        assert msg["size"] == 15
        assert msg["last_move"] is None
        assert len(msg["board"]) == 15
        assert all(cell == "empty" for row in msg["board"] for cell in row)

    @pytest.mark.asyncio
    async def test_board_rows_indexed_by_y(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.place_stone(3, 9)
        await session.sync()
        msg = ws.send_json.call_args[0][0]
        assert msg["board"][9][3] == "black"
        assert msg["last_move"] == [3, 9]


class TestPlaceStone:
    @pytest.mark.asyncio
    async def test_accepted_move(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.place_stone(7, 7)

        ws.send_json.assert_called_once()
        msg = ws.send_json.call_args[0][0]
        assert msg == {"type": "stone_placed", "x": 7, "y": 7, "color": "black", "next_turn": "white"}

    @pytest.mark.asyncio
    async def test_rejected_move_sends_nothing(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.place_stone(7, 7)
        ws.send_json.reset_mock()

        await session.place_stone(7, 7)
        await session.place_stone(15, 0)

        ws.send_json.assert_not_called()
        assert session.engine.turn is Cell.WHITE

    @pytest.mark.asyncio
    async def test_winning_move(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        for x in range(4):
            await session.place_stone(x, 0)
            await session.place_stone(x, 1)
        ws.send_json.reset_mock()

        await session.place_stone(4, 0)

        msgs = sent(ws)
        assert [m["type"] for m in msgs] == ["stone_placed", "game_over"]
        assert msgs[0]["next_turn"] is None
        assert msgs[1] == {"type": "game_over", "winner": "black", "reason": "five_in_row"}

    @pytest.mark.asyncio
    async def test_moves_after_win_are_ignored(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        for x in range(4):
            await session.place_stone(x, 0)
            await session.place_stone(x, 1)
        await session.place_stone(4, 0)
        ws.send_json.reset_mock()

        await session.place_stone(10, 10)
        ws.send_json.assert_not_called()


class TestClick:
    @pytest.mark.asyncio
    async def test_click_snaps_to_intersection(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.click(47.0, 102.0)
        msg = ws.send_json.call_args[0][0]
        assert (msg["x"], msg["y"]) == (1, 3)
        assert session.engine.cell(1, 3) is Cell.BLACK

    @pytest.mark.asyncio
    async def test_click_outside_board_is_ignored(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws)
        await session.click(-100.0, 15.0)
        ws.send_json.assert_not_called()
        assert session.engine.move_count == 0


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_syncs_fresh_state(self):
        ws = make_mock_ws()
        session = GameSession(ws=ws, engine=GameEngine(9))
        await session.place_stone(1, 1)
        await session.place_stone(2, 2)
        ws.send_json.reset_mock()

        await session.reset()

        msg = ws.send_json.call_args[0][0]
        assert msg["type"] == "state_sync"
        assert msg["size"] == 9
        assert msg["turn"] == "black"
        assert msg["move_count"] == 0
        assert all(cell == "empty" for row in msg["board"] for cell in row)

    @pytest.mark.asyncio
    async def test_sessions_do_not_share_engines(self):
        first = GameSession(ws=make_mock_ws())
        second = GameSession(ws=make_mock_ws())
        await first.place_stone(0, 0)
        assert second.engine.move_count == 0
        assert second.engine.cell(0, 0) is Cell.EMPTY
