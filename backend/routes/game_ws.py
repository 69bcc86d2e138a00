from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from services.store import open_game

router = APIRouter(tags=["game"])
logger = logging.getLogger(__name__)


@router.websocket("/")
async def ws_game(websocket: WebSocket) -> None:
    """
    Play one human-vs-computer game per connection.

    The server speaks first with a "start" frame, then answers every client
    frame with exactly one reply (unknown message types are ignored):
      in:  {"type": "choice" | "reset", "message": 0-8}
      out: {"type": ..., "message": str, "winner": str, "board": [9 x null|"X"|"O"]}
    """
    await websocket.accept()
    async with open_game() as game:
        logger.info("[game_ws] Client connected session=%s", game.id)
        await websocket.send_json(game.start().model_dump(mode="json"))
        try:
            while True:
                frame = await websocket.receive()
                if frame["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(frame.get("code", 1000), frame.get("reason"))
                raw = frame.get("text")
                if raw is None:
                    raw = frame.get("bytes") or b""
                reply = game.handle(raw)
                if reply is not None:
                    await websocket.send_json(reply.model_dump(mode="json"))
        except WebSocketDisconnect:
            logger.info("[game_ws] Client disconnected session=%s", game.id)
