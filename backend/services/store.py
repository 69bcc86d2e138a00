"""In-memory registry of live games. Keyed by session ID, one entry per open connection."""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from services.game_session import GameSession

logger = logging.getLogger(__name__)

games: dict[str, GameSession] = {}


@asynccontextmanager
async def open_game(rng: random.Random | None = None) -> AsyncIterator[GameSession]:
    session_id = secrets.token_urlsafe(8)
    game = GameSession(session_id, rng=rng)
    games[session_id] = game
    logger.info("[store] Registered session=%s active=%d", session_id, len(games))
    try:
        yield game
    finally:
        game.close()
        games.pop(session_id, None)
        logger.info("[store] Discarded session=%s active=%d", session_id, len(games))
