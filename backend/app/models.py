from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from models import Winner


class InboundType(StrEnum):
    CHOICE = "choice"
    RESET = "reset"


class OutboundType(StrEnum):
    START = "start"
    RESET = "reset"
    FAIL = "fail"
    GAME_OVER = "gameOver"
    PLAYER_CHOICE = "playerChoice"


class InboundMessage(BaseModel):
    """Client frame. ``message`` is only read for choices and is checked by the board."""

    type: str
    message: Any = None


class OutboundMessage(BaseModel):
    type: OutboundType
    message: str = ""
    winner: Winner = Winner.NONE
    board: list[str | None]


class GamesReadResponse(BaseModel):
    active: int
