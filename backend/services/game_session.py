"""Per-connection game protocol: one board, one human, one computer opponent."""

from __future__ import annotations

import logging
import random

from pydantic import ValidationError

from app.models import InboundMessage, InboundType, OutboundMessage, OutboundType
from models import IN_PROGRESS, Board, MoveResult, Outcome, Winner

logger = logging.getLogger(__name__)

WAITING_TEXT = "waiting for player choice"
RESET_TEXT = "the game was reset"
FAIL_TEXT = "invalid input! choose again..."
GAME_OVER_TEXT = "game is over!"
FINISHED_TEXT = "game is over! reset to play again"


class GameSession:
    """
    Drives one connection through repeated games.

    Every call to ``handle`` runs a full round (validate, mutate, evaluate)
    before returning the single reply for that frame. A game that has ended
    rejects further choices until it is reset.
    """

    def __init__(self, session_id: str, *, rng: random.Random | None = None) -> None:
        self.id = session_id
        self.board = Board()
        self.outcome: Outcome = IN_PROGRESS
        self._rng = rng or random.Random()

    def _reply(self, kind: OutboundType, text: str, winner: Winner = Winner.NONE) -> OutboundMessage:
        return OutboundMessage(
            type=kind,
            message=text,
            winner=winner,
            board=self.board.snapshot(),
        )

    def start(self) -> OutboundMessage:
        logger.info("[game_session] Game started session=%s", self.id)
        return self._reply(OutboundType.START, WAITING_TEXT)

    def handle(self, raw: str | bytes) -> OutboundMessage | None:
        """Parse one client frame and answer it. Unknown types get no reply."""
        try:
            msg = InboundMessage.model_validate_json(raw)
        except ValidationError as e:
            error = e.errors()[0]
            logger.warning(
                "[game_session] Malformed frame session=%s loc=%s: %s",
                self.id,
                error.get("loc"),
                error["msg"],
            )
            return self._reply(OutboundType.FAIL, FAIL_TEXT)
        return self.handle_message(msg)

    def handle_message(self, msg: InboundMessage) -> OutboundMessage | None:
        if msg.type == InboundType.RESET:
            return self.reset()
        if msg.type == InboundType.CHOICE:
            return self.choose(msg.message)
        logger.warning("[game_session] Ignoring unknown message type=%r session=%s", msg.type, self.id)
        return None

    def reset(self) -> OutboundMessage:
        self.board.reset()
        self.outcome = IN_PROGRESS
        logger.info("[game_session] Board reset session=%s", self.id)
        return self._reply(OutboundType.RESET, RESET_TEXT)

    def choose(self, index: object) -> OutboundMessage:
        if self.outcome.ended:
            logger.info("[game_session] Choice after game over rejected session=%s", self.id)
            return self._reply(OutboundType.FAIL, FINISHED_TEXT)

        if self.board.apply_player_move(index) is MoveResult.FAIL:
            logger.info("[game_session] Invalid choice %r session=%s", index, self.id)
            return self._reply(OutboundType.FAIL, FAIL_TEXT)

        self.outcome = self.board.evaluate_outcome()
        if self.outcome.ended:
            return self._game_over()

        placed = self.board.apply_opponent_move(self._rng)
        logger.debug("[game_session] Player took %s, computer took %s session=%s", index, placed, self.id)

        self.outcome = self.board.evaluate_outcome()
        if self.outcome.ended:
            return self._game_over()

        return self._reply(OutboundType.PLAYER_CHOICE, WAITING_TEXT)

    def _game_over(self) -> OutboundMessage:
        logger.info("[game_session] Game over winner=%s session=%s", self.outcome.winner.value, self.id)
        return self._reply(OutboundType.GAME_OVER, GAME_OVER_TEXT, self.outcome.winner)

    def close(self) -> None:
        self.board.reset()
        self.outcome = IN_PROGRESS
