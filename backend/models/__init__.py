from .board import (
    BOARD_SIZE,
    CENTER,
    IN_PROGRESS,
    WINNING_COMBINATIONS,
    Board,
    BoardFullError,
    Mark,
    MoveResult,
    Outcome,
    Winner,
)

__all__ = [
    "Board",
    "BoardFullError",
    "Mark",
    "MoveResult",
    "Outcome",
    "Winner",
    "IN_PROGRESS",
    "WINNING_COMBINATIONS",
    "BOARD_SIZE",
    "CENTER",
]
