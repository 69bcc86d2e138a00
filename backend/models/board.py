"""Tic-tac-toe board: nine cells, the win lines, and the computer's move policy."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

BOARD_SIZE = 9
CENTER = 4

WINNING_COMBINATIONS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Mark(str, Enum):
    PLAYER = "X"
    OPPONENT = "O"


class Winner(str, Enum):
    PLAYER = "PLAYER"
    COMPUTER = "COMPUTER"
    DRAW = "DRAW"
    NONE = ""


class MoveResult(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"


class BoardFullError(RuntimeError):
    """The computer was asked to move on a board with no empty cell."""


@dataclass(frozen=True)
class Outcome:
    ended: bool
    winner: Winner = Winner.NONE

    def __post_init__(self) -> None:
        if not self.ended and self.winner is not Winner.NONE:
            raise ValueError(f"unfinished game cannot have winner {self.winner!r}")
        if self.ended and self.winner is Winner.NONE:
            raise ValueError("finished game must have a winner or be a draw")


IN_PROGRESS = Outcome(ended=False)

_LINE_WINNERS = {Mark.PLAYER: Winner.PLAYER, Mark.OPPONENT: Winner.COMPUTER}


@dataclass
class Board:
    cells: list[Mark | None] = field(default_factory=lambda: [None] * BOARD_SIZE)

    def is_full(self) -> bool:
        return None not in self.cells

    def empty_cells(self) -> list[int]:
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def apply_player_move(self, index: object) -> MoveResult:
        """Place an X at ``index``. Anything but an int naming an empty cell fails."""
        if isinstance(index, bool) or not isinstance(index, int):
            return MoveResult.FAIL
        if not 0 <= index < BOARD_SIZE:
            return MoveResult.FAIL
        if self.cells[index] is not None:
            return MoveResult.FAIL
        self.cells[index] = Mark.PLAYER
        return MoveResult.SUCCESS

    def apply_opponent_move(self, rng: random.Random | None = None) -> int:
        """
        Place an O and return its index.

        The center is always taken first. After that the cell is picked by
        drawing indices in [0, 8] until an empty one comes up.
        """
        if self.is_full():
            raise BoardFullError("no empty cell left for the computer")

        if self.cells[CENTER] is None:
            self.cells[CENTER] = Mark.OPPONENT
            return CENTER

        draw = rng or random
        index = draw.randrange(BOARD_SIZE)
        while self.cells[index] is not None:
            index = draw.randrange(BOARD_SIZE)
        self.cells[index] = Mark.OPPONENT
        return index

    def evaluate_outcome(self) -> Outcome:
        for a, b, c in WINNING_COMBINATIONS:
            mark = self.cells[a]
            if mark is not None and mark == self.cells[b] == self.cells[c]:
                return Outcome(ended=True, winner=_LINE_WINNERS[mark])
        if self.is_full():
            return Outcome(ended=True, winner=Winner.DRAW)
        return IN_PROGRESS

    def reset(self) -> None:
        self.cells[:] = [None] * BOARD_SIZE

    def snapshot(self) -> list[str | None]:
        """Wire form of the cells: None, "X" or "O"."""
        return [cell.value if cell is not None else None for cell in self.cells]
