import random
from unittest.mock import MagicMock

import pytest

from models import (
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

X, O = Mark.PLAYER, Mark.OPPONENT


def test_new_board_is_empty() -> None:
    board = Board()
    assert board.cells == [None] * 9
    assert board.is_full() is False
    assert board.empty_cells() == list(range(9))
    assert board.evaluate_outcome() == IN_PROGRESS


@pytest.mark.parametrize("line", WINNING_COMBINATIONS)
def test_player_line_wins(line: tuple[int, int, int]) -> None:
    board = Board()
    for i in line:
        board.cells[i] = X
    assert board.evaluate_outcome() == Outcome(ended=True, winner=Winner.PLAYER)


@pytest.mark.parametrize("line", WINNING_COMBINATIONS)
def test_opponent_line_wins(line: tuple[int, int, int]) -> None:
    board = Board()
    for i in line:
        board.cells[i] = O
    assert board.evaluate_outcome() == Outcome(ended=True, winner=Winner.COMPUTER)


def test_full_board_without_line_is_draw() -> None:
    board = Board(cells=[X, O, X, X, O, O, O, X, X])
    assert board.is_full() is True
    assert board.evaluate_outcome() == Outcome(ended=True, winner=Winner.DRAW)


def test_win_on_full_board_beats_draw() -> None:
    board = Board(cells=[X, X, X, O, O, X, X, O, O])
    assert board.evaluate_outcome().winner is Winner.PLAYER


def test_partial_board_without_line_is_in_progress() -> None:
    board = Board(cells=[X, O, None, None, X, None, O, None, None])
    outcome = board.evaluate_outcome()
    assert outcome.ended is False
    assert outcome.winner is Winner.NONE


def test_unfinished_outcome_cannot_have_winner() -> None:
    with pytest.raises(ValueError):
        Outcome(ended=False, winner=Winner.PLAYER)


def test_finished_outcome_must_have_winner() -> None:
    with pytest.raises(ValueError):
        Outcome(ended=True)
    assert Outcome(ended=True, winner=Winner.DRAW).winner is Winner.DRAW


def test_player_move_marks_empty_cell() -> None:
    board = Board()
    assert board.apply_player_move(3) is MoveResult.SUCCESS
    assert board.cells[3] is X
    assert board.empty_cells() == [0, 1, 2, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("index", range(9))
@pytest.mark.parametrize("mark", [X, O])
def test_player_move_on_occupied_cell_fails(index: int, mark: Mark) -> None:
    board = Board()
    board.cells[index] = mark
    before = list(board.cells)
    assert board.apply_player_move(index) is MoveResult.FAIL
    assert board.cells == before


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, True, None])
def test_player_move_outside_board_fails(index: object) -> None:
    board = Board()
    assert board.apply_player_move(index) is MoveResult.FAIL
    assert board.cells == [None] * 9


def test_opponent_always_takes_empty_center() -> None:
    rng = random.Random(7)
    for _ in range(200):
        board = Board()
        others = [i for i in range(9) if i != CENTER]
        for i in rng.sample(others, rng.randint(0, len(others))):
            board.cells[i] = rng.choice([X, O])
        assert board.apply_opponent_move(rng) == CENTER
        assert board.cells[CENTER] is O


def test_opponent_fills_exactly_one_empty_cell_when_center_taken() -> None:
    rng = random.Random(1234)
    for _ in range(500):
        board = Board()
        board.cells[CENTER] = rng.choice([X, O])
        others = [i for i in range(9) if i != CENTER]
        for i in rng.sample(others, rng.randint(0, len(others) - 1)):
            board.cells[i] = rng.choice([X, O])
        before = list(board.cells)

        placed = board.apply_opponent_move(rng)

        assert before[placed] is None
        assert board.cells[placed] is O
        changed = [i for i in range(9) if board.cells[i] != before[i]]
        assert changed == [placed]


def test_opponent_redraws_until_cell_is_empty() -> None:
    board = Board()
    board.cells[0] = X
    board.cells[CENTER] = X
    rng = MagicMock()
    rng.randrange.side_effect = [0, 4, 0, 8]

    assert board.apply_opponent_move(rng) == 8
    assert board.cells[8] is O
    assert rng.randrange.call_count == 4


def test_opponent_move_on_full_board_raises() -> None:
    board = Board(cells=[X, O, X, X, O, O, O, X, X])
    with pytest.raises(BoardFullError):
        board.apply_opponent_move()


def test_reset_clears_all_cells() -> None:
    board = Board(cells=[X, O, X, None, O, None, None, X, None])
    cells = board.cells
    board.reset()
    assert board.cells == [None] * 9
    assert board.cells is cells


def test_snapshot_is_wire_form_copy() -> None:
    board = Board()
    board.apply_player_move(4)
    board.cells[0] = O
    snap = board.snapshot()
    assert snap == ["O", None, None, None, "X", None, None, None, None]
    board.reset()
    assert snap[4] == "X"


def test_boards_do_not_share_cells() -> None:
    first, second = Board(), Board()
    first.apply_player_move(0)
    assert second.cells[0] is None
