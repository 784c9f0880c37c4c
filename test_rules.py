"""
Tests for the board and rules engine.
"""

import numpy as np
import pytest

from rules import (
    WINNING_LINES,
    Board,
    GameStatus,
    InvalidMove,
    Move,
    Player,
    apply_move,
    is_full,
    is_legal,
    new_board,
    outcome,
    winner,
    winning_line,
)
from rules.move_validator import MoveValidator


X, O, _ = Player.X, Player.O, None


def make_board(rows):
    return Board([[0 if cell is None else cell for cell in row] for row in rows])


def test_new_board_is_empty():
    board = new_board()
    assert len(board.empty_cells()) == 9
    assert board.count(X) == 0 and board.count(O) == 0
    assert outcome(board).status == GameStatus.IN_PROGRESS


def test_move_index_round_trip_examples():
    assert Move.from_index(5) == (1, 2)
    assert Move(2, 1).index == 7
    assert Move.from_index(0) == Move(0, 0)


def test_board_accepts_flat_cells():
    board = Board([1, 0, 0, 0, 2, 0, 0, 0, 0])
    assert board.get((0, 0)) == X
    assert board.get((1, 1)) == O
    assert board.get((2, 2)) is None


def test_board_rejects_bad_cells():
    with pytest.raises(ValueError):
        Board([0] * 8)
    with pytest.raises(ValueError):
        Board([3] + [0] * 8)


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    for player in (X, O):
        board = new_board()
        for cell in line:
            board.place(cell, player)

        result = outcome(board)
        assert result.status == GameStatus.WIN
        assert result.winner == player
        assert result.winning_line == line
        assert winner(board) == player


def test_three_in_a_row_for_x():
    board = new_board()
    for move in [(0, 0), (0, 1), (0, 2)]:
        board = apply_move(board, move, X)

    assert winner(board) == X
    assert winning_line(board) == ((0, 0), (0, 1), (0, 2))


def test_full_board_without_line_is_draw():
    board = make_board([
        [X, O, X],
        [O, X, O],
        [O, X, O],
    ])
    assert is_full(board)
    assert winner(board) is None

    result = outcome(board)
    assert result.status == GameStatus.DRAW
    assert result.winner is None
    assert result.winning_line is None


def test_full_board_with_line_is_win_not_draw():
    board = make_board([
        [X, X, X],
        [O, O, X],
        [X, O, O],
    ])
    assert is_full(board)
    assert outcome(board).status == GameStatus.WIN
    assert outcome(board).winner == X


def test_outcome_is_repeatable():
    board = make_board([
        [X, O, _],
        [_, X, _],
        [O, _, _],
    ])
    before = board.to_bytes()
    assert outcome(board) == outcome(board)
    assert board.to_bytes() == before


def test_mixed_line_is_not_a_win():
    board = make_board([
        [X, O, X],
        [_, _, _],
        [_, _, _],
    ])
    assert winner(board) is None
    assert outcome(board).status == GameStatus.IN_PROGRESS


def test_is_legal():
    board = make_board([
        [X, _, _],
        [_, O, _],
        [_, _, _],
    ])
    assert is_legal(board, (0, 1))
    assert is_legal(board, Move(2, 2))
    assert not is_legal(board, (0, 0))
    assert not is_legal(board, (1, 1))


@pytest.mark.parametrize("move", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds_is_illegal(move):
    assert not is_legal(new_board(), move)


@pytest.mark.parametrize("move", [(1,), (1, 1, 1), "ab", None, (1.0, 1), (True, 0)])
def test_malformed_move_is_illegal(move):
    assert not is_legal(new_board(), move)


def test_numpy_integers_are_accepted():
    assert is_legal(new_board(), (np.int64(1), np.int8(2)))


def test_validator_explains_rejection():
    board = apply_move(new_board(), (1, 1), X)
    result = MoveValidator().validate_move(board, (1, 1))
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = MoveValidator().validate_move(board, (5, 5))
    assert not result.is_valid
    assert "Invalid position" in result.error_message


def test_apply_move_returns_new_board():
    board = new_board()
    after = apply_move(board, (1, 1), X)

    assert after.get((1, 1)) == X
    assert board.get((1, 1)) is None
    assert after is not board


def test_apply_move_on_occupied_cell_leaves_board_unchanged():
    board = apply_move(new_board(), (0, 0), X)
    before = board.to_bytes()

    with pytest.raises(InvalidMove):
        apply_move(board, (0, 0), O)

    assert board.to_bytes() == before


def test_apply_move_out_of_bounds_raises():
    with pytest.raises(InvalidMove):
        apply_move(new_board(), (3, 3), X)


def test_alternating_play_keeps_counts_balanced():
    rng = np.random.default_rng(1234)

    for _game in range(50):
        board = new_board()
        player = X
        while not outcome(board).is_terminal:
            empty = board.empty_cells()
            move = empty[int(rng.integers(len(empty)))]
            board = apply_move(board, move, player)
            player = player.opposite()

            assert board.count(X) - board.count(O) in (0, 1)


def test_render_shows_marks():
    board = make_board([
        [X, _, _],
        [_, O, _],
        [_, _, _],
    ])
    text = board.render()
    assert "X" in text and "O" in text
    assert len(text.splitlines()) == 7


def test_board_equality():
    a = apply_move(new_board(), (2, 2), O)
    b = apply_move(new_board(), (2, 2), O)
    assert a == b
    assert a != new_board()
    assert hash(a) == hash(b)


def test_board_accepts_none_as_empty():
    board = Board([X, None, None, None, O, None, None, None, None])
    assert board.get((0, 0)) == X
    assert board.is_empty((0, 1))
    assert not board.is_empty((1, 1))
    assert board.count(O) == 1


@pytest.mark.parametrize("cell", ["x", 1.5, True])
def test_board_rejects_odd_cell_types(cell):
    with pytest.raises(ValueError):
        Board([cell] + [0] * 8)
