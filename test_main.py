"""
Tests for the console front end.
"""

import pytest

from rules import GameStatus, Move, Player
from opponent import Difficulty, OpponentConfig

from game_state import GameMode, GameState
from main import TicTacToeConsole, main, parse_move, self_play


def scripted(lines):
    it = iter(lines)
    return lambda prompt: next(it)


@pytest.mark.parametrize("text, expected", [
    ("1 1", Move(1, 1)),
    ("2,0", Move(2, 0)),
    (" 0 , 2 ", Move(0, 2)),
    ("5", Move(1, 2)),
    ("0", Move(0, 0)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["9", "-1", "a b", "", "1 2 3", "x"])
def test_parse_move_rejects(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_two_player_game_to_the_end(capsys):
    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=scripted([
        "0 0", "1 0", "0 1", "1 1", "0 2",
        "n",
    ]))
    game.start()

    assert state.outcome.status == GameStatus.WIN
    assert state.winner == Player.X
    assert state.scores.wins == 1
    assert "X wins!" in capsys.readouterr().out


def test_bad_input_is_reprompted(capsys):
    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=scripted([
        "0 0",
        "0 0",      # occupied
        "hello",    # not a move
        "7 7",      # off the board
        "1 0", "0 1", "1 1", "0 2",
        "n",
    ]))
    game.start()

    out = capsys.readouterr().out
    assert "occupied" in out
    assert "Invalid position" in out
    assert state.winner == Player.X
    assert len(state.moves) == 5


def test_quit_stops_the_game():
    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=scripted(["1 1", "q"]))
    game.start()

    assert not game.is_running
    assert not state.is_game_over
    assert len(state.moves) == 1


def test_end_of_input_quits():
    def no_input(prompt):
        raise EOFError

    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=no_input)
    game.start()
    assert not game.is_running


def test_play_again_keeps_score():
    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=scripted([
        "0 0", "1 0", "0 1", "1 1", "0 2",
        "y",
        "0 0", "1 0", "0 1", "1 1", "0 2",
        "n",
    ]))
    game.start()

    assert state.scores.wins == 2


def test_against_the_computer(capsys):
    state = GameState(mode=GameMode.VS_COMPUTER, difficulty=Difficulty.EASY, seed=3)

    def first_empty(prompt):
        if "again" in prompt:
            return "n"
        return str(state.board.empty_cells()[0].index)

    game = TicTacToeConsole(state, input_func=first_empty, move_delay=0)
    game.start()

    assert state.is_game_over
    assert state.scores.games_played == 1
    assert "Computer plays" in capsys.readouterr().out


def test_self_play_hard_is_a_draw():
    state = self_play(Difficulty.HARD)
    assert state.outcome.status == GameStatus.DRAW


def test_main_self_play(monkeypatch, capsys):
    monkeypatch.setattr(OpponentConfig, "VERBOSE", False)
    assert main(["--self-play", "--difficulty", "hard", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "DRAW" in out
    assert "AI evaluated" in out


def test_main_rejects_unknown_difficulty():
    with pytest.raises(SystemExit):
        main(["--difficulty", "impossible"])


def test_difficulty_change_applies_to_next_reply(capsys):
    state = GameState(mode=GameMode.VS_COMPUTER, difficulty=Difficulty.EASY, seed=0)
    script = iter(["1 1", "d hard", None, "q"])
    evaluated = []

    def reader(prompt):
        evaluated.append(state.ai.moves_evaluated)
        text = next(script)
        if text is None:
            return str(state.board.empty_cells()[0].index)
        return text

    game = TicTacToeConsole(state, input_func=reader, move_delay=0)
    game.start()

    # First reply was random, second was a full search
    assert evaluated[1] == 0
    assert state.ai.difficulty == Difficulty.HARD
    assert state.ai.moves_evaluated > 0
    assert len(state.moves) == 4
    assert "Difficulty set to: hard" in capsys.readouterr().out


def test_difficulty_command_rejects_bad_input(capsys):
    state = GameState(mode=GameMode.VS_COMPUTER, difficulty=Difficulty.MEDIUM)
    game = TicTacToeConsole(state, input_func=scripted(["d impossible", "d", "q"]))
    game.start()

    out = capsys.readouterr().out
    assert "Unknown difficulty" in out
    assert "Usage: d easy|medium|hard" in out
    assert state.difficulty == Difficulty.MEDIUM
    assert state.moves == []


def test_difficulty_command_in_two_player_mode(capsys):
    state = GameState(mode=GameMode.TWO_PLAYER)
    game = TicTacToeConsole(state, input_func=scripted(["d hard", "q"]))
    game.start()

    assert "no computer player" in capsys.readouterr().out
    assert state.moves == []
