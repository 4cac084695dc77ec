"""
Tests for the command-line tool.
"""

import pytest

from main import main


def test_verdict_win(capsys):
    assert main(["verdict", "XXX|OO.|..."]) == 0
    assert capsys.readouterr().out.strip() == "X wins"


def test_verdict_draw(capsys):
    assert main(["verdict", "XOX|OXO|OXO"]) == 0
    assert capsys.readouterr().out.strip() == "draw"


def test_verdict_undecided(capsys):
    assert main(["verdict", "........."]) == 0
    assert capsys.readouterr().out.strip() == "undecided"


def test_best_move(capsys):
    assert main(["best-move", "XX..O...O", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Best move for X: 2" in out
    assert "cell 2: +10" in out


def test_best_move_as_o(capsys):
    assert main(["best-move", "XX..O....", "--engine-mark", "O"]) == 0
    assert "Best move for O: 2" in capsys.readouterr().out


def test_best_move_debug_output(capsys):
    assert main(["best-move", "XX..O...O", "--debug"]) == 0
    assert "AI evaluated" in capsys.readouterr().out


def test_bad_board_is_reported(capsys):
    assert main(["best-move", "XX?"]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_full_board_is_reported(capsys):
    assert main(["best-move", "XOX|OXO|OXO"]) == 2
    assert "full" in capsys.readouterr().err


def test_self_play_against_random(capsys):
    assert main(["self-play", "--games", "5", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Games: 5" in out
    assert "Opponent wins: 0" in out


def test_self_play_against_engine(capsys):
    assert main(["self-play", "--games", "2", "--opponent", "engine", "--seed", "4"]) == 0
    assert "Draws: 2" in capsys.readouterr().out


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
