"""
Tests for the Triqui game session (turns, coin toss, scores).
"""

import random

import pytest

from triqui import (
    AIPlayer,
    GameSession,
    SessionPhase,
    CoinFace,
    Outcome,
    Scores,
    Mark,
    Verdict,
    InvalidIndexError,
    InvalidMoveError,
    empty_board,
    empty_cells,
)

X, O, E = Mark.X, Mark.O, Mark.EMPTY


class FirstChoice:
    """Deterministic rng: always picks the first option (HEADS, lowest cell)."""

    def choice(self, seq):
        return seq[0]


class LowestCellAI:
    """A weak engine that always plays the lowest empty cell."""

    def best_move(self, board, engine_mark, opponent_mark):
        return empty_cells(board)[0]


def test_new_session_waits_for_coin_toss():
    session = GameSession()
    assert session.phase == SessionPhase.AWAITING_FIRST_MOVE_CHOICE
    assert session.board == empty_board()
    assert session.scores == Scores()

    with pytest.raises(InvalidMoveError):
        session.play(4)
    with pytest.raises(InvalidMoveError):
        session.engine_move()


def test_player_wins_coin_toss_and_starts_as_x():
    session = GameSession(rng=FirstChoice())
    assert session.resolve_coin_toss(CoinFace.HEADS) is True
    assert session.coin_result == CoinFace.HEADS
    assert session.player_mark == X
    assert session.engine_mark == O
    assert session.phase == SessionPhase.PLAYER_TURN
    assert session.board == empty_board()


def test_engine_wins_coin_toss_and_moves_first():
    session = GameSession(rng=FirstChoice())
    assert session.resolve_coin_toss(CoinFace.TAILS) is False
    assert session.engine_mark == X
    assert session.player_mark == O

    # The engine has already played its opening
    assert session.board.count(X) == 1
    assert session.moves[0].mark == X
    assert session.phase == SessionPhase.PLAYER_TURN
    assert session.current_mark == O


def test_player_move_gets_engine_reply():
    session = GameSession(rng=FirstChoice())
    session.resolve_coin_toss(CoinFace.HEADS)
    session.play(4)

    assert session.board[4] == X
    assert session.board.count(O) == 1
    assert [move.move_number for move in session.moves] == [0, 1]
    assert session.phase == SessionPhase.PLAYER_TURN


@pytest.mark.parametrize("index", [-1, 9, 4])
def test_invalid_player_moves_are_rejected(index):
    session = GameSession(rng=FirstChoice(), auto_engine=False)
    session.resolve_coin_toss(CoinFace.HEADS)
    session.play(4)
    session.engine_move()

    board_before = session.board
    with pytest.raises(InvalidIndexError):
        session.play(index)
    assert session.board == board_before


def test_manual_engine_turns():
    session = GameSession(rng=FirstChoice(), auto_engine=False)
    session.resolve_coin_toss(CoinFace.HEADS)

    with pytest.raises(InvalidMoveError):
        session.engine_move()

    session.play(0)
    assert session.phase == SessionPhase.ENGINE_TURN

    with pytest.raises(InvalidMoveError):
        session.play(1)

    index = session.engine_move()
    assert session.board[index] == O
    assert session.phase == SessionPhase.PLAYER_TURN


def test_player_can_beat_a_weak_engine():
    session = GameSession(ai=LowestCellAI(), rng=FirstChoice())
    session.resolve_coin_toss(CoinFace.HEADS)

    session.play(0)  # engine takes 1
    session.play(4)  # engine takes 2
    session.play(8)

    assert session.is_game_over
    assert session.verdict == Verdict.win(X)
    assert session.outcome == Outcome.PLAYER
    assert session.scores == Scores(player_wins=1)

    with pytest.raises(InvalidMoveError):
        session.play(3)


def test_engine_never_loses_to_lowest_cell_player():
    session = GameSession(rng=random.Random(3))
    session.resolve_coin_toss(CoinFace.HEADS)

    while not session.is_game_over:
        session.play(empty_cells(session.board)[0])

    assert session.outcome in (Outcome.ENGINE, Outcome.DRAW)
    assert session.scores.player_wins == 0


def test_perfect_players_draw():
    session = GameSession(rng=random.Random(8))
    opponent = AIPlayer(rng=random.Random(9))
    session.resolve_coin_toss(CoinFace.TAILS)

    while not session.is_game_over:
        session.play(opponent.best_move(session.board, session.player_mark, session.engine_mark))

    assert session.verdict == Verdict.draw()
    assert session.outcome == Outcome.DRAW
    assert session.scores == Scores(draws=1)
    assert len(session.moves) == 9


def test_new_game_keeps_scores():
    session = GameSession(ai=LowestCellAI(), rng=FirstChoice())
    session.resolve_coin_toss(CoinFace.HEADS)
    for index in (0, 4, 8):
        session.play(index)

    session.new_game()
    assert session.phase == SessionPhase.AWAITING_FIRST_MOVE_CHOICE
    assert session.board == empty_board()
    assert session.moves == []
    assert session.verdict is None
    assert session.outcome is None
    assert session.scores.player_wins == 1


def test_scores_record():
    scores = Scores()
    scores = scores.record(Outcome.PLAYER).record(Outcome.DRAW).record(Outcome.ENGINE)
    scores = scores.record(Outcome.ENGINE)
    assert scores == Scores(player_wins=1, draws=1, engine_wins=2)
