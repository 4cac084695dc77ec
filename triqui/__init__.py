"""
Triqui
======
A perfect-play engine for 3x3 tic-tac-toe.

Legality checks, win/draw detection, and a minimax move oracle with
alpha-beta pruning, plus a game session that keeps turn state and
score for a human-vs-engine game.
"""

import random
from typing import Optional, Sequence

from .board import (
    Mark,
    Board,
    BOARD_SIZE,
    CELL_COUNT,
    empty_board,
    validate_board,
    empty_cells,
    place,
    parse_board,
    board_to_string,
)
from .config import EngineConfig
from .exceptions import (
    TriquiError,
    InvalidBoardError,
    InvalidIndexError,
    PreconditionViolatedError,
    InvalidMoveError,
)
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Verdict, VerdictKind, WINNING_LINES
from .ai_player import AIPlayer
from .session import GameSession, SessionPhase, CoinFace, Outcome, Scores, Move

__version__ = "1.0.0"

_validator = MoveValidator()
_win_checker = WinChecker()
_ai = AIPlayer()


def is_move_legal(board: Sequence[Mark], index: int) -> bool:
    """True iff index is in 0-8 and that cell is empty."""
    return _validator.is_move_legal(board, index)


def check_winner(board: Sequence[Mark]) -> Optional[Mark]:
    """The mark holding a complete line, or None."""
    return _win_checker.check_winner(board)


def is_draw(board: Sequence[Mark]) -> bool:
    """True iff the board is full and no one has won."""
    return _win_checker.is_draw(board)


def get_verdict(board: Sequence[Mark]) -> Verdict:
    return _win_checker.get_verdict(board)


def best_move(
    board: Sequence[Mark],
    engine_mark: Mark,
    opponent_mark: Mark,
    rng: Optional[random.Random] = None
) -> int:
    """Optimal cell for engine_mark; ties broken with rng (or a shared default)."""
    ai = _ai if rng is None else AIPlayer(rng=rng)
    return ai.best_move(board, engine_mark, opponent_mark)
