"""
Game session for Triqui.
Tracks the board, whose turn it is, and the running score between a
human player and the engine. The engine itself stays stateless; this
is the caller that owns the board.
"""

import random
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field, replace

from .ai_player import AIPlayer
from .board import Mark, Board, empty_board, place
from .config import EngineConfig
from .exceptions import InvalidIndexError, InvalidMoveError
from .move_validator import MoveValidator
from .win_checker import WinChecker, Verdict


class SessionPhase(Enum):
    """Where the session is in a game."""
    AWAITING_FIRST_MOVE_CHOICE = "awaiting_first_move_choice"
    PLAYER_TURN = "player_turn"
    ENGINE_TURN = "engine_turn"
    GAME_OVER = "game_over"


class CoinFace(Enum):
    """The two sides of the coin tossed to decide who starts."""
    HEADS = "heads"
    TAILS = "tails"


class Outcome(Enum):
    """Result of a finished game from the session's point of view."""
    PLAYER = "player"
    ENGINE = "engine"
    DRAW = "draw"


@dataclass(frozen=True)
class Scores:
    """Running tally across games."""
    player_wins: int = 0
    draws: int = 0
    engine_wins: int = 0

    def record(self, outcome: Outcome) -> "Scores":
        """Return a copy with one more game of the given outcome."""
        if outcome == Outcome.PLAYER:
            return replace(self, player_wins=self.player_wins + 1)
        if outcome == Outcome.ENGINE:
            return replace(self, engine_wins=self.engine_wins + 1)
        return replace(self, draws=self.draws + 1)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameSession:
    """
    A human-vs-engine Triqui session.

    Tracks:
    - The board (owned here, passed to the engine by value)
    - Which mark the player and the engine hold
    - The phase: coin toss, player turn, engine turn, game over
    - Move history and the score across games
    """

    ai: Optional[AIPlayer] = None
    rng: Optional[random.Random] = None
    config: Optional[EngineConfig] = None

    # Let the engine reply as soon as it is its turn
    auto_engine: bool = True

    board: Board = field(default_factory=empty_board)
    phase: SessionPhase = SessionPhase.AWAITING_FIRST_MOVE_CHOICE
    player_mark: Mark = Mark.X
    engine_mark: Mark = Mark.O
    current_mark: Mark = Mark.X
    moves: List[Move] = field(default_factory=list)
    verdict: Optional[Verdict] = None
    outcome: Optional[Outcome] = None
    scores: Scores = field(default_factory=Scores)
    coin_result: Optional[CoinFace] = None

    def __post_init__(self):
        if self.config is None:
            self.config = EngineConfig()
        if self.rng is None:
            self.rng = random.Random()
        if self.ai is None:
            self.ai = AIPlayer(rng=self.rng, config=self.config)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.current_mark = self.config.FIRST_MARK

    @property
    def is_game_over(self) -> bool:
        return self.phase == SessionPhase.GAME_OVER

    def resolve_coin_toss(self, choice: CoinFace) -> bool:
        """
        Toss the coin and start a game.

        The player starts if the coin lands on their choice. Whoever
        starts plays the first mark (X by default).

        Args:
            choice: The face the player called.

        Returns:
            True if the player moves first.
        """
        self.coin_result = self.rng.choice([CoinFace.HEADS, CoinFace.TAILS])
        player_starts = self.coin_result == choice

        first = self.config.FIRST_MARK
        self.player_mark = first if player_starts else first.opposite()
        self.engine_mark = self.player_mark.opposite()
        self._start_board()

        if self.config.DEBUG_MODE:
            starter = "player" if player_starts else "engine"
            print(f"Coin: {self.coin_result.value}. The {starter} starts with {first.value}.")

        self._maybe_engine_move()
        return player_starts

    def play(self, index: int):
        """
        Make the player's move.

        Args:
            index: Cell to play (0-8).

        Raises:
            InvalidMoveError: Not the player's turn.
            InvalidIndexError: Out-of-range or occupied cell.
        """
        if self.phase != SessionPhase.PLAYER_TURN:
            raise InvalidMoveError(f"Player cannot move during {self.phase.value}")

        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            raise InvalidIndexError(result.error_message)

        self._apply(index, self.player_mark)
        self._maybe_engine_move()

    def engine_move(self) -> int:
        """
        Ask the engine for its move and play it.

        Returns:
            The cell the engine played.

        Raises:
            InvalidMoveError: Not the engine's turn.
        """
        if self.phase != SessionPhase.ENGINE_TURN:
            raise InvalidMoveError(f"Engine cannot move during {self.phase.value}")

        index = self.ai.best_move(self.board, self.engine_mark, self.player_mark)
        self._apply(index, self.engine_mark)
        return index

    def new_game(self):
        """Clear the board and wait for a new coin toss. Scores are kept."""
        self.board = empty_board()
        self.moves = []
        self.verdict = None
        self.outcome = None
        self.coin_result = None
        self.current_mark = self.config.FIRST_MARK
        self.phase = SessionPhase.AWAITING_FIRST_MOVE_CHOICE

    def _start_board(self):
        self.board = empty_board()
        self.moves = []
        self.verdict = None
        self.outcome = None
        self.current_mark = self.config.FIRST_MARK
        self.phase = self._turn_phase()

    def _turn_phase(self) -> SessionPhase:
        if self.current_mark == self.player_mark:
            return SessionPhase.PLAYER_TURN
        return SessionPhase.ENGINE_TURN

    def _maybe_engine_move(self):
        if self.auto_engine and self.phase == SessionPhase.ENGINE_TURN:
            self.engine_move()

    def _apply(self, index: int, mark: Mark):
        """Place a mark, then either end the game or pass the turn."""
        self.board = place(self.board, index, mark)
        self.moves.append(Move(mark=mark, index=index, move_number=len(self.moves)))
        self.current_mark = mark.opposite()

        verdict = self.win_checker.get_verdict(self.board)
        if not verdict.is_over:
            self.phase = self._turn_phase()
            return

        if verdict.winner is None:
            outcome = Outcome.DRAW
        elif verdict.winner == self.player_mark:
            outcome = Outcome.PLAYER
        else:
            outcome = Outcome.ENGINE

        self.verdict = verdict
        self.outcome = outcome
        self.scores = self.scores.record(outcome)
        self.phase = SessionPhase.GAME_OVER

        if self.config.DEBUG_MODE:
            print(f"Game over: {verdict} ({outcome.value})")
