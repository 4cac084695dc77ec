"""
AI player for Triqui.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .board import Mark, Board, validate_board, empty_cells, place
from .config import EngineConfig
from .exceptions import PreconditionViolatedError
from .win_checker import winner_of


class AIPlayer:
    """
    An AI that plays Triqui using the Minimax algorithm.

    The AI always plays optimally: it wins if possible, blocks the
    opponent if needed, and never loses. When several cells are equally
    good it picks one of them at random, so it does not always open the
    same way.

    The player holds no game state. Which mark it plays is given on
    every call.
    """

    def __init__(self, rng: Optional[random.Random] = None, config: Optional[EngineConfig] = None):
        """
        Initialize the AI player.

        Args:
            rng: Source of randomness for tie-breaks. Anything with a
                 `choice(seq)` method; pass a seeded random.Random for
                 reproducible play.
            config: Engine configuration (default: EngineConfig()).
        """
        self.rng = rng if rng is not None else random.Random()
        self.config = config if config is not None else EngineConfig()

    def best_move(self, board: Sequence[Mark], engine_mark: Mark, opponent_mark: Mark) -> int:
        """
        Get the best move for the engine.

        Args:
            board: Current board (9 marks). Not modified.
            engine_mark: The mark the engine plays.
            opponent_mark: The mark the opponent plays.

        Returns:
            Index of the chosen cell.

        Raises:
            PreconditionViolatedError: Full board, or invalid side marks.
        """
        scores, evaluated = self._score_root(board, engine_mark, opponent_mark)

        best_score = max(scores.values())
        tied = sorted(i for i, score in scores.items() if score == best_score)
        move = self.rng.choice(tied)

        if self.config.DEBUG_MODE:
            print(
                f"AI evaluated {evaluated} positions. Best move: {move} "
                f"(score: {best_score}, tied: {tied})"
            )

        return move

    def score_moves(self, board: Sequence[Mark], engine_mark: Mark, opponent_mark: Mark) -> Dict[int, int]:
        """
        Get the minimax score of every empty cell for the engine.

        Args:
            board: Current board (9 marks). Not modified.
            engine_mark: The mark the engine plays.
            opponent_mark: The mark the opponent plays.

        Returns:
            Mapping of cell index to score.
        """
        scores, _ = self._score_root(board, engine_mark, opponent_mark)
        return scores

    def _score_root(
        self,
        board: Sequence[Mark],
        engine_mark: Mark,
        opponent_mark: Mark
    ) -> Tuple[Dict[int, int], int]:
        cells = validate_board(board)
        self._check_preconditions(cells, engine_mark, opponent_mark)

        # Positions visited by this call only
        counter = [0]
        scores = {}

        # Every root cell gets a full window so tied scores are exact
        for index in empty_cells(cells):
            child = place(cells, index, engine_mark)
            scores[index] = self._minimax(
                child,
                depth=0,
                is_maximizing=False,
                engine_mark=engine_mark,
                opponent_mark=opponent_mark,
                counter=counter
            )

        return scores, counter[0]

    def _check_preconditions(self, cells: Board, engine_mark: Mark, opponent_mark: Mark):
        for name, mark in (("engine_mark", engine_mark), ("opponent_mark", opponent_mark)):
            if not isinstance(mark, Mark) or mark == Mark.EMPTY:
                raise PreconditionViolatedError(f"{name} must be X or O, got {mark!r}")

        if engine_mark == opponent_mark:
            raise PreconditionViolatedError(
                f"engine_mark and opponent_mark are both {engine_mark.value}"
            )

        if Mark.EMPTY not in cells:
            raise PreconditionViolatedError("Board is full, there is no move to make")

    def _minimax(
        self,
        cells: Board,
        depth: int,
        is_maximizing: bool,
        engine_mark: Mark,
        opponent_mark: Mark,
        counter: List[int],
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            cells: Position to evaluate.
            depth: Plies played since the root move.
            is_maximizing: True if it's the engine's turn.
            engine_mark: The engine's mark.
            opponent_mark: The opponent's mark.
            counter: One-element list counting visited positions.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        counter[0] += 1

        # Check terminal states
        winner = winner_of(cells)

        if winner == engine_mark:
            return self.config.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner == opponent_mark:
            return depth - self.config.WIN_SCORE  # Loss (prefer slower losses)

        valid_moves = empty_cells(cells)

        if not valid_moves:
            return self.config.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in valid_moves:
                child = place(cells, index, engine_mark)
                score = self._minimax(
                    child, depth + 1, False, engine_mark, opponent_mark, counter, alpha, beta
                )
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index in valid_moves:
                child = place(cells, index, opponent_mark)
                score = self._minimax(
                    child, depth + 1, True, engine_mark, opponent_mark, counter, alpha, beta
                )
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
