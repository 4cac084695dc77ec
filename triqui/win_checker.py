"""
Win checker for Triqui.
Checks if a mark has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .board import Mark, Board, validate_board


class VerdictKind(Enum):
    """How a board stands."""
    WIN = "win"
    DRAW = "draw"
    UNDECIDED = "undecided"


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of a board: a win for one mark, a draw, or undecided.
    Always derived from a board, never stored by the engine.
    """
    kind: VerdictKind
    winner: Optional[Mark] = None

    @classmethod
    def win(cls, mark: Mark) -> "Verdict":
        return cls(VerdictKind.WIN, mark)

    @classmethod
    def draw(cls) -> "Verdict":
        return cls(VerdictKind.DRAW)

    @classmethod
    def undecided(cls) -> "Verdict":
        return cls(VerdictKind.UNDECIDED)

    @property
    def is_over(self) -> bool:
        return self.kind != VerdictKind.UNDECIDED

    def __str__(self) -> str:
        if self.kind == VerdictKind.WIN:
            return f"{self.winner.value} wins"
        return self.kind.value


# All possible winning lines, checked in this order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(cells: Board) -> Optional[Tuple[int, int, int]]:
    """First complete line of an already validated board, or None."""
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] is not Mark.EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def winner_of(cells: Board) -> Optional[Mark]:
    """Winning mark of an already validated board, or None."""
    line = winning_line(cells)
    return cells[line[0]] if line is not None else None


class WinChecker:
    """
    Checks for win conditions in Triqui.

    Win condition: 3 cells of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board (9 marks).

        Returns:
            The winning Mark, or None if no line is complete.
        """
        return winner_of(validate_board(board))

    def is_draw(self, board: Sequence[Mark]) -> bool:
        """
        Check if the game is a draw.

        A full board with a winning line is a win, not a draw.

        Args:
            board: The board (9 marks).

        Returns:
            True if no one has won and no cell is empty.
        """
        cells = validate_board(board)

        if winning_line(cells) is not None:
            return False

        return Mark.EMPTY not in cells

    def get_winning_line(self, board: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board (9 marks).

        Returns:
            The first complete line as an index triple, or None.
        """
        return winning_line(validate_board(board))

    def get_verdict(self, board: Sequence[Mark]) -> Verdict:
        """Classify a board as a win, a draw, or undecided."""
        cells = validate_board(board)

        winner = winner_of(cells)
        if winner is not None:
            return Verdict.win(winner)
        if Mark.EMPTY not in cells:
            return Verdict.draw()
        return Verdict.undecided()

