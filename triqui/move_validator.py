"""
Move validator for Triqui.
Checks whether a cell index can be played on a board.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .board import Mark, CELL_COUNT, validate_board, empty_cells
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Triqui moves.

    Rules:
    1. Index must be an integer in 0-8
    2. Can only place on empty cells
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def is_move_legal(self, board: Sequence[Mark], index: int) -> bool:
        """
        Check if a cell can be played.

        Args:
            board: Current board (9 marks).
            index: Cell index to play.

        Returns:
            True iff index is in 0-8 and that cell is empty.
        """
        return self.validate_move(board, index).is_valid

    def validate_move(self, board: Sequence[Mark], index: int) -> ValidationResult:
        """
        Validate a move and explain why it is rejected.

        Args:
            board: Current board (9 marks).
            index: Cell index to play.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        cells = validate_board(board)

        # bool is an int subclass but never a cell index
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid index {index!r}. Must be an integer."
            )

        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid index {index}. Must be 0-{CELL_COUNT - 1}."
            )

        if cells[index] is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {cells[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Mark]) -> List[int]:
        """
        Get all playable cells.

        Args:
            board: Current board (9 marks).

        Returns:
            Empty cell indices, or an empty list once someone has won.
        """
        cells = validate_board(board)

        if self.win_checker.check_winner(cells) is not None:
            return []

        return empty_cells(cells)
