"""
Board representation for Triqui.
A board is 9 marks in row-major order:

    0 1 2
    3 4 5
    6 7 8
"""

from collections import abc
from enum import Enum
from typing import List, Sequence, Tuple

from .exceptions import InvalidBoardError


class Mark(Enum):
    """The value of a single cell."""
    EMPTY = "."
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Board = Tuple[Mark, ...]

# Characters accepted by parse_board
_CHAR_TO_MARK = {
    "X": Mark.X,
    "x": Mark.X,
    "O": Mark.O,
    "o": Mark.O,
    ".": Mark.EMPTY,
    "-": Mark.EMPTY,
    "_": Mark.EMPTY,
}
_SEPARATORS = set(" \t\n|,")


def empty_board() -> Board:
    """A board with all 9 cells empty."""
    return (Mark.EMPTY,) * CELL_COUNT


def validate_board(board: Sequence[Mark]) -> Board:
    """
    Check a board snapshot and return it as a tuple.

    Args:
        board: Any sequence of 9 Mark values.

    Returns:
        The same cells as a tuple.

    Raises:
        InvalidBoardError: Wrong type, wrong length, or a cell that is not a Mark.
    """
    if isinstance(board, (str, bytes)) or not isinstance(board, abc.Sequence):
        raise InvalidBoardError(
            f"Board must be a sequence of Mark values, got {type(board).__name__}"
        )

    if len(board) != CELL_COUNT:
        raise InvalidBoardError(
            f"Board must have exactly {CELL_COUNT} cells, got {len(board)}"
        )

    for index, cell in enumerate(board):
        if not isinstance(cell, Mark):
            raise InvalidBoardError(f"Cell {index} is not a Mark: {cell!r}")

    return tuple(board)


def empty_cells(board: Board) -> List[int]:
    """Indices of the empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell is Mark.EMPTY]


def place(board: Board, index: int, mark: Mark) -> Board:
    """Return a new board with `mark` at `index`. The input is not modified."""
    return board[:index] + (mark,) + board[index + 1:]


def parse_board(text: str) -> Board:
    """
    Parse a board from text like "XX.|.O.|..O".

    X/O (any case) are marks, '.', '-' and '_' are empty cells.
    Spaces, '|' and ',' are ignored.
    """
    cells = []
    for char in text:
        if char in _SEPARATORS:
            continue
        if char not in _CHAR_TO_MARK:
            raise InvalidBoardError(f"Unexpected character in board: {char!r}")
        cells.append(_CHAR_TO_MARK[char])

    return validate_board(cells)


def board_to_string(board: Board) -> str:
    """Compact 9-character form, e.g. "XX..O...O"."""
    return "".join(cell.value for cell in board)
