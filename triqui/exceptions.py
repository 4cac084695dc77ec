"""
Exceptions raised by the Triqui engine and game session.
"""


class TriquiError(Exception):
    """Base class for all Triqui errors."""
    pass


class InvalidBoardError(TriquiError, ValueError):
    """The board is not 9 cells of Mark values."""
    pass


class InvalidIndexError(TriquiError, ValueError):
    """A placement outside 0-8 or onto an occupied cell."""
    pass


class PreconditionViolatedError(TriquiError):
    """best_move was called on a full board or with bad side marks."""
    pass


class InvalidMoveError(TriquiError):
    """A session move was made out of turn or after the game ended."""
    pass
