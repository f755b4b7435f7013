"""Custom exception hierarchy for the crossword editor."""


class CrosswordError(Exception):
    """Base exception for grid model failures."""


class InvalidInputError(CrosswordError):
    """Raised when a non-alphabetic character is written to a square."""


class InvalidStateError(CrosswordError):
    """Raised when a square is asked for a letter it does not hold."""


class OutOfBoundsError(CrosswordError):
    """Raised when a coordinate falls outside the grid."""


class InvalidDimensionsError(CrosswordError):
    """Raised when a grid is sized with a non-positive row or column count."""
