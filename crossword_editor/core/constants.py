"""Shared constants and enumerations for the crossword editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SquareType(str, Enum):
    """States a single grid square can be in."""

    EMPTY = "EMPTY"
    BLOCK = "BLOCK"
    LETTER = "LETTER"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


class Move(str, Enum):
    """Single-square cursor moves (arrow keys)."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def step(self) -> Tuple[int, int]:
        return MOVE_STEPS[self]


class AdvanceMode(str, Enum):
    """Where the cursor goes after a square is edited."""

    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


MOVE_STEPS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
