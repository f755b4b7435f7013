"""Data models for the crossword editor."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from .constants import Direction, SquareType
from .exceptions import InvalidInputError, InvalidStateError

if TYPE_CHECKING:
    from ..engine.grid import CrosswordGrid


class Square:
    """A single grid square: empty, blocked, or holding one letter.

    A square created by :class:`CrosswordGrid` keeps a weak reference to its
    grid. Whenever a mutation moves the square into or out of ``BLOCK`` the
    grid is renumbered before the mutating call returns.
    """

    __slots__ = ("_type", "_letter", "_number", "_grid_ref")

    def __init__(self, grid: Optional["CrosswordGrid"] = None) -> None:
        self._type = SquareType.EMPTY
        self._letter: Optional[str] = None
        self._number: Optional[int] = None
        self._grid_ref = weakref.ref(grid) if grid is not None else None

    def __repr__(self) -> str:
        if self._type == SquareType.LETTER:
            return f"Square(LETTER {self._letter!r}, number={self._number})"
        return f"Square({self._type.value}, number={self._number})"

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def clear(self) -> None:
        self._transition(SquareType.EMPTY, None)

    def block(self) -> None:
        self._transition(SquareType.BLOCK, None)

    def write(self, letter: str) -> None:
        """Store ``letter``; callers upper-case it beforehand if they want to."""

        if not self.is_valid_letter(letter):
            raise InvalidInputError(f"Invalid letter: {letter!r}")
        self._transition(SquareType.LETTER, letter)

    @staticmethod
    def is_valid_letter(letter: object) -> bool:
        return isinstance(letter, str) and len(letter) == 1 and letter.isalpha()

    def _transition(self, new_type: SquareType, letter: Optional[str]) -> None:
        was_block = self._type == SquareType.BLOCK
        self._type = new_type
        self._letter = letter
        if was_block != (new_type == SquareType.BLOCK):
            grid = self._grid_ref() if self._grid_ref is not None else None
            if grid is not None:
                grid.renumber()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def type(self) -> SquareType:
        return self._type

    @property
    def letter(self) -> str:
        if self._type != SquareType.LETTER:
            raise InvalidStateError(f"Square holds no letter (it is {self._type.value})")
        assert self._letter is not None
        return self._letter

    @property
    def number(self) -> Optional[int]:
        return self._number

    def is_block(self) -> bool:
        return self._type == SquareType.BLOCK

    def is_empty(self) -> bool:
        return self._type == SquareType.EMPTY

    def _assign_number(self, number: Optional[int]) -> None:
        self._number = number


@dataclass
class Entry:
    """A numbered across or down word start and the squares it spans."""

    number: int
    direction: Direction
    row: int
    col: int
    length: int
    cells: List[Tuple[int, int]] = field(default_factory=list)
    pattern: str = ""

    @property
    def label(self) -> str:
        return f"{self.number}-{self.direction.value.lower()}"
