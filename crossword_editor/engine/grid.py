"""Grid container and renumbering."""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from ..core.constants import Bounds
from ..core.exceptions import InvalidDimensionsError, OutOfBoundsError
from ..core.models import Entry, Square
from ..utils.logger import get_logger
from .numbering import collect_entries, compute_numbers


LOGGER = get_logger(__name__)

SquareVisitor = Callable[[int, int, Square], None]


class CrosswordGrid:
    """A fixed-size rectangle of squares with always-consistent clue numbers."""

    def __init__(self, height: int, width: int) -> None:
        for name, value in (("height", height), ("width", width)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionsError(f"{name} must be a positive integer, got {value!r}")
        self.bounds = Bounds(rows=height, cols=width)
        self.squares: List[List[Square]] = [
            [Square(self) for _ in range(width)] for _ in range(height)
        ]
        LOGGER.info("Created %sx%s grid", height, width)
        self.renumber()

    def __repr__(self) -> str:
        return f"CrosswordGrid(height={self.height}, width={self.width})"

    @property
    def height(self) -> int:
        return self.bounds.rows

    @property
    def width(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def square_exists(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def get_square_at(self, row: int, col: int) -> Square:
        if not self.square_exists(row, col):
            raise OutOfBoundsError(
                f"Square ({row},{col}) outside {self.height}x{self.width} grid"
            )
        return self.squares[row][col]

    def __iter__(self) -> Iterator[Tuple[int, int, Square]]:
        """Row-major ``(row, col, square)`` triples."""

        for row, squares in enumerate(self.squares):
            for col, square in enumerate(squares):
                yield row, col, square

    def for_each_square(self, visitor: SquareVisitor) -> None:
        for row, col, square in self:
            visitor(row, col, square)

    # ------------------------------------------------------------------
    # Numbering
    # ------------------------------------------------------------------
    def renumber(self) -> None:
        """Recompute every square's number from the current block layout."""

        numbers = compute_numbers(self)
        for row, col, square in self:
            square._assign_number(numbers.get((row, col)))
        LOGGER.debug("Renumbered grid: %s numbered squares", len(numbers))

    def entries(self) -> List[Entry]:
        return collect_entries(self)
