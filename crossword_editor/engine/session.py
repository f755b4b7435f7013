"""Editing session: cursor position, auto-advance and key actions."""

from __future__ import annotations

from ..core.constants import AdvanceMode, Move
from ..core.models import Square
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


class EditorSession:
    """Tracks the selected square of a grid being edited interactively.

    Front ends translate raw input (clicks, key presses) into the calls below
    and redraw afterwards.
    """

    def __init__(self, grid: CrosswordGrid, advance_mode: AdvanceMode = AdvanceMode.NONE) -> None:
        self.grid = grid
        self.advance_mode = advance_mode
        self.selected_row = 0
        self.selected_col = 0

    @property
    def selected(self):
        return self.selected_row, self.selected_col

    @property
    def current_square(self) -> Square:
        return self.grid.get_square_at(self.selected_row, self.selected_col)

    def is_selected(self, row: int, col: int) -> bool:
        return row == self.selected_row and col == self.selected_col

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def select(self, row: int, col: int) -> bool:
        if not self.grid.square_exists(row, col):
            LOGGER.debug("Ignoring selection outside grid at (%s,%s)", row, col)
            return False
        self.selected_row, self.selected_col = row, col
        return True

    def move(self, move: Move) -> None:
        """Step one square, wrapping around the grid edges."""

        dr, dc = move.step
        self.selected_row = (self.selected_row + dr) % self.grid.height
        self.selected_col = (self.selected_col + dc) % self.grid.width

    def advance(self, forward: bool = True) -> bool:
        """Step along the auto-advance direction unless a block or edge is in the way."""

        if self.advance_mode == AdvanceMode.NONE:
            return False
        delta = 1 if forward else -1
        row, col = self.selected_row, self.selected_col
        if self.advance_mode == AdvanceMode.HORIZONTAL:
            col += delta
        else:
            row += delta
        if not self.grid.square_exists(row, col) or self.grid.get_square_at(row, col).is_block():
            return False
        self.selected_row, self.selected_col = row, col
        return True

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def type_letter(self, letter: str) -> None:
        self.current_square.write(letter.upper())
        LOGGER.debug("Wrote %s at (%s,%s)", letter.upper(), self.selected_row, self.selected_col)
        self.advance(forward=True)

    def erase(self) -> None:
        self.current_square.clear()
        self.advance(forward=False)

    def block_current(self) -> None:
        self.current_square.block()
        LOGGER.debug("Blocked (%s,%s)", self.selected_row, self.selected_col)
        self.advance(forward=True)
