"""Clue numbering rules.

A square is numbered when it is not a block and starts an across or a down
word. It starts a word in a direction when the square before it is a block
or lies outside the grid, and the square after it exists and is not a block.
Numbers are handed out from 1 in row-major order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

from ..core.constants import Direction
from ..core.models import Entry

if TYPE_CHECKING:
    from .grid import CrosswordGrid


def is_barrier(grid: CrosswordGrid, row: int, col: int) -> bool:
    """True when (row, col) is a block or outside the grid."""

    if not grid.square_exists(row, col):
        return True
    return grid.get_square_at(row, col).is_block()


def starts_word(grid: CrosswordGrid, row: int, col: int, direction: Direction) -> bool:
    if is_barrier(grid, row, col):
        return False
    dr, dc = direction.step
    return is_barrier(grid, row - dr, col - dc) and not is_barrier(grid, row + dr, col + dc)


def compute_numbers(grid: CrosswordGrid) -> Dict[Tuple[int, int], int]:
    numbers: Dict[Tuple[int, int], int] = {}
    next_number = 1
    for row, col, _ in grid:
        if starts_word(grid, row, col, Direction.ACROSS) or starts_word(grid, row, col, Direction.DOWN):
            numbers[(row, col)] = next_number
            next_number += 1
    return numbers


def collect_entries(grid: CrosswordGrid) -> List[Entry]:
    """Derive across then down entries from the grid's current numbering."""

    entries: List[Entry] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        for row, col, square in grid:
            if square.number is None or not starts_word(grid, row, col, direction):
                continue
            cells = _collect_run(grid, row, col, direction)
            entries.append(
                Entry(
                    number=square.number,
                    direction=direction,
                    row=row,
                    col=col,
                    length=len(cells),
                    cells=cells,
                    pattern="".join(_pattern_char(grid, r, c) for r, c in cells),
                )
            )
    return entries


def _collect_run(grid: CrosswordGrid, row: int, col: int, direction: Direction) -> List[Tuple[int, int]]:
    dr, dc = direction.step
    cells: List[Tuple[int, int]] = []
    r, c = row, col
    while not is_barrier(grid, r, c):
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def _pattern_char(grid: CrosswordGrid, row: int, col: int) -> str:
    square = grid.get_square_at(row, col)
    return "." if square.is_empty() else square.letter
