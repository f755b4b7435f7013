"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List

from ..core.constants import Direction, SquareType

if TYPE_CHECKING:
    from ..core.models import Entry, Square
    from ..engine.grid import CrosswordGrid


BLOCK_GLYPH = "█"
MARGIN = "    "


def square_glyph(square: Square) -> str:
    if square.type == SquareType.LETTER:
        return square.letter
    if square.type == SquareType.BLOCK:
        return BLOCK_GLYPH
    return " "


def _boundary(width: int, cell_width: int) -> str:
    return MARGIN + "+" + "+".join("-" * cell_width for _ in range(width)) + "+"


def _number_cell(square: Square, cell_width: int) -> str:
    if square.is_block():
        return BLOCK_GLYPH * cell_width
    if square.number is None:
        return " " * cell_width
    return f"{square.number:<{cell_width}}"


def _glyph_cell(square: Square, cell_width: int) -> str:
    if square.is_block():
        return BLOCK_GLYPH * cell_width
    return f"{square_glyph(square):^{cell_width}}"


def format_board(grid: CrosswordGrid, *, show_numbers: bool = True) -> str:
    """Render the grid as boxed text with row and column indices.

    With ``show_numbers`` each square takes two text lines, the clue number
    sitting in the top-left corner above the letter.
    """

    cell_width = 4 if show_numbers else 3
    header = MARGIN + "".join(f" {c:<{cell_width}}" for c in range(grid.width))
    lines = [header.rstrip(), _boundary(grid.width, cell_width)]
    for r in range(grid.height):
        row = [grid.get_square_at(r, c) for c in range(grid.width)]
        if show_numbers:
            lines.append(MARGIN + "|" + "|".join(_number_cell(sq, cell_width) for sq in row) + "|")
        lines.append(f"{r:>3} |" + "|".join(_glyph_cell(sq, cell_width) for sq in row) + "|")
        lines.append(_boundary(grid.width, cell_width))
    return "\n".join(lines)


def format_entries(entries: Iterable[Entry]) -> str:
    lines: List[str] = []
    entries = list(entries)
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(f"{direction.value.capitalize()}:")
        selected = [e for e in entries if e.direction == direction]
        if not selected:
            lines.append("  (none)")
        for entry in selected:
            lines.append(
                f"  {entry.number:>3}. {entry.pattern}  ({entry.length}) at ({entry.row},{entry.col})"
            )
    return "\n".join(lines)


def pretty_print_board(grid: CrosswordGrid, *, label: str | None = None, stream=None) -> None:
    """Print the crossword grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(grid), file=stream)
