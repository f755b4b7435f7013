"""Pixel and point arithmetic for the graphical front end."""

from __future__ import annotations

from typing import Optional, Tuple

POINTS_PER_INCH = 72

SELECTED_EMPTY_COLOR = "#B4D5FE"
SELECTED_BLOCK_COLOR = "#022E64"


def square_size_for(pixels_per_inch: float, squares_per_inch: int) -> int:
    return max(1, int(pixels_per_inch) // squares_per_inch)


def font_size_for(squares_per_inch: int) -> int:
    return max(1, POINTS_PER_INCH // squares_per_inch)


def cell_at_point(x: int, y: int, square_size: int, height: int, width: int) -> Optional[Tuple[int, int]]:
    """Map a canvas pixel to the (row, col) under it, or None off the grid."""

    if x < 0 or y < 0:
        return None
    row, col = y // square_size, x // square_size
    if row >= height or col >= width:
        return None
    return row, col


def cell_origin(row: int, col: int, square_size: int) -> Tuple[int, int]:
    return col * square_size, row * square_size
