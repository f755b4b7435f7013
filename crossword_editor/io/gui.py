"""tkinter front end for editing a crossword grid."""

from __future__ import annotations

import sys
import tkinter as tk
from tkinter import simpledialog
from typing import Optional

from ..core.config import EditorConfig
from ..core.constants import AdvanceMode, Move, SquareType
from ..core.models import Square
from ..engine.grid import CrosswordGrid
from ..engine.session import EditorSession
from ..utils.logger import get_logger
from .geometry import (
    SELECTED_BLOCK_COLOR,
    SELECTED_EMPTY_COLOR,
    cell_at_point,
    cell_origin,
    font_size_for,
    square_size_for,
)


LOGGER = get_logger(__name__)

ARROW_KEYS = {
    "Up": Move.UP,
    "Down": Move.DOWN,
    "Left": Move.LEFT,
    "Right": Move.RIGHT,
}

ADVANCE_LABELS = (
    ("None", AdvanceMode.NONE),
    ("Horizontal", AdvanceMode.HORIZONTAL),
    ("Vertical", AdvanceMode.VERTICAL),
)


class CrosswordGUI:
    """Window with a clickable grid canvas and an auto-advance selector."""

    def __init__(self, config: EditorConfig) -> None:
        self.config = config
        self.root = tk.Tk()
        self.root.title("Crossword")
        self.root.withdraw()
        self.session: Optional[EditorSession] = None
        self.canvas: Optional[tk.Canvas] = None
        self.square_size = 0
        self.font_size = 0
        self.advance_var = tk.StringVar(value=AdvanceMode.NONE.value)

    # ------------------------------------------------------------------
    # Set-up
    # ------------------------------------------------------------------
    def _ask_positive_int(self, prompt: str, default: int) -> int:
        value = simpledialog.askinteger(
            "Crossword", prompt, initialvalue=default, minvalue=1, parent=self.root
        )
        if value is None:
            LOGGER.info("Prompt cancelled, exiting")
            self.root.destroy()
            sys.exit(0)
        return value

    def _init_model(self) -> None:
        height = self.config.height or self._ask_positive_int("How many rows?", 10)
        width = self.config.width or self._ask_positive_int("How many columns?", height)
        self.session = EditorSession(CrosswordGrid(height, width))

    def _init_size(self) -> None:
        spi = self.config.squares_per_inch or self._ask_positive_int("How many squares per inch?", 4)
        self.square_size = square_size_for(self.root.winfo_fpixels("1i"), spi)
        self.font_size = font_size_for(spi)

    def _init_frame(self) -> None:
        assert self.session is not None
        grid = self.session.grid
        self.canvas = tk.Canvas(
            self.root,
            width=grid.width * self.square_size + 1,
            height=grid.height * self.square_size + 1,
            background="white",
            highlightthickness=0,
        )
        self.canvas.pack(side=tk.TOP)
        self.canvas.bind("<ButtonPress-1>", self._on_click)
        self.canvas.bind("<Key>", self._on_key)

        buttons = tk.Frame(self.root, takefocus=0)
        tk.Label(buttons, text="Auto-advance direction:").pack(side=tk.LEFT)
        for label, mode in ADVANCE_LABELS:
            tk.Radiobutton(
                buttons,
                text=label,
                value=mode.value,
                variable=self.advance_var,
                command=self._on_advance_change,
                takefocus=0,
            ).pack(side=tk.LEFT)
        buttons.pack(side=tk.TOP)

        self.root.resizable(False, False)
        self.root.deiconify()
        self.canvas.focus_set()
        self.redraw()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def redraw(self) -> None:
        assert self.canvas is not None and self.session is not None
        self.canvas.delete("all")
        for row, col, square in self.session.grid:
            self._draw_square(row, col, square, self.session.is_selected(row, col))

    def _draw_square(self, row: int, col: int, square: Square, is_selected: bool) -> None:
        assert self.canvas is not None
        x0, y0 = cell_origin(row, col, self.square_size)
        x1, y1 = x0 + self.square_size, y0 + self.square_size
        if square.type == SquareType.BLOCK:
            fill = SELECTED_BLOCK_COLOR if is_selected else "black"
            self.canvas.create_rectangle(x0, y0, x1, y1, fill=fill, outline="black")
            return
        fill = SELECTED_EMPTY_COLOR if is_selected else "white"
        self.canvas.create_rectangle(x0, y0, x1, y1, fill=fill, outline="black")
        if square.type == SquareType.LETTER:
            self.canvas.create_text(
                (x0 + x1) // 2,
                (y0 + y1) // 2,
                text=square.letter,
                font=("Courier", self.font_size),
            )
        if square.number is not None:
            self.canvas.create_text(
                x0 + 2,
                y0 + 1,
                text=str(square.number),
                anchor=tk.NW,
                font=("Helvetica", max(6, self.font_size // 3)),
            )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_advance_change(self) -> None:
        assert self.session is not None
        self.session.advance_mode = AdvanceMode(self.advance_var.get())

    def _on_click(self, event: tk.Event) -> None:
        assert self.session is not None and self.canvas is not None
        grid = self.session.grid
        cell = cell_at_point(event.x, event.y, self.square_size, grid.height, grid.width)
        if cell is not None:
            self.session.select(*cell)
        self.canvas.focus_set()
        self.redraw()

    def _on_key(self, event: tk.Event) -> None:
        assert self.session is not None
        keysym = event.keysym
        if keysym in ARROW_KEYS:
            self.session.move(ARROW_KEYS[keysym])
        elif keysym == "Return":
            self.session.advance(forward=True)
        elif keysym == "BackSpace":
            self.session.erase()
        elif keysym == "space":
            self.session.block_current()
        elif len(event.char) == 1 and "a" <= event.char.lower() <= "z":
            self.session.type_letter(event.char)
        else:
            return
        self.redraw()

    def run(self) -> None:
        self._init_model()
        self._init_size()
        self._init_frame()
        self.root.mainloop()
