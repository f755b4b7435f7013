"""Interactive crossword grid editor.

This package exposes the public API surface via:

- ``crossword_editor.engine.grid.CrosswordGrid``: the grid of squares with
  automatic clue numbering.
- ``crossword_editor.core.models.Square``: a single square's state machine.
- ``crossword_editor.io.console.ConsoleView``: the text console front end.

The tkinter front end lives in ``crossword_editor.io.gui`` and is imported
on demand.
"""

from .core.models import Entry, Square
from .engine.grid import CrosswordGrid
from .io.console import ConsoleView

__all__ = [
    "CrosswordGrid",
    "ConsoleView",
    "Entry",
    "Square",
]

__version__ = "0.1.0"
