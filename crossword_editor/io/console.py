"""Interactive text console for editing a crossword grid."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from ..core.exceptions import InvalidInputError, OutOfBoundsError
from ..core.models import Square
from ..engine.grid import CrosswordGrid
from ..utils.logger import get_logger
from ..utils.pretty import format_entries, pretty_print_board


LOGGER = get_logger(__name__)

HELP_LINES = (
    "Available commands:",
    "exit",
    "help",
    "clear row col",
    "block row col",
    "write letter row col",
    "entries",
)


class Command(str, Enum):
    EXIT = "exit"
    HELP = "help"
    CLEAR = "clear"
    BLOCK = "block"
    WRITE = "write"
    ENTRIES = "entries"
    UNRECOGNIZED = ""

    @classmethod
    def of(cls, word: str) -> "Command":
        try:
            return cls(word)
        except ValueError:
            return cls.UNRECOGNIZED


class ConsoleView:
    """Read-eval-print loop over a :class:`CrosswordGrid`.

    ``reader`` behaves like :func:`input` (prompt in, line out, ``EOFError``
    at end of input) and everything is printed to ``stream``.
    """

    def __init__(
        self,
        grid: Optional[CrosswordGrid] = None,
        *,
        reader: Optional[Callable[[str], str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.grid = grid
        self.reader = reader or input
        self.stream = stream or sys.stdout
        self._handlers: Dict[Command, Callable[[List[str]], bool]] = {
            Command.EXIT: self._do_exit,
            Command.HELP: self._do_help,
            Command.CLEAR: self._do_clear,
            Command.BLOCK: self._do_block,
            Command.WRITE: self._do_write,
            Command.ENTRIES: self._do_entries,
            Command.UNRECOGNIZED: self._do_unrecognized,
        }

    def println(self, line: str = "") -> None:
        print(line, file=self.stream)

    # ------------------------------------------------------------------
    # Set-up
    # ------------------------------------------------------------------
    def read_positive_int(self, prompt: str) -> int:
        while True:
            try:
                value = int(self.reader(prompt).strip())
                if value <= 0:
                    raise ValueError(value)
                return value
            except ValueError:
                self.println("Enter an integer greater than 0")

    def init_grid(self, height: Optional[int] = None, width: Optional[int] = None) -> CrosswordGrid:
        if height is None:
            height = self.read_positive_int("How many rows? ")
        if width is None:
            width = self.read_positive_int("How many columns? ")
        self.grid = CrosswordGrid(height, width)
        return self.grid

    def print_board(self) -> None:
        assert self.grid is not None
        pretty_print_board(self.grid, stream=self.stream)

    # ------------------------------------------------------------------
    # Command loop
    # ------------------------------------------------------------------
    def run(self, height: Optional[int] = None, width: Optional[int] = None) -> None:
        try:
            if self.grid is None:
                self.init_grid(height, width)
            self.print_board()
            while self.handle_line(self.reader("> ")):
                pass
        except EOFError:
            self.println()
        LOGGER.debug("Console session finished")

    def handle_line(self, line: str) -> bool:
        """Execute one command line; returns False once the session should end."""

        words = line.split()
        if not words:
            return True
        command = Command.of(words[0])
        LOGGER.debug("Command %s with args %s", command.name, words[1:])
        return self._handlers[command](words[1:])

    def _next_square(self, args: List[str]) -> Optional[Square]:
        assert self.grid is not None
        try:
            return self.grid.get_square_at(int(args[0]), int(args[1]))
        except (IndexError, ValueError, OutOfBoundsError):
            self.println("Invalid square")
            return None

    def _do_exit(self, args: List[str]) -> bool:
        return False

    def _do_help(self, args: List[str]) -> bool:
        for line in HELP_LINES:
            self.println(line)
        return True

    def _do_clear(self, args: List[str]) -> bool:
        square = self._next_square(args)
        if square is not None:
            square.clear()
            self.print_board()
        return True

    def _do_block(self, args: List[str]) -> bool:
        square = self._next_square(args)
        if square is not None:
            square.block()
            self.print_board()
        return True

    def _do_write(self, args: List[str]) -> bool:
        if not args:
            self.println("Provide a letter")
            return True
        if len(args[0]) != 1:
            self.println("Provide a single letter")
            return True
        letter = args[0].upper()
        square = self._next_square(args[1:])
        if square is None:
            return True
        try:
            square.write(letter)
        except InvalidInputError:
            self.println(f"Invalid letter: {letter}")
            return True
        self.print_board()
        return True

    def _do_entries(self, args: List[str]) -> bool:
        assert self.grid is not None
        self.println(format_entries(self.grid.entries()))
        return True

    def _do_unrecognized(self, args: List[str]) -> bool:
        self.println("Unrecognized command")
        return True
