import io
import unittest
from typing import Callable, List, Tuple

from crossword_editor.core.constants import SquareType
from crossword_editor.engine.grid import CrosswordGrid
from crossword_editor.io.console import Command, ConsoleView, HELP_LINES


def scripted(lines: List[str]) -> Tuple[Callable[[str], str], List[str]]:
    """Build an ``input``-like reader that replays ``lines`` then hits EOF."""

    feed = iter(lines)
    prompts: List[str] = []

    def reader(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return reader, prompts


class CommandParsingTests(unittest.TestCase):
    def test_known_and_unknown_words(self) -> None:
        self.assertEqual(Command.of("write"), Command.WRITE)
        self.assertEqual(Command.of("entries"), Command.ENTRIES)
        self.assertEqual(Command.of("WRITE"), Command.UNRECOGNIZED)
        self.assertEqual(Command.of("frobnicate"), Command.UNRECOGNIZED)


class ConsoleCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CrosswordGrid(2, 2)
        self.out = io.StringIO()
        reader, _ = scripted([])
        self.console = ConsoleView(self.grid, reader=reader, stream=self.out)

    def output(self) -> str:
        return self.out.getvalue()

    def test_write_uppercases_and_prints_board(self) -> None:
        self.assertTrue(self.console.handle_line("write a 0 1"))
        self.assertEqual(self.grid.get_square_at(0, 1).letter, "A")
        self.assertIn("+----+----+", self.output())

    def test_write_argument_errors(self) -> None:
        self.console.handle_line("write")
        self.console.handle_line("write ab 0 0")
        self.console.handle_line("write 1 0 0")
        self.console.handle_line("write a 5 5")
        self.console.handle_line("write a 0")
        self.assertEqual(
            self.output().splitlines(),
            [
                "Provide a letter",
                "Provide a single letter",
                "Invalid letter: 1",
                "Invalid square",
                "Invalid square",
            ],
        )
        self.assertTrue(all(sq.type == SquareType.EMPTY for _, _, sq in self.grid))

    def test_block_and_clear_renumber(self) -> None:
        self.console.handle_line("block 0 1")
        self.assertTrue(self.grid.get_square_at(0, 1).is_block())
        self.assertEqual(self.grid.get_square_at(1, 0).number, 2)
        self.console.handle_line("clear 0 1")
        self.assertEqual(self.grid.get_square_at(0, 1).type, SquareType.EMPTY)
        self.assertEqual(self.grid.get_square_at(1, 0).number, 3)

    def test_invalid_coordinates(self) -> None:
        self.console.handle_line("block x y")
        self.console.handle_line("clear -1 0")
        self.console.handle_line("clear 0")
        self.assertEqual(self.output().splitlines(), ["Invalid square"] * 3)

    def test_help_exit_blank_and_unknown(self) -> None:
        self.assertTrue(self.console.handle_line("   "))
        self.assertTrue(self.console.handle_line("help"))
        self.assertTrue(self.console.handle_line("dance 1 2"))
        self.assertFalse(self.console.handle_line("exit"))
        self.assertEqual(self.output().splitlines(), list(HELP_LINES) + ["Unrecognized command"])

    def test_entries_listing(self) -> None:
        self.console.handle_line("entries")
        text = self.output()
        self.assertIn("Across:", text)
        self.assertIn("Down:", text)
        self.assertIn("    1. ..  (2) at (0,0)", text)


class ConsoleRunTests(unittest.TestCase):
    def test_prompts_until_positive_dimensions(self) -> None:
        reader, prompts = scripted(["0", "rows", "2", "-4", "3", "block 1 1", "exit"])
        out = io.StringIO()
        console = ConsoleView(reader=reader, stream=out)
        console.run()

        assert console.grid is not None
        self.assertEqual((console.grid.height, console.grid.width), (2, 3))
        self.assertTrue(console.grid.get_square_at(1, 1).is_block())
        self.assertEqual(out.getvalue().count("Enter an integer greater than 0"), 3)
        self.assertEqual(prompts[:5], ["How many rows? "] * 3 + ["How many columns? "] * 2)
        self.assertEqual(prompts[-1], "> ")

    def test_configured_dimensions_skip_prompts(self) -> None:
        reader, prompts = scripted(["exit"])
        console = ConsoleView(reader=reader, stream=io.StringIO())
        console.run(4, 5)
        assert console.grid is not None
        self.assertEqual((console.grid.height, console.grid.width), (4, 5))
        self.assertEqual(prompts, ["> "])

    def test_end_of_input_finishes_session(self) -> None:
        reader, _ = scripted(["write q 0 0"])
        grid = CrosswordGrid(1, 2)
        console = ConsoleView(grid, reader=reader, stream=io.StringIO())
        console.run()
        self.assertEqual(grid.get_square_at(0, 0).letter, "Q")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
