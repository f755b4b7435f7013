import unittest

from crossword_editor.core.constants import SquareType
from crossword_editor.core.exceptions import InvalidInputError, InvalidStateError
from crossword_editor.core.models import Square


class RecordingGrid:
    """Stands in for a grid and counts renumber requests."""

    def __init__(self) -> None:
        self.renumbers = 0

    def renumber(self) -> None:
        self.renumbers += 1


class SquareStateTests(unittest.TestCase):
    def test_new_square_is_empty_and_unnumbered(self) -> None:
        square = Square()
        self.assertEqual(square.type, SquareType.EMPTY)
        self.assertIsNone(square.number)
        self.assertTrue(square.is_empty())

    def test_write_block_clear_transitions(self) -> None:
        square = Square()
        square.write("Q")
        self.assertEqual(square.type, SquareType.LETTER)
        self.assertEqual(square.letter, "Q")
        square.block()
        self.assertEqual(square.type, SquareType.BLOCK)
        self.assertTrue(square.is_block())
        square.clear()
        self.assertEqual(square.type, SquareType.EMPTY)

    def test_write_keeps_case_as_given(self) -> None:
        square = Square()
        square.write("a")
        self.assertEqual(square.letter, "a")

    def test_write_accepts_non_ascii_letters(self) -> None:
        square = Square()
        square.write("É")
        self.assertEqual(square.letter, "É")

    def test_write_rejects_non_letters_and_keeps_state(self) -> None:
        square = Square()
        square.write("Q")
        for bad in ("1", " ", "", "AB", "#", None, 65):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInputError):
                    square.write(bad)  # type: ignore[arg-type]
                self.assertEqual(square.type, SquareType.LETTER)
                self.assertEqual(square.letter, "Q")

    def test_letter_requires_letter_state(self) -> None:
        square = Square()
        with self.assertRaises(InvalidStateError):
            square.letter
        square.block()
        with self.assertRaises(InvalidStateError):
            square.letter


class SquareRenumberTriggerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = RecordingGrid()
        self.square = Square(self.grid)  # type: ignore[arg-type]

    def test_non_block_transitions_do_not_renumber(self) -> None:
        self.square.write("A")
        self.square.write("B")
        self.square.clear()
        self.square.clear()
        self.assertEqual(self.grid.renumbers, 0)

    def test_entering_and_leaving_block_renumbers(self) -> None:
        self.square.write("A")
        self.square.block()
        self.assertEqual(self.grid.renumbers, 1)
        self.square.block()
        self.assertEqual(self.grid.renumbers, 1)
        self.square.write("C")
        self.assertEqual(self.grid.renumbers, 2)
        self.square.block()
        self.square.clear()
        self.assertEqual(self.grid.renumbers, 4)

    def test_failed_write_on_block_does_not_renumber(self) -> None:
        self.square.block()
        with self.assertRaises(InvalidInputError):
            self.square.write("7")
        self.assertEqual(self.grid.renumbers, 1)
        self.assertTrue(self.square.is_block())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
