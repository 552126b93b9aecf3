"""Behavior tests for single-slot rendering with ``Cell`` and ``Column``."""

from __future__ import annotations

import dataclasses
import unittest

from textrow import Cell, Column, TextAlign
from textrow.ansi import display_width

STYLED_TEXT = (
    "Allocating memory \x1b[31mis actually quite fast, and regardless you’re going "
    "to be copying the entire\x1b[39m string around."
)
STYLED_LINES = [
    "Allocating memory \x1b[31mis actually!\x1b[39m",
    "\x1b[31m!quite+++ copying the entire\x1b[39m!!",
    "!!!!!!!!string around.!!!!!!!!",
]


class CellRenderTests(unittest.TestCase):
    def test_plain_text_renders_single_line(self) -> None:
        self.assertEqual(Cell().with_text("foo").render(), ["foo"])

    def test_missing_text_renders_nothing(self) -> None:
        self.assertEqual(Cell().render(), [])
        self.assertEqual(Cell().with_width(3).render(), [])

    def test_empty_text_renders_one_padded_line(self) -> None:
        self.assertEqual(Cell(text="", width=3, text_pad=".").render(), ["..."])

    def test_width_pads_every_line_exactly(self) -> None:
        lines = Cell(text="the quick brown fox jumps", width=7).render()
        self.assertEqual(lines, ["the    ", "quick  ", "brown  ", "fox    ", "jumps  "])
        self.assertTrue(all(display_width(line) == 7 for line in lines))

    def test_without_width_text_stays_one_unpadded_line(self) -> None:
        self.assertEqual(Cell(text="a\nb", text_pad="!").render(), ["a\nb"])

    def test_right_truncation_puts_tail_first(self) -> None:
        cell = Cell(text="abcdefgh", text_width=5, text_align=TextAlign.RIGHT)
        self.assertEqual(cell.render(), ["...gh"])

    def test_custom_tail_is_used(self) -> None:
        cell = Cell(text="abcdefgh", text_width=5).with_text_tail("~")
        self.assertEqual(cell.render(), ["abcd~"])

    def test_center_padding_puts_odd_column_right(self) -> None:
        cell = Cell(text="ab", width=5).with_text_align("center").with_text_pad("!")
        self.assertEqual(cell.render(), ["!ab!!"])

    def test_wrapped_styles_are_repaired_per_line(self) -> None:
        cell = Cell(text="\x1b[31mred words here\x1b[39m", width=9, text_pad=".")
        self.assertEqual(
            cell.render(),
            ["\x1b[31mred words\x1b[39m", "\x1b[31mhere\x1b[39m....."],
        )

    def test_truncate_wrap_pad_and_repair_combined(self) -> None:
        cell = (
            Cell()
            .with_text(STYLED_TEXT)
            .with_width(30)
            .with_text_width(72)
            .with_text_align(TextAlign.CENTER)
            .with_text_tail("+++")
            .with_text_pad("!")
        )
        self.assertEqual(cell.render(), STYLED_LINES)

    def test_render_is_idempotent(self) -> None:
        cell = Cell(text=STYLED_TEXT, width=12, text_width=40)
        self.assertEqual(cell.render(), cell.render())


class CellConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cell = Cell()
        self.assertIsNone(cell.width)
        self.assertIsNone(cell.text)
        self.assertIsNone(cell.text_width)
        self.assertIs(cell.text_align, TextAlign.LEFT)
        self.assertEqual(cell.text_tail, "...")
        self.assertEqual(cell.text_pad, " ")

    def test_setters_return_copies(self) -> None:
        base = Cell(text="foo")
        wide = base.with_width(10)
        self.assertIsNone(base.width)
        self.assertEqual(wide.width, 10)
        self.assertEqual(wide.text, "foo")
        self.assertIsInstance(wide, Cell)

    def test_cells_are_frozen(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Cell().width = 3  # type: ignore[misc]

    def test_alignment_accepts_string_values(self) -> None:
        self.assertIs(Cell().with_text_align(" RIGHT ").text_align, TextAlign.RIGHT)

    def test_invalid_configuration_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Cell(width=-1)
        with self.assertRaises(TypeError):
            Cell(text_width=True)
        with self.assertRaises(TypeError):
            Cell(text=3)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            Cell().with_text_align("sideways")
        with self.assertRaises(ValueError):
            Cell(text_pad="ab")
        with self.assertRaises(ValueError):
            Cell(text_pad="")

    def test_zero_width_is_passed_through(self) -> None:
        self.assertEqual(Cell(text="abc", width=0).render(), [""])


class ColumnTests(unittest.TestCase):
    def test_build_terminates_every_line(self) -> None:
        column = Column(
            text=STYLED_TEXT,
            width=30,
            text_width=72,
            text_align=TextAlign.CENTER,
            text_tail="+++",
            text_pad="!",
        )
        self.assertEqual(column.build(), "".join(f"{line}\n" for line in STYLED_LINES))

    def test_str_and_from_text(self) -> None:
        self.assertEqual(str(Column.from_text("foo")), "foo\n")

    def test_missing_text_builds_empty_string(self) -> None:
        self.assertEqual(Column(width=4).build(), "")
        self.assertEqual(Column(width=4).lines(), [])

    def test_multi_character_pad(self) -> None:
        self.assertEqual(Column(text="ab", width=7, text_pad="-=").build(), "ab-=-=-\n")

    def test_lines_split_text_newlines_without_width(self) -> None:
        self.assertEqual(Column(text="a\nb").lines(), ["a", "b"])

    def test_unwrapped_lines_are_repaired_one_by_one(self) -> None:
        column = Column(text="\x1b[31ma\nb\x1b[39m")
        self.assertEqual(column.build(), "\x1b[31ma\x1b[39m\n\x1b[31mb\x1b[39m\n")
        self.assertEqual(column.lines(), ["\x1b[31ma\x1b[39m", "\x1b[31mb\x1b[39m"])

    def test_wide_pad_unit_reaches_exact_width(self) -> None:
        lines = Column(text="ab", width=5, text_pad="利").lines()
        self.assertEqual(lines, ["ab利 "])
        self.assertEqual(display_width(lines[0]), 5)

    def test_cell_keeps_unwrapped_text_as_one_repaired_line(self) -> None:
        self.assertEqual(Cell(text="\x1b[31ma\nb").render(), ["\x1b[31ma\nb\x1b[39m"])


if __name__ == "__main__":
    unittest.main()
