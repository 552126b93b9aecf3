"""Row composition: merge independently formatted slots into one block.

Every child is rendered on its own, then lines are interleaved column by
column. The row is as tall as its tallest child; shorter children fill their
missing lines with blank text padded to their own width.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cell import Slot


@dataclass(frozen=True)
class Row:
    """Ordered, immutable sequence of cells or columns."""

    children: tuple[Slot, ...] = ()

    def add(self, child: Slot) -> Row:
        """Return a new row with ``child`` appended on the right."""
        if not isinstance(child, Slot):
            raise TypeError(f"row children must be Cell or Column, not {type(child).__name__}")
        return Row(children=(*self.children, child))

    add_cell = add
    add_column = add

    def _child_lines(self) -> list[list[str]]:
        return [child.lines() for child in self.children]

    def height(self) -> int:
        """Return the line count of the tallest child."""
        return max((len(lines) for lines in self._child_lines()), default=0)

    def render(self) -> list[str]:
        """Return the row as a list of lines, top to bottom."""
        if not self.children:
            return []

        columns = self._child_lines()
        height = max(len(lines) for lines in columns)
        if height == 0:
            return []

        result: list[str] = []
        for y in range(height):
            parts: list[str] = []
            for child, lines in zip(self.children, columns):
                text = lines[y] if y < len(lines) else ""
                parts.append(child.pad_line(text))
            result.append("".join(parts))
        return result

    def build(self) -> str:
        """Return the rendered lines, each followed by a newline."""
        return "".join(f"{line}\n" for line in self.render())

    def __str__(self) -> str:
        return self.build()
