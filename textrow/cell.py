"""Single-slot formatting: ``Cell`` and ``Column``.

Both share one immutable configuration record. ``Cell`` renders to a list of
lines and pads with a single character; ``Column`` renders to a
newline-terminated block and pads with an arbitrary string.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TypeVar

from .ansi import TextAlign, pad_text, repair_lines, repair_text, truncate_text, wrap_text

DEFAULT_TEXT_TAIL = "..."
DEFAULT_TEXT_PAD = " "

SlotT = TypeVar("SlotT", bound="Slot")


def coerce_align(value: TextAlign | str) -> TextAlign:
    """Return ``value`` as a ``TextAlign``, accepting its string value."""
    if isinstance(value, TextAlign):
        return value
    if isinstance(value, str):
        try:
            return TextAlign(value.strip().lower())
        except ValueError:
            raise ValueError(f"unknown text alignment: {value!r}") from None
    raise TypeError(f"text_align must be TextAlign or str, not {type(value).__name__}")


def _check_width(name: str, value: object) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int or None, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_str(name: str, value: object, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")


@dataclass(frozen=True)
class Slot:
    """Formatting configuration for one slot of a row.

    ``width`` is the rendered width of every output line; when unset the text
    is neither wrapped nor padded. ``text_width`` truncates the text before
    wrapping. Instances are immutable; the ``with_*`` methods return copies.
    """

    width: int | None = None
    text: str | None = None
    text_width: int | None = None
    text_align: TextAlign = TextAlign.LEFT
    text_tail: str = DEFAULT_TEXT_TAIL
    text_pad: str = DEFAULT_TEXT_PAD

    def __post_init__(self) -> None:
        _check_width("width", self.width)
        _check_width("text_width", self.text_width)
        _check_str("text", self.text, optional=True)
        _check_str("text_tail", self.text_tail)
        _check_str("text_pad", self.text_pad)
        object.__setattr__(self, "text_align", coerce_align(self.text_align))

    @classmethod
    def from_text(cls: type[SlotT], text: str) -> SlotT:
        """Return an otherwise unconfigured slot holding ``text``."""
        return cls(text=text)

    def with_width(self: SlotT, width: int | None) -> SlotT:
        return dataclasses.replace(self, width=width)

    def with_text(self: SlotT, text: str | None) -> SlotT:
        return dataclasses.replace(self, text=text)

    def with_text_width(self: SlotT, text_width: int | None) -> SlotT:
        return dataclasses.replace(self, text_width=text_width)

    def with_text_align(self: SlotT, text_align: TextAlign | str) -> SlotT:
        return dataclasses.replace(self, text_align=text_align)

    def with_text_tail(self: SlotT, text_tail: str) -> SlotT:
        return dataclasses.replace(self, text_tail=text_tail)

    def with_text_pad(self: SlotT, text_pad: str) -> SlotT:
        return dataclasses.replace(self, text_pad=text_pad)

    def pad_line(self, line: str) -> str:
        """Pad one line to ``width`` with this slot's alignment and pad unit.

        Returns ``line`` unchanged when no width is configured.
        """
        if self.width is None:
            return line
        return pad_text(line, self.width, self.text_align, self.text_pad)

    def shape_lines(self) -> list[str]:
        """Truncate, wrap, and pad the text; styles are not yet repaired."""
        if self.text is None:
            return []

        text = self.text
        if self.text_width is not None:
            text = truncate_text(text, self.text_width, self.text_align, self.text_tail)
        if self.width is not None:
            lines = [self.pad_line(line) for line in wrap_text(text, self.width)]
        else:
            lines = [text]
        return lines

    def format_lines(self) -> list[str]:
        """Return the shaped lines with styles repaired line by line."""
        return repair_lines(self.shape_lines())

    def lines(self) -> list[str]:
        """Return the lines this slot contributes to a row."""
        return self.format_lines()


@dataclass(frozen=True)
class Cell(Slot):
    """Slot rendered as a list of lines, padded with a single character."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.text_pad) != 1:
            raise ValueError(f"cell text_pad must be a single character, got {self.text_pad!r}")

    def render(self) -> list[str]:
        """Return the formatted lines; empty when no text is set."""
        return self.format_lines()


@dataclass(frozen=True)
class Column(Slot):
    """Slot rendered as a newline-terminated block, padded with any string."""

    def build(self) -> str:
        """Return the formatted lines, each followed by a newline.

        Styles are repaired on the joined block, so text lines inside an
        unwrapped column are closed and reopened too.
        """
        lines = self.shape_lines()
        if not lines:
            return ""
        return "".join(f"{line}\n" for line in repair_text("\n".join(lines)).split("\n"))

    def lines(self) -> list[str]:
        """Return the built block split back into lines.

        Unlike ``format_lines`` this yields one entry per text line when no
        width is set and the text holds newlines.
        """
        block = self.build()
        if not block:
            return []
        return block[:-1].split("\n")

    def __str__(self) -> str:
        return self.build()
