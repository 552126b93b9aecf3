"""ANSI-aware text measurement and line shaping utilities.

Provides wrapping, truncation, padding, and style repair that preserve escape
sequences. Widths are always visible terminal columns, never raw ``len``.
"""

from __future__ import annotations

import enum
import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


class TextAlign(enum.Enum):
    """Horizontal alignment used for truncation side and padding."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible width of ``text`` with escape sequences removed."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def _tokenize(text: str) -> list[tuple[str, bool]]:
    """Split text into ``(piece, is_escape)`` pairs, one visible char per piece."""
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                tokens.append((match.group(0), True))
                i = match.end()
                continue
        tokens.append((text[i], False))
        i += 1
    return tokens


def expand_tabs(text: str, col: int = 0) -> str:
    """Replace tabs with spaces up to the next tab stop, skipping escapes."""
    if "\t" not in text:
        return text
    out: list[str] = []
    for piece, is_escape in _tokenize(text):
        if is_escape:
            out.append(piece)
            continue
        w = char_display_width(piece, col)
        out.append(" " * w if piece == "\t" else piece)
        col += w
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences before the cut are preserved verbatim and do not
    count toward width. Tabs are expanded into spaces.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for piece, is_escape in _tokenize(text):
        if is_escape:
            out.append(piece)
            continue
        w = char_display_width(piece, col)
        if col + w > max_cols:
            break
        out.append(" " * w if piece == "\t" else piece)
        col += w
    return "".join(out)


def _hard_wrap(text: str, width: int) -> list[str]:
    """Split one word into chunks of at most ``width`` columns.

    Escape sequences remain attached to the chunk they were read into. A
    single character wider than ``width`` still gets its own chunk.
    """
    wrapped: list[str] = []
    chunk: list[str] = []
    col = 0
    for piece, is_escape in _tokenize(text):
        if is_escape:
            chunk.append(piece)
            continue
        w = char_display_width(piece, col)
        if col + w > width and col > 0:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(piece)
        col += w
    wrapped.append("".join(chunk))
    return wrapped


def _wrap_paragraph(text: str, width: int) -> list[str]:
    """Greedy word wrap of one newline-free paragraph."""
    lines: list[str] = []
    line = ""
    line_width = 0
    started = False
    for word in expand_tabs(text).split(" "):
        word_width = display_width(word)
        if not started:
            if not word and lines:
                continue
            line, line_width, started = word, word_width, True
        elif line_width + 1 + word_width <= width:
            line = f"{line} {word}"
            line_width += 1 + word_width
            continue
        else:
            lines.append(line)
            if not word:
                line, line_width, started = "", 0, False
                continue
            line, line_width = word, word_width

        if line_width > width:
            chunks = _hard_wrap(line, width)
            lines.extend(chunks[:-1])
            line = chunks[-1]
            line_width = display_width(line)
    if started or not lines:
        lines.append(line)
    return lines


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap styled text into lines no wider than ``width`` display columns.

    Embedded newlines always start a new line. Within a paragraph words are
    packed greedily; a word wider than ``width`` is split by columns.
    """
    if width <= 0:
        return [""]

    wrapped: list[str] = []
    for paragraph in text.split("\n"):
        wrapped.extend(_wrap_paragraph(paragraph, width))
    return wrapped


def truncate_text(text: str, max_width: int, align: TextAlign, tail: str) -> str:
    """Shorten ``text`` to at most ``max_width`` columns, marking the cut with ``tail``.

    ``LEFT`` keeps the start, ``RIGHT`` keeps the end, and ``CENTER`` keeps
    both ends (the start gets the odd column). Escape sequences from the removed
    part are emitted at the cut so the result stays balanced.
    """
    if display_width(text) <= max_width:
        return text
    text = expand_tabs(text)

    max_width = max(0, max_width)
    if display_width(tail) > max_width:
        tail = clip_ansi_line(tail, max_width)
    keep = max_width - display_width(tail)

    if align is TextAlign.LEFT:
        head_cols, end_cols = keep, 0
    elif align is TextAlign.RIGHT:
        head_cols, end_cols = 0, keep
    else:
        end_cols = keep // 2
        head_cols = keep - end_cols

    tokens = _tokenize(text)
    head_end = len(tokens)
    col = 0
    for idx, (piece, is_escape) in enumerate(tokens):
        if is_escape:
            continue
        w = char_display_width(piece, col)
        if col + w > head_cols:
            head_end = idx
            break
        col += w

    end_start = len(tokens)
    col = 0
    for idx in range(len(tokens) - 1, head_end - 1, -1):
        piece, is_escape = tokens[idx]
        if is_escape:
            continue
        w = char_display_width(piece, 0)
        if col + w > end_cols:
            break
        col += w
        end_start = idx

    head = "".join(piece for piece, _ in tokens[:head_end])
    removed = "".join(piece for piece, is_escape in tokens[head_end:end_start] if is_escape)
    end = "".join(piece for piece, _ in tokens[end_start:])
    if align is TextAlign.RIGHT:
        return f"{head}{removed}{tail}{end}"
    return f"{head}{tail}{removed}{end}"


def _fill(pad: str, cols: int) -> str:
    """Repeat ``pad`` and clip it to ``cols`` columns.

    A wide pad character that does not fit the last column is replaced by
    spaces so the fill is always exactly ``cols`` wide.
    """
    pad_width = display_width(pad)
    if cols <= 0 or pad_width <= 0:
        return ""
    fill = clip_ansi_line(pad * (cols // pad_width + 1), cols)
    return fill + " " * (cols - display_width(fill))


def pad_text(line: str, width: int, align: TextAlign, pad: str) -> str:
    """Extend ``line`` to ``width`` columns with the ``pad`` fill unit.

    ``LEFT`` pads on the right, ``RIGHT`` on the left, and ``CENTER`` splits
    the fill with the odd column on the right. Lines already at or beyond
    ``width`` are returned unchanged.
    """
    missing = width - display_width(line)
    if missing <= 0:
        return line
    if align is TextAlign.LEFT:
        return f"{line}{_fill(pad, missing)}"
    if align is TextAlign.RIGHT:
        return f"{_fill(pad, missing)}{line}"
    left = missing // 2
    return f"{_fill(pad, left)}{line}{_fill(pad, missing - left)}"


# SGR attribute slot -> sequence that switches it off.
_SGR_CLOSERS = {
    "fg": "\x1b[39m",
    "bg": "\x1b[49m",
    "intensity": "\x1b[22m",
    "italic": "\x1b[23m",
    "underline": "\x1b[24m",
    "blink": "\x1b[25m",
    "inverse": "\x1b[27m",
    "hidden": "\x1b[28m",
    "strike": "\x1b[29m",
}
_SGR_ON = {
    1: "intensity",
    2: "intensity",
    3: "italic",
    4: "underline",
    5: "blink",
    6: "blink",
    7: "inverse",
    8: "hidden",
    9: "strike",
}
_SGR_OFF = {
    22: "intensity",
    23: "italic",
    24: "underline",
    25: "blink",
    27: "inverse",
    28: "hidden",
    29: "strike",
    39: "fg",
    49: "bg",
}


def _apply_sgr(state: dict[str, str], seq: str) -> None:
    """Update per-attribute SGR ``state`` with one ``ESC[...m`` sequence."""
    raw = seq[2:-1]
    if "?" in raw:
        return
    try:
        params = [int(part) if part else 0 for part in raw.split(";")]
    except ValueError:
        return

    i = 0
    while i < len(params):
        code = params[i]
        if code == 0:
            state.clear()
        elif code in (38, 48):
            slot = "fg" if code == 38 else "bg"
            mode = params[i + 1] if i + 1 < len(params) else None
            if mode == 5:
                args = params[i + 1 : i + 3]
            elif mode == 2:
                args = params[i + 1 : i + 5]
            else:
                args = []
            if args:
                state.pop(slot, None)
                state[slot] = "\x1b[" + ";".join(str(v) for v in [code, *args]) + "m"
            i += len(args)
        elif 30 <= code <= 37 or 90 <= code <= 97:
            state.pop("fg", None)
            state["fg"] = f"\x1b[{code}m"
        elif 40 <= code <= 47 or 100 <= code <= 107:
            state.pop("bg", None)
            state["bg"] = f"\x1b[{code}m"
        elif code in _SGR_ON:
            slot = _SGR_ON[code]
            state.pop(slot, None)
            state[slot] = f"\x1b[{code}m"
        elif code in _SGR_OFF:
            state.pop(_SGR_OFF[code], None)
        i += 1


def repair_lines(lines: list[str]) -> list[str]:
    """Make each line carry its own styling.

    Attributes left open by earlier lines are re-opened at the start of the
    next line, and every line closes what is still open at its end using the
    attribute-specific reset codes. Visible content is never changed.
    """
    repaired: list[str] = []
    state: dict[str, str] = {}
    for line in lines:
        opening = "".join(state.values())
        for match in ANSI_ESCAPE_RE.finditer(line):
            seq = match.group(0)
            if seq.endswith("m"):
                _apply_sgr(state, seq)
        closing = "".join(_SGR_CLOSERS[slot] for slot in state)
        repaired.append(f"{opening}{line}{closing}")
    return repaired


def repair_text(text: str) -> str:
    """Apply :func:`repair_lines` to a newline-separated block."""
    return "\n".join(repair_lines(text.split("\n")))
