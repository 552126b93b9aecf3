"""Public package surface for textrow.

Exports the slot types (``Cell``, ``Column``), the ``Row`` composer, and the
``TextAlign`` enum. Text primitives live in ``textrow.ansi``.
"""

from __future__ import annotations

from .ansi import TextAlign
from .cell import Cell, Column
from .row import Row

__all__ = ["Cell", "Column", "Row", "TextAlign"]
