"""
Slot grid construction for the Hypertac connector block.
"""

from __future__ import annotations

from pyhypertac.config import GridConfig
from pyhypertac.model.constants import SLOT_ID_FORMAT
from pyhypertac.model.slot import Slot


def slot_id(row: int, col: int) -> str:
    """Return the conceptual id of a slot, e.g. ``slot_id(1, 2) == "R1C2"``."""
    return SLOT_ID_FORMAT.format(row=row, col=col)


def slot_index(row: int, col: int, cols: int) -> int:
    """
    Convert a 1-indexed (row, col) coordinate into a flat row-major index.

    Args:
        row: Grid row, starting at 1.
        col: Grid column, starting at 1.
        cols: Number of columns in the grid.

    Returns:
        Zero-based position of the slot in the list from
        :func:`initialize_slots`.
    """
    return (row - 1) * cols + (col - 1)


def initialize_slots(rows: int, cols: int) -> list[Slot]:
    """
    Build an empty grid of ``rows * cols`` slots in row-major order.

    Args:
        rows: Number of grid rows (>= 1).
        cols: Number of grid columns (>= 1).

    Returns:
        A fresh list of unused slots: R1C1, R1C2, ..., R{rows}C{cols}.

    Raises:
        GridConfigurationError: If either dimension is not a positive integer.
    """
    GridConfig(rows=rows, cols=cols).validate()
    return [
        Slot(id=slot_id(r, c), row=r, col=c)
        for r in range(1, rows + 1)
        for c in range(1, cols + 1)
    ]
