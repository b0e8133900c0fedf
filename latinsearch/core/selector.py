"""Blank-cell selection."""

from __future__ import annotations

from typing import Optional

from .grid import Grid
from .model import BLANK, Cell


def next_blank(grid: Grid) -> Optional[Cell]:
    """Return the first blank cell in row-major order, or None if complete.

    The scan order fixes the order in which solutions are enumerated.
    """
    for cell in grid.cells():
        if grid.get(cell) == BLANK:
            return cell
    return None
