"""Optional hooks into the search.

The search calls these at fixed points but never depends on them; attaching
or removing an observer does not change which solutions are produced or in
what order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .grid import Grid
from .model import Cell, Value

log = logging.getLogger(__name__)


class SearchObserver:
    """Base observer; every hook is a no-op."""

    def on_enter_branch(self, grid: Grid, cell: Cell) -> None:
        """Called before the candidates of ``cell`` are expanded."""

    def on_candidate(self, cell: Cell, value: Value) -> None:
        """Called after ``value`` is placed at ``cell`` and before recursing."""

    def on_dead_end(self, grid: Grid, cell: Cell) -> None:
        """Called when ``cell`` has no legal candidate."""

    def on_solution(self, grid: Grid) -> None:
        """Called right before a complete grid is emitted."""


class TraceObserver(SearchObserver):
    """Writes a step-by-step trace of the search to a logger at DEBUG."""

    def __init__(self, logger: Optional[logging.Logger] = None, seed: Optional[Grid] = None):
        self.log = logger or log
        self._base = seed.blank_count() if seed is not None else None
        self._expanding: Dict[Cell, str] = {}

    def _indent(self, grid: Grid) -> str:
        if self._base is None:
            self._base = grid.blank_count()
        return " " * (self._base - grid.blank_count())

    def on_enter_branch(self, grid, cell):
        indent = self._expanding[cell] = self._indent(grid)
        self.log.debug("%sAttempt:", indent)
        for row in grid.rows:
            self.log.debug("%s%s", indent, " ".join(str(v) for v in row))
        self.log.debug("%sFound blank at %s", indent, cell)

    def on_candidate(self, cell, value):
        self.log.debug("%sPlaced %d at %s", self._expanding.get(cell, ""), value, cell)

    def on_dead_end(self, grid, cell):
        self.log.debug("%sNo legal value at %s", self._indent(grid), cell)

    def on_solution(self, grid):
        self.log.debug("%sComplete", self._indent(grid))


@dataclass
class StatsObserver(SearchObserver):
    """Counts search events."""
    branches: int = 0
    placements: int = 0
    dead_ends: int = 0
    solutions: int = 0

    def on_enter_branch(self, grid, cell):
        self.branches += 1

    def on_candidate(self, cell, value):
        self.placements += 1

    def on_dead_end(self, grid, cell):
        self.dead_ends += 1

    def on_solution(self, grid):
        self.solutions += 1
