"""Candidate generation under the active uniqueness rules."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Type

from ..rules import DEFAULT_RULES, Rule, get_rule
from .grid import Grid
from .model import BLANK, Cell, Value


class ConstraintChecker:
    """Decides which values may legally be placed in a cell.

    Row and column rules always apply, so every grid it accepts stays a
    partial Latin square; ``rules`` can only add to them (e.g. ``box``).
    """

    def __init__(self, rules: Optional[Iterable[str]] = None, size: Optional[int] = None):
        names = tuple(dict.fromkeys(DEFAULT_RULES + tuple(rules or ())))
        self.rules: List[Type[Rule]] = [get_rule(name) for name in names]
        if size is not None:
            self.check_size(size)

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

    def check_size(self, size: int) -> None:
        for rule in self.rules:
            rule.check_size(size)

    def is_valid(self, grid: Grid, cell: Cell, value: Value) -> bool:
        """True iff ``value`` occurs in no unit that contains ``cell``."""
        for rule in self.rules:
            for other in rule.unit_of(cell, grid.size):
                if grid.get(other) == value:
                    return False
        return True

    def candidates(self, grid: Grid, cell: Cell) -> List[Value]:
        """Every legal value for ``cell``, ascending."""
        return [v for v in range(1, grid.size + 1) if self.is_valid(grid, cell, v)]

    def find_conflicts(self, grid: Grid) -> Set[Cell]:
        """Cells whose nonzero value is repeated inside one of their units."""
        conflicts: Set[Cell] = set()
        for rule in self.rules:
            for unit in rule.units(grid.size):
                seen = {}
                for cell in unit:
                    value = grid.get(cell)
                    if value == BLANK:
                        continue
                    if value in seen:
                        conflicts.add(seen[value])
                        conflicts.add(cell)
                    else:
                        seen[value] = cell
        return conflicts
