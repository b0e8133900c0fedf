"""Sudoku sub-grid rule.

Not part of the default rule set: enabling it turns Latin-square enumeration
into fixed-size Sudoku enumeration, so it must be requested explicitly.
"""

import math

from ..core.model import Cell, ConfigurationError
from . import Rule, register_rule


def box_side(size: int) -> int:
    side = math.isqrt(size)
    if side * side != size:
        raise ConfigurationError(f"box rule needs a perfect-square size, got {size}")
    return side


@register_rule
class BoxRule(Rule):
    name = "box"

    @staticmethod
    def check_size(size):
        box_side(size)

    @staticmethod
    def unit_of(cell, size):
        side = box_side(size)
        top = cell.row // side * side
        left = cell.col // side * side
        return tuple(
            Cell(r, c)
            for r in range(top, top + side)
            for c in range(left, left + side)
        )

    @classmethod
    def units(cls, size):
        side = box_side(size)
        return [
            cls.unit_of(Cell(r, c), size)
            for r in range(0, size, side)
            for c in range(0, size, side)
        ]
