from ..core.model import Cell
from . import Rule, register_rule


@register_rule
class RowRule(Rule):
    name = "row"

    @staticmethod
    def unit_of(cell, size):
        return tuple(Cell(cell.row, c) for c in range(size))

    @classmethod
    def units(cls, size):
        return [cls.unit_of(Cell(r, 0), size) for r in range(size)]
