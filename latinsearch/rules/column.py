from ..core.model import Cell
from . import Rule, register_rule


@register_rule
class ColumnRule(Rule):
    name = "column"

    @staticmethod
    def unit_of(cell, size):
        return tuple(Cell(r, cell.col) for r in range(size))

    @classmethod
    def units(cls, size):
        return [cls.unit_of(Cell(0, c), size) for c in range(size)]
