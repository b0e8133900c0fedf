from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


BLANK = 0


class ConfigurationError(ValueError):
    """Raised for invalid sizes, seed grids or rule selections."""


@dataclass(frozen=True, order=True)
class Cell:
    """A zero-indexed (row, column) coordinate."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


Value = int
Row = Tuple[Value, ...]
Rows = Tuple[Row, ...]
SeedRows = Sequence[Sequence[Value]]
