from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .model import BLANK, Cell, ConfigurationError, Rows, SeedRows, Value


@dataclass(frozen=True)
class Grid:
    """Immutable N x N value matrix; 0 marks a blank cell.

    Every write goes through :meth:`with_value`, which returns a fresh grid,
    so a grid handed out as a solution can never be changed by the search.
    """
    rows: Rows

    @classmethod
    def create(cls, size: int, seed: Optional[SeedRows] = None) -> "Grid":
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(f"size must be a positive integer, got {size!r}")
        if seed is None:
            return cls.blank(size)

        if not isinstance(seed, (list, tuple)):
            raise ConfigurationError(f"seed must be a list of rows, got {seed!r}")
        if len(seed) != size:
            raise ConfigurationError(f"seed has {len(seed)} rows, expected {size}")
        rows = []
        for r, row in enumerate(seed):
            if not isinstance(row, (list, tuple)):
                raise ConfigurationError(f"seed row {r} must be a list, got {row!r}")
            if len(row) != size:
                raise ConfigurationError(
                    f"seed row {r} has {len(row)} values, expected {size}"
                )
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigurationError(f"seed value at {r},{c} is not an integer: {value!r}")
                if not BLANK <= value <= size:
                    raise ConfigurationError(
                        f"seed value at {r},{c} is {value}, allowed range is 0..{size}"
                    )
            rows.append(tuple(row))
        return cls(tuple(rows))

    @classmethod
    def blank(cls, size: int) -> "Grid":
        return cls(tuple((BLANK,) * size for _ in range(size)))

    @property
    def size(self) -> int:
        return len(self.rows)

    def get(self, cell: Cell) -> Value:
        return self.rows[cell.row][cell.col]

    def with_value(self, cell: Cell, value: Value) -> "Grid":
        row = self.rows[cell.row]
        new_row = row[:cell.col] + (value,) + row[cell.col + 1:]
        return Grid(self.rows[:cell.row] + (new_row,) + self.rows[cell.row + 1:])

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                yield Cell(r, c)

    def is_complete(self) -> bool:
        return all(value != BLANK for row in self.rows for value in row)

    def blank_count(self) -> int:
        return sum(1 for row in self.rows for value in row if value == BLANK)

    def to_lists(self) -> List[List[Value]]:
        """Return a mutable copy of the values, detached from this grid."""
        return [list(row) for row in self.rows]
