"""Plain-text rendering of grids."""

from __future__ import annotations

from ..core.grid import Grid


def format_grid(grid: Grid, headline: str | None = None, indent: int = 0) -> str:
    prefix = " " * indent
    width = len(str(grid.size))
    lines = [prefix + headline] if headline else []
    for row in grid.rows:
        lines.append(prefix + " ".join(str(v).rjust(width) for v in row))
    return "\n".join(lines)
