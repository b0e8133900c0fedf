"""Backtracking enumeration of completed grids."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .constraints import ConstraintChecker
from .grid import Grid
from .model import Cell, Value
from .observers import SearchObserver
from .selector import next_blank

log = logging.getLogger(__name__)

_SILENT = SearchObserver()


def solve(
    grid: Grid,
    checker: Optional[ConstraintChecker] = None,
    observer: Optional[SearchObserver] = None,
) -> Iterator[Grid]:
    """Lazily yield every completion of ``grid``, depth-first.

    Blanks are filled in row-major order and candidates are tried in
    ascending order, so the sequence is the same on every run. A seed that
    already repeats a value inside a unit yields nothing. Size errors are
    raised here, before any iteration; closing the returned generator
    abandons the rest of the search.
    """
    checker = checker or ConstraintChecker()
    observer = observer or _SILENT
    checker.check_size(grid.size)

    conflicts = checker.find_conflicts(grid)
    if conflicts:
        log.debug("seed conflicts at %s; nothing to enumerate",
                  ", ".join(str(c) for c in sorted(conflicts)))
        return _exhausted()

    log.debug("searching %dx%d grid with %d blank(s), rules=%s",
              grid.size, grid.size, grid.blank_count(), checker.rule_names)
    return _search(grid, checker, observer)


def _exhausted() -> Iterator[Grid]:
    return
    yield


def _search(grid: Grid, checker: ConstraintChecker, observer: SearchObserver) -> Iterator[Grid]:
    # Each frame is (grid, cell, remaining candidates), one per filled blank.
    stack: List[Tuple[Grid, Cell, Iterator[Value]]] = []
    branch: Optional[Grid] = grid
    while branch is not None or stack:
        if branch is not None:
            cell = next_blank(branch)
            if cell is None:
                observer.on_solution(branch)
                yield branch
            else:
                observer.on_enter_branch(branch, cell)
                candidates = checker.candidates(branch, cell)
                if candidates:
                    stack.append((branch, cell, iter(candidates)))
                else:
                    observer.on_dead_end(branch, cell)
            branch = None
            continue

        parent, cell, pending = stack[-1]
        value = next(pending, None)
        if value is None:
            stack.pop()
        else:
            branch = parent.with_value(cell, value)
            observer.on_candidate(cell, value)


def count_solutions(grid: Grid, checker: Optional[ConstraintChecker] = None) -> int:
    return sum(1 for _ in solve(grid, checker))


def first_solution(grid: Grid, checker: Optional[ConstraintChecker] = None) -> Optional[Grid]:
    return next(solve(grid, checker), None)
