"""Command-line interface."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from pathlib import Path

from ..core.constraints import ConstraintChecker
from ..core.csp import solve
from ..core.grid import Grid
from ..core.model import ConfigurationError
from ..core.observers import TraceObserver
from . import parser
from .render import format_grid

log = logging.getLogger(__name__)

DEFAULT_SIZE = 4


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="latinsearch",
        description="Enumerate every completion of a partially filled Latin square.",
    )
    ap.add_argument("seed", nargs="?", help="Path to seed grid YAML")
    ap.add_argument("-n", "--size", type=int, help=f"Grid size (default {DEFAULT_SIZE} without a seed file)")
    ap.add_argument("--box", action="store_true", help="Also require distinct values in each sub-grid box")
    ap.add_argument("--limit", type=int, help="Stop after this many solutions")
    ap.add_argument("--count", action="store_true", help="Only print the number of solutions")
    ap.add_argument("--trace", action="store_true", help="Log every search step (implies --verbose)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or args.trace else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        grid, rules, limit = _configure(args)
        checker = ConstraintChecker(rules, size=grid.size)
        observer = TraceObserver(seed=grid) if args.trace else None
        solutions = solve(grid, checker, observer)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if limit is not None:
        solutions = itertools.islice(solutions, limit)

    found = 0
    for solution in solutions:
        found += 1
        if not args.count:
            print(format_grid(solution, "Solution:"))
            print()
    if args.count:
        print(found)
    else:
        print(f"{found} solution(s) found.")
    log.debug("done: %d solution(s), limit=%s", found, limit)
    return 0


def _configure(args):
    if args.seed is not None:
        seed = parser.load_seed(Path(args.seed))
        log.info("Loaded %dx%d seed with %d blank(s) from %s",
                 seed.size, seed.size, seed.grid.blank_count(), args.seed)
        if args.size is not None and args.size != seed.size:
            raise ConfigurationError(f"--size {args.size} does not match seed size {seed.size}")
        grid, rules, limit = seed.grid, seed.rules, seed.limit
    else:
        grid = Grid.create(DEFAULT_SIZE if args.size is None else args.size)
        rules, limit = None, None

    if args.box:
        rules = list(rules or []) + ["box"]
    if args.limit is not None:
        if args.limit <= 0:
            raise ConfigurationError(f"--limit must be a positive integer, got {args.limit}")
        limit = args.limit
    return grid, rules, limit


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
