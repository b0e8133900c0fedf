from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.grid import Grid
from ..core.model import ConfigurationError


@dataclass
class Seed:
    size: int
    grid: Grid
    rules: Optional[List[str]] = None
    limit: Optional[int] = None
    options: Dict[str, Any] = field(default_factory=dict)


def _parse_row(row: Any, index: int) -> List[int]:
    if isinstance(row, str):
        # compact form: "12.4", "." or "0" for a blank
        return [0 if ch in ".0" else _digit(ch, index) for ch in row.replace(" ", "")]
    if not isinstance(row, list):
        raise ConfigurationError(f"grid row {index} must be a list or string, got {row!r}")
    return row


def _digit(ch: str, index: int) -> int:
    if not ch.isdigit():
        raise ConfigurationError(f"grid row {index} has invalid character {ch!r}")
    return int(ch)


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return value


def load_seed(path: str | Path) -> Seed:
    """Load a YAML seed description into a Seed object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"cannot read seed file {path}: {exc.strerror}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"malformed seed file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"seed file {path} must contain a mapping")

    raw_rows = data.get("grid")
    rows = None
    if raw_rows is not None:
        if not isinstance(raw_rows, list):
            raise ConfigurationError("grid must be a list of rows")
        rows = [_parse_row(row, i) for i, row in enumerate(raw_rows)]

    if "size" in data:
        size = _positive_int(data["size"], "size")
    elif rows:
        size = len(rows)
    else:
        raise ConfigurationError(f"seed file {path} needs a size or a grid")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ConfigurationError("options must be a mapping")
    rules = options.get("rules")
    if rules is not None:
        if isinstance(rules, str):
            rules = [rules]
        if not isinstance(rules, list) or not all(isinstance(r, str) for r in rules):
            raise ConfigurationError(f"options.rules must be a rule name or a list of names, got {rules!r}")
    limit = options.get("limit")
    if limit is not None:
        limit = _positive_int(limit, "limit")

    return Seed(
        size=size,
        grid=Grid.create(size, rows),
        rules=rules,
        limit=limit,
        options=options,
    )
