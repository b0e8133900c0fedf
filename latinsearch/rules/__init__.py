"""Rule registry and base classes."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple, Type

from ..core.model import Cell, ConfigurationError

Unit = Tuple[Cell, ...]


class Rule:
    """Base uniqueness rule: values inside one unit must be pairwise distinct."""
    name: str = "rule"

    @staticmethod
    def check_size(size: int) -> None:
        """Raise ConfigurationError if the rule cannot apply to ``size``."""

    @staticmethod
    def unit_of(cell: Cell, size: int) -> Unit:
        raise NotImplementedError

    @classmethod
    def units(cls, size: int) -> Iterable[Unit]:
        raise NotImplementedError


RULE_REGISTRY: Dict[str, Type[Rule]] = {}

DEFAULT_RULES = ("row", "column")


def register_rule(cls: Type[Rule]) -> Type[Rule]:
    RULE_REGISTRY[cls.name] = cls
    return cls


def get_rule(name: str) -> Type[Rule]:
    try:
        return RULE_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(RULE_REGISTRY))
        raise ConfigurationError(f"unknown rule {name!r} (known: {known})") from None


from . import box, column, row  # noqa: E402,F401
