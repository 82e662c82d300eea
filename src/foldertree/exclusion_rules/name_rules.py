"""Exact-name exclusion rules."""

from typing import FrozenSet, Iterable, Set

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclude entries whose name is exactly one of a fixed set of names.

    Used for the built-in exclusions (``.git``, ``node_modules``, ``__pycache__``) that are
    applied regardless of user configuration.

    Example:
        >>> rules = NameExclusionRules(["node_modules", "__pycache__"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("node_modules.txt")
        False
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: Set[str] = set(names)

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(self._names)

    def exclude(self, name: str) -> bool:
        return name in self._names

    def add_rule(self, rule: str) -> None:
        """Add another name to exclude."""
        self._names.add(rule)

    def has_rules(self) -> bool:
        return bool(self._names)
