"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A name is excluded if ANY of the constituent rules excludes it. Rules are evaluated in
    the order provided and evaluation stops at the first match, so a name matched by both
    the built-in names and a user pattern is decided once by whichever comes first.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from foldertree.exclusion_rules.name_rules import NameExclusionRules
        >>> from foldertree.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> composite = CompositeExclusionRules([NameExclusionRules([".git"]), PatternExclusionRules(r"^\\.")])
        >>> composite.exclude(".git"), composite.exclude(".env"), composite.exclude("src")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str) -> bool:
        return any(rule.exclude(name) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)
