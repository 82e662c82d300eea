"""Regular-expression exclusion rules."""

import re
from typing import List, Optional, Pattern

from .base_rules import BaseExclusionRules


class PatternExclusionRules(BaseExclusionRules):
    """Exclude entries whose name matches a regular expression.

    Patterns are compiled once, when they are added, and tested with ``re.search`` against
    the bare entry name. A pattern therefore matches anywhere in the name unless it is
    anchored: ``log`` excludes ``changelog.md``, while ``^\\.`` only excludes dotfiles.

    Multiple patterns may be added; a name is excluded if any of them matches.

    Example:
        >>> rules = PatternExclusionRules(r"^\\.")
        >>> rules.exclude(".env")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule(r"\\.pyc$")
        >>> rules.exclude("main.pyc")
        True
    """

    def __init__(self, pattern: Optional[str] = None) -> None:
        """Initialize pattern rules.

        Args:
            pattern: Optional initial regular expression.

        Raises:
            ValueError: If the pattern is not a valid regular expression.
        """
        self._patterns: List[Pattern[str]] = []
        if pattern is not None:
            self.add_rule(pattern)

    @property
    def patterns(self) -> List[str]:
        return [p.pattern for p in self._patterns]

    def exclude(self, name: str) -> bool:
        return any(p.search(name) for p in self._patterns)

    def add_rule(self, rule: str) -> None:
        """Compile and add a regular expression.

        Raises:
            ValueError: If the rule is not a valid regular expression.
        """
        try:
            self._patterns.append(re.compile(rule))
        except re.error as e:
            raise ValueError(f"Invalid exclude pattern {rule!r}: {e}") from e

    def has_rules(self) -> bool:
        return bool(self._patterns)
