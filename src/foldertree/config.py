"""Build configuration for folder trees."""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.name_rules import NameExclusionRules
from foldertree.exclusion_rules.pattern_rules import PatternExclusionRules
from foldertree.types import PathType

# Always skipped: version-control metadata, dependency caches and bytecode caches
DEFAULT_EXCLUDED_NAMES: FrozenSet[str] = frozenset({".git", "node_modules", "__pycache__"})


@dataclass(frozen=True)
class TreeConfig:
    """Immutable settings for a single tree build.

    Attributes:
        root_path: Directory to render.
        max_depth: Deepest recursion level to read, or None for no limit. The root's
            immediate children are depth 0.
        exclude_pattern: Regular expression tested (with ``re.search``) against bare entry
            names. Matching entries are skipped entirely.
        excluded_names: Names that are always skipped, regardless of exclude_pattern.

    Raises:
        ValueError: If max_depth is negative or exclude_pattern is not a valid regular
            expression.

    Example:
        >>> config = TreeConfig(".", max_depth=2, exclude_pattern=r"^\\.")
        >>> config.exclusion_rules().exclude(".env")
        True
        >>> TreeConfig(".", max_depth=-1)
        Traceback (most recent call last):
            ...
        ValueError: max_depth must be a non-negative integer, got -1
    """

    root_path: PathType = "."
    max_depth: Optional[int] = None
    exclude_pattern: Optional[str] = None
    excluded_names: FrozenSet[str] = field(default=DEFAULT_EXCLUDED_NAMES)

    def __post_init__(self) -> None:
        if self.max_depth is not None and (isinstance(self.max_depth, bool) or self.max_depth < 0):
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth}")
        if self.exclude_pattern is not None:
            try:
                re.compile(self.exclude_pattern)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern {self.exclude_pattern!r}: {e}") from e
        object.__setattr__(self, "excluded_names", frozenset(self.excluded_names))

    def exclusion_rules(self) -> BaseExclusionRules:
        """Build the exclusion rules for this configuration.

        Built-in names are checked before the exclude pattern, and the first rule that
        matches decides, so an entry excluded by both is only skipped once.

        Returns:
            A composite of the built-in name rules and, if configured, the pattern rules.
        """
        rules: List[BaseExclusionRules] = [NameExclusionRules(self.excluded_names)]
        if self.exclude_pattern is not None:
            rules.append(PatternExclusionRules(self.exclude_pattern))
        return CompositeExclusionRules(rules)
