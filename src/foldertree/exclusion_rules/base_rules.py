from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Rules are always evaluated against the bare name of a directory entry, never against
    its full or relative path, so a rule matching ``build`` excludes every entry named
    ``build`` at any level of the tree. Concrete implementations decide how names are
    matched (exact names, regular expressions, combinations of both).

    Example:
        >>> from foldertree.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules([".git"])
        >>> rules.add_rule("dist")
        >>> rules.exclude("dist")
        True
        >>> rules.exclude("src")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The bare entry name to check, e.g. ``"node_modules"``.

        Returns:
            bool: True if the entry should be skipped, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that don't support individual rule addition (e.g., composite rules) use
        this default implementation.

        Args:
            rule (str): The exclusion rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """
        Check whether any rule is configured.

        Returns:
            bool: True if this object can exclude anything at all.
        """
        return True
