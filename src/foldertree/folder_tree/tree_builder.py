"""Asynchronous folder tree construction.

The builder walks a directory recursively: every surviving entry of a directory
is turned into a node concurrently, each subdirectory recursing on its own, and the
directory's children are only sorted and attached once all of them have finished. Because
sibling subtrees share no state, the finished tree is the same whatever order the
concurrent reads complete in.

Only a failure to list the root directory aborts a build (RootAccessError). A directory
below the root that cannot be listed becomes a node with no children, and a
SubdirectoryReadError describing it is sent to the builder's error reporter.
"""

import asyncio
import locale
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from foldertree.config import TreeConfig
from foldertree.exceptions import RootAccessError, SubdirectoryReadError
from foldertree.folder_tree.tree_node import TreeNode
from foldertree.types import DirectoryEntry, PathType

# Receives one human-readable diagnostic line per recovered failure
ErrorReporter = Callable[[str], None]


def print_to_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _scan(directory: Path) -> List[DirectoryEntry]:
    with os.scandir(directory) as entries:
        return [DirectoryEntry(entry.name, entry.is_dir(follow_symlinks=False)) for entry in entries]


async def read_directory(directory: PathType) -> List[DirectoryEntry]:
    """List a directory's immediate entries together with their types.

    The blocking scan runs in the default thread pool so several directories can be read at
    once. The listing either succeeds completely or raises; partial listings are never
    returned.

    Args:
        directory: Directory to list.

    Returns:
        The entries in the order the operating system reports them.

    Raises:
        OSError: If the directory is missing, not a directory, or unreadable.
    """
    return await asyncio.to_thread(_scan, Path(directory))


@dataclass(frozen=True)
class BuildResult:
    """Outcome of building the children of one directory.

    Exactly one of the two states holds: the listing succeeded and ``children`` holds the
    sorted nodes, or it failed and ``error`` holds the cause with ``children`` empty.
    """

    children: Tuple[TreeNode, ...] = ()
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def collation_key(label: str) -> Tuple[str, str]:
    """Sort key comparing labels case-insensitively first, then by the locale's collation.

    Case folding keeps ``alpha`` ahead of ``Zeta`` even under the C locale, where plain
    code-point order would put every upper-case name first.
    """
    return locale.strxfrm(label.casefold()), locale.strxfrm(label)


def sort_nodes(nodes: Sequence[TreeNode]) -> Tuple[TreeNode, ...]:
    """Order nodes by label using collation_key."""
    return tuple(sorted(nodes, key=lambda node: collation_key(node.label)))


class TreeBuilder:
    """Builds a TreeNode hierarchy for one configuration.

    Attributes:
        config (TreeConfig): The immutable build configuration.
        reporter (ErrorReporter): Sink for diagnostics about unreadable subdirectories.
            Defaults to printing each line on standard error.
        errors (List[SubdirectoryReadError]): Diagnostics reported during builds, in the
            order they were reported.

    Example:
        >>> import asyncio
        >>> builder = TreeBuilder(TreeConfig("src", max_depth=1))  # doctest: +SKIP
        >>> root = asyncio.run(builder.build_tree())  # doctest: +SKIP
        >>> [child.label for child in root.children]  # doctest: +SKIP
        ['foldertree/']
    """

    def __init__(self, config: TreeConfig, reporter: Optional[ErrorReporter] = None) -> None:
        self.config = config
        self.reporter: ErrorReporter = reporter if reporter is not None else print_to_stderr
        self.errors: List[SubdirectoryReadError] = []
        self._rules = config.exclusion_rules()

    async def build_tree(self) -> TreeNode:
        """Build the complete tree for the configured root.

        Returns:
            A directory node labelled with the root's base name whose children are the
            filtered, sorted contents of the root.

        Raises:
            RootAccessError: If the root path does not exist, is not a directory, or cannot
                be listed.
        """
        root = Path(self.config.root_path).resolve()
        result = await self.build(root)
        if result.error is not None:
            raise RootAccessError(root, result.error) from result.error
        return TreeNode(root.name or str(root), is_dir=True, children=result.children)

    async def build(self, directory: PathType, depth: int = 0) -> BuildResult:
        """Build the sorted child nodes of a directory.

        Args:
            directory: Directory whose entries become the returned nodes.
            depth: Recursion level of those entries; the root's entries are depth 0.

        Returns:
            The sorted children, or an empty result carrying the listing error. Listing
            errors are returned rather than raised.
        """
        if self.config.max_depth is not None and depth > self.config.max_depth:
            return BuildResult()

        try:
            entries = await read_directory(directory)
        except OSError as e:
            return BuildResult(error=e)

        parent = Path(directory)
        nodes = await asyncio.gather(
            *(self._build_node(parent, entry, depth) for entry in entries if not self._rules.exclude(entry.name))
        )
        return BuildResult(children=sort_nodes(nodes))

    async def _build_node(self, parent: Path, entry: DirectoryEntry, depth: int) -> TreeNode:
        if not entry.is_dir:
            return TreeNode(entry.name)

        path = parent / entry.name
        result = await self.build(path, depth + 1)
        if result.error is not None:
            self._report(SubdirectoryReadError(entry.name, path, result.error))
        return TreeNode(entry.name, is_dir=True, children=result.children)

    def _report(self, error: SubdirectoryReadError) -> None:
        self.errors.append(error)
        self.reporter(str(error))
