"""Folder tree facade with lazy building, counting and text rendering.

This module provides the FolderTree class, a synchronous front end to the asynchronous
TreeBuilder. It builds the tree on first access, keeps it until refreshed, and renders
it in the style of the Unix ``tree`` command.
"""

import asyncio
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from anytree import ContStyle, PreOrderIter, RenderTree

from foldertree.config import DEFAULT_EXCLUDED_NAMES, TreeConfig
from foldertree.exceptions import SubdirectoryReadError
from foldertree.folder_tree.tree_builder import ErrorReporter, TreeBuilder
from foldertree.folder_tree.tree_node import TreeNode
from foldertree.types import PathType

# Produces the printable text for one node
LabelStyle = Callable[[TreeNode], str]


def plain_label(node: TreeNode) -> str:
    return node.label


class FolderTree:
    """A tree representation of a directory structure with depth and exclusion limits.

    The tree is built lazily on first access and can be refreshed to reflect filesystem
    changes. Building runs the asynchronous TreeBuilder to completion on a fresh event
    loop, so this class must not be used from inside a running event loop; use TreeBuilder
    directly there.

    Error Handling:
        A root that cannot be listed raises RootAccessError from every accessor that
        triggers a build. Subdirectories that cannot be listed appear with no children;
        their diagnostics go to ``reporter`` and are kept in ``errors``.

    Attributes:
        config (TreeConfig): Settings used for every build.
        reporter (Optional[ErrorReporter]): Sink for subdirectory diagnostics. None means
            standard error.

    Example:
        >>> tree = FolderTree("src", max_depth=0)  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        └── foldertree/
    """

    def __init__(
        self,
        root_path: PathType = ".",
        max_depth: Optional[int] = None,
        exclude_pattern: Optional[str] = None,
        excluded_names: Iterable[str] = DEFAULT_EXCLUDED_NAMES,
        reporter: Optional[ErrorReporter] = None,
    ) -> None:
        """Initialize a FolderTree.

        Args:
            root_path: Directory to represent. Can be any path-like object.
            max_depth: Deepest level to read; None for unlimited.
            exclude_pattern: Regular expression for entry names to skip.
            excluded_names: Names that are always skipped.
            reporter: Callable receiving one line per unreadable subdirectory.

        Raises:
            ValueError: If max_depth is negative or exclude_pattern is invalid.
        """
        self.config = TreeConfig(
            root_path=root_path,
            max_depth=max_depth,
            exclude_pattern=exclude_pattern,
            excluded_names=frozenset(excluded_names),
        )
        self.reporter = reporter
        self._tree: Optional[TreeNode] = None
        self._errors: List[SubdirectoryReadError] = []

    @property
    def root_path(self) -> Path:
        """The absolute, resolved root directory."""
        return Path(self.config.root_path).resolve()

    @property
    def errors(self) -> List[SubdirectoryReadError]:
        """Subdirectory diagnostics from the most recent build."""
        return list(self._errors)

    def get_tree(self) -> TreeNode:
        """Get the root node of the folder tree, building it if needed.

        Raises:
            RootAccessError: If the root directory cannot be listed.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> TreeNode:
        builder = TreeBuilder(self.config, self.reporter)
        try:
            return asyncio.run(builder.build_tree())
        finally:
            self._errors = list(builder.errors)

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._tree = None
        self._errors = []
        self._tree = self._build_tree()

    def get_file_count(self) -> int:
        """Get the number of files (non-directory entries) in the tree."""
        return sum(1 for node in PreOrderIter(self.get_tree()) if not node.is_dir)

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        return sum(1 for node in PreOrderIter(self.get_tree()) if node.is_dir) - 1

    def stream_tree_representation(self, style: Optional[LabelStyle] = None) -> Iterator[str]:
        """Generate the tree one line at a time.

        Args:
            style: Callable producing each node's printable text. Defaults to the node's
                label, which marks directories with a trailing ``/``.

        Yields:
            Lines of the tree, starting with the root and including the connecting lines.

        Raises:
            RootAccessError: If the root directory cannot be listed.

        Example:
            >>> tree = FolderTree("project")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            project/
            ├── a.txt
            ├── b.txt
            └── z/
                └── m.txt
        """
        label = style or plain_label
        for pre, _, node in RenderTree(self.get_tree(), style=ContStyle()):
            yield f"{pre}{label(node)}"

    def get_tree_representation(self, style: Optional[LabelStyle] = None) -> str:
        """Get the complete tree as a single string."""
        return "\n".join(self.stream_tree_representation(style))
