"""Node representation for entries in the folder tree."""

from typing import Any, Iterable, Optional

from anytree import Node

# Marker appended to directory labels
DIRECTORY_MARKER = "/"


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the folder tree.

    Extends anytree.Node with a flag recording whether the entry is a directory, which the
    renderer needs to decorate directory names. Nodes are built bottom-up: the tree builder
    passes a node's already-sorted children at construction and does not modify the node
    afterwards.

    Attributes:
        name (str): The bare name of the file or directory.
        is_dir (bool): True if this node represents a directory.
        label (str): Display name; directories carry a trailing ``/``.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> leaf = TreeNode("m.txt")
        >>> folder = TreeNode("z", is_dir=True, children=[leaf])
        >>> folder.label, leaf.label
        ('z/', 'm.txt')
        >>> leaf.parent is folder
        True
    """

    def __init__(
        self,
        name: str,
        is_dir: bool = False,
        children: Optional[Iterable["TreeNode"]] = None,
        parent: Optional["TreeNode"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The name of the file or directory.
            is_dir: Whether this node represents a directory. Defaults to False.
            children: Child nodes, in display order. Defaults to none.
            parent: The parent node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent=parent, children=list(children) if children else None, **kwargs)
        self.is_dir = is_dir

    @property
    def label(self) -> str:
        return f"{self.name}{DIRECTORY_MARKER}" if self.is_dir else str(self.name)
