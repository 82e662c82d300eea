"""Folder tree representation with configurable exclusion rules.

This package provides the asynchronous tree builder, the node type it produces, and a
synchronous facade that builds, counts and renders folder trees.
"""

from .folder_tree import FolderTree
from .tree_builder import BuildResult, TreeBuilder, read_directory
from .tree_node import TreeNode

__all__ = ["BuildResult", "FolderTree", "TreeBuilder", "TreeNode", "read_directory"]
