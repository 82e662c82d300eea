"""Directory tree rendering utilities.

This package walks a directory concurrently and renders it as a textual tree,
with optional depth limiting and name-pattern exclusion.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("folder-tree")
except PackageNotFoundError:
    __version__ = "unknown"
