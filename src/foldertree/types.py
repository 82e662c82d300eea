from os import PathLike
from typing import NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class DirectoryEntry(NamedTuple):
    """One item returned by listing a directory.

    Attributes:
        name: The bare entry name (no directory components).
        is_dir: True if the OS reports the entry itself as a directory. Symbolic links
            are never reported as directories, so they are not recursed into.
    """

    name: str
    is_dir: bool
