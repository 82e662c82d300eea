from pathlib import Path
from typing import Optional

from foldertree.types import PathType


class RootAccessError(Exception):
    """
    Exception raised when the directory being rendered cannot be listed.

    This is the only failure that aborts a build. It is raised when the root path does not
    exist, is not a directory, or cannot be read. Failures below the root are reported as
    SubdirectoryReadError diagnostics instead and never abort the walk.

    Attributes:
        path (Path): The root path that could not be listed.
        cause (Optional[OSError]): The underlying operating system error, if any.
        message (str): Human-readable description of the failure.

    Example:
        >>> error = RootAccessError("/missing", FileNotFoundError(2, "No such file or directory"))
        >>> str(error)
        'Cannot read root directory /missing: No such file or directory'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else str(cause or "unknown error")
        self.message = f"Cannot read root directory {self.path}: {reason}"
        super().__init__(self.message)


class SubdirectoryReadError(Exception):
    """
    Diagnostic for a nested directory that could not be listed.

    Instances are created by the tree builder and handed to its error reporter; they are
    never raised out of a build. The affected directory still appears in the tree, with no
    children.

    Attributes:
        name (str): Bare name of the subdirectory.
        path (Path): Full path of the subdirectory.
        cause (OSError): The error raised while listing it.

    Example:
        >>> error = SubdirectoryReadError("secret", "/data/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Error reading secret: [Errno 13] Permission denied'
    """

    def __init__(self, name: str, path: PathType, cause: OSError) -> None:
        self.name = name
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error reading {name}: {cause}")
