"""Command-line argument parsing for folder-tree.

This module defines the command-line interface for folder-tree,
handling argument parsing and validation.
"""

import argparse
import re
from pathlib import Path

from foldertree import __version__


def non_negative_int(value: str) -> int:
    """Parse a maximum depth, rejecting negative numbers and non-integers."""
    try:
        depth = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r} is not an integer")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {depth} is negative")
    return depth


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with folder-tree's options.
    """
    description = """
    folder-tree: A CLI tool to generate folder trees.

    Prints the absolute path of the scanned directory followed by its contents drawn as a
    tree. Directories are read concurrently; a subdirectory that cannot be read is reported
    on stderr and shown without contents, while a root directory that cannot be read is a
    fatal error.

    The names .git, node_modules and __pycache__ are always skipped.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      folder-tree

      # Tree of another directory, two levels deep
      folder-tree -p /path/to/project -d 1

      # Skip dotfiles (the pattern is a regular expression matched against bare names)
      folder-tree -i '^\\.'

      # Skip logs and print a summary line
      folder-tree -i '\\.log$' -s
    """

    parser = argparse.ArgumentParser(
        prog="folder-tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"folder-tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=Path("."),
        help="The path to generate the tree from (default: current directory).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        default=None,
        metavar="N",
        help=(
            "Maximum depth of the tree. Depth 0 lists the directory's own entries without "
            "descending into subdirectories (default: unlimited)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        default=None,
        metavar="PATTERN",
        help="Ignore files and folders whose name matches this regular expression.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print the number of directories and files after the tree.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.ignore is not None:
        try:
            re.compile(args.ignore)
        except re.error as e:
            raise ValueError(f"invalid ignore pattern {args.ignore!r}: {e}") from e
