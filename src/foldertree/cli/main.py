"""Command-line interface for folder-tree.

This module provides the command-line entry point: it parses arguments, builds the tree for
the requested directory and prints it, reporting unreadable subdirectories on stderr as it
goes.

Exit Codes:
    0: Successful completion (including runs where some subdirectories were unreadable)
    1: The root directory could not be read
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on stdout

Example:
    # Basic usage
    $ folder-tree -p /path/to/dir

    # Two levels deep, skipping dotfiles
    $ folder-tree -p /path/to/dir -d 1 -i '^\\.'
"""

import locale
import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from foldertree.cli.argparser import create_parser, validate_args
from foldertree.exceptions import RootAccessError
from foldertree.folder_tree.folder_tree import FolderTree
from foldertree.folder_tree.tree_node import TreeNode

DIRECTORY_STYLE = "bold #DAA520"
ROOT_STYLE = "green"
ERROR_STYLE = "red"


def printable(text: str) -> str:
    """Make text safe for console output, replacing undecodable filename bytes with U+FFFD.

    Names that are not valid UTF-8 reach Python as lone surrogates (``surrogateescape``),
    which cannot be encoded for output.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def markup(text: str) -> str:
    return escape(printable(text))


def styled_label(node: TreeNode) -> str:
    """Return a node's label as console markup, highlighting directory names."""
    if node.is_dir:
        return f"[{DIRECTORY_STYLE}]{markup(node.name)}[/]/"
    return markup(node.label)


def format_summary(directories: int, files: int) -> str:
    """Format the directory and file counts the way ``tree`` does."""
    return (
        f"{directories} {'directory' if directories == 1 else 'directories'}, "
        f"{files} {'file' if files == 1 else 'files'}"
    )


def make_console(stderr: bool = False, no_color: bool = False) -> Console:
    return Console(stderr=stderr, no_color=no_color, highlight=False, emoji=False)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the folder-tree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: The root directory could not be read
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on stdout
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass  # Unsupported locale settings leave the C collation order in place

    console = make_console(no_color=args.no_color)
    err_console = make_console(stderr=True, no_color=args.no_color)

    def report(message: str) -> None:
        err_console.print(f"[{ERROR_STYLE}]{markup(message)}[/]", soft_wrap=True)

    tree = FolderTree(args.path, max_depth=args.depth, exclude_pattern=args.ignore, reporter=report)

    try:
        tree.get_tree()
        console.print(f"[{ROOT_STYLE}]Project Root Directory: {markup(str(tree.root_path))}[/]", soft_wrap=True)
        for line in tree.stream_tree_representation(styled_label):
            console.print(line, soft_wrap=True)
        if args.summary:
            console.print()
            console.print(format_summary(tree.get_directory_count(), tree.get_file_count()), soft_wrap=True)
        sys.stdout.flush()
    except RootAccessError as e:
        err_console.print(f"[{ERROR_STYLE}]Error: {markup(str(e))}[/]", soft_wrap=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        # Keep the interpreter's final flush from raising again on the closed pipe
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)


if __name__ == "__main__":
    main()
