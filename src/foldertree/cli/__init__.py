"""Command-line interface for folder-tree."""
