"""Test configuration and fixtures for folder-tree."""

from pathlib import Path

import pytest

from foldertree.folder_tree import tree_builder


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the directory layout root/{b.txt, a.txt, z/m.txt}."""
    root = tmp_path.resolve() / "root"
    root.mkdir()
    (root / "b.txt").write_text("b")
    (root / "a.txt").write_text("a")
    (root / "z").mkdir()
    (root / "z" / "m.txt").write_text("m")
    return root


@pytest.fixture
def scanned(monkeypatch):
    """Record every directory the builder lists."""
    seen = []
    real_scan = tree_builder._scan

    def recording_scan(directory: Path):
        seen.append(directory)
        return real_scan(directory)

    monkeypatch.setattr(tree_builder, "_scan", recording_scan)
    return seen


@pytest.fixture
def denied(monkeypatch):
    """Simulate permission denial for the directories added to the returned set.

    Permission bits are not enforced for root, so listing failures are injected at the
    scan instead of using chmod.
    """
    paths = set()
    real_scan = tree_builder._scan

    def denying_scan(directory: Path):
        if directory in paths:
            raise PermissionError(13, "Permission denied", str(directory))
        return real_scan(directory)

    monkeypatch.setattr(tree_builder, "_scan", denying_scan)
    return paths
