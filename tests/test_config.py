"""Unit tests for TreeConfig."""

import dataclasses

import pytest

from foldertree.config import DEFAULT_EXCLUDED_NAMES, TreeConfig


def test_defaults():
    config = TreeConfig()

    assert config.root_path == "."
    assert config.max_depth is None
    assert config.exclude_pattern is None
    assert config.excluded_names == DEFAULT_EXCLUDED_NAMES == frozenset({".git", "node_modules", "__pycache__"})


def test_config_is_immutable():
    config = TreeConfig(max_depth=1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_depth = 2


def test_excluded_names_are_frozen():
    config = TreeConfig(excluded_names={"dist"})

    assert config.excluded_names == frozenset({"dist"})
    assert isinstance(config.excluded_names, frozenset)


@pytest.mark.parametrize("depth", [-1, -10, True])
def test_invalid_max_depth(depth):
    with pytest.raises(ValueError, match="max_depth must be a non-negative integer"):
        TreeConfig(max_depth=depth)


def test_zero_max_depth_is_valid():
    assert TreeConfig(max_depth=0).max_depth == 0


def test_invalid_exclude_pattern():
    with pytest.raises(ValueError, match="Invalid exclude pattern"):
        TreeConfig(exclude_pattern="[")


def test_exclusion_rules_without_pattern():
    rules = TreeConfig().exclusion_rules()

    assert rules.exclude("node_modules")
    assert not rules.exclude(".env")


def test_exclusion_rules_with_pattern():
    rules = TreeConfig(exclude_pattern=r"^\.").exclusion_rules()

    assert rules.exclude(".git")
    assert rules.exclude(".env")
    assert rules.exclude("__pycache__")
    assert not rules.exclude("src")
