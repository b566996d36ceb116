"""Tests for TraversalConfig and strategy parsing."""

import pytest

from junctiontree import ConfigurationError, TraversalConfig, TraversalStrategy, parse_strategy


def test_defaults_are_valid():
    config = TraversalConfig()

    assert config.strategy == TraversalStrategy.POST_ORDER
    assert config.max_depth is None
    assert config.check_mutations is True
    assert config.validate() == []


def test_presets():
    assert TraversalConfig.shallow().strategy == TraversalStrategy.CHILDREN
    full = TraversalConfig.full(max_depth=3)
    assert full.strategy == TraversalStrategy.POST_ORDER
    assert full.max_depth == 3
    assert full.validate() == []


@pytest.mark.parametrize("kwargs,message", [
    ({"max_depth": -1}, "max_depth cannot be negative"),
    ({"max_nodes": 0}, "max_nodes must be positive"),
    ({"strategy": TraversalStrategy.CHILDREN, "max_depth": 2},
     "max_depth is not supported by the children strategy"),
    ({"include_filter": "nope"}, "include_filter must be callable"),
    ({"strategy": "post_order"}, "strategy must be a TraversalStrategy, got 'post_order'"),
])
def test_validation_errors(kwargs, message):
    assert message in TraversalConfig(**kwargs).validate()


def test_multiple_errors_reported_together():
    errors = TraversalConfig(max_depth=-1, max_nodes=-5).validate()
    assert len(errors) == 2


def test_raise_for_errors():
    with pytest.raises(ConfigurationError, match="max_nodes must be positive"):
        TraversalConfig(max_nodes=0).raise_for_errors()

    TraversalConfig().raise_for_errors()


@pytest.mark.parametrize("name,expected", [
    ("children", TraversalStrategy.CHILDREN),
    ("SHALLOW", TraversalStrategy.CHILDREN),
    ("post_order", TraversalStrategy.POST_ORDER),
    ("PostOrder", TraversalStrategy.POST_ORDER),
    ("dfs_post", TraversalStrategy.POST_ORDER),
    ("recursive", TraversalStrategy.POST_ORDER),
    (TraversalStrategy.CHILDREN, TraversalStrategy.CHILDREN),
])
def test_parse_strategy(name, expected):
    assert parse_strategy(name) is expected


def test_parse_unknown_strategy():
    with pytest.raises(ConfigurationError, match="Unknown traversal strategy"):
        parse_strategy("bfs")


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
