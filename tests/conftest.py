"""Shared fixtures for JunctionTree tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from junctiontree import Node


EXPECTED_POST_ORDER = [
    "a0b0", "a0b1", "a0",
    "a1b0", "a1b1c0d0", "a1b1c0", "a1b1", "a1",
    "root",
]


def create_example_tree():
    """Create the reference tree, returning ``(root, nodes_by_label)``.

    Structure:
    root
    ├── a0
    │   ├── a0b0
    │   └── a0b1
    └── a1
        ├── a1b0
        └── a1b1
            └── a1b1c0
                └── a1b1c0d0
    """
    nodes = {}

    def make(label, parent=None):
        node = Node(label)
        if parent is not None:
            parent.add(node)
        nodes[label] = node
        return node

    root = make("root")
    a0 = make("a0", root)
    make("a0b0", a0)
    make("a0b1", a0)
    a1 = make("a1", root)
    make("a1b0", a1)
    a1b1 = make("a1b1", a1)
    a1b1c0 = make("a1b1c0", a1b1)
    make("a1b1c0d0", a1b1c0)

    return root, nodes


@pytest.fixture
def example_tree():
    """Root of the reference tree."""
    root, _ = create_example_tree()
    return root


@pytest.fixture
def example_nodes():
    """Every node of the reference tree, keyed by label."""
    _, nodes = create_example_tree()
    return nodes


@pytest.fixture
def labels():
    """Turn an iterable of nodes into a list of labels."""
    def _labels(nodes):
        return [node.label for node in nodes]
    return _labels
