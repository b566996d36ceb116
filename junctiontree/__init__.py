"""JunctionTree - ordered trees with a non-recursive post-order walk.

A Node owns an ordered list of children. Two walks are available:

    node.children_iter()    # direct children, in insertion order
    node.recursive_iter()   # whole subtree, leaves first, junctions
                            # after all of their descendants

The full walk keeps its own stack, so it works on trees far deeper than
Python's recursion limit.
"""

import logging

__version__ = "0.1.0"

from .core.node import Node
from .core.iterators import ShallowIterator, DepthFirstIterator
from .errors import (
    TreeError,
    OwnershipError,
    CycleError,
    TreeMutatedError,
    ConfigurationError,
)
from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .api import (
    traverse_tree,
    run_traversal,
    traverse_with_depth,
    count_nodes,
    find_nodes,
    collect_labels,
    get_leaf_nodes,
    get_junction_nodes,
    get_tree_stats,
)
from .builders import build_tree, build_chain

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Node",
    "ShallowIterator",
    "DepthFirstIterator",
    # Errors
    "TreeError",
    "OwnershipError",
    "CycleError",
    "TreeMutatedError",
    "ConfigurationError",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "parse_strategy",
    # API
    "traverse_tree",
    "run_traversal",
    "traverse_with_depth",
    "count_nodes",
    "find_nodes",
    "collect_labels",
    "get_leaf_nodes",
    "get_junction_nodes",
    "get_tree_stats",
    # Builders
    "build_tree",
    "build_chain",
]
