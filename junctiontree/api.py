"""High-level API for JunctionTree.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the iterator classes and TraversalConfig
for ease of use in simple cases.
"""

from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .core.iterators import DepthFirstIterator, ShallowIterator
from .core.node import Node


def traverse_tree(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.POST_ORDER,
    max_depth: Optional[int] = None,
    include_filter: Optional[Callable[[Node], bool]] = None,
    max_nodes: Optional[int] = None,
    check_mutations: bool = True,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Options are validated immediately, before the first node is produced.

    Args:
        root: Node to start from
        strategy: Which walk to run (children, post_order or an alias)
        max_depth: Deepest level to reach in a post-order walk
        include_filter: Only emit nodes for which this returns True
        max_nodes: Stop after this many nodes have been emitted
        check_mutations: Fail fast if the tree is mutated mid-walk

    Returns:
        Iterator over the selected nodes

    Raises:
        ConfigurationError: If the options are inconsistent

    Example:
        >>> for node in traverse_tree(root, strategy="children"):
        ...     print(node.label)
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        max_depth=max_depth,
        include_filter=include_filter,
        max_nodes=max_nodes,
        check_mutations=check_mutations,
    )
    return run_traversal(root, config)


def run_traversal(root: Node, config: TraversalConfig) -> Iterator[Node]:
    """Execute a traversal described by ``config``.

    Args:
        root: Node to start from
        config: Validated or unvalidated configuration

    Returns:
        Iterator over the selected nodes

    Raises:
        ConfigurationError: If ``config`` fails validation
    """
    config.raise_for_errors()

    if config.strategy == TraversalStrategy.CHILDREN:
        source: Iterator[Node] = ShallowIterator(root, check_mutations=config.check_mutations)
    else:
        source = DepthFirstIterator(root, max_depth=config.max_depth,
                                    check_mutations=config.check_mutations)

    return _select(source, config)


def _select(source: Iterator[Node], config: TraversalConfig) -> Iterator[Node]:
    """Apply the emission filter and node limit to a raw walk."""
    emitted = 0
    for node in source:
        if config.include_filter is not None and not config.include_filter(node):
            continue
        yield node
        emitted += 1
        if config.max_nodes is not None and emitted >= config.max_nodes:
            return


def traverse_with_depth(
    root: Node,
    max_depth: Optional[int] = None,
    check_mutations: bool = True,
) -> Iterator[Tuple[Node, int]]:
    """Post-order walk yielding ``(node, depth)`` pairs, root at depth 0.

    Raises:
        ConfigurationError: If max_depth is negative
    """
    walker = DepthFirstIterator(root, max_depth=max_depth,
                                check_mutations=check_mutations)
    return walker.iter_with_depth()


def count_nodes(root: Node, **kwargs) -> int:
    """Count nodes produced by a traversal.

    Args:
        root: Node to start from
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes emitted
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Node, predicate: Callable[[Node], bool], **kwargs) -> Iterator[Node]:
    """Find nodes that match a predicate, in traversal order.

    An ``include_filter`` passed in ``kwargs`` still applies; a node is
    emitted only when both it and ``predicate`` accept it.

    Example:
        >>> deep = list(find_nodes(root, lambda n: n.label.startswith("a1b1")))
    """
    include_filter = kwargs.get('include_filter')
    if include_filter is None:
        kwargs['include_filter'] = predicate
    else:
        kwargs['include_filter'] = lambda node: include_filter(node) and predicate(node)
    return traverse_tree(root, **kwargs)


def collect_labels(root: Node, **kwargs) -> List[str]:
    """Labels of the nodes a traversal produces, in order."""
    return [node.label for node in traverse_tree(root, **kwargs)]


def get_leaf_nodes(root: Node) -> List[Node]:
    """All leaves of the subtree, left to right."""
    return list(find_nodes(root, lambda n: n.is_leaf()))


def get_junction_nodes(root: Node) -> List[Node]:
    """All junctions of the subtree, in post-order."""
    return list(find_nodes(root, lambda n: n.has_children()))


def get_tree_stats(root: Node) -> Dict[str, int]:
    """Summarize the shape of the subtree rooted at ``root``.

    Returns:
        Dictionary containing:
        - total_nodes: Number of nodes, root included
        - leaf_count: Nodes without children
        - junction_count: Nodes with children
        - max_depth: Depth of the deepest node (root = 0)
        - max_branching: Largest number of direct children of any node
    """
    stats = {
        'total_nodes': 0,
        'leaf_count': 0,
        'junction_count': 0,
        'max_depth': 0,
        'max_branching': 0,
    }

    for node, depth in traverse_with_depth(root):
        stats['total_nodes'] += 1
        if node.has_children():
            stats['junction_count'] += 1
            stats['max_branching'] = max(stats['max_branching'], node.child_count())
        else:
            stats['leaf_count'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)

    return stats
