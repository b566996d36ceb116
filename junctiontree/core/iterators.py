"""Iterators over JunctionTree nodes.

ShallowIterator walks the direct children of one node. DepthFirstIterator
composes ShallowIterators on an explicit stack to walk a whole subtree in
post-order without touching the interpreter's call stack, so trees of any
depth can be traversed.
"""

import copy
import logging
from typing import Iterator, List, Optional, Tuple

from ..errors import ConfigurationError, TreeMutatedError
from .node import Node

logger = logging.getLogger(__name__)


class ShallowIterator:
    """Single-pass cursor over one node's direct children.

    Produces each child exactly once, in insertion order. Not restartable;
    ask the node for a new one instead. ``copy.copy()`` forks the cursor at
    its current position.
    """

    def __init__(self, node: Node, check_mutations: bool = True):
        """Initialize the cursor at the first child.

        Args:
            node: Node whose children are walked
            check_mutations: Raise TreeMutatedError if the node's tree
                changes before the cursor is exhausted
        """
        self._node = node
        self._index = 0
        self._exhausted = False
        self._expected_stamp = node._stamp()
        self._check_mutations = check_mutations

    @property
    def node(self) -> Node:
        return self._node

    def __iter__(self) -> "ShallowIterator":
        return self

    def __next__(self) -> Node:
        if self._exhausted:
            raise StopIteration
        if self._check_mutations and self._node._stamp() != self._expected_stamp:
            logger.warning("Tree containing %r changed during iteration", self._node.label)
            raise TreeMutatedError(
                f"Tree containing {self._node.label!r} was mutated during iteration"
            )
        child = self._next_child()
        if child is None:
            raise StopIteration
        return child

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0
        return max(self._node.child_count() - self._index, 0)

    def _next_child(self) -> Optional[Node]:
        """Advance without the mutation guard; None once exhausted."""
        if self._exhausted:
            return None
        if self._index >= self._node.child_count():
            self._exhausted = True
            return None
        child = self._node.child_at(self._index)
        self._index += 1
        return child


class DepthFirstIterator:
    """Post-order walk of the subtree rooted at a start node.

    Leaves are emitted the moment they are reached. A junction (a node with
    children) is emitted only once its whole subtree has been emitted, so
    the start node comes out last unless it is itself a leaf.

    State is two parallel stacks, always pushed and popped together:
    a stack of ShallowIterators for the open ancestor chain, innermost on
    top, and a stack of the junction nodes that produced them. When the top
    cursor runs dry, its junction is the next node to emit.

    Example:
        >>> [n.label for n in root.recursive_iter()]
        ['a0b0', 'a0b1', 'a0', 'a1b0', 'a1b1c0d0', 'a1b1c0', 'a1b1', 'a1', 'root']
    """

    def __init__(self,
                 start: Node,
                 max_depth: Optional[int] = None,
                 check_mutations: bool = True):
        """Initialize the walk with one open entry for ``start``.

        Args:
            start: Root of the subtree to walk (depth 0)
            max_depth: Deepest level to reach; a junction at this depth is
                emitted without being descended (None = unlimited)
            check_mutations: Raise TreeMutatedError if the tree changes
                while the walk is live

        Raises:
            ConfigurationError: If max_depth is negative
        """
        if max_depth is not None and max_depth < 0:
            raise ConfigurationError("max_depth cannot be negative")

        self._start = start
        self._max_depth = max_depth
        self._check_mutations = check_mutations
        self._expected_stamp = start._stamp()
        # The tree-wide stamp checked in _advance covers every cursor, so
        # the inner cursors skip their own guard.
        self._cursors: List[ShallowIterator] = [
            ShallowIterator(start, check_mutations=False)
        ]
        self._junctions: List[Node] = [start]
        self._emitted = 0
        self._exhaustion_logged = False

    @property
    def start(self) -> Node:
        return self._start

    @property
    def stack_depth(self) -> int:
        """Number of open (cursor, junction) pairs."""
        return len(self._cursors)

    @property
    def emitted(self) -> int:
        """Number of nodes produced so far."""
        return self._emitted

    def __iter__(self) -> "DepthFirstIterator":
        return self

    def __next__(self) -> Node:
        step = self._advance()
        if step is None:
            raise StopIteration
        return step[0]

    def iter_with_depth(self) -> Iterator[Tuple[Node, int]]:
        """Yield ``(node, depth)`` pairs from this iterator's remaining walk.

        Shares state with ``next()``: interleaving the two consumes a
        single traversal.
        """
        while True:
            step = self._advance()
            if step is None:
                return
            yield step

    def __copy__(self) -> "DepthFirstIterator":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._cursors = [copy.copy(cursor) for cursor in self._cursors]
        clone._junctions = list(self._junctions)
        return clone

    def _advance(self) -> Optional[Tuple[Node, int]]:
        """Run the state machine until one node is emitted.

        Returns:
            ``(node, depth)`` or None once the walk is exhausted
        """
        cursors = self._cursors
        junctions = self._junctions

        if not cursors:
            if not self._exhaustion_logged:
                self._exhaustion_logged = True
                logger.debug("Traversal from %r exhausted after %d nodes",
                             self._start.label, self._emitted)
            return None

        if self._check_mutations and self._start._stamp() != self._expected_stamp:
            logger.warning("Tree containing %r changed during traversal", self._start.label)
            raise TreeMutatedError(
                f"Tree containing {self._start.label!r} was mutated during traversal"
            )

        while True:
            height = len(cursors)
            child = None
            # Children of the top cursor sit at depth == height
            if self._max_depth is None or height <= self._max_depth:
                child = cursors[-1]._next_child()

            if child is None:
                cursors.pop()
                junction = junctions.pop()
                self._emitted += 1
                return junction, len(cursors)

            if child.has_children():
                cursors.append(ShallowIterator(child, check_mutations=False))
                junctions.append(child)
                continue

            self._emitted += 1
            return child, height
