"""Node abstraction for JunctionTree.

A Node is an ordered, owning container of child nodes. Nodes are built
once by a construction collaborator and then only read by the traversal
layer, which holds plain references into the structure.
"""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ..errors import CycleError, OwnershipError

if TYPE_CHECKING:
    from .iterators import DepthFirstIterator, ShallowIterator

logger = logging.getLogger(__name__)


class _TreeState:
    """Modification counter shared by every node of one tree.

    When a tree is attached under another, its state is merged into the
    parent tree's state by forwarding; lookups compress the forwarding
    chain as they go.
    """

    __slots__ = ("version", "merged_into")

    def __init__(self):
        self.version = 0
        self.merged_into: Optional["_TreeState"] = None


class Node:
    """One point in the tree, owning zero or more ordered children.

    Ownership is exclusive: a node has at most one parent, and adding it a
    second time raises ``OwnershipError``. Each successful ``add`` bumps the
    tree's ``version``, which is what live iterators compare against to
    detect mutation.

    Example:
        >>> root = Node("root")
        >>> a0 = root.add(Node("a0"))
        >>> a0.add(Node("a0b0"))
        Node('a0b0', children=0)
        >>> [n.label for n in root.recursive_iter()]
        ['a0b0', 'a0', 'root']
    """

    def __init__(self, label: str = ""):
        """Create a leaf node that is the root of its own tree.

        Args:
            label: Opaque display label, immutable after creation
        """
        self._label = label
        self._children = []
        self._parent: Optional["Node"] = None
        self._state = _TreeState()

    @property
    def label(self) -> str:
        return self._label

    @property
    def children(self) -> Tuple["Node", ...]:
        """Snapshot of the direct children in insertion order."""
        return tuple(self._children)

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent

    @property
    def version(self) -> int:
        """Modification counter of the tree this node currently belongs to."""
        return self._tree_state().version

    def _tree_state(self) -> _TreeState:
        state = self._state
        root = state
        while root.merged_into is not None:
            root = root.merged_into
        while state is not root:
            forward = state.merged_into
            state.merged_into = root
            state = forward
        self._state = root
        return root

    def _stamp(self) -> Tuple[_TreeState, int]:
        """Identity and version of the owning tree, compared by iterators."""
        state = self._tree_state()
        return state, state.version

    def add(self, child: "Node") -> "Node":
        """Append ``child`` as the new last direct child.

        Ownership of ``child`` and its entire subtree moves to this node.
        Must not be called while a traversal over this tree (or over the
        tree ``child`` heads) is still live; such traversals fail with
        ``TreeMutatedError`` on their next step.

        Args:
            child: Parentless node to attach

        Returns:
            The attached child, so builders can chain calls

        Raises:
            TypeError: If ``child`` is not a Node
            CycleError: If ``child`` is this node or one of its ancestors
            OwnershipError: If ``child`` already has a parent
        """
        if not isinstance(child, Node):
            raise TypeError(f"Expected Node, got {type(child).__name__}")
        if child is self:
            raise CycleError(f"Cannot add {self.label!r} under itself")
        if child._parent is not None:
            ancestor = self._parent
            while ancestor is not None:
                if ancestor is child:
                    raise CycleError(
                        f"Cannot add {child.label!r} under {self.label!r}: "
                        f"it is one of its ancestors"
                    )
                ancestor = ancestor._parent
            raise OwnershipError(
                f"Node {child.label!r} is already owned by {child._parent.label!r}"
            )

        parent_state = self._tree_state()
        child_state = child._tree_state()
        # A parentless node in our own tree can only be our root
        if child_state is parent_state:
            raise CycleError(
                f"Cannot add {child.label!r} under {self.label!r}: "
                f"it is one of its ancestors"
            )

        child._parent = self
        self._children.append(child)
        child_state.merged_into = parent_state
        parent_state.version += 1

        logger.debug("Attached %r under %r", child.label, self.label)
        return child

    def has_children(self) -> bool:
        return len(self._children) > 0

    def is_leaf(self) -> bool:
        return not self._children

    def child_count(self) -> int:
        return len(self._children)

    def child_at(self, index: int) -> "Node":
        """Return the direct child at ``index`` (insertion order)."""
        return self._children[index]

    def children_iter(self, check_mutations: bool = True) -> "ShallowIterator":
        """Iterate the direct children of this node, in insertion order."""
        from .iterators import ShallowIterator
        return ShallowIterator(self, check_mutations=check_mutations)

    def recursive_iter(self,
                       max_depth: Optional[int] = None,
                       check_mutations: bool = True) -> "DepthFirstIterator":
        """Iterate this node's whole subtree in post-order.

        Despite the name, the walk is iterative and safe on trees far
        deeper than the interpreter's recursion limit.

        Args:
            max_depth: Deepest level to reach (None = unlimited)
            check_mutations: Fail fast if the tree is mutated mid-walk

        Returns:
            DepthFirstIterator starting at this node
        """
        from .iterators import DepthFirstIterator
        return DepthFirstIterator(self, max_depth=max_depth,
                                  check_mutations=check_mutations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._label!r}, children={len(self._children)})"
