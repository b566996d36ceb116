"""Tree construction helpers.

Builders turn plain Python data into Node trees. They use an explicit
work stack, so mappings nested deeper than the recursion limit
still build.
"""

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .core.node import Node


def build_tree(nested: Mapping[str, Any]) -> Node:
    """Build a tree from a single-key nested mapping.

    Each key is a label and each value maps the children's labels to their
    own subtrees. ``{}`` or ``None`` marks a leaf. Mapping order is
    insertion order for children.

    Args:
        nested: ``{root_label: {child_label: {...}, ...}}``

    Returns:
        The root Node

    Raises:
        ValueError: If the top level does not have exactly one key
        TypeError: If a subtree is neither a mapping nor None

    Example:
        >>> root = build_tree({"root": {"a0": {"a0b0": {}}, "a1": None}})
        >>> [n.label for n in root.children]
        ['a0', 'a1']
    """
    if not isinstance(nested, Mapping):
        raise TypeError(f"Expected a mapping, got {type(nested).__name__}")
    if len(nested) != 1:
        raise ValueError(f"Expected exactly one root label, got {len(nested)}")

    (label, subtree), = nested.items()
    root = Node(label)

    pending: List[Tuple[Node, Optional[Mapping[str, Any]]]] = [(root, subtree)]
    while pending:
        parent, children = pending.pop()
        if children is None:
            continue
        if not isinstance(children, Mapping):
            raise TypeError(
                f"Children of {parent.label!r} must be a mapping or None, "
                f"got {type(children).__name__}"
            )
        for child_label, grandchildren in children.items():
            child = parent.add(Node(child_label))
            pending.append((child, grandchildren))

    return root


def build_chain(labels: Iterable[str]) -> Node:
    """Build a linear tree where each node is the only child of the previous.

    Args:
        labels: Labels from the root downwards; must not be empty

    Returns:
        The root Node

    Raises:
        ValueError: If ``labels`` is empty
    """
    iterator = iter(labels)
    try:
        root = Node(next(iterator))
    except StopIteration:
        raise ValueError("build_chain needs at least one label") from None

    tail = root
    for label in iterator:
        tail = tail.add(Node(label))
    return root
