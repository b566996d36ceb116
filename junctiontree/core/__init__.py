"""Core tree structure and traversal state machines."""

from .node import Node
from .iterators import ShallowIterator, DepthFirstIterator

__all__ = [
    "Node",
    "ShallowIterator",
    "DepthFirstIterator",
]
