"""Exception taxonomy for JunctionTree.

Traversal itself is total over well-formed trees. The only failures are
structural violations on construction (ownership, cycles) and the
fail-fast guard that fires when a tree is mutated under a live traversal.
"""


class TreeError(Exception):
    """Base class for all JunctionTree errors."""
    pass


class OwnershipError(TreeError):
    """Raised when a node that already has a parent is added elsewhere."""
    pass


class CycleError(TreeError):
    """Raised when adding a node would make it its own ancestor."""
    pass


class TreeMutatedError(TreeError, RuntimeError):
    """Raised by an iterator whose tree was mutated after it was created.

    Mirrors the ``RuntimeError`` Python raises when a dict changes size
    during iteration, so callers catching that family still see it.
    """
    pass


class ConfigurationError(TreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
