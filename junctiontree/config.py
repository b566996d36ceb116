"""Configuration system for JunctionTree.

This module defines how callers describe a traversal: which walk to run,
how deep to go, which nodes to emit and how strictly to guard against
mutation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .errors import ConfigurationError


class TraversalStrategy(Enum):
    """Which walk to run over a node."""
    CHILDREN = "children"       # Direct children only
    POST_ORDER = "post_order"   # Whole subtree, junctions after descendants


_STRATEGY_ALIASES = {
    'children': TraversalStrategy.CHILDREN,
    'shallow': TraversalStrategy.CHILDREN,
    'post_order': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'recursive': TraversalStrategy.POST_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy given as an enum member or a name.

    Args:
        strategy: TraversalStrategy or case-insensitive name/alias

    Returns:
        The matching TraversalStrategy

    Raises:
        ConfigurationError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy
    key = str(strategy).lower()
    if key not in _STRATEGY_ALIASES:
        raise ConfigurationError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
        )
    return _STRATEGY_ALIASES[key]


@dataclass
class TraversalConfig:
    """Complete configuration for one traversal.

    The filter only decides what is emitted; it never prunes, so every
    node of the subtree is still visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.POST_ORDER
    max_depth: Optional[int] = None                          # None = unlimited
    include_filter: Optional[Callable[[Any], bool]] = None   # Emission predicate
    max_nodes: Optional[int] = None                          # Stop after N emitted
    check_mutations: bool = True                             # Fail fast on add()

    @classmethod
    def shallow(cls) -> 'TraversalConfig':
        """Config for walking direct children only."""
        return cls(strategy=TraversalStrategy.CHILDREN)

    @classmethod
    def full(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Config for a post-order walk of the whole subtree.

        Args:
            max_depth: Optional depth limit

        Returns:
            TraversalConfig for a full walk
        """
        return cls(strategy=TraversalStrategy.POST_ORDER, max_depth=max_depth)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.max_depth is not None:
            if self.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.strategy == TraversalStrategy.CHILDREN:
                errors.append("max_depth is not supported by the children strategy")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors

    def raise_for_errors(self) -> None:
        """Raise ConfigurationError if ``validate()`` reports anything."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
