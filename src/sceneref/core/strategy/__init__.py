"""Strategy functionality: contract, registry, built-in lookups and graph walks."""

from sceneref.core.strategy.builtin import (
    Ancestors,
    ByName,
    ByNameInSubtree,
    ByTag,
    Descendants,
    DirectParent,
    GlobalByType,
    SameNode,
)
from sceneref.core.strategy.core import StrategyRegistry, get_registry, strategy
from sceneref.core.strategy.models import Strategy
from sceneref.core.strategy.operations import (
    has_structural_ancestry,
    unique_by_identity,
    walk_ancestors,
)

__all__ = [
    # Models
    "Strategy",
    # Core
    "strategy",
    "get_registry",
    "StrategyRegistry",
    # Built-in strategies
    "SameNode",
    "Descendants",
    "Ancestors",
    "DirectParent",
    "GlobalByType",
    "ByName",
    "ByNameInSubtree",
    "ByTag",
    # Operations
    "walk_ancestors",
    "has_structural_ancestry",
    "unique_by_identity",
]
