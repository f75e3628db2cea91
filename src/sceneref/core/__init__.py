"""Core functionalities: stateless resolution primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: node identity, directives,
    the strategy contract and the built-in strategies. Strategies only read the
    graph. For stateful services, see graph/, resolution/ and diagnostics/.
"""

from sceneref.core.directive import (
    Directive,
    FieldBinding,
    FieldShape,
    FieldTarget,
    OverwritePolicy,
)
from sceneref.core.errors import (
    CycleError,
    NotFoundError,
    ResolutionError,
    SubtreeLookupError,
    TypeMismatchError,
)
from sceneref.core.identity import NodeId
from sceneref.core.strategy import (
    Ancestors,
    ByName,
    ByNameInSubtree,
    ByTag,
    Descendants,
    DirectParent,
    GlobalByType,
    SameNode,
    Strategy,
    StrategyRegistry,
    get_registry,
    strategy,
)

__all__ = [
    # Identity
    "NodeId",
    # Directive
    "Directive",
    "OverwritePolicy",
    "FieldShape",
    "FieldTarget",
    "FieldBinding",
    # Errors
    "ResolutionError",
    "NotFoundError",
    "SubtreeLookupError",
    "TypeMismatchError",
    "CycleError",
    # Strategy
    "Strategy",
    "strategy",
    "get_registry",
    "StrategyRegistry",
    "SameNode",
    "Descendants",
    "Ancestors",
    "DirectParent",
    "GlobalByType",
    "ByName",
    "ByNameInSubtree",
    "ByTag",
]
