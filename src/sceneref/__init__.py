"""SceneRef: declarative field reference resolution over scene graphs.

Usage:
    from sceneref import (
        ByTag, Directive, FieldBinding, FieldTarget, LocalSceneGraph, NodeId, Resolver, SameNode,
    )

    @dataclass
    class Spawner:
        body: Rigidbody | None = None
        points: list[NodeId] = field(default_factory=list)

    SPAWNER_BINDINGS = (
        FieldBinding("body", Directive(SameNode()), FieldTarget.scalar(Rigidbody)),
        FieldBinding("points", Directive(ByTag("Spawn")), FieldTarget.collection(NodeId)),
    )

    graph = LocalSceneGraph()
    node = graph.create_node("Spawner")
    spawner = graph.add_component(node, Spawner())
    graph.add_component(node, Rigidbody())

    Resolver(graph).apply(spawner, SPAWNER_BINDINGS)
"""

__version__ = "0.1.0"

# Core primitives
from sceneref.core import (
    Ancestors,
    ByName,
    ByNameInSubtree,
    ByTag,
    CycleError,
    Descendants,
    Directive,
    DirectParent,
    FieldBinding,
    FieldShape,
    FieldTarget,
    GlobalByType,
    NodeId,
    NotFoundError,
    OverwritePolicy,
    ResolutionError,
    SameNode,
    Strategy,
    StrategyRegistry,
    SubtreeLookupError,
    TypeMismatchError,
    get_registry,
    strategy,
)

# Diagnostics
from sceneref.diagnostics import (
    CollectingDiagnostics,
    Diagnostic,
    DiagnosticSink,
    LoggingDiagnostics,
)

# Scene graph
from sceneref.graph import (
    LocalSceneGraph,
    SceneGraph,
)

# Resolution
from sceneref.resolution import (
    BuildReport,
    ResolutionResult,
    ResolutionStatus,
    Resolver,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "NodeId",
    "Directive",
    "OverwritePolicy",
    "FieldShape",
    "FieldTarget",
    "FieldBinding",
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
    # Errors
    "ResolutionError",
    "NotFoundError",
    "SubtreeLookupError",
    "TypeMismatchError",
    "CycleError",
    # Graph
    "SceneGraph",
    "LocalSceneGraph",
    # Resolution
    "Resolver",
    "ResolutionResult",
    "ResolutionStatus",
    "BuildReport",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "CollectingDiagnostics",
]
